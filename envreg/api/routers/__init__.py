"""API routers."""

from .chat import router as chat_router
from .compliance import router as compliance_router
from .conversations import router as conversations_router
from .health import router as health_router
from .laws import router as laws_router
from .polimi import router as polimi_router

__all__ = [
    "chat_router",
    "compliance_router",
    "conversations_router",
    "health_router",
    "laws_router",
    "polimi_router",
]
