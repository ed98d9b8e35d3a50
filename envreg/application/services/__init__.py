"""Service orchestrators."""

from .chat_service import ChatService
from .compliance_service import ComplianceService
from .conversation_service import ConversationService
from .polimi_chat_service import PolimiChatService

__all__ = [
    "ChatService",
    "ComplianceService",
    "ConversationService",
    "PolimiChatService",
]
