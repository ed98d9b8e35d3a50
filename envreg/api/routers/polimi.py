"""Politecnico di Milano degree assistant endpoint.

Routes:
- POST /polimi/chat - Degree-scoped regulation chat (Italian)

Dependencies: envreg.application.services.polimi_chat_service
System role: Polimi assistant HTTP API
"""

from fastapi import APIRouter, Depends

from envreg.api.deps import get_polimi_chat_service
from envreg.api.routers.error_handling import handle_polimi_errors
from envreg.application.services.polimi_chat_service import PolimiChatService
from envreg.models.chat import ChatResponse
from envreg.models.polimi import PolimiChatRequest

router = APIRouter(prefix="/polimi", tags=["polimi"])


@router.post("/chat", response_model=ChatResponse)
@handle_polimi_errors
async def polimi_chat(
    request: PolimiChatRequest,
    service: PolimiChatService = Depends(get_polimi_chat_service),
) -> ChatResponse:
    """Answer within the regulatory scope of the given degree program."""
    return await service.complete(request)
