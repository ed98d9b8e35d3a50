"""Chat API endpoints.

Routes:
- POST /chat - Stateless chat completion with citation extraction

Dependencies: envreg.application.services.chat_service
System role: Law chat HTTP API
"""

from fastapi import APIRouter, Depends

from envreg.api.deps import get_chat_service
from envreg.api.routers.error_handling import handle_api_errors
from envreg.application.services.chat_service import ChatService
from envreg.models.chat import ChatRequest, ChatResponse

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post("", response_model=ChatResponse)
@handle_api_errors
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer the conversation's last message and cite the laws it mentions.

    Args:
        request: Messages so far, optional selected laws and system context
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Answer text with up to five citations

    Raises:
        HTTPException(429): Gateway rate limit exceeded
        HTTPException(402): Gateway credits exhausted
        HTTPException(500): Gateway or configuration error
    """
    return await chat_service.complete(request)
