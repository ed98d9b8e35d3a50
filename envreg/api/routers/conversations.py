"""
Conversation API endpoints.

Routes:
- POST /conversations - Create conversation
- GET /conversations?user_id= - List a user's conversations
- GET /conversations/{conversation_id} - Get conversation
- PATCH /conversations/{conversation_id} - Rename conversation
- DELETE /conversations/{conversation_id} - Delete conversation and messages
- GET /conversations/{conversation_id}/messages - Stored messages
- POST /conversations/{conversation_id}/chat - Send message, store answer

Dependencies: envreg.application.services.conversation_service
System role: Conversation HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from envreg.api.deps import get_conversation_service
from envreg.api.routers.error_handling import handle_api_errors
from envreg.application.services.conversation_service import ConversationService
from envreg.models.chat import (
    ChatHistoryResponse,
    ConversationChatRequest,
    ConversationChatResponse,
)
from envreg.models.conversation import (
    ConversationResponse,
    CreateConversationRequest,
    UpdateConversationRequest,
)

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.post("", response_model=ConversationResponse, status_code=status.HTTP_201_CREATED)
@handle_api_errors
async def create_conversation(
    request: CreateConversationRequest,
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """Create a new conversation."""
    return await service.create_conversation(request)


@router.get("", response_model=list[ConversationResponse])
@handle_api_errors
async def list_conversations(
    user_id: str = Query(min_length=1),
    service: ConversationService = Depends(get_conversation_service),
) -> list[ConversationResponse]:
    """List a user's conversations, most recently active first."""
    return await service.list_conversations(user_id)


@router.get("/{conversation_id}", response_model=ConversationResponse)
@handle_api_errors
async def get_conversation(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """Get conversation by ID."""
    return await service.get_conversation(conversation_id)


@router.patch("/{conversation_id}", response_model=ConversationResponse)
@handle_api_errors
async def rename_conversation(
    conversation_id: UUID,
    request: UpdateConversationRequest,
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationResponse:
    """Rename a conversation."""
    return await service.rename_conversation(conversation_id, request.title)


@router.delete("/{conversation_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_api_errors
async def delete_conversation(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> None:
    """Delete a conversation and all of its messages."""
    await service.delete_conversation(conversation_id)


@router.get("/{conversation_id}/messages", response_model=ChatHistoryResponse)
@handle_api_errors
async def get_messages(
    conversation_id: UUID,
    service: ConversationService = Depends(get_conversation_service),
) -> ChatHistoryResponse:
    """Get stored messages with their citations, oldest first."""
    return await service.get_messages(conversation_id)


@router.post("/{conversation_id}/chat", response_model=ConversationChatResponse)
@handle_api_errors
async def chat_in_conversation(
    conversation_id: UUID,
    request: ConversationChatRequest,
    service: ConversationService = Depends(get_conversation_service),
) -> ConversationChatResponse:
    """Send a message to a conversation and store the cited answer.

    Flow:
    1. Store the user message
    2. Complete over the recent history with the selected laws as context
    3. Store the answer and its citations; title the conversation on first use

    Raises:
        HTTPException(404): Conversation or selected law not found
        HTTPException(429/402/500): Gateway errors
    """
    return await service.chat(conversation_id, request)
