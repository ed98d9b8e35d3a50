"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import Field

from envreg.models.citation import Citation
from envreg.models.common import CamelModel
from envreg.models.law import SelectedLaw

ChatRole = Literal["user", "assistant"]


class ChatTurn(CamelModel):
    """One turn of a conversation as exchanged with the model."""

    role: ChatRole
    content: str


class ChatRequest(CamelModel):
    """Stateless chat request with optional law selection context."""

    messages: list[ChatTurn] = Field(min_length=1, description="Conversation so far")
    system_context: str | None = Field(default=None, description="Extra system instructions")
    selected_laws: list[SelectedLaw] = Field(default_factory=list)


class ChatResponse(CamelModel):
    """Answer text with extracted citations."""

    content: str
    citations: list[Citation] = Field(default_factory=list)


class ConversationChatRequest(CamelModel):
    """Message posted to a persisted conversation."""

    message: str = Field(min_length=1, description="User question")
    selected_law_ids: list[str] = Field(default_factory=list)
    system_context: str | None = None


class ConversationChatResponse(ChatResponse):
    """Answer stored in a conversation."""

    conversation_id: uuid.UUID
    message_id: uuid.UUID


class ChatMessageResponse(CamelModel):
    """Single stored chat message."""

    id: uuid.UUID
    role: ChatRole
    content: str
    citations: list[Citation] = Field(default_factory=list)
    created_at: datetime


class ChatHistoryResponse(CamelModel):
    """Response schema for chat history."""

    messages: list[ChatMessageResponse]
    total: int = Field(description="Total number of messages")
