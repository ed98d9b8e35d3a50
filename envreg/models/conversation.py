"""
Conversation domain models and schemas.

Dependencies: pydantic
System role: Conversation API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from envreg.models.common import AreaOfInterest, CamelModel, RegulatoryScope

DEFAULT_CONVERSATION_TITLE = "New Chat"


class CreateConversationRequest(CamelModel):
    """Request schema for creating a conversation."""

    user_id: str = Field(min_length=1)
    title: str = Field(default=DEFAULT_CONVERSATION_TITLE, max_length=255)
    regulatory_filters: list[RegulatoryScope] = Field(default_factory=list)
    area_filter: AreaOfInterest | None = None


class UpdateConversationRequest(CamelModel):
    """Request schema for renaming a conversation."""

    title: str = Field(min_length=1, max_length=255)


class ConversationResponse(CamelModel):
    """Response schema for conversation operations."""

    id: uuid.UUID
    user_id: str
    title: str
    regulatory_filters: list[RegulatoryScope]
    area_filter: AreaOfInterest | None
    created_at: datetime
    updated_at: datetime
