"""
Chat message ORM model.

Citations extracted from assistant answers are stored as an embedded JSON
list next to the message content.

Dependencies: sqlalchemy, envreg.boundary.db.base
System role: Chat message persistence
"""

import uuid

from sqlalchemy import JSON, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from envreg.boundary.db.base import Base, TimestampMixin, UUIDMixin


class MessageModel(Base, UUIDMixin, TimestampMixin):
    """
    Message ORM model.

    Attributes:
        conversation_id: Parent conversation (cascade delete)
        role: "user" or "assistant"
        content: Message text
        citations: JSON list of citation objects (camelCase keys)
    """

    __tablename__ = "messages"

    conversation_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(String(16), nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    citations: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    conversation = relationship("ConversationModel", back_populates="messages")
