"""
Conversation ORM model.

A user's chat thread with the law assistant, with the regulatory filters
active when it was created.

Dependencies: sqlalchemy, envreg.boundary.db.base
System role: Conversation persistence
"""

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from envreg.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ConversationModel(Base, UUIDMixin, TimestampMixin):
    """
    Conversation ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Opaque owner identifier
        title: Display title, set from the first user message
        regulatory_filters: JSON list of regulatory scope values
        area_filter: Optional area-of-interest value
        messages: Messages in this conversation (cascade delete)
    """

    __tablename__ = "conversations"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="New Chat",
    )

    regulatory_filters: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )

    area_filter: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        default=None,
    )

    messages = relationship(
        "MessageModel",
        back_populates="conversation",
        cascade="all, delete-orphan",
    )
