"""
Chat message CRUD operations.

Dependencies: sqlalchemy, envreg.boundary.db.models
System role: Chat message persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.boundary.db.models.message_model import MessageModel
from envreg.boundary.db.CRUD.base_crud import BaseCRUD


class MessageCRUD(BaseCRUD[MessageModel]):
    """CRUD operations for MessageModel scoped by conversation."""

    def __init__(self) -> None:
        super().__init__(MessageModel)

    async def list_by_conversation(
        self,
        session: AsyncSession,
        conversation_id: UUID,
    ) -> Sequence[MessageModel]:
        """
        Retrieve all messages of a conversation in chronological order.

        Args:
            session: Async database session
            conversation_id: Parent conversation UUID

        Returns:
            Sequence of MessageModel ordered oldest first
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_recent(
        self,
        session: AsyncSession,
        conversation_id: UUID,
        limit: int,
    ) -> list[MessageModel]:
        """
        Retrieve the last `limit` messages of a conversation.

        Returns:
            Messages in chronological order (oldest of the window first)
        """
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.created_at.desc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return list(reversed(result.scalars().all()))

    async def count_by_conversation(
        self,
        session: AsyncSession,
        conversation_id: UUID,
    ) -> int:
        """Count messages in a conversation."""
        stmt = (
            select(func.count())
            .select_from(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
        )
        result = await session.execute(stmt)
        return result.scalar_one()


message_crud = MessageCRUD()
