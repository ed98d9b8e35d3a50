"""
Conversation CRUD operations.

Dependencies: sqlalchemy, envreg.boundary.db.models
System role: Conversation persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.boundary.db.base import utc_now
from envreg.boundary.db.models.conversation_model import ConversationModel
from envreg.boundary.db.CRUD.base_crud import BaseCRUD


class ConversationCRUD(BaseCRUD[ConversationModel]):
    """CRUD operations for ConversationModel with per-user listing."""

    def __init__(self) -> None:
        super().__init__(ConversationModel)

    async def list_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ConversationModel]:
        """
        Retrieve a user's conversations, most recently active first.

        Args:
            session: Async database session
            user_id: Owner identifier
            limit: Maximum number of conversations to return
            offset: Number of conversations to skip

        Returns:
            Sequence of ConversationModel ordered by updated_at descending
        """
        stmt = (
            select(ConversationModel)
            .where(ConversationModel.user_id == user_id)
            .order_by(ConversationModel.updated_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def touch(self, session: AsyncSession, id: UUID) -> ConversationModel | None:
        """Bump updated_at so the conversation sorts first in listings."""
        return await self.update_by_id(
            session, id, updated_at=utc_now()
        )


conversation_crud = ConversationCRUD()
