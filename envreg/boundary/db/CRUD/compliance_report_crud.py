"""
Compliance report CRUD operations.

Dependencies: sqlalchemy, envreg.boundary.db.models
System role: Compliance report persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.boundary.db.models.compliance_report_model import ComplianceReportModel
from envreg.boundary.db.CRUD.base_crud import BaseCRUD


class ComplianceReportCRUD(BaseCRUD[ComplianceReportModel]):
    """CRUD operations for ComplianceReportModel."""

    def __init__(self) -> None:
        super().__init__(ComplianceReportModel)

    async def list_by_user(
        self,
        session: AsyncSession,
        user_id: str,
        limit: int | None = None,
    ) -> Sequence[ComplianceReportModel]:
        """
        Retrieve a user's reports, newest first.

        Args:
            session: Async database session
            user_id: Owner identifier
            limit: Maximum number of reports to return

        Returns:
            Sequence of ComplianceReportModel ordered by created_at descending
        """
        stmt = (
            select(ComplianceReportModel)
            .where(ComplianceReportModel.user_id == user_id)
            .order_by(ComplianceReportModel.created_at.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


compliance_report_crud = ComplianceReportCRUD()
