"""
Compliance report ORM model.

Stores the outcome of a document compliance analysis.

Dependencies: sqlalchemy, envreg.boundary.db.base
System role: Compliance report persistence
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from envreg.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ComplianceReportModel(Base, UUIDMixin, TimestampMixin):
    """
    Compliance report ORM model.

    Attributes:
        user_id: Optional owner identifier
        document_name: Uploaded file name
        status: "pass", "fail" or "pending"
        summary: Analysis summary
        violations: JSON list of violation objects
        suggestions: JSON list of suggestion objects
        regulatory_filters: JSON list of scopes the analysis focused on
        area_filter: Optional area-of-interest value
    """

    __tablename__ = "compliance_reports"

    user_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    document_name: Mapped[str] = mapped_column(String(512), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="pending")
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    violations: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    suggestions: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    regulatory_filters: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    area_filter: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
