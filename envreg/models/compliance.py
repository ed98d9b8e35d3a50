"""
Compliance report domain models and schemas.

Dependencies: pydantic
System role: Compliance analysis API contracts
"""

import uuid
from datetime import datetime
from enum import Enum

from pydantic import Field

from envreg.models.common import AreaOfInterest, CamelModel, RegulatoryScope
from envreg.models.law import SelectedLaw


class ComplianceStatus(str, Enum):
    """Outcome of a compliance analysis."""

    PASS = "pass"
    FAIL = "fail"
    PENDING = "pending"


class Severity(str, Enum):
    """Violation severity."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Violation(CamelModel):
    """A regulation the document appears to breach."""

    regulation: str
    description: str
    severity: Severity = Severity.MEDIUM
    location: str | None = None


class Suggestion(CamelModel):
    """A remediation suggestion."""

    title: str
    description: str
    regulation: str = "General"


class ComplianceAnalysis(CamelModel):
    """Verdict parsed from the model output, before report metadata is added."""

    status: ComplianceStatus = ComplianceStatus.PENDING
    summary: str = ""
    violations: list[Violation] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)


class ComplianceFilters(CamelModel):
    """Scopes and area that focus the analysis."""

    regulatory_scopes: list[RegulatoryScope] = Field(default_factory=list)
    area_of_interest: AreaOfInterest | None = None


class AnalyzeComplianceRequest(CamelModel):
    """Document submitted for analysis (content as a base64 data URL or text)."""

    file_name: str = Field(min_length=1)
    file_content: str
    filters: ComplianceFilters = Field(default_factory=ComplianceFilters)
    selected_laws: list[SelectedLaw] = Field(default_factory=list)
    user_id: str | None = None


class ComplianceReport(CamelModel):
    """Final compliance report returned to clients."""

    id: uuid.UUID
    document_name: str
    status: ComplianceStatus
    summary: str
    violations: list[Violation] = Field(default_factory=list)
    suggestions: list[Suggestion] = Field(default_factory=list)
    regulatory_filters: list[RegulatoryScope] = Field(default_factory=list)
    area_filter: AreaOfInterest | None = None
    created_at: datetime


class ComplianceDashboardResponse(CamelModel):
    """Aggregate view over a user's reports."""

    total_reports: int
    by_status: dict[str, int]
    violations_by_severity: dict[str, int]
    recent_reports: list[ComplianceReport]
