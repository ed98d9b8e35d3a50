"""
Compliance analysis service.

Sends a document to the LLM gateway with the compliance analyst prompt,
parses the JSON verdict out of the answer, and persists the resulting
report. Unparseable answers produce a "pending" report recommending manual
review instead of an error.

Dependencies: pydantic, sqlalchemy, envreg.core, envreg.boundary
System role: Compliance analysis orchestration layer
"""

import base64
import json
import logging
import re
from collections import Counter
from pathlib import Path
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.boundary.db.CRUD.compliance_report_crud import compliance_report_crud
from envreg.boundary.db.models.compliance_report_model import ComplianceReportModel
from envreg.boundary.llm import LLMGatewayClient
from envreg.core.exceptions import ReportNotFoundError, ReportParsingError, ValidationError
from envreg.core.prompts import COMPLIANCE_PROMPT, build_compliance_prompt_values
from envreg.models.compliance import (
    AnalyzeComplianceRequest,
    ComplianceAnalysis,
    ComplianceDashboardResponse,
    ComplianceReport,
    ComplianceStatus,
    Severity,
    Suggestion,
)
from envreg.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
)

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = frozenset({".pdf", ".docx", ".txt"})
UPLOAD_MIME_TYPES = {
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".txt": "text/plain",
}
DASHBOARD_RECENT_LIMIT = 5

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

FALLBACK_ANALYSIS = ComplianceAnalysis(
    status=ComplianceStatus.PENDING,
    summary=(
        "Unable to fully analyze the document. "
        "Please try again or upload a different format."
    ),
    violations=[],
    suggestions=[
        Suggestion(
            title="Manual Review Recommended",
            description=(
                "The document could not be automatically analyzed. "
                "Please review manually against applicable regulations."
            ),
            regulation="General",
        )
    ],
)


def encode_upload(file_name: str, data: bytes, content_type: str | None = None) -> str:
    """
    Encode uploaded bytes as a base64 data URL, the format browsers send.

    Args:
        file_name: Original file name, used to check the extension
        data: Raw file bytes
        content_type: MIME type reported by the client, if any

    Returns:
        str: ``data:<mime>;base64,<payload>``

    Raises:
        ValidationError: If the extension is not .pdf, .docx or .txt
    """
    extension = Path(file_name).suffix.lower()
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationError(
            f"Unsupported file type '{extension or file_name}'. "
            "Allowed types: .pdf, .docx, .txt",
            field="file",
        )
    mime_type = content_type or UPLOAD_MIME_TYPES[extension]
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def parse_analysis(content: str) -> ComplianceAnalysis:
    """
    Parse the JSON verdict from model output.

    The outermost ``{...}`` span is decoded so prose or code fences around
    the object are ignored.

    Raises:
        ReportParsingError: If no object is found or it does not validate
    """
    match = _JSON_OBJECT.search(content)
    if match is None:
        raise ReportParsingError("No JSON found in response")
    try:
        return ComplianceAnalysis.model_validate(json.loads(match.group(0)))
    except json.JSONDecodeError as e:
        raise ReportParsingError("Model output is not valid JSON", {"error": str(e)}) from e
    except PydanticValidationError as e:
        raise ReportParsingError(
            "Model output does not match the report format",
            {"error_count": e.error_count()},
        ) from e


def _to_report(model: ComplianceReportModel) -> ComplianceReport:
    return ComplianceReport(
        id=model.id,
        document_name=model.document_name,
        status=model.status,
        summary=model.summary,
        violations=model.violations or [],
        suggestions=model.suggestions or [],
        regulatory_filters=model.regulatory_filters or [],
        area_filter=model.area_filter,
        created_at=model.created_at,
    )


class ComplianceService:
    """Compliance analysis and report retrieval."""

    def __init__(self, db: AsyncSession, llm_client: LLMGatewayClient) -> None:
        """
        Initialize compliance service.

        Args:
            db: Async SQLAlchemy session
            llm_client: Gateway client for the analysis completion
        """
        self.db = db
        self.llm_client = llm_client

    async def analyze(self, request: AnalyzeComplianceRequest) -> ComplianceReport:
        """
        Analyze a document and persist the report.

        Args:
            request: Document name and content, analysis filters, optional owner

        Returns:
            ComplianceReport: Stored report (fallback verdict when unparseable)

        Raises:
            LLMGatewayError: If the gateway call fails
        """
        messages = COMPLIANCE_PROMPT.format_messages(
            **build_compliance_prompt_values(
                request.file_name,
                request.file_content,
                request.filters,
                request.selected_laws,
            )
        )
        log_with_context(
            logger,
            logging.INFO,
            "Analyzing document",
            document_name=request.file_name,
            content_length=len(request.file_content),
            regulatory_scopes=request.filters.regulatory_scopes,
        )

        content = await self.llm_client.acomplete(messages)
        try:
            analysis = parse_analysis(content)
        except ReportParsingError as e:
            log_exception_with_context(
                logger,
                "Failed to parse compliance analysis, using fallback report",
                e,
                document_name=request.file_name,
                raw_output=content,
            )
            analysis = FALLBACK_ANALYSIS

        report = await compliance_report_crud.create(
            self.db,
            user_id=request.user_id,
            document_name=request.file_name,
            status=analysis.status.value,
            summary=analysis.summary,
            violations=[v.model_dump(mode="json", by_alias=True) for v in analysis.violations],
            suggestions=[s.model_dump(mode="json", by_alias=True) for s in analysis.suggestions],
            regulatory_filters=[s.value for s in request.filters.regulatory_scopes],
            area_filter=(
                request.filters.area_of_interest.value
                if request.filters.area_of_interest
                else None
            ),
        )
        await self.db.commit()

        log_with_context(
            logger,
            logging.INFO,
            "Compliance analysis completed",
            report_id=report.id,
            status=report.status,
            violation_count=len(analysis.violations),
        )
        return _to_report(report)

    async def get_report(self, report_id: UUID) -> ComplianceReport:
        """
        Get a stored report.

        Raises:
            ReportNotFoundError: If the report does not exist
        """
        report = await compliance_report_crud.get_by_id(self.db, report_id)
        if report is None:
            raise ReportNotFoundError(str(report_id))
        return _to_report(report)

    async def list_reports(self, user_id: str) -> list[ComplianceReport]:
        """List a user's reports, newest first."""
        reports = await compliance_report_crud.list_by_user(self.db, user_id)
        return [_to_report(r) for r in reports]

    async def get_dashboard(self, user_id: str) -> ComplianceDashboardResponse:
        """
        Aggregate a user's reports.

        Returns:
            ComplianceDashboardResponse: Count per status and per violation
            severity (every value present, zero when unused) and the most
            recent reports
        """
        reports = await self.list_reports(user_id)

        by_status = Counter(report.status.value for report in reports)
        by_severity = Counter(
            violation.severity.value
            for report in reports
            for violation in report.violations
        )

        return ComplianceDashboardResponse(
            total_reports=len(reports),
            by_status={status.value: by_status[status.value] for status in ComplianceStatus},
            violations_by_severity={
                severity.value: by_severity[severity.value] for severity in Severity
            },
            recent_reports=reports[:DASHBOARD_RECENT_LIMIT],
        )
