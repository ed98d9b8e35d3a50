"""
Test suite for ComplianceService.

Covers model output parsing, the fallback report, upload encoding,
persistence and dashboard aggregation.

System role: Verification of compliance analysis orchestration
"""

import base64
import json
import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from envreg.application.services.compliance_service import (
    FALLBACK_ANALYSIS,
    ComplianceService,
    encode_upload,
    parse_analysis,
)
from envreg.core.exceptions import ReportNotFoundError, ReportParsingError, ValidationError
from envreg.models.common import AreaOfInterest, RegulatoryScope
from envreg.models.compliance import (
    AnalyzeComplianceRequest,
    ComplianceFilters,
    ComplianceStatus,
    Severity,
)

FAIL_VERDICT = {
    "status": "fail",
    "summary": "Discharge permit missing.",
    "violations": [
        {
            "regulation": "D.Lgs. 152/2006, Art. 124",
            "description": "No discharge authorisation",
            "severity": "high",
            "location": "Section 3",
        },
        {
            "regulation": "L.R. 26/2003",
            "description": "Regional registry not updated",
            "severity": "low",
        },
    ],
    "suggestions": [
        {
            "title": "Request authorisation",
            "description": "Apply to the Province before discharging.",
            "regulation": "D.Lgs. 152/2006",
        }
    ],
}


@pytest.fixture
def compliance_service(
    test_async_db: AsyncSession,
    mock_llm_client: MagicMock,
) -> ComplianceService:
    """Provide ComplianceService bound to the SQLite test session."""
    return ComplianceService(db=test_async_db, llm_client=mock_llm_client)


def _request(user_id: str | None = None, **kwargs) -> AnalyzeComplianceRequest:
    return AnalyzeComplianceRequest(
        file_name="plant-report.txt",
        file_content="data:text/plain;base64,SGVsbG8=",
        user_id=user_id,
        **kwargs,
    )


class TestParseAnalysis:
    """parse_analysis()."""

    def test_fenced_json_should_be_parsed(self) -> None:
        # Arrange
        content = f"Here is the report:\n```json\n{json.dumps(FAIL_VERDICT)}\n```"

        # Act
        analysis = parse_analysis(content)

        # Assert
        assert analysis.status == ComplianceStatus.FAIL
        assert analysis.violations[0].severity == Severity.HIGH
        assert analysis.violations[1].location is None
        assert analysis.suggestions[0].title == "Request authorisation"

    def test_missing_fields_should_default(self) -> None:
        analysis = parse_analysis('{"summary": "Looks fine"}')

        assert analysis.status == ComplianceStatus.PENDING
        assert analysis.violations == []

    def test_no_object_should_raise(self) -> None:
        with pytest.raises(ReportParsingError, match="No JSON"):
            parse_analysis("I cannot analyze this document.")

    def test_invalid_json_should_raise(self) -> None:
        with pytest.raises(ReportParsingError):
            parse_analysis("{status: pass}")

    def test_invalid_status_should_raise(self) -> None:
        with pytest.raises(ReportParsingError):
            parse_analysis('{"status": "maybe", "summary": "?"}')


class TestEncodeUpload:
    """encode_upload()."""

    def test_txt_should_become_data_url(self) -> None:
        data_url = encode_upload("notes.TXT", b"Hello")

        assert data_url == "data:text/plain;base64," + base64.b64encode(b"Hello").decode()

    def test_client_content_type_should_be_kept(self) -> None:
        data_url = encode_upload("report.pdf", b"%PDF", "application/pdf")

        assert data_url.startswith("data:application/pdf;base64,")

    @pytest.mark.parametrize("file_name", ["image.png", "archive.zip", "no_extension"])
    def test_unsupported_extension_should_raise(self, file_name: str) -> None:
        with pytest.raises(ValidationError):
            encode_upload(file_name, b"bytes")


class TestAnalyze:
    """ComplianceService.analyze()."""

    @pytest.mark.asyncio
    async def test_analyze_should_persist_parsed_report(
        self,
        compliance_service: ComplianceService,
        mock_llm_client: MagicMock,
        user_id: str,
    ) -> None:
        # Arrange
        mock_llm_client.acomplete.return_value = json.dumps(FAIL_VERDICT)
        request = _request(
            user_id,
            filters=ComplianceFilters(
                regulatory_scopes=[RegulatoryScope.NATIONAL],
                area_of_interest=AreaOfInterest.SEWAGE,
            ),
        )

        # Act
        report = await compliance_service.analyze(request)
        stored = await compliance_service.get_report(report.id)

        # Assert
        assert report.status == ComplianceStatus.FAIL
        assert report.document_name == "plant-report.txt"
        assert report.regulatory_filters == [RegulatoryScope.NATIONAL]
        assert report.area_filter == AreaOfInterest.SEWAGE
        assert stored.violations == report.violations
        assert stored.suggestions[0].regulation == "D.Lgs. 152/2006"

    @pytest.mark.asyncio
    async def test_analyze_should_send_filters_in_prompt(
        self,
        compliance_service: ComplianceService,
        mock_llm_client: MagicMock,
    ) -> None:
        # Arrange
        mock_llm_client.acomplete.return_value = json.dumps(FAIL_VERDICT)
        request = _request(filters=ComplianceFilters(regulatory_scopes=[RegulatoryScope.LOMBARDY]))

        # Act
        await compliance_service.analyze(request)

        # Assert
        human_message = mock_llm_client.acomplete.await_args.args[0][1]
        assert "Document name: plant-report.txt" in human_message.content
        assert "Lombardy regional regulations" in human_message.content

    @pytest.mark.asyncio
    async def test_unparseable_output_should_give_fallback_report(
        self,
        compliance_service: ComplianceService,
        mock_llm_client: MagicMock,
    ) -> None:
        # Arrange
        mock_llm_client.acomplete.return_value = "Sorry, I could not read the document."

        # Act
        report = await compliance_service.analyze(_request())

        # Assert
        assert report.status == ComplianceStatus.PENDING
        assert report.summary == FALLBACK_ANALYSIS.summary
        assert report.violations == []
        assert [s.title for s in report.suggestions] == ["Manual Review Recommended"]

    @pytest.mark.asyncio
    async def test_get_unknown_report_should_raise(
        self,
        compliance_service: ComplianceService,
    ) -> None:
        with pytest.raises(ReportNotFoundError):
            await compliance_service.get_report(uuid.uuid4())


class TestDashboard:
    """ComplianceService.get_dashboard()."""

    @pytest.mark.asyncio
    async def test_dashboard_should_aggregate_user_reports(
        self,
        compliance_service: ComplianceService,
        mock_llm_client: MagicMock,
        user_id: str,
    ) -> None:
        # Arrange
        mock_llm_client.acomplete.return_value = json.dumps(FAIL_VERDICT)
        await compliance_service.analyze(_request(user_id))
        mock_llm_client.acomplete.return_value = '{"status": "pass", "summary": "OK"}'
        await compliance_service.analyze(_request(user_id))
        await compliance_service.analyze(_request("another-user"))

        # Act
        dashboard = await compliance_service.get_dashboard(user_id)

        # Assert
        assert dashboard.total_reports == 2
        assert dashboard.by_status == {"pass": 1, "fail": 1, "pending": 0}
        assert dashboard.violations_by_severity == {"low": 1, "medium": 0, "high": 1}
        assert len(dashboard.recent_reports) == 2

    @pytest.mark.asyncio
    async def test_dashboard_should_keep_five_most_recent(
        self,
        compliance_service: ComplianceService,
        mock_llm_client: MagicMock,
        user_id: str,
    ) -> None:
        # Arrange
        mock_llm_client.acomplete.return_value = '{"status": "pass", "summary": "OK"}'
        for _ in range(7):
            await compliance_service.analyze(_request(user_id))

        # Act
        dashboard = await compliance_service.get_dashboard(user_id)

        # Assert
        assert dashboard.total_reports == 7
        assert len(dashboard.recent_reports) == 5

    @pytest.mark.asyncio
    async def test_dashboard_without_reports_should_be_zeroed(
        self,
        compliance_service: ComplianceService,
    ) -> None:
        dashboard = await compliance_service.get_dashboard("nobody")

        assert dashboard.total_reports == 0
        assert dashboard.by_status == {"pass": 0, "fail": 0, "pending": 0}
        assert dashboard.recent_reports == []
