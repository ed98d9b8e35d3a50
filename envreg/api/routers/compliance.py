"""
Compliance analysis API endpoints.

Routes:
- POST /compliance/analyze - Analyze document content (JSON body)
- POST /compliance/analyze/upload - Analyze an uploaded .pdf/.docx/.txt file
- GET /compliance/reports?user_id= - List a user's reports
- GET /compliance/reports/{report_id} - Get a report
- GET /compliance/dashboard?user_id= - Aggregated report statistics

Dependencies: envreg.application.services.compliance_service
System role: Compliance analysis HTTP API
"""

import json
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from pydantic import ValidationError as PydanticValidationError

from envreg.api.deps import get_compliance_service
from envreg.api.routers.error_handling import handle_api_errors
from envreg.application.services.compliance_service import (
    ComplianceService,
    encode_upload,
)
from envreg.core.exceptions import ValidationError
from envreg.models.compliance import (
    AnalyzeComplianceRequest,
    ComplianceDashboardResponse,
    ComplianceFilters,
    ComplianceReport,
)

router = APIRouter(prefix="/compliance", tags=["compliance"])


@router.post("/analyze", response_model=ComplianceReport)
@handle_api_errors
async def analyze_document(
    request: AnalyzeComplianceRequest,
    service: ComplianceService = Depends(get_compliance_service),
) -> ComplianceReport:
    """Analyze document content and store the compliance report."""
    return await service.analyze(request)


@router.post("/analyze/upload", response_model=ComplianceReport)
@handle_api_errors
async def analyze_upload(
    file: UploadFile = File(...),
    filters: str | None = Form(default=None, description="ComplianceFilters as JSON"),
    user_id: str | None = Form(default=None),
    service: ComplianceService = Depends(get_compliance_service),
) -> ComplianceReport:
    """
    Analyze an uploaded document.

    Args:
        file: .pdf, .docx or .txt document
        filters: Optional JSON object ``{"regulatoryScopes": [...], "areaOfInterest": ...}``
        user_id: Optional owner of the stored report

    Raises:
        HTTPException(400): Unsupported file type or malformed filters
    """
    file_name = file.filename or ""
    data = await file.read()
    file_content = encode_upload(file_name, data, file.content_type)

    try:
        parsed_filters = (
            ComplianceFilters.model_validate(json.loads(filters)) if filters else ComplianceFilters()
        )
    except (json.JSONDecodeError, PydanticValidationError) as e:
        raise ValidationError(f"Invalid filters: {e}", field="filters") from e

    return await service.analyze(
        AnalyzeComplianceRequest(
            file_name=file_name,
            file_content=file_content,
            filters=parsed_filters,
            user_id=user_id,
        )
    )


@router.get("/reports", response_model=list[ComplianceReport])
@handle_api_errors
async def list_reports(
    user_id: str = Query(min_length=1),
    service: ComplianceService = Depends(get_compliance_service),
) -> list[ComplianceReport]:
    """List a user's reports, newest first."""
    return await service.list_reports(user_id)


@router.get("/reports/{report_id}", response_model=ComplianceReport)
@handle_api_errors
async def get_report(
    report_id: UUID,
    service: ComplianceService = Depends(get_compliance_service),
) -> ComplianceReport:
    """Get a stored report."""
    return await service.get_report(report_id)


@router.get("/dashboard", response_model=ComplianceDashboardResponse)
@handle_api_errors
async def get_dashboard(
    user_id: str = Query(min_length=1),
    service: ComplianceService = Depends(get_compliance_service),
) -> ComplianceDashboardResponse:
    """Report counts by status, violation counts by severity, five latest reports."""
    return await service.get_dashboard(user_id)
