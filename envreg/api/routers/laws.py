"""
Law catalog API endpoints.

Routes:
- GET /laws - List laws matching filters
- GET /laws/facets - Display labels for every filter vocabulary
- GET /laws/{law_id} - Get a single law

Dependencies: envreg.core.law_catalog
System role: Law browsing HTTP API
"""

from datetime import date

from fastapi import APIRouter, Depends, Query

from envreg.api.deps import get_law_catalog
from envreg.api.routers.error_handling import handle_api_errors
from envreg.core.law_catalog import LawCatalog
from envreg.models.common import AREA_OF_INTEREST_LABELS, REGULATORY_SCOPE_LABELS
from envreg.models.law import (
    CATEGORY_LABELS,
    JURISDICTION_LABELS,
    STATUS_LABELS,
    FacetsResponse,
    Jurisdiction,
    Law,
    LawCategory,
    LawFilters,
    LawListResponse,
    LawStatus,
)

router = APIRouter(prefix="/laws", tags=["laws"])


@router.get("", response_model=LawListResponse)
@handle_api_errors
async def list_laws(
    search: str = Query(default="", description="Text searched in title, name, summary and tags"),
    jurisdiction: list[Jurisdiction] = Query(default=[]),
    category: list[LawCategory] = Query(default=[]),
    status: list[LawStatus] = Query(default=[]),
    date_from: date | None = Query(default=None),
    date_to: date | None = Query(default=None),
    catalog: LawCatalog = Depends(get_law_catalog),
) -> LawListResponse:
    """
    List laws matching every given filter.

    Repeat a query parameter to match several values,
    e.g. ``?jurisdiction=EU&jurisdiction=Italy``.
    """
    filters = LawFilters(
        search=search,
        jurisdictions=jurisdiction,
        categories=category,
        statuses=status,
        date_from=date_from,
        date_to=date_to,
    )
    laws = catalog.filter(filters)
    return LawListResponse(laws=laws, total=len(laws))


@router.get("/facets", response_model=FacetsResponse)
async def get_facets() -> FacetsResponse:
    """Display labels keyed by enum value."""
    return FacetsResponse(
        jurisdictions={k.value: v for k, v in JURISDICTION_LABELS.items()},
        categories={k.value: v for k, v in CATEGORY_LABELS.items()},
        statuses={k.value: v for k, v in STATUS_LABELS.items()},
        regulatory_scopes={k.value: v for k, v in REGULATORY_SCOPE_LABELS.items()},
        areas_of_interest={k.value: v for k, v in AREA_OF_INTEREST_LABELS.items()},
    )


@router.get("/{law_id}", response_model=Law)
@handle_api_errors
async def get_law(
    law_id: str,
    catalog: LawCatalog = Depends(get_law_catalog),
) -> Law:
    """
    Get a law by id.

    Raises:
        HTTPException(404): Law not found
    """
    return catalog.get(law_id)
