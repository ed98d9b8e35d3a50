"""
Law catalog domain models and schemas.

Dependencies: pydantic
System role: Law catalog API contracts
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field

from envreg.models.common import CamelModel


class Jurisdiction(str, Enum):
    """Jurisdiction values used by the norms catalog."""

    EU = "EU"
    ITALY = "Italy"
    REGIONAL = "Regional"


class LawCategory(str, Enum):
    """Topic category of a law."""

    WATER = "Water"
    AIR = "Air"
    WASTE = "Waste"
    SOIL = "Soil"
    NOISE = "Noise"
    ENERGY = "Energy"
    GENERAL = "General"


class LawStatus(str, Enum):
    """Legal status of a law."""

    ACTIVE = "Active"
    AMENDED = "Amended"
    REPEALED = "Repealed"


JURISDICTION_LABELS: dict[Jurisdiction, str] = {
    Jurisdiction.EU: "European Union",
    Jurisdiction.ITALY: "National (Italy)",
    Jurisdiction.REGIONAL: "Regional",
}

CATEGORY_LABELS: dict[LawCategory, str] = {
    LawCategory.WATER: "Water",
    LawCategory.AIR: "Air Quality",
    LawCategory.WASTE: "Waste Management",
    LawCategory.SOIL: "Soil",
    LawCategory.NOISE: "Noise",
    LawCategory.ENERGY: "Energy",
    LawCategory.GENERAL: "General",
}

STATUS_LABELS: dict[LawStatus, str] = {
    LawStatus.ACTIVE: "Active",
    LawStatus.AMENDED: "Amended",
    LawStatus.REPEALED: "Repealed",
}


class Law(BaseModel):
    """A law entry from the norms catalog."""

    id: str
    title: str
    short_name: str
    jurisdiction: Jurisdiction
    category: LawCategory
    publication_date: date
    status: LawStatus
    summary: str = ""
    pdf_url: str
    tags: list[str] = Field(default_factory=list)


class SelectedLaw(CamelModel):
    """Subset of a law sent by clients as chat context (camelCase or snake_case keys)."""

    id: str | None = None
    title: str
    short_name: str
    pdf_url: str | None = None
    jurisdiction: str | None = None
    category: str | None = None


class LawFilters(BaseModel):
    """Catalog filter criteria. Empty lists mean no restriction."""

    search: str = ""
    jurisdictions: list[Jurisdiction] = Field(default_factory=list)
    categories: list[LawCategory] = Field(default_factory=list)
    statuses: list[LawStatus] = Field(default_factory=list)
    date_from: date | None = None
    date_to: date | None = None


class LawListResponse(BaseModel):
    """Filtered law list."""

    laws: list[Law]
    total: int


class FacetsResponse(BaseModel):
    """Display labels for every filterable vocabulary."""

    jurisdictions: dict[str, str]
    categories: dict[str, str]
    statuses: dict[str, str]
    regulatory_scopes: dict[str, str]
    areas_of_interest: dict[str, str]
