"""
Common response models and shared enums.

Regulatory scope and area-of-interest vocabularies, the camelCase base model
used by the JSON API, and the error schema.

Dependencies: pydantic
System role: Common API response structures
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys, populated by either name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegulatoryScope(str, Enum):
    """Jurisdiction of a legal instrument."""

    EUROPEAN = "european"
    NATIONAL = "national"
    LOMBARDY = "lombardy"


class AreaOfInterest(str, Enum):
    """Environmental topic used to focus chats and analyses."""

    SEWAGE = "sewage"
    AIR_QUALITY = "air_quality"
    WASTE_MANAGEMENT = "waste_management"
    WATER_RESOURCES = "water_resources"
    NOISE_POLLUTION = "noise_pollution"
    SOIL_CONTAMINATION = "soil_contamination"
    ENERGY = "energy"
    GENERAL = "general"


REGULATORY_SCOPE_LABELS: dict[RegulatoryScope, str] = {
    RegulatoryScope.EUROPEAN: "European Union",
    RegulatoryScope.NATIONAL: "National (Italy)",
    RegulatoryScope.LOMBARDY: "Lombardy Region",
}

AREA_OF_INTEREST_LABELS: dict[AreaOfInterest, str] = {
    AreaOfInterest.SEWAGE: "Sewage & Wastewater",
    AreaOfInterest.AIR_QUALITY: "Air Quality",
    AreaOfInterest.WASTE_MANAGEMENT: "Waste Management",
    AreaOfInterest.WATER_RESOURCES: "Water Resources",
    AreaOfInterest.NOISE_POLLUTION: "Noise Pollution",
    AreaOfInterest.SOIL_CONTAMINATION: "Soil Contamination",
    AreaOfInterest.ENERGY: "Energy & Emissions",
    AreaOfInterest.GENERAL: "General",
}


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    details: dict | None = Field(default=None, description="Additional error context")
