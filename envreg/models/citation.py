"""
Citation domain model.

A structured reference to a legal instrument found in generated text.
Immutable once created; persisted only as JSON embedded in a chat message.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import ConfigDict, Field

from envreg.models.common import CamelModel, RegulatoryScope

__all__ = ["Citation", "RegulatoryScope"]


class Citation(CamelModel):
    """Citation extracted from an assistant answer."""

    model_config = ConfigDict(frozen=True)

    document_id: str = Field(description="Stable identifier, e.g. it-dlgs-152-2006")
    document_title: str = Field(description="Human-readable title, e.g. D.Lgs. 152/2006")
    excerpt: str = Field(description="Text surrounding the match in the answer")
    regulatory_scope: RegulatoryScope = Field(description="Jurisdiction of the instrument")
