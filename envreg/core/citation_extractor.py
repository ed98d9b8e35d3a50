"""
Legal citation extraction from generated text.

Scans LLM output for references to EU directives, Italian legislative
decrees (D.Lgs) and Lombardy regional laws (L.R.) and turns every match into
a Citation. Results are deduplicated by identifier and capped.

Dependencies: re (stdlib), envreg.models.citation
System role: Citation post-processing for chat answers
"""

import re
from dataclasses import dataclass

from envreg.models.citation import Citation, RegulatoryScope

MAX_CITATIONS = 5
EXCERPT_BEFORE = 50
EXCERPT_AFTER = 100


@dataclass(frozen=True)
class CitationStyle:
    """One recognised citation style."""

    scope: RegulatoryScope
    pattern: re.Pattern[str]
    id_prefix: str
    label: str


# Style order is the result order: EU, then national, then regional.
CITATION_STYLES: tuple[CitationStyle, ...] = (
    CitationStyle(
        scope=RegulatoryScope.EUROPEAN,
        pattern=re.compile(
            r"\b(?:Directive|Direttiva)\s+(?:\((?:EU|UE|EC|CE)\)\s*)?(?:n\.\s*)?"
            r"(\d{2,4}/\d{1,4})\b",
            re.IGNORECASE,
        ),
        id_prefix="eu-",
        label="EU Directive",
    ),
    CitationStyle(
        scope=RegulatoryScope.NATIONAL,
        pattern=re.compile(r"\bD\.\s?[Ll]gs\.?\s*(?:n\.\s*)?(\d{1,4}/\d{4})\b"),
        id_prefix="it-dlgs-",
        label="D.Lgs.",
    ),
    CitationStyle(
        scope=RegulatoryScope.LOMBARDY,
        pattern=re.compile(r"\bL\.\s?R\.\s*(?:Lombardia\s+)?(?:n\.\s*)?(\d{1,4}/\d{4})\b"),
        id_prefix="lr-lombardia-",
        label="L.R. Lombardia",
    ),
)


def _excerpt(text: str, position: int) -> str:
    start = max(0, position - EXCERPT_BEFORE)
    end = min(len(text), position + EXCERPT_AFTER)
    return text[start:end]


def _build_citation(style: CitationStyle, text: str, match: re.Match[str]) -> Citation:
    number = match.group(1)
    return Citation(
        document_id=style.id_prefix + number.replace("/", "-"),
        document_title=f"{style.label} {number}",
        excerpt=_excerpt(text, match.start()),
        regulatory_scope=style.scope,
    )


def extract_citations(text: str, limit: int = MAX_CITATIONS) -> list[Citation]:
    """
    Extract structured legal citations from free text.

    Styles are scanned in CITATION_STYLES order and matches within a style
    left to right. The first occurrence of an identifier wins.

    Args:
        text: Model-generated prose
        limit: Maximum number of unique citations to return

    Returns:
        list[Citation]: At most `limit` citations in encounter order
    """
    citations: list[Citation] = []
    seen: set[str] = set()

    if not text:
        return citations

    for style in CITATION_STYLES:
        for match in style.pattern.finditer(text):
            citation = _build_citation(style, text, match)
            if citation.document_id in seen:
                continue
            seen.add(citation.document_id)
            citations.append(citation)

    return citations[:limit]


class CitationExtractor:
    """Callable wrapper used by services that take the extractor as a dependency."""

    def __init__(self, limit: int = MAX_CITATIONS) -> None:
        self.limit = limit

    def extract(self, text: str) -> list[Citation]:
        """Return citations found in text."""
        return extract_citations(text, limit=self.limit)
