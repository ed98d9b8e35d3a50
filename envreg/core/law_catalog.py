"""
Law catalog.

Loads the norms JSON file and answers lookup and filter queries over it.
The catalog is read-only and held in memory for the process lifetime.

Dependencies: pydantic, envreg.models.law
System role: Law browsing business logic
"""

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from envreg.core.exceptions import LawCatalogError, LawNotFoundError
from envreg.models.law import Law, LawFilters

logger = logging.getLogger(__name__)

_LAW_LIST = TypeAdapter(list[Law])


class LawCatalog:
    """In-memory catalog of environmental laws."""

    def __init__(self, laws: list[Law]) -> None:
        """
        Initialize catalog from already validated laws.

        Args:
            laws: Catalog entries in display order
        """
        self._laws = list(laws)
        self._by_id = {law.id: law for law in self._laws}

    @classmethod
    def load(cls, path: Path) -> "LawCatalog":
        """
        Load catalog from a norms JSON file (a list of law objects).

        Args:
            path: Path to the JSON file

        Returns:
            LawCatalog: Loaded catalog

        Raises:
            LawCatalogError: If the file is missing, not JSON, or has invalid entries
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
            laws = _LAW_LIST.validate_python(json.loads(raw))
        except FileNotFoundError as e:
            raise LawCatalogError(f"Norms file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise LawCatalogError(f"Norms file is not valid JSON: {path}", {"error": str(e)}) from e
        except ValidationError as e:
            raise LawCatalogError(
                f"Norms file has invalid entries: {path}",
                {"error_count": e.error_count()},
            ) from e

        logger.info("Law catalog loaded", extra={"path": str(path), "law_count": len(laws)})
        return cls(laws)

    def __len__(self) -> int:
        return len(self._laws)

    def all(self) -> list[Law]:
        """Return every law in catalog order."""
        return list(self._laws)

    def get(self, law_id: str) -> Law:
        """
        Get a law by id.

        Raises:
            LawNotFoundError: If no law has this id
        """
        law = self._by_id.get(law_id)
        if law is None:
            raise LawNotFoundError(law_id)
        return law

    def get_many(self, law_ids: list[str]) -> list[Law]:
        """Resolve ids in the given order, failing on the first unknown id."""
        return [self.get(law_id) for law_id in law_ids]

    def filter(self, filters: LawFilters) -> list[Law]:
        """
        Return laws matching every active criterion.

        Args:
            filters: Search text, enum memberships and inclusive date range

        Returns:
            list[Law]: Matching laws in catalog order
        """
        return [law for law in self._laws if matches(law, filters)]


def matches(law: Law, filters: LawFilters) -> bool:
    """Check a single law against the filters."""
    if filters.search:
        needle = filters.search.lower()
        haystacks = [law.title, law.short_name, law.summary, *law.tags]
        if not any(needle in value.lower() for value in haystacks):
            return False

    if filters.jurisdictions and law.jurisdiction not in filters.jurisdictions:
        return False

    if filters.categories and law.category not in filters.categories:
        return False

    if filters.statuses and law.status not in filters.statuses:
        return False

    if filters.date_from and law.publication_date < filters.date_from:
        return False
    if filters.date_to and law.publication_date > filters.date_to:
        return False

    return True
