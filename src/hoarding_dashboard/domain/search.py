"""Domain models for grouped search results."""

from dataclasses import dataclass, field
from enum import StrEnum


class SearchCategory(StrEnum):
    """Result groups in display order."""

    HOARDINGS = "hoardings"
    CONTRACTS = "contracts"
    PHOTOS = "photos"
    USERS = "users"
    ASSIGNMENTS = "assignments"
    BILLINGS = "billings"


@dataclass(frozen=True)
class SearchHit:
    """Lightweight summary of a matching record."""

    id: str
    category: SearchCategory
    title: str
    subtitle: str = ""


@dataclass(frozen=True)
class SearchResultSet:
    """Search hits grouped by category."""

    groups: dict[SearchCategory, tuple[SearchHit, ...]] = field(default_factory=dict)

    def hits(self, category: SearchCategory) -> tuple[SearchHit, ...]:
        """Return hits for one category, empty when none matched."""
        return self.groups.get(category, ())

    @property
    def has_results(self) -> bool:
        """Return True when any category has at least one hit."""
        return any(self.groups.values())

    def preview(self, limit: int = 3) -> dict[SearchCategory, tuple[SearchHit, ...]]:
        """Return the first hits of each non-empty category."""
        return {
            category: hits[:limit]
            for category, hits in self.groups.items()
            if hits
        }
