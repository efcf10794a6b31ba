"""Provenance-tagged service results."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

T = TypeVar("T")


class Provenance(StrEnum):
    """Where a piece of data came from."""

    LIVE = "live"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Data returned by a service call along with its origin."""

    data: T
    message: str = ""
    code: int = 200
    provenance: Provenance = Provenance.LIVE

    @property
    def is_fallback(self) -> bool:
        """Return True when the data is local sample data."""
        return self.provenance is Provenance.FALLBACK
