"""Domain models for the authenticated session."""

from dataclasses import dataclass

from hoarding_dashboard.domain.models import UserRecord
from hoarding_dashboard.domain.results import Provenance


@dataclass(frozen=True)
class SessionState:
    """Snapshot of who is logged in and whether the app is ready."""

    user: UserRecord | None = None
    token: str | None = None
    is_loading: bool = True
    is_authenticated: bool = False
    last_error: str | None = None
    provenance: Provenance = Provenance.LIVE
