"""Incremental search panel behind the header search box."""

import logging
from dataclasses import dataclass, field, replace
from urllib.parse import quote

from hoarding_dashboard.domain.models import UserRole
from hoarding_dashboard.domain.results import Provenance
from hoarding_dashboard.domain.search import SearchCategory, SearchResultSet
from hoarding_dashboard.services.notifications import NotificationLevel, Notifier
from hoarding_dashboard.services.search import SearchService
from hoarding_dashboard.services.session import SessionStore

_logger = logging.getLogger(__name__)

FALLBACK_WARNING = "Error searching. Showing fallback results."

_OWNER_ROUTES: dict[SearchCategory, str] = {
    SearchCategory.HOARDINGS: "/hoardings/{id}",
    SearchCategory.CONTRACTS: "/contracts/{id}",
    SearchCategory.PHOTOS: "/photos/{id}",
    SearchCategory.USERS: "/users/{id}",
    SearchCategory.BILLINGS: "/billings/{id}",
    SearchCategory.ASSIGNMENTS: "/photographers/assignments/{id}",
}

_MEMBER_ROUTES: dict[SearchCategory, str] = {
    SearchCategory.HOARDINGS: "/client/hoardings/{id}",
    SearchCategory.CONTRACTS: "/client/contracts/{id}",
    SearchCategory.PHOTOS: "/client/photos/{id}",
    SearchCategory.USERS: "/profile",
    SearchCategory.BILLINGS: "/client/billing/{id}",
    SearchCategory.ASSIGNMENTS: "/photographer/assignment-details/{id}",
}


def route_for(category: SearchCategory, hit_id: str, role: UserRole | None) -> str:
    """Return the detail route for a search hit as seen by ``role``."""
    routes = _OWNER_ROUTES if role == UserRole.OWNER else _MEMBER_ROUTES
    return routes[category].format(id=quote(hit_id, safe=""))


def search_page_route(query: str) -> str:
    """Return the full results page route for a raw query."""
    return f"/search?query={quote(query, safe='')}"


@dataclass(frozen=True)
class SearchPanel:
    """What the dropdown under the search box currently shows."""

    query: str = ""
    is_open: bool = False
    is_searching: bool = False
    results: SearchResultSet | None = None
    provenance: Provenance = Provenance.LIVE


@dataclass
class LiveSearchController:
    """Drives the search panel as the user types.

    Every issued request takes the next sequence number. A response is
    installed only if its number is still the latest, so a slow response for
    an older query never overwrites a newer one.
    """

    search_service: SearchService
    notifier: Notifier
    session: SessionStore
    min_length: int = 2
    _panel: SearchPanel = field(default_factory=SearchPanel, init=False)
    _sequence: int = field(default=0, init=False)

    @property
    def panel(self) -> SearchPanel:
        return self._panel

    async def update_query(self, query: str) -> SearchPanel:
        """Record new input and search when it is long enough."""
        sequence = self._invalidate()
        if len(query) < self.min_length:
            self._panel = SearchPanel(query=query)
            return self._panel

        self._panel = replace(
            self._panel, query=query, is_open=True, is_searching=True
        )
        try:
            result = await self.search_service.search(query)
        except Exception:
            if sequence == self._sequence:
                self._panel = replace(self._panel, is_searching=False)
            raise

        if sequence != self._sequence:
            _logger.debug("Discarding stale search response for %r", query)
            return self._panel
        if result.is_fallback:
            self.notifier.notify(NotificationLevel.WARNING, FALLBACK_WARNING)
        self._panel = SearchPanel(
            query=query,
            is_open=True,
            results=result.data,
            provenance=result.provenance,
        )
        return self._panel

    def click_outside(self) -> SearchPanel:
        """Hide the panel, keeping the typed query."""
        self._invalidate()
        self._panel = replace(self._panel, is_open=False, is_searching=False)
        return self._panel

    def clear(self) -> SearchPanel:
        """Empty the search box."""
        self._invalidate()
        self._panel = SearchPanel()
        return self._panel

    def select(self, category: SearchCategory, hit_id: str) -> str:
        """Close the panel and return the route for a chosen hit."""
        user = self.session.state.user
        route = route_for(category, hit_id, user.role if user else None)
        self.clear()
        return route

    def submit(self) -> str | None:
        """Close the panel and return the full results route, if any."""
        query = self._panel.query
        if not query.strip():
            return None
        self.clear()
        return search_page_route(query)

    def _invalidate(self) -> int:
        self._sequence += 1
        return self._sequence
