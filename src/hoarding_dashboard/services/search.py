"""Cross-resource search endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.domain.errors import ApiShapeError
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.domain.search import SearchCategory, SearchHit, SearchResultSet
from hoarding_dashboard.services import sample_data
from hoarding_dashboard.services.common import live, read_with_fallback, sample

_SAMPLE_GROUPS: dict[SearchCategory, list[dict[str, object]]] = {
    SearchCategory.HOARDINGS: sample_data.HOARDINGS,
    SearchCategory.CONTRACTS: sample_data.CONTRACTS,
    SearchCategory.PHOTOS: sample_data.PHOTOS,
    SearchCategory.USERS: sample_data.SEARCH_USERS,
}


@dataclass
class SearchService:
    """Searches hoardings, contracts, photos, users, assignments and billings."""

    api: ApiClient

    async def search(
        self,
        query: str,
        category: SearchCategory | None = None,
        filters: dict[str, str] | None = None,
    ) -> ServiceResult[SearchResultSet]:
        """Search all categories, or one when ``category`` is given."""

        async def fetch() -> ServiceResult[SearchResultSet]:
            params: dict[str, Any] = {"query": query, "type": category}
            params.update(filters or {})
            envelope = await self.api.request("GET", "/api/search", params=params)
            return live(envelope, build_result_set(envelope.data))

        return await read_with_fallback(
            fetch,
            lambda: sample(self.sample_results(category), "Search results"),
            action="search",
        )

    async def public_search(
        self, query: str, category: SearchCategory | None = None
    ) -> ServiceResult[SearchResultSet]:
        """Search without authentication; the fallback lists active hoardings."""

        async def fetch() -> ServiceResult[SearchResultSet]:
            envelope = await self.api.request(
                "GET",
                "/api/public-search",
                params={"query": query, "type": category},
            )
            return live(envelope, build_result_set(envelope.data))

        def fallback() -> ServiceResult[SearchResultSet]:
            active = [h for h in sample_data.HOARDINGS if h.get("status") == "active"]
            return sample(
                build_result_set({SearchCategory.HOARDINGS.value: active}),
                "Public search results",
            )

        return await read_with_fallback(fetch, fallback, action="public_search")

    def sample_results(self, category: SearchCategory | None = None) -> SearchResultSet:
        """Return the fixed sample result set, restricted to one category."""
        return build_result_set(
            {
                group.value: rows
                for group, rows in _SAMPLE_GROUPS.items()
                if category is None or group == category
            }
        )


def build_result_set(payload: object) -> SearchResultSet:
    """Summarize a raw ``{category: [records]}`` payload into search hits."""
    if not isinstance(payload, dict):
        raise ApiShapeError("Search response is not grouped by category")
    groups: dict[SearchCategory, tuple[SearchHit, ...]] = {}
    for category in SearchCategory:
        rows = payload.get(category.value)
        if rows is None:
            continue
        if not isinstance(rows, list):
            raise ApiShapeError(f"Search group '{category}' is not a list")
        groups[category] = tuple(
            summarize(category, row) for row in rows if isinstance(row, dict)
        )
    return SearchResultSet(groups=groups)


def summarize(category: SearchCategory, record: dict[str, Any]) -> SearchHit:
    """Reduce a full record to the fields shown in the search panel."""
    record_id = str(record.get("_id") or record.get("id") or "")
    if not record_id:
        raise ApiShapeError(f"Search hit in '{category}' has no id")
    title, subtitle = _SUMMARIZERS[category](record_id, record)
    return SearchHit(id=record_id, category=category, title=title, subtitle=subtitle)


def _name_of(value: Any, default: str) -> str:
    if isinstance(value, dict) and value.get("name"):
        return str(value["name"])
    return default


def _date_part(value: Any) -> str:
    return str(value)[:10] if value else "unknown date"


def _hoarding_summary(record_id: str, record: dict[str, Any]) -> tuple[str, str]:
    location = record.get("location") or {}
    size = record.get("size") or {}
    city = location.get("city", "") if isinstance(location, dict) else ""
    dimensions = ""
    if isinstance(size, dict) and size:
        dimensions = (
            f"{_number(size.get('width'))}x{_number(size.get('height'))} "
            f"{size.get('unit', 'feet')}"
        )
    subtitle = ", ".join(part for part in (city, dimensions) if part)
    return str(record.get("name") or record_id), subtitle


def _contract_summary(record_id: str, record: dict[str, Any]) -> tuple[str, str]:
    client = _name_of(record.get("client"), "Unknown Client")
    hoarding = _name_of(record.get("hoarding"), "Unknown Hoarding")
    return f"Contract #{record_id[:8]}", f"{client} - {hoarding}"


def _photo_summary(record_id: str, record: dict[str, Any]) -> tuple[str, str]:
    title = str(record.get("description") or record.get("caption") or "Photo")
    hoarding = _name_of(record.get("hoarding"), "Unknown Hoarding")
    return title, f"{hoarding} - {_date_part(record.get('takenAt'))}"


def _user_summary(record_id: str, record: dict[str, Any]) -> tuple[str, str]:
    email = record.get("email", "")
    role = record.get("role")
    subtitle = f"{email} ({role})" if role else str(email)
    return str(record.get("name") or record_id), subtitle


def _assignment_summary(record_id: str, record: dict[str, Any]) -> tuple[str, str]:
    hoarding = _name_of(record.get("hoarding"), "Assignment")
    status = record.get("status", "assigned")
    return hoarding, f"Due {_date_part(record.get('dueDate'))} - {status}"


def _billing_summary(record_id: str, record: dict[str, Any]) -> tuple[str, str]:
    number = record.get("invoiceNumber") or record_id[:8]
    status = record.get("paymentStatus", "pending")
    return f"Invoice #{number}", f"{_number(record.get('amount'))} - {status}"


def _number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value if value is not None else "?")


_SUMMARIZERS = {
    SearchCategory.HOARDINGS: _hoarding_summary,
    SearchCategory.CONTRACTS: _contract_summary,
    SearchCategory.PHOTOS: _photo_summary,
    SearchCategory.USERS: _user_summary,
    SearchCategory.ASSIGNMENTS: _assignment_summary,
    SearchCategory.BILLINGS: _billing_summary,
}
