"""Hoarding inventory endpoints."""

from dataclasses import dataclass

from hoarding_dashboard.adapters.http_client import ApiClient, FileField
from hoarding_dashboard.domain.errors import ApiShapeError, NotFoundError
from hoarding_dashboard.domain.resources import Hoarding, Page
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services import sample_data
from hoarding_dashboard.services.common import (
    live,
    matches,
    paginate,
    parse_model,
    parse_models,
    parse_page,
    read_with_fallback,
    sample,
    segment,
)


@dataclass
class HoardingService:
    """Service for listing and maintaining hoardings."""

    api: ApiClient

    async def list_hoardings(
        self,
        status: str | None = None,
        city: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ServiceResult[Page[Hoarding]]:
        """List hoardings filtered by status and city."""

        async def fetch() -> ServiceResult[Page[Hoarding]]:
            envelope = await self.api.request(
                "GET",
                "/api/hoardings",
                params={"status": status, "city": city, "page": page, "limit": limit},
            )
            return live(envelope, parse_page(Hoarding, envelope.data, "hoardings"))

        def fallback() -> ServiceResult[Page[Hoarding]]:
            hoardings = [
                hoarding
                for hoarding in _sample_hoardings()
                if (status is None or hoarding.status == status)
                and matches(city, hoarding.location.city)
            ]
            return sample(paginate(hoardings, page, limit), "Hoardings fetched")

        return await read_with_fallback(fetch, fallback, action="list_hoardings")

    async def get_hoarding(self, hoarding_id: str) -> ServiceResult[Hoarding]:
        """Return a single hoarding by id."""

        async def fetch() -> ServiceResult[Hoarding]:
            envelope = await self.api.request(
                "GET", f"/api/hoardings/{segment(hoarding_id)}"
            )
            return live(envelope, parse_model(Hoarding, envelope.data))

        def fallback() -> ServiceResult[Hoarding]:
            for hoarding in _sample_hoardings():
                if hoarding.id == hoarding_id:
                    return sample(hoarding, "Hoarding fetched")
            raise NotFoundError("Hoarding not found")

        return await read_with_fallback(
            fetch, fallback, action=f"get_hoarding:{hoarding_id}"
        )

    async def create_hoarding(
        self, fields: dict[str, str], images: list[FileField] | None = None
    ) -> ServiceResult[Hoarding]:
        """Create a hoarding with optional images."""
        envelope = await self.api.request(
            "POST",
            "/api/hoardings",
            data=fields,
            files=[("images", image) for image in images or []] or None,
        )
        return live(envelope, parse_model(Hoarding, envelope.data))

    async def update_hoarding(
        self,
        hoarding_id: str,
        fields: dict[str, str],
        images: list[FileField] | None = None,
    ) -> ServiceResult[Hoarding]:
        """Update a hoarding, appending any new images."""
        envelope = await self.api.request(
            "PUT",
            f"/api/hoardings/{segment(hoarding_id)}",
            data=fields,
            files=[("images", image) for image in images or []] or None,
        )
        return live(envelope, parse_model(Hoarding, envelope.data))

    async def delete_hoarding(self, hoarding_id: str) -> ServiceResult[None]:
        """Delete a hoarding."""
        envelope = await self.api.request(
            "DELETE", f"/api/hoardings/{segment(hoarding_id)}"
        )
        return live(envelope, None)

    async def remove_image(
        self, hoarding_id: str, image_url: str
    ) -> ServiceResult[Hoarding]:
        """Detach one image from a hoarding."""
        envelope = await self.api.request(
            "DELETE",
            f"/api/hoardings/{segment(hoarding_id)}/images",
            json={"imageUrl": image_url},
        )
        return live(envelope, parse_model(Hoarding, envelope.data))

    async def hoardings_by_status(self, status: str) -> ServiceResult[list[Hoarding]]:
        """List hoardings with a given status."""

        async def fetch() -> ServiceResult[list[Hoarding]]:
            envelope = await self.api.request(
                "GET", f"/api/hoardings/status/{segment(status)}"
            )
            return live(envelope, parse_models(Hoarding, envelope.data))

        def fallback() -> ServiceResult[list[Hoarding]]:
            hoardings = [h for h in _sample_hoardings() if h.status == status]
            return sample(hoardings, f"Hoardings with status {status} fetched")

        return await read_with_fallback(
            fetch, fallback, action=f"hoardings_by_status:{status}"
        )

    async def hoardings_by_location(self, city: str) -> ServiceResult[list[Hoarding]]:
        """List hoardings in a city."""

        async def fetch() -> ServiceResult[list[Hoarding]]:
            envelope = await self.api.request(
                "GET", f"/api/hoardings/location/{segment(city)}"
            )
            return live(envelope, parse_models(Hoarding, envelope.data))

        def fallback() -> ServiceResult[list[Hoarding]]:
            hoardings = [
                h for h in _sample_hoardings() if matches(city, h.location.city)
            ]
            return sample(hoardings, f"Hoardings in {city} fetched")

        return await read_with_fallback(
            fetch, fallback, action=f"hoardings_by_location:{city}"
        )

    async def search_hoardings(self, query: str) -> ServiceResult[list[Hoarding]]:
        """Search hoardings by name, address or city."""

        async def fetch() -> ServiceResult[list[Hoarding]]:
            envelope = await self.api.request(
                "GET", "/api/search", params={"query": query, "type": "hoardings"}
            )
            if not isinstance(envelope.data, dict):
                raise ApiShapeError("Missing 'hoardings' in search response")
            return live(
                envelope, parse_models(Hoarding, envelope.data.get("hoardings", []))
            )

        def fallback() -> ServiceResult[list[Hoarding]]:
            hoardings = [
                h
                for h in _sample_hoardings()
                if matches(query, h.name, h.location.address, h.location.city)
            ]
            return sample(hoardings, "Hoarding search results")

        return await read_with_fallback(fetch, fallback, action="search_hoardings")


def _sample_hoardings() -> list[Hoarding]:
    return [Hoarding.model_validate(row) for row in sample_data.HOARDINGS]
