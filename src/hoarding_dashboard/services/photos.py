"""Hoarding photo endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient, FileField
from hoarding_dashboard.domain.resources import Photo
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services.common import (
    live,
    parse_model,
    parse_models,
    segment,
)


@dataclass
class PhotoService:
    """Service for photos uploaded against hoardings and assignments."""

    api: ApiClient

    async def list_photos(
        self, filters: dict[str, Any] | None = None
    ) -> ServiceResult[list[Photo]]:
        """List photos matching arbitrary backend filters."""
        envelope = await self.api.request("GET", "/api/photos", params=filters)
        return live(envelope, parse_models(Photo, envelope.data))

    async def get_photo(self, photo_id: str) -> ServiceResult[Photo]:
        envelope = await self.api.request("GET", f"/api/photos/{segment(photo_id)}")
        return live(envelope, parse_model(Photo, envelope.data))

    async def upload_photo(
        self, photo: FileField, fields: dict[str, str]
    ) -> ServiceResult[Photo]:
        """Upload a photo file with its hoarding and assignment fields."""
        envelope = await self.api.request(
            "POST", "/api/photos", data=fields, files={"photo": photo}
        )
        return live(envelope, parse_model(Photo, envelope.data))

    async def update_photo(
        self, photo_id: str, caption: str | None = None, status: str | None = None
    ) -> ServiceResult[Photo]:
        """Update the caption or review status of a photo."""
        changes = {
            key: value
            for key, value in {"caption": caption, "status": status}.items()
            if value is not None
        }
        envelope = await self.api.request(
            "PUT", f"/api/photos/{segment(photo_id)}", json=changes
        )
        return live(envelope, parse_model(Photo, envelope.data))

    async def delete_photo(self, photo_id: str) -> ServiceResult[None]:
        envelope = await self.api.request("DELETE", f"/api/photos/{segment(photo_id)}")
        return live(envelope, None)

    async def photos_by_hoarding(self, hoarding_id: str) -> ServiceResult[list[Photo]]:
        envelope = await self.api.request(
            "GET", f"/api/photos/hoarding/{segment(hoarding_id)}"
        )
        return live(envelope, parse_models(Photo, envelope.data))

    async def photos_by_assignment(
        self, assignment_id: str
    ) -> ServiceResult[list[Photo]]:
        envelope = await self.api.request(
            "GET", f"/api/photos/assignment/{segment(assignment_id)}"
        )
        return live(envelope, parse_models(Photo, envelope.data))
