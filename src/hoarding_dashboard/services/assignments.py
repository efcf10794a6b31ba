"""Photographer assignment workflow endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.domain.resources import (
    Assignment,
    AssignmentStatus,
    Photo,
    Photographer,
    PhotographerStats,
)
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services.common import (
    live,
    parse_model,
    parse_models,
    read_with_fallback,
    sample,
    segment,
)


@dataclass
class AssignmentService:
    """Service for assigning hoardings to photographers and tracking the work.

    Read calls degrade to empty data tagged as fallback; there is no sample
    assignment set to show.
    """

    api: ApiClient

    async def list_assignments(
        self, assignment_id: str | None = None, status: str | None = None
    ) -> ServiceResult[list[Assignment]]:
        """List assignments visible to the current user."""

        async def fetch() -> ServiceResult[list[Assignment]]:
            envelope = await self.api.request(
                "GET",
                "/api/assignments",
                params={"status": status, "id": assignment_id},
            )
            return live(envelope, parse_models(Assignment, envelope.data or []))

        return await read_with_fallback(
            fetch,
            lambda: sample([], "Failed to fetch assignments"),
            action="list_assignments",
        )

    async def update_status(
        self, assignment_id: str, status: AssignmentStatus
    ) -> ServiceResult[Assignment]:
        """Move an assignment to a new status."""
        envelope = await self.api.request(
            "PUT",
            f"/api/assignments/{segment(assignment_id)}/status",
            json={"status": status.value},
        )
        return live(envelope, parse_model(Assignment, envelope.data))

    async def photos_for_assignment(
        self, assignment_id: str
    ) -> ServiceResult[list[Photo]]:
        """List photos uploaded for one assignment."""

        async def fetch() -> ServiceResult[list[Photo]]:
            envelope = await self.api.request(
                "GET", "/api/photos", params={"assignment": assignment_id}
            )
            return live(envelope, parse_models(Photo, envelope.data or []))

        return await read_with_fallback(
            fetch,
            lambda: sample([], "Failed to fetch photos"),
            action=f"photos_for_assignment:{assignment_id}",
        )

    async def list_photos(
        self, status: str | None = None
    ) -> ServiceResult[list[Photo]]:
        """List the photographer's own uploads."""

        async def fetch() -> ServiceResult[list[Photo]]:
            envelope = await self.api.request(
                "GET", "/api/photos", params={"status": status}
            )
            return live(envelope, parse_models(Photo, envelope.data or []))

        return await read_with_fallback(
            fetch,
            lambda: sample([], "Failed to fetch photos"),
            action="list_photos",
        )

    async def dashboard_stats(self) -> ServiceResult[PhotographerStats]:
        """Return counters for the photographer dashboard."""

        async def fetch() -> ServiceResult[PhotographerStats]:
            envelope = await self.api.request(
                "GET", "/api/assignments/photographers/stats"
            )
            return live(envelope, parse_model(PhotographerStats, envelope.data))

        return await read_with_fallback(
            fetch,
            lambda: sample(PhotographerStats(), "Failed to fetch dashboard stats"),
            action="dashboard_stats",
        )

    async def list_photographers(
        self, status: str | None = None, search: str | None = None
    ) -> ServiceResult[list[Photographer]]:
        """List photographers available for assignments."""

        async def fetch() -> ServiceResult[list[Photographer]]:
            envelope = await self.api.request(
                "GET",
                "/api/users/photographers",
                params={"status": status, "search": search},
            )
            return live(envelope, parse_models(Photographer, envelope.data or []))

        return await read_with_fallback(
            fetch,
            lambda: sample([], "Failed to fetch photographers"),
            action="list_photographers",
        )

    async def assign_hoarding(
        self,
        photographer_id: str,
        hoarding_id: str,
        due_date: str,
        notes: str | None = None,
    ) -> ServiceResult[Assignment]:
        """Create an assignment for a photographer."""
        payload: dict[str, Any] = {
            "photographer": photographer_id,
            "hoarding": hoarding_id,
            "dueDate": due_date,
        }
        if notes:
            payload["notes"] = notes
        envelope = await self.api.request("POST", "/api/assignments", json=payload)
        return live(envelope, parse_model(Assignment, envelope.data))
