"""User management endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient, FileField
from hoarding_dashboard.domain.errors import NotFoundError
from hoarding_dashboard.domain.models import UserRecord, UserRole
from hoarding_dashboard.domain.resources import Page
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services import sample_data
from hoarding_dashboard.services.common import (
    live,
    matches,
    paginate,
    parse_model,
    parse_page,
    read_with_fallback,
    sample,
    segment,
)


@dataclass
class UserService:
    """Service for listing and editing dashboard users."""

    api: ApiClient

    async def list_users(
        self,
        role: UserRole | None = None,
        search: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ServiceResult[Page[UserRecord]]:
        """List users, optionally filtered by role and search text."""

        async def fetch() -> ServiceResult[Page[UserRecord]]:
            envelope = await self.api.request(
                "GET",
                "/api/users",
                params={"role": role, "search": search, "page": page, "limit": limit},
            )
            return live(envelope, parse_page(UserRecord, envelope.data, "users"))

        def fallback() -> ServiceResult[Page[UserRecord]]:
            users = [
                user
                for user in _sample_users()
                if (role is None or user.role == role)
                and matches(search, user.name, user.email)
            ]
            return sample(paginate(users, page, limit), "Users fetched")

        return await read_with_fallback(fetch, fallback, action="list_users")

    async def get_user(self, user_id: str) -> ServiceResult[UserRecord]:
        """Return a single user by id."""

        async def fetch() -> ServiceResult[UserRecord]:
            envelope = await self.api.request("GET", f"/api/users/{segment(user_id)}")
            return live(envelope, parse_model(UserRecord, envelope.data))

        def fallback() -> ServiceResult[UserRecord]:
            for user in _sample_users():
                if user.id == user_id:
                    return sample(user, "User fetched")
            raise NotFoundError("User not found")

        return await read_with_fallback(fetch, fallback, action=f"get_user:{user_id}")

    async def list_photographers(
        self, search: str | None = None
    ) -> ServiceResult[Page[UserRecord]]:
        """List users with the photographer role."""
        return await self.list_users(
            role=UserRole.PHOTOGRAPHER, search=search, page=1, limit=20
        )

    async def list_clients(
        self, search: str | None = None
    ) -> ServiceResult[Page[UserRecord]]:
        """List users with the client role."""
        return await self.list_users(
            role=UserRole.CLIENT, search=search, page=1, limit=20
        )

    async def get_profile(self) -> ServiceResult[UserRecord]:
        """Return the current user's profile."""

        async def fetch() -> ServiceResult[UserRecord]:
            envelope = await self.api.request("GET", "/api/users/profile")
            return live(envelope, parse_model(UserRecord, envelope.data))

        def fallback() -> ServiceResult[UserRecord]:
            return sample(_sample_users()[0], "User profile fetched")

        return await read_with_fallback(fetch, fallback, action="get_profile")

    async def update_user(
        self, user_id: str, changes: dict[str, Any]
    ) -> ServiceResult[UserRecord]:
        """Update fields of a user."""
        envelope = await self.api.request(
            "PUT", f"/api/users/{segment(user_id)}", json=changes
        )
        return live(envelope, parse_model(UserRecord, envelope.data))

    async def delete_user(self, user_id: str) -> ServiceResult[None]:
        """Delete a user."""
        envelope = await self.api.request("DELETE", f"/api/users/{segment(user_id)}")
        return live(envelope, None)

    async def update_profile(
        self,
        changes: dict[str, str],
        avatar: FileField | None = None,
    ) -> ServiceResult[UserRecord]:
        """Update the current user's profile, optionally replacing the avatar."""
        envelope = await self.api.request(
            "PUT",
            "/api/users/profile",
            data=changes,
            files={"avatar": avatar} if avatar is not None else None,
        )
        return live(envelope, parse_model(UserRecord, envelope.data))

    async def change_password(
        self, current_password: str, new_password: str
    ) -> ServiceResult[None]:
        """Change the current user's password."""
        envelope = await self.api.request(
            "PUT",
            "/api/users/change-password",
            json={"currentPassword": current_password, "newPassword": new_password},
        )
        return live(envelope, None)


def _sample_users() -> list[UserRecord]:
    return [UserRecord.model_validate(row) for row in sample_data.USERS]
