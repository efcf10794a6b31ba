"""Authentication endpoints of the hoarding backend."""

from dataclasses import dataclass

from hoarding_dashboard.adapters.http_client import ApiClient, FileField
from hoarding_dashboard.domain.errors import ApiShapeError
from hoarding_dashboard.domain.models import RegisterData, UserRecord
from hoarding_dashboard.services.common import parse_model


@dataclass(frozen=True)
class LoginResult:
    """User and token returned by a credential exchange."""

    user: UserRecord
    token: str


@dataclass
class AuthService:
    """Wraps login, registration and profile calls."""

    api: ApiClient

    async def login(self, email: str, password: str) -> LoginResult:
        """Exchange credentials for a token and user record."""
        envelope = await self.api.request(
            "POST", "/api/users/login", json={"email": email, "password": password}
        )
        return _login_result(envelope.data)

    async def register(self, data: RegisterData) -> LoginResult:
        """Create an account, uploading the avatar when one is given."""
        form: dict[str, str] = {
            "name": data.name,
            "email": data.email,
            "password": data.password,
            "role": data.role.value,
        }
        if data.phone:
            form["phone"] = str(data.phone)
        if data.location:
            form["location"] = data.location
        files: dict[str, FileField] | None = None
        if data.avatar is not None:
            files = {
                "avatar": (
                    data.avatar_filename,
                    data.avatar,
                    "application/octet-stream",
                )
            }
        envelope = await self.api.request(
            "POST", "/api/users/register", data=form, files=files
        )
        return _login_result(envelope.data)

    async def get_profile(self) -> UserRecord:
        """Return the user owning the current token."""
        envelope = await self.api.request("GET", "/api/users/profile")
        if not envelope.data:
            raise ApiShapeError("Invalid response from API")
        return parse_model(UserRecord, envelope.data)

    async def logout(self, token: str) -> None:
        """Tell the backend a token is no longer in use."""
        await self.api.request(
            "POST",
            "/api/users/logout",
            headers={"Authorization": f"Bearer {token}"},
            notify=False,
        )


def _login_result(payload: object) -> LoginResult:
    if not isinstance(payload, dict) or not payload.get("token"):
        raise ApiShapeError("Invalid response from server")
    return LoginResult(
        user=parse_model(UserRecord, payload.get("user")),
        token=str(payload["token"]),
    )
