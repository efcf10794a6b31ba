"""Configured HTTP client for the hoarding backend."""

import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from hoarding_dashboard.domain.envelope import ApiEnvelope
from hoarding_dashboard.domain.errors import (
    GENERIC_ERROR_MESSAGE,
    ApiError,
    ApiResponseError,
    ApiShapeError,
    ApiTransportError,
)
from hoarding_dashboard.services.notifications import NotificationLevel, Notifier

_logger = logging.getLogger(__name__)

FileField = tuple[str, bytes, str]


class ApiClient(Protocol):
    """Interface for enveloped REST calls against the backend."""

    @property
    def token(self) -> str | None:
        """Return the bearer token attached to outgoing requests."""

    def set_token(self, token: str) -> None:
        """Attach a bearer token to every subsequent request."""

    def clear_token(self) -> None:
        """Stop sending an Authorization header."""

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, FileField] | list[tuple[str, FileField]] | None = None,
        headers: dict[str, str] | None = None,
        notify: bool = True,
    ) -> ApiEnvelope:
        """Send a request and return the parsed envelope."""


@dataclass
class HttpxApiClient(ApiClient):
    """API client implemented with httpx."""

    http_client: httpx.AsyncClient
    notifier: Notifier
    timeout: float = 10.0

    @classmethod
    def create(
        cls, base_url: str, notifier: Notifier, timeout: float = 10.0
    ) -> "HttpxApiClient":
        """Create an API client with a managed httpx session."""
        return cls(
            http_client=httpx.AsyncClient(
                base_url=base_url, headers={"Accept": "application/json"}
            ),
            notifier=notifier,
            timeout=timeout,
        )

    @property
    def token(self) -> str | None:
        """Return the bearer token attached to outgoing requests."""
        header = self.http_client.headers.get("Authorization")
        if header and header.startswith("Bearer "):
            return header.removeprefix("Bearer ")
        return None

    def set_token(self, token: str) -> None:
        """Attach a bearer token through the client's default headers."""
        self.http_client.headers["Authorization"] = f"Bearer {token}"

    def clear_token(self) -> None:
        """Remove the default Authorization header."""
        self.http_client.headers.pop("Authorization", None)

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, FileField] | list[tuple[str, FileField]] | None = None,
        headers: dict[str, str] | None = None,
        notify: bool = True,
    ) -> ApiEnvelope:
        """Send a request, notify on failure, and return the envelope."""
        try:
            response = await self.http_client.request(
                method,
                path,
                params=_drop_empty(params),
                json=json,
                data=data,
                files=files,
                headers=headers,
                timeout=self.timeout,
            )
        except httpx.HTTPError as exc:
            raise self._report(
                ApiTransportError(str(exc) or "Network error"), method, path, notify
            ) from exc

        if response.is_error:
            raise self._report(
                ApiResponseError(
                    _server_message(response)
                    or f"Request failed with status {response.status_code}",
                    status_code=response.status_code,
                ),
                method,
                path,
                notify,
            )

        try:
            envelope = ApiEnvelope.model_validate(response.json())
        except ValueError as exc:
            raise self._report(
                ApiShapeError(
                    "Invalid response from server", status_code=response.status_code
                ),
                method,
                path,
                notify,
            ) from exc

        if not envelope.success:
            raise self._report(
                ApiResponseError(
                    envelope.message or GENERIC_ERROR_MESSAGE,
                    status_code=envelope.code,
                ),
                method,
                path,
                notify,
            )
        return envelope

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    def _report(
        self, error: ApiError, method: str, path: str, notify: bool
    ) -> ApiError:
        _logger.warning(
            "API %s %s failed (status=%s): %s",
            method,
            path,
            error.status_code or "n/a",
            error.message,
        )
        if notify:
            self.notifier.notify(NotificationLevel.ERROR, error.message)
        return error


def _server_message(response: httpx.Response) -> str | None:
    """Extract the envelope message from an error response, if any."""
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, str) and message:
            return message
    return None


def _drop_empty(params: dict[str, Any] | None) -> dict[str, Any] | None:
    """Remove unset query parameters."""
    if params is None:
        return None
    return {key: value for key, value in params.items() if value not in (None, "")}
