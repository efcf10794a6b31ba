"""Tests for the httpx-backed API client."""

import asyncio
import json
from collections.abc import Callable

import httpx
import pytest

from hoarding_dashboard.adapters.http_client import HttpxApiClient
from hoarding_dashboard.domain.errors import (
    ApiResponseError,
    ApiShapeError,
    ApiTransportError,
)
from hoarding_dashboard.services.notifications import (
    NotificationCenter,
    NotificationLevel,
)


def _client(
    handler: Callable[[httpx.Request], httpx.Response], notifier: NotificationCenter
) -> HttpxApiClient:
    transport = httpx.MockTransport(handler)
    async_client = httpx.AsyncClient(
        transport=transport, base_url="https://api.example.test"
    )
    return HttpxApiClient(http_client=async_client, notifier=notifier)


def test_request_returns_envelope_with_bearer_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"success": True, "code": 200, "message": "OK", "data": [1, 2]},
        )

    notifier = NotificationCenter()
    client = _client(handler, notifier)
    client.set_token("jwt-1")

    envelope = asyncio.run(
        client.request(
            "GET", "/api/hoardings", params={"status": None, "city": "", "page": 2}
        )
    )

    assert envelope.data == [1, 2]
    assert envelope.message == "OK"
    assert client.token == "jwt-1"
    assert seen[0].headers["Authorization"] == "Bearer jwt-1"
    assert seen[0].url.path == "/api/hoardings"
    assert dict(seen[0].url.params) == {"page": "2"}
    assert notifier.items == []


def test_clear_token_strips_authorization() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "data": None})

    client = _client(handler, NotificationCenter())
    client.set_token("jwt-1")
    client.clear_token()

    asyncio.run(client.request("GET", "/api/users/profile"))

    assert client.token is None
    assert "Authorization" not in seen[0].headers


def test_error_status_uses_server_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            401, json={"success": False, "code": 401, "message": "Invalid credentials"}
        )

    notifier = NotificationCenter()
    client = _client(handler, notifier)

    with pytest.raises(ApiResponseError) as excinfo:
        asyncio.run(
            client.request("POST", "/api/users/login", json={"email": "a@b.c"})
        )

    assert excinfo.value.message == "Invalid credentials"
    assert excinfo.value.status_code == 401
    assert notifier.items[-1].level == NotificationLevel.ERROR
    assert notifier.items[-1].message == "Invalid credentials"


def test_error_status_without_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="oops")

    client = _client(handler, NotificationCenter())

    with pytest.raises(ApiResponseError) as excinfo:
        asyncio.run(client.request("GET", "/api/users/profile"))

    assert excinfo.value.message == "Request failed with status 500"


def test_unsuccessful_envelope_raises() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"success": False, "code": 409, "message": "Hoarding is booked"}
        )

    client = _client(handler, NotificationCenter())

    with pytest.raises(ApiResponseError) as excinfo:
        asyncio.run(client.request("POST", "/api/contracts", json={}))

    assert excinfo.value.message == "Hoarding is booked"
    assert excinfo.value.status_code == 409


def test_non_json_body_is_a_shape_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    client = _client(handler, NotificationCenter())

    with pytest.raises(ApiShapeError):
        asyncio.run(client.request("GET", "/api/hoardings"))


def test_transport_failure_is_reported() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    notifier = NotificationCenter()
    client = _client(handler, notifier)

    with pytest.raises(ApiTransportError) as excinfo:
        asyncio.run(client.request("GET", "/api/search"))

    assert excinfo.value.message == "Connection refused"
    assert excinfo.value.status_code is None
    assert notifier.items[-1].message == "Connection refused"


def test_silent_request_skips_notification() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Not found"})

    notifier = NotificationCenter()
    client = _client(handler, notifier)

    with pytest.raises(ApiResponseError):
        asyncio.run(client.request("POST", "/api/users/logout", notify=False))

    assert notifier.items == []


def test_explicit_headers_and_multipart_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"success": True, "data": {"ok": True}})

    client = _client(handler, NotificationCenter())

    asyncio.run(
        client.request(
            "POST",
            "/api/users/register",
            data={"name": "Asha"},
            files={"avatar": ("me.png", b"png", "image/png")},
            headers={"Authorization": "Bearer other"},
        )
    )

    request = seen[0]
    body = request.read()
    assert request.headers["Authorization"] == "Bearer other"
    assert request.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="avatar"; filename="me.png"' in body
    assert b"Asha" in body


def test_create_sets_base_url_and_accept_header() -> None:
    client = HttpxApiClient.create(
        base_url="https://api.example.test", notifier=NotificationCenter()
    )

    assert client.http_client.base_url.host == "api.example.test"
    assert client.http_client.headers["Accept"] == "application/json"
    assert client.token is None
    asyncio.run(client.close())


def test_json_body_is_sent() -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content.decode()))
        return httpx.Response(200, json={"success": True, "data": None})

    client = _client(handler, NotificationCenter())

    asyncio.run(
        client.request("PUT", "/api/assignments/a1/status", json={"status": "done"})
    )

    assert bodies == [{"status": "done"}]
