"""Shared test fixtures."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.config import Settings
from hoarding_dashboard.containers import AppContainer
from hoarding_dashboard.domain.envelope import ApiEnvelope
from hoarding_dashboard.domain.errors import ApiError, ApiTransportError
from hoarding_dashboard.domain.models import PersistedCredential
from hoarding_dashboard.services.assignments import AssignmentService
from hoarding_dashboard.services.auth import AuthService
from hoarding_dashboard.services.billings import BillingService
from hoarding_dashboard.services.clients import ClientService
from hoarding_dashboard.services.contracts import ContractService
from hoarding_dashboard.services.hoardings import HoardingService
from hoarding_dashboard.services.live_search import LiveSearchController
from hoarding_dashboard.services.notifications import NotificationCenter
from hoarding_dashboard.services.photos import PhotoService
from hoarding_dashboard.services.sample_data import FALLBACK_ACCOUNTS
from hoarding_dashboard.services.search import SearchService
from hoarding_dashboard.services.session import CredentialStore, SessionStore
from hoarding_dashboard.services.users import UserService

OWNER_PAYLOAD: dict[str, object] = {
    "_id": "u-100",
    "name": "Asha Owner",
    "email": "asha@example.com",
    "role": "owner",
    "companyName": "Asha Outdoor",
}


@dataclass
class InMemoryCredentialStore(CredentialStore):
    """In-memory credential store for tests."""

    credential: PersistedCredential | None = None

    def load(self) -> PersistedCredential | None:
        return self.credential

    def save(self, credential: PersistedCredential) -> None:
        self.credential = credential

    def clear(self) -> None:
        self.credential = None


@dataclass
class RecordedCall:
    """A request seen by the fake API client."""

    method: str
    path: str
    params: dict[str, Any] | None
    json: Any
    data: dict[str, Any] | None
    files: Any
    headers: dict[str, str] | None
    token: str | None
    notify: bool


@dataclass
class FakeApiClient(ApiClient):
    """Fake API client answering from a table of scripted responses.

    Values may be an ``ApiEnvelope``, an ``ApiError`` to raise, or raw data
    to wrap in a successful envelope. Unscripted routes behave like an
    unreachable backend.
    """

    responses: dict[tuple[str, str], object] = field(default_factory=dict)
    calls: list[RecordedCall] = field(default_factory=list)
    before_response: Callable[[RecordedCall], Awaitable[None]] | None = None
    _token: str | None = None

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None

    async def request(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: Any = None,
        headers: dict[str, str] | None = None,
        notify: bool = True,
    ) -> ApiEnvelope:
        call = RecordedCall(
            method=method,
            path=path,
            params=params,
            json=json,
            data=data,
            files=files,
            headers=headers,
            token=self._token,
            notify=notify,
        )
        self.calls.append(call)
        if self.before_response is not None:
            await self.before_response(call)
        response = self.responses.get((method, path))
        if response is None:
            raise ApiTransportError("Network error")
        if isinstance(response, ApiError):
            raise response
        if isinstance(response, ApiEnvelope):
            return response
        return ApiEnvelope(success=True, code=200, message="OK", data=response)

    def paths(self) -> list[str]:
        return [call.path for call in self.calls]


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        api_base_url="https://api.example.test",
        credential_store_path=tmp_path / "credentials.json",
    )


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def credential_store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture
def api_client() -> FakeApiClient:
    return FakeApiClient()


@pytest.fixture
def session_store(
    api_client: FakeApiClient,
    credential_store: InMemoryCredentialStore,
    notifications: NotificationCenter,
) -> SessionStore:
    return SessionStore(
        auth_service=AuthService(api_client),
        api=api_client,
        credential_store=credential_store,
        notifier=notifications,
        fallback_accounts=dict(FALLBACK_ACCOUNTS),
    )


@pytest.fixture
def container(
    settings: Settings,
    api_client: FakeApiClient,
    notifications: NotificationCenter,
    session_store: SessionStore,
) -> AppContainer:
    search_service = SearchService(api_client)

    async def close_resources() -> None:
        await session_store.wait_for_background()

    return AppContainer(
        settings=settings,
        notifications=notifications,
        api_client=api_client,
        session_store=session_store,
        user_service=UserService(api_client),
        client_service=ClientService(api_client),
        hoarding_service=HoardingService(api_client),
        contract_service=ContractService(api_client),
        billing_service=BillingService(api_client),
        photo_service=PhotoService(api_client),
        assignment_service=AssignmentService(api_client),
        search_service=search_service,
        live_search=LiveSearchController(
            search_service=search_service,
            notifier=notifications,
            session=session_store,
            min_length=settings.search_min_query_length,
        ),
        close_resources=close_resources,
    )
