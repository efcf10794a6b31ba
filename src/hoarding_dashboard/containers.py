"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from hoarding_dashboard.adapters.file_credential_store import JsonFileCredentialStore
from hoarding_dashboard.adapters.http_client import ApiClient, HttpxApiClient
from hoarding_dashboard.config import Settings, parse_fallback_emails
from hoarding_dashboard.domain.models import UserRecord
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


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notifications: NotificationCenter
    api_client: ApiClient
    session_store: SessionStore
    user_service: UserService
    client_service: ClientService
    hoarding_service: HoardingService
    contract_service: ContractService
    billing_service: BillingService
    photo_service: PhotoService
    assignment_service: AssignmentService
    search_service: SearchService
    live_search: LiveSearchController
    close_resources: Callable[[], Awaitable[None]]


def fallback_accounts_for(settings: Settings) -> dict[str, UserRecord]:
    """Return the fallback accounts recognized under ``settings``."""
    if not settings.fallback_accounts_enabled:
        return {}
    allowed = parse_fallback_emails(settings.fallback_account_emails)
    return {
        email: user
        for email, user in FALLBACK_ACCOUNTS.items()
        if allowed is None or email in allowed
    }


def build_container(
    settings: Settings | None = None,
    credential_store: CredentialStore | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    notifications = NotificationCenter(
        history_size=resolved_settings.notification_history_size
    )
    api_client = HttpxApiClient.create(
        base_url=resolved_settings.api_base_url,
        notifier=notifications,
        timeout=resolved_settings.request_timeout_seconds,
    )
    session_store = SessionStore(
        auth_service=AuthService(api_client),
        api=api_client,
        credential_store=credential_store
        or JsonFileCredentialStore(resolved_settings.credential_store_path),
        notifier=notifications,
        fallback_accounts=fallback_accounts_for(resolved_settings),
        offline_registration_enabled=resolved_settings.offline_registration_enabled,
    )
    search_service = SearchService(api_client)
    live_search = LiveSearchController(
        search_service=search_service,
        notifier=notifications,
        session=session_store,
        min_length=resolved_settings.search_min_query_length,
    )

    async def close_resources() -> None:
        await session_store.wait_for_background()
        await api_client.close()

    return AppContainer(
        settings=resolved_settings,
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
        live_search=live_search,
        close_resources=close_resources,
    )
