"""Session store: who is logged in and whether protected views may render."""

import asyncio
import logging
import secrets
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Protocol
from urllib.parse import quote
from uuid import uuid4

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.domain.errors import ApiError, error_message
from hoarding_dashboard.domain.models import (
    PersistedCredential,
    RegisterData,
    UserRecord,
    UserRole,
)
from hoarding_dashboard.domain.results import Provenance
from hoarding_dashboard.domain.session import SessionState
from hoarding_dashboard.services.access import AccessDecision, evaluate_access
from hoarding_dashboard.services.auth import AuthService
from hoarding_dashboard.services.notifications import NotificationLevel, Notifier
from hoarding_dashboard.services.sample_data import FALLBACK_TOKEN_PREFIX

_logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Durable storage for the login token and email."""

    def load(self) -> PersistedCredential | None:
        """Return the stored credential, if any."""

    def save(self, credential: PersistedCredential) -> None:
        """Persist a credential, replacing any previous one."""

    def clear(self) -> None:
        """Remove the stored credential."""


@dataclass
class SessionStore:
    """Single writer of the session user and the client bearer token.

    ``fallback_accounts`` maps recognized demo emails to fixed user records.
    Those emails sign in without a password check, so production deployments
    should pass an empty mapping.
    """

    auth_service: AuthService
    api: ApiClient
    credential_store: CredentialStore
    notifier: Notifier
    fallback_accounts: Mapping[str, UserRecord] = field(default_factory=dict)
    offline_registration_enabled: bool = True
    _state: SessionState = field(default_factory=SessionState, init=False)
    _background: set[asyncio.Task[None]] = field(default_factory=set, init=False)
    _bootstrapped: asyncio.Event | None = field(default=None, init=False)

    @property
    def state(self) -> SessionState:
        """Return the current session snapshot."""
        return self._state

    def check_access(self, required_role: UserRole | None = None) -> AccessDecision:
        """Evaluate the route guard for the current session."""
        return evaluate_access(self._state, required_role)

    async def bootstrap(self) -> SessionState:
        """Resolve the persisted credential into a session, once at startup.

        Login, registration and logout wait for this to finish, so a stale
        stored credential can never tear down a session created meanwhile.
        """
        done = asyncio.Event()
        self._bootstrapped = done
        try:
            credential = self.credential_store.load()
            if credential is None:
                _logger.info("No stored credential, starting signed out")
                return self._state
            self.api.set_token(credential.token)
            try:
                user = await self.auth_service.get_profile()
            except ApiError as exc:
                fallback = self._fallback_account(credential.email)
                if fallback is None:
                    _logger.warning("Stored credential rejected: %s", exc.message)
                    self._sign_out()
                    return self._state
                _logger.warning(
                    "Profile fetch failed, using fallback account %s", credential.email
                )
                self._install(fallback, credential.token, Provenance.FALLBACK)
            else:
                self._install(user, credential.token, Provenance.LIVE)
            return self._state
        finally:
            self._state = replace(self._state, is_loading=False)
            done.set()

    async def fetch_profile(self) -> UserRecord:
        """Reload the current user from the backend and install it."""
        token = self.api.token
        if token is None:
            raise ApiError("Not authenticated", status_code=401)
        user = await self.auth_service.get_profile()
        self._install(user, token, Provenance.LIVE)
        return user

    async def login(self, email: str, password: str) -> UserRecord:
        """Sign in, installing user and token together or raising."""
        await self._wait_for_bootstrap()
        self._state = replace(self._state, is_loading=True, last_error=None)
        try:
            fallback = self._fallback_account(email)
            if fallback is not None:
                _logger.warning(
                    "Signing in fallback account %s without a password check", email
                )
                self._persist_and_install(
                    fallback, _local_token(), email, Provenance.FALLBACK
                )
                self._notify(
                    NotificationLevel.SUCCESS,
                    f"Welcome, {fallback.name}! (Demo Account)",
                )
                return fallback

            try:
                result = await self.auth_service.login(email, password)
            except Exception as exc:
                self._fail(f"Login failed: {error_message(exc)}")
                raise
            self._persist_and_install(result.user, result.token, email, Provenance.LIVE)
            self._notify(NotificationLevel.SUCCESS, f"Welcome, {result.user.name}!")
            return result.user
        finally:
            self._state = replace(self._state, is_loading=False)

    async def register(self, data: RegisterData) -> UserRecord:
        """Create an account and sign in as it.

        When the backend call fails and offline registration is enabled, a
        local account is built from the form fields instead. That account
        exists only on this machine.
        """
        await self._wait_for_bootstrap()
        self._state = replace(self._state, is_loading=True, last_error=None)
        try:
            try:
                result = await self.auth_service.register(data)
            except Exception as exc:
                if not self.offline_registration_enabled:
                    self._fail(f"Registration failed: {error_message(exc)}")
                    raise
                _logger.warning(
                    "Registration failed (%s), creating offline account for %s",
                    error_message(exc),
                    data.email,
                )
                user = _offline_user(data)
                self._persist_and_install(
                    user, _local_token(), data.email, Provenance.FALLBACK
                )
                self._notify(
                    NotificationLevel.SUCCESS, "Registration successful! (Demo Mode)"
                )
                return user
            self._persist_and_install(
                result.user, result.token, data.email, Provenance.LIVE
            )
            self._notify(NotificationLevel.SUCCESS, "Registration successful!")
            return result.user
        finally:
            self._state = replace(self._state, is_loading=False)

    async def logout(self) -> None:
        """Forget the credential and tell the backend in the background."""
        await self._wait_for_bootstrap()
        self._sign_out()

    def update_user(self, user: UserRecord) -> None:
        """Replace the in-memory user without revalidating the token.

        Identity and role are fixed once an account exists, so a record that
        changes either is rejected with ``ValueError``.
        """
        current = self._state.user
        if current is None:
            raise ValueError("No signed-in user to update")
        if user.id != current.id:
            raise ValueError("User id cannot be changed")
        if user.role != current.role:
            raise ValueError("User role cannot be changed")
        self._state = replace(self._state, user=user)

    async def wait_for_background(self) -> None:
        """Wait for pending backend logout notifications."""
        if self._background:
            await asyncio.gather(*self._background)

    async def _wait_for_bootstrap(self) -> None:
        if self._bootstrapped is not None:
            await self._bootstrapped.wait()

    def _sign_out(self) -> None:
        token = self._state.token
        was_authenticated = self._state.is_authenticated
        self.credential_store.clear()
        self.api.clear_token()
        self._state = replace(
            self._state,
            user=None,
            token=None,
            is_authenticated=False,
            provenance=Provenance.LIVE,
        )
        if was_authenticated:
            self._notify(NotificationLevel.SUCCESS, "Logged out successfully")
        if token and not token.startswith(FALLBACK_TOKEN_PREFIX):
            task = asyncio.create_task(self._send_logout(token))
            self._background.add(task)
            task.add_done_callback(self._background.discard)

    async def _send_logout(self, token: str) -> None:
        try:
            await self.auth_service.logout(token)
        except ApiError as exc:
            _logger.info("Backend logout not acknowledged: %s", exc.message)

    def _fallback_account(self, email: str | None) -> UserRecord | None:
        if not email:
            return None
        return self.fallback_accounts.get(email.strip().lower())

    def _persist_and_install(
        self, user: UserRecord, token: str, email: str, provenance: Provenance
    ) -> None:
        self.credential_store.save(PersistedCredential(token=token, email=email))
        self._install(user, token, provenance)

    def _install(self, user: UserRecord, token: str, provenance: Provenance) -> None:
        self.api.set_token(token)
        self._state = replace(
            self._state,
            user=user,
            token=token,
            is_authenticated=True,
            last_error=None,
            provenance=provenance,
        )

    def _fail(self, message: str) -> None:
        self._state = replace(self._state, last_error=message)
        self._notify(NotificationLevel.ERROR, message)

    def _notify(self, level: NotificationLevel, message: str) -> None:
        self.notifier.notify(level, message)


def _local_token() -> str:
    return f"{FALLBACK_TOKEN_PREFIX}{secrets.token_urlsafe(16)}"


def _offline_user(data: RegisterData) -> UserRecord:
    return UserRecord(
        id=uuid4().hex[:13],
        name=data.name,
        email=data.email,
        role=data.role,
        avatar=f"https://api.dicebear.com/7.x/avataaars/svg?seed={quote(data.name)}",
        phone=data.phone,
        location=data.location,
    )
