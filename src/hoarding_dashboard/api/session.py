"""Session endpoints: login, registration, logout and profile edits."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Request, status

from hoarding_dashboard.api.errors import http_status_for
from hoarding_dashboard.api.guards import require_session
from hoarding_dashboard.api.models import LoginRequest, RegisterRequest
from hoarding_dashboard.domain.errors import ApiError
from hoarding_dashboard.domain.models import UserRecord  # noqa: TC001
from hoarding_dashboard.domain.session import SessionState  # noqa: TC001
from hoarding_dashboard.services.access import LOGIN_ROUTE, greeting_for, home_route

if TYPE_CHECKING:
    from hoarding_dashboard.containers import AppContainer

router = APIRouter(prefix="/session", tags=["session"])


def session_payload(state: SessionState) -> dict[str, object]:
    """Serialize a session snapshot without exposing the token."""
    user = state.user
    return {
        "user": user.model_dump(mode="json", by_alias=True) if user else None,
        "is_loading": state.is_loading,
        "is_authenticated": state.is_authenticated,
        "last_error": state.last_error,
        "provenance": state.provenance.value,
        "greeting": greeting_for(user.role if user else None),
    }


@router.get("")
async def read_session(request: Request) -> dict[str, object]:
    """Return the current session."""
    container: AppContainer = request.app.state.container
    return session_payload(container.session_store.state)


@router.post("/login")
async def login(body: LoginRequest, request: Request) -> dict[str, object]:
    """Sign in and return where the user should land."""
    store = request.app.state.container.session_store
    try:
        user = await store.login(body.email, body.password)
    except ApiError as exc:
        raise HTTPException(
            status_code=http_status_for(exc), detail=store.state.last_error
        ) from exc
    return {
        "redirect_to": home_route(user.role),
        "session": session_payload(store.state),
    }


@router.post("/register")
async def register(body: RegisterRequest, request: Request) -> dict[str, object]:
    """Create an account and sign in as it."""
    store = request.app.state.container.session_store
    try:
        user = await store.register(body.to_register_data())
    except ApiError as exc:
        raise HTTPException(
            status_code=http_status_for(exc), detail=store.state.last_error
        ) from exc
    return {
        "redirect_to": home_route(user.role),
        "session": session_payload(store.state),
    }


@router.post("/logout")
async def logout(request: Request) -> dict[str, object]:
    """Sign out."""
    store = request.app.state.container.session_store
    await store.logout()
    return {"redirect_to": LOGIN_ROUTE, "session": session_payload(store.state)}


@router.put("/user", dependencies=[Depends(require_session())])
async def update_user(user: UserRecord, request: Request) -> dict[str, object]:
    """Replace the in-memory user after a profile edit."""
    store = request.app.state.container.session_store
    try:
        store.update_user(user)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)
        ) from exc
    return session_payload(store.state)
