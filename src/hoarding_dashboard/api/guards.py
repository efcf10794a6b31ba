"""Route guard dependencies for protected views."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, status

from hoarding_dashboard.domain.models import UserRecord, UserRole  # noqa: TC001
from hoarding_dashboard.services.access import LOGIN_ROUTE, AccessDecision

if TYPE_CHECKING:
    from hoarding_dashboard.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def require_session(
    role: UserRole | None = None,
) -> Callable[[Request], Awaitable[UserRecord]]:
    """Build a dependency that admits only sessions allowed to see a view.

    While bootstrap is running the view answers 503; otherwise a denied
    session is redirected to the login or unauthorized page.
    """

    async def dependency(request: Request) -> UserRecord:
        store = get_container(request).session_store
        decision = store.check_access(role)
        if decision is AccessDecision.LOADING:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Session is loading",
                headers={"Retry-After": "1"},
            )
        user = store.state.user
        if decision.redirect_to is not None or user is None:
            raise HTTPException(
                status_code=status.HTTP_307_TEMPORARY_REDIRECT,
                headers={"Location": decision.redirect_to or LOGIN_ROUTE},
            )
        return user

    return dependency
