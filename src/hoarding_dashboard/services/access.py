"""Route guards and role-based navigation."""

from dataclasses import dataclass
from enum import StrEnum

from hoarding_dashboard.domain.models import UserRole
from hoarding_dashboard.domain.session import SessionState

LOGIN_ROUTE = "/login"
UNAUTHORIZED_ROUTE = "/unauthorized"


class AccessDecision(StrEnum):
    """Outcome of checking a session against a protected view."""

    LOADING = "loading"
    REDIRECT_LOGIN = "redirect_login"
    REDIRECT_UNAUTHORIZED = "redirect_unauthorized"
    ALLOW = "allow"

    @property
    def redirect_to(self) -> str | None:
        """Return the route to redirect to, if the decision is a redirect."""
        if self is AccessDecision.REDIRECT_LOGIN:
            return LOGIN_ROUTE
        if self is AccessDecision.REDIRECT_UNAUTHORIZED:
            return UNAUTHORIZED_ROUTE
        return None


def evaluate_access(
    state: SessionState, required_role: UserRole | None = None
) -> AccessDecision:
    """Decide whether a protected view may render for the session."""
    if state.is_loading:
        return AccessDecision.LOADING
    if not state.is_authenticated or state.user is None:
        return AccessDecision.REDIRECT_LOGIN
    if required_role is not None and state.user.role != required_role:
        return AccessDecision.REDIRECT_UNAUTHORIZED
    return AccessDecision.ALLOW


@dataclass(frozen=True)
class NavItem:
    """Sidebar entry."""

    name: str
    path: str


_NAVIGATION: dict[UserRole, tuple[NavItem, ...]] = {
    UserRole.OWNER: (
        NavItem("Dashboard", "/dashboard"),
        NavItem("Hoardings", "/hoardings"),
        NavItem("Photographers", "/photographers"),
        NavItem("Clients", "/clients"),
        NavItem("Contracts", "/contracts"),
        NavItem("Billings", "/billings"),
        NavItem("Photos", "/photos"),
        NavItem("Analytics", "/analytics"),
        NavItem("Settings", "/settings"),
    ),
    UserRole.PHOTOGRAPHER: (
        NavItem("Dashboard", "/photographer"),
        NavItem("Assignments", "/photographer/assignments"),
        NavItem("Upload Photos", "/photographer/upload"),
        NavItem("Photo History", "/photographer/history"),
        NavItem("Settings", "/photographer/settings"),
    ),
    UserRole.CLIENT: (
        NavItem("Dashboard", "/client"),
        NavItem("My Hoardings", "/client/hoardings"),
        NavItem("My Photos", "/client/photos"),
        NavItem("Contracts", "/client/contracts"),
        NavItem("Billing", "/client/billing"),
        NavItem("Settings", "/client/settings"),
    ),
}

_GREETINGS: dict[UserRole, str] = {
    UserRole.OWNER: "Admin Dashboard",
    UserRole.PHOTOGRAPHER: "Photographer Portal",
    UserRole.CLIENT: "Client Dashboard",
}


def navigation_for(role: UserRole) -> tuple[NavItem, ...]:
    """Return the sidebar entries for a role."""
    return _NAVIGATION[role]


def greeting_for(role: UserRole | None) -> str:
    """Return the header title for a role."""
    if role is None:
        return "Dashboard"
    return _GREETINGS.get(role, "Dashboard")


def home_route(role: UserRole) -> str:
    """Return the landing route after login."""
    return _NAVIGATION[role][0].path
