"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request

from hoarding_dashboard.api.errors import register_error_handlers
from hoarding_dashboard.api.guards import require_session
from hoarding_dashboard.api.search import router as search_router
from hoarding_dashboard.api.session import router as session_router
from hoarding_dashboard.api.views import router as views_router
from hoarding_dashboard.app_logging import configure_logging
from hoarding_dashboard.containers import AppContainer
from hoarding_dashboard.domain.models import UserRecord
from hoarding_dashboard.services.access import greeting_for, navigation_for


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    async def bootstrap_session(app: FastAPI) -> None:
        try:
            await app.state.container.session_store.bootstrap()
        except Exception:
            logger.exception("Failed to bootstrap the session")

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        bootstrap = asyncio.create_task(bootstrap_session(app))
        yield
        await bootstrap
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    register_error_handlers(app)

    app.include_router(session_router)
    app.include_router(search_router)
    app.include_router(views_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/login")
    async def login_page(request: Request) -> dict[str, object]:
        """Landing page for signed-out sessions."""
        state = request.app.state.container.session_store.state
        return {"view": "login", "is_authenticated": state.is_authenticated}

    @app.get("/unauthorized")
    async def unauthorized_page() -> dict[str, str]:
        return {
            "view": "unauthorized",
            "message": "You do not have permission to view this page",
        }

    @app.get("/navigation")
    async def navigation(
        user: UserRecord = Depends(require_session()),
    ) -> dict[str, object]:
        """Return the sidebar entries and header title for the current role."""
        return {
            "greeting": greeting_for(user.role),
            "items": [
                {"name": item.name, "path": item.path}
                for item in navigation_for(user.role)
            ],
        }

    @app.get("/notifications")
    async def notifications(request: Request) -> dict[str, object]:
        """Return and clear pending notifications."""
        center = request.app.state.container.notifications
        return {
            "notifications": [
                {
                    "level": item.level.value,
                    "message": item.message,
                    "created_at": item.created_at.isoformat(),
                }
                for item in center.drain()
            ]
        }

    return app
