"""Search endpoints: full results and the live panel under the search box."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder

from hoarding_dashboard.api.guards import require_session
from hoarding_dashboard.api.models import LiveSearchRequest, SearchSelection
from hoarding_dashboard.domain.search import SearchCategory  # noqa: TC001

if TYPE_CHECKING:
    from hoarding_dashboard.containers import AppContainer
    from hoarding_dashboard.services.live_search import SearchPanel

PREVIEW_LIMIT = 3

router = APIRouter(
    prefix="/search", tags=["search"], dependencies=[Depends(require_session())]
)


def panel_payload(panel: SearchPanel) -> dict[str, object]:
    """Serialize the panel with the first few hits of each category."""
    results = panel.results
    return {
        "query": panel.query,
        "is_open": panel.is_open,
        "is_searching": panel.is_searching,
        "has_results": results.has_results if results else False,
        "preview": jsonable_encoder(results.preview(PREVIEW_LIMIT)) if results else {},
        "provenance": panel.provenance.value,
    }


@router.get("")
async def full_results(
    request: Request, query: str, type: SearchCategory | None = None  # noqa: A002
) -> dict[str, object]:
    """Return every hit for a query, grouped by category."""
    container: AppContainer = request.app.state.container
    result = await container.search_service.search(query, type)
    return jsonable_encoder(result)


@router.post("/live")
async def live_search(body: LiveSearchRequest, request: Request) -> dict[str, object]:
    """Feed the latest text of the search box to the panel."""
    container: AppContainer = request.app.state.container
    panel = await container.live_search.update_query(body.query)
    return panel_payload(panel)


@router.post("/dismiss")
async def dismiss(request: Request) -> dict[str, object]:
    """Close the panel after a click outside it."""
    container: AppContainer = request.app.state.container
    return panel_payload(container.live_search.click_outside())


@router.post("/select")
async def select(body: SearchSelection, request: Request) -> dict[str, object]:
    """Close the panel and return the route of the chosen hit."""
    container: AppContainer = request.app.state.container
    return {"redirect_to": container.live_search.select(body.category, body.id)}


@router.post("/submit")
async def submit(request: Request) -> dict[str, object]:
    """Close the panel and return the full results route."""
    container: AppContainer = request.app.state.container
    return {"redirect_to": container.live_search.submit()}
