"""Role-guarded resource views backed by the service modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder

from hoarding_dashboard.api.guards import require_session
from hoarding_dashboard.domain.models import UserRecord, UserRole

if TYPE_CHECKING:
    from hoarding_dashboard.containers import AppContainer

router = APIRouter(tags=["views"])

_owner = require_session(UserRole.OWNER)
_photographer = require_session(UserRole.PHOTOGRAPHER)
_client = require_session(UserRole.CLIENT)


@router.get("/hoardings", dependencies=[Depends(_owner)])
async def hoardings(  # noqa: PLR0913
    request: Request,
    status: str | None = None,
    city: str | None = None,
    page: int = 1,
    limit: int = 10,
) -> dict[str, object]:
    """List hoardings."""
    container: AppContainer = request.app.state.container
    result = await container.hoarding_service.list_hoardings(
        status=status, city=city, page=page, limit=limit
    )
    return jsonable_encoder(result)


@router.get("/hoardings/{hoarding_id}", dependencies=[Depends(_owner)])
async def hoarding_detail(hoarding_id: str, request: Request) -> dict[str, object]:
    """Show a single hoarding."""
    container: AppContainer = request.app.state.container
    return jsonable_encoder(await container.hoarding_service.get_hoarding(hoarding_id))


@router.get("/contracts", dependencies=[Depends(_owner)])
async def contracts(request: Request, status: str | None = None) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return jsonable_encoder(
        await container.contract_service.list_contracts(status=status)
    )


@router.get("/billings", dependencies=[Depends(_owner)])
async def billings(request: Request, status: str | None = None) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = await container.billing_service.list_invoices(status=status)
    return jsonable_encoder(result)


@router.get("/clients", dependencies=[Depends(_owner)])
async def clients(
    request: Request, search: str | None = None, page: int = 1, limit: int = 10
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    result = await container.client_service.list_clients(
        search=search, page=page, limit=limit
    )
    return jsonable_encoder(result)


@router.get("/photographers", dependencies=[Depends(_owner)])
async def photographers(
    request: Request, search: str | None = None
) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return jsonable_encoder(
        await container.user_service.list_photographers(search=search)
    )


@router.get("/photographer/assignments", dependencies=[Depends(_photographer)])
async def photographer_assignments(
    request: Request, status: str | None = None
) -> dict[str, object]:
    """List the photographer's assignments."""
    container: AppContainer = request.app.state.container
    return jsonable_encoder(
        await container.assignment_service.list_assignments(status=status)
    )


@router.get("/photographer/stats", dependencies=[Depends(_photographer)])
async def photographer_stats(request: Request) -> dict[str, object]:
    container: AppContainer = request.app.state.container
    return jsonable_encoder(await container.assignment_service.dashboard_stats())


@router.get("/client/contracts")
async def client_contracts(
    request: Request, user: UserRecord = Depends(_client)
) -> dict[str, object]:
    """List contracts of the signed-in client."""
    container: AppContainer = request.app.state.container
    return jsonable_encoder(
        await container.client_service.client_contracts(user.id)
    )


@router.get("/client/photos")
async def client_photos(
    request: Request, user: UserRecord = Depends(_client)
) -> dict[str, object]:
    """List photos of hoardings leased by the signed-in client."""
    container: AppContainer = request.app.state.container
    return jsonable_encoder(
        await container.photo_service.list_photos({"client": user.id})
    )
