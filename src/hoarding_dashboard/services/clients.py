"""Client account endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.domain.errors import NotFoundError
from hoarding_dashboard.domain.resources import Client, Contract, Page
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services import sample_data
from hoarding_dashboard.services.common import (
    live,
    matches,
    paginate,
    parse_model,
    parse_models,
    parse_page,
    read_with_fallback,
    sample,
    segment,
)


@dataclass
class ClientService:
    """Service for the owner's client directory."""

    api: ApiClient

    async def list_clients(
        self,
        search: str | None = None,
        status: str | None = None,
        page: int = 1,
        limit: int = 10,
    ) -> ServiceResult[Page[Client]]:
        """List clients filtered by search text and status."""

        async def fetch() -> ServiceResult[Page[Client]]:
            envelope = await self.api.request(
                "GET",
                "/api/users/clients",
                params={
                    "search": search,
                    "status": status,
                    "page": page,
                    "limit": limit,
                },
            )
            return live(envelope, parse_page(Client, envelope.data, "clients"))

        def fallback() -> ServiceResult[Page[Client]]:
            clients = [
                client
                for client in _sample_clients()
                if (status is None or client.status == status)
                and matches(
                    search,
                    client.name,
                    client.email,
                    client.company_name,
                    client.contact_person,
                )
            ]
            return sample(paginate(clients, page, limit), "Clients fetched")

        return await read_with_fallback(fetch, fallback, action="list_clients")

    async def get_client(self, client_id: str) -> ServiceResult[Client]:
        """Return a single client by id."""

        async def fetch() -> ServiceResult[Client]:
            envelope = await self.api.request("GET", f"/api/users/{segment(client_id)}")
            return live(envelope, parse_model(Client, envelope.data))

        def fallback() -> ServiceResult[Client]:
            for client in _sample_clients():
                if client.id == client_id:
                    return sample(client, "Client fetched")
            raise NotFoundError("Client not found")

        return await read_with_fallback(
            fetch, fallback, action=f"get_client:{client_id}"
        )

    async def update_client(
        self, client_id: str, changes: dict[str, Any]
    ) -> ServiceResult[Client]:
        """Update fields of a client."""
        envelope = await self.api.request(
            "PUT", f"/api/users/{segment(client_id)}", json=changes
        )
        return live(envelope, parse_model(Client, envelope.data))

    async def client_contracts(self, client_id: str) -> ServiceResult[list[Contract]]:
        """List the contracts held by a client."""

        async def fetch() -> ServiceResult[list[Contract]]:
            envelope = await self.api.request(
                "GET", "/api/contracts", params={"clientId": client_id}
            )
            return live(envelope, parse_models(Contract, envelope.data))

        def fallback() -> ServiceResult[list[Contract]]:
            contracts = parse_models(Contract, sample_data.client_contracts(client_id))
            return sample(contracts, "Contracts fetched")

        return await read_with_fallback(
            fetch, fallback, action=f"client_contracts:{client_id}"
        )


def _sample_clients() -> list[Client]:
    return [Client.model_validate(row) for row in sample_data.CLIENTS]
