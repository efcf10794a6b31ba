"""Contract endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.domain.resources import Contract
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services.common import (
    live,
    parse_model,
    parse_models,
    segment,
)


@dataclass
class ContractService:
    """Service for hoarding lease contracts."""

    api: ApiClient

    async def list_contracts(
        self, status: str | None = None, client_id: str | None = None
    ) -> ServiceResult[list[Contract]]:
        """List contracts filtered by status and client."""
        envelope = await self.api.request(
            "GET", "/api/contracts", params={"status": status, "clientId": client_id}
        )
        return live(envelope, parse_models(Contract, envelope.data))

    async def get_contract(self, contract_id: str) -> ServiceResult[Contract]:
        """Return a single contract by id."""
        envelope = await self.api.request(
            "GET", f"/api/contracts/{segment(contract_id)}"
        )
        return live(envelope, parse_model(Contract, envelope.data))

    async def create_contract(  # noqa: PLR0913
        self,
        *,
        hoarding_id: str,
        client_id: str,
        start_date: str,
        end_date: str,
        total_amount: float,
        terms_and_conditions: str | None = None,
    ) -> ServiceResult[Contract]:
        """Create a contract leasing a hoarding to a client."""
        payload: dict[str, Any] = {
            "hoarding": hoarding_id,
            "client": client_id,
            "startDate": start_date,
            "endDate": end_date,
            "totalAmount": total_amount,
        }
        if terms_and_conditions is not None:
            payload["termsAndConditions"] = terms_and_conditions
        envelope = await self.api.request("POST", "/api/contracts", json=payload)
        return live(envelope, parse_model(Contract, envelope.data))

    async def update_contract(
        self, contract_id: str, changes: dict[str, Any]
    ) -> ServiceResult[Contract]:
        """Update status, amount, dates or terms of a contract."""
        envelope = await self.api.request(
            "PUT", f"/api/contracts/{segment(contract_id)}", json=changes
        )
        return live(envelope, parse_model(Contract, envelope.data))

    async def delete_contract(self, contract_id: str) -> ServiceResult[None]:
        """Delete a contract."""
        envelope = await self.api.request(
            "DELETE", f"/api/contracts/{segment(contract_id)}"
        )
        return live(envelope, None)
