"""Invoice and billing analytics endpoints."""

from dataclasses import dataclass
from typing import Any

from hoarding_dashboard.adapters.http_client import ApiClient
from hoarding_dashboard.domain.resources import BillingAnalytics, Invoice
from hoarding_dashboard.domain.results import ServiceResult
from hoarding_dashboard.services.common import (
    live,
    parse_model,
    parse_models,
    segment,
)


@dataclass
class BillingService:
    """Service for invoices raised against contracts."""

    api: ApiClient

    async def list_invoices(
        self,
        status: str | None = None,
        contract_id: str | None = None,
        client_id: str | None = None,
    ) -> ServiceResult[list[Invoice]]:
        """List invoices filtered by status, contract and client."""
        envelope = await self.api.request(
            "GET",
            "/api/billings",
            params={"status": status, "contractId": contract_id, "clientId": client_id},
        )
        return live(envelope, parse_models(Invoice, envelope.data))

    async def get_invoice(self, invoice_id: str) -> ServiceResult[Invoice]:
        envelope = await self.api.request(
            "GET", f"/api/billings/invoice/{segment(invoice_id)}"
        )
        return live(envelope, parse_model(Invoice, envelope.data))

    async def create_invoice(
        self, contract_id: str, amount: float, due_date: str, notes: str | None = None
    ) -> ServiceResult[Invoice]:
        """Raise an invoice against a contract."""
        payload: dict[str, Any] = {
            "contract": contract_id,
            "amount": amount,
            "dueDate": due_date,
        }
        if notes is not None:
            payload["notes"] = notes
        envelope = await self.api.request("POST", "/api/billings/invoice", json=payload)
        return live(envelope, parse_model(Invoice, envelope.data))

    async def update_invoice(
        self, invoice_id: str, changes: dict[str, Any]
    ) -> ServiceResult[Invoice]:
        """Update payment status or details of an invoice."""
        envelope = await self.api.request(
            "PUT", f"/api/billings/invoice/{segment(invoice_id)}", json=changes
        )
        return live(envelope, parse_model(Invoice, envelope.data))

    async def delete_invoice(self, invoice_id: str) -> ServiceResult[None]:
        envelope = await self.api.request(
            "DELETE", f"/api/billings/invoice/{segment(invoice_id)}"
        )
        return live(envelope, None)

    async def send_payment_reminder(self, invoice_id: str) -> ServiceResult[None]:
        """Ask the backend to remind the client about an unpaid invoice."""
        envelope = await self.api.request(
            "POST", f"/api/billings/invoice/{segment(invoice_id)}/remind"
        )
        return live(envelope, None)

    async def analytics(self) -> ServiceResult[BillingAnalytics]:
        """Return billing totals grouped by payment status."""
        envelope = await self.api.request("GET", "/api/billings/analytics")
        return live(envelope, parse_model(BillingAnalytics, envelope.data))
