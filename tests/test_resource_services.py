"""Tests for the per-resource service wrappers."""

import asyncio

import pytest

from hoarding_dashboard.domain.envelope import ApiEnvelope
from hoarding_dashboard.domain.errors import (
    ApiResponseError,
    ApiTransportError,
    NotFoundError,
)
from hoarding_dashboard.domain.models import UserRole
from hoarding_dashboard.domain.resources import AssignmentStatus, PhotographerStats
from hoarding_dashboard.domain.results import Provenance
from hoarding_dashboard.services import sample_data
from hoarding_dashboard.services.assignments import AssignmentService
from hoarding_dashboard.services.billings import BillingService
from hoarding_dashboard.services.clients import ClientService
from hoarding_dashboard.services.contracts import ContractService
from hoarding_dashboard.services.hoardings import HoardingService
from hoarding_dashboard.services.photos import PhotoService
from hoarding_dashboard.services.users import UserService


def test_list_hoardings_parses_paginated_response(api_client) -> None:
    api_client.responses[("GET", "/api/hoardings")] = ApiEnvelope(
        success=True,
        code=200,
        message="Hoardings fetched",
        data={
            "hoardings": sample_data.HOARDINGS[:2],
            "pagination": {"total": 12, "page": 2, "limit": 2, "pages": 6},
        },
    )
    service = HoardingService(api_client)

    result = asyncio.run(service.list_hoardings(city="Mumbai", page=2, limit=2))

    assert result.provenance == Provenance.LIVE
    assert result.message == "Hoardings fetched"
    assert result.data.total == 12
    assert result.data.pages == 6
    assert result.data.items[0].daily_rate == 5000
    assert result.data.items[0].location.zip_code == "560001"
    assert api_client.calls[0].params == {
        "status": None,
        "city": "Mumbai",
        "page": 2,
        "limit": 2,
    }


def test_list_hoardings_fallback_filters_and_paginates(api_client) -> None:
    service = HoardingService(api_client)

    result = asyncio.run(service.list_hoardings(status="active", limit=2))

    assert result.is_fallback
    assert result.message == "Hoardings fetched (sample data)"
    assert result.data.total == 3
    assert result.data.pages == 2
    assert [h.id for h in result.data.items] == ["mock-hoarding-1", "mock-hoarding-2"]


def test_get_hoarding_fallback_and_not_found(api_client) -> None:
    service = HoardingService(api_client)

    found = asyncio.run(service.get_hoarding("mock-hoarding-3"))

    assert found.data.status == "maintenance"
    with pytest.raises(NotFoundError):
        asyncio.run(service.get_hoarding("missing"))


def test_search_hoardings_fallback_matches_address(api_client) -> None:
    service = HoardingService(api_client)

    result = asyncio.run(service.search_hoardings("terminal"))

    assert [h.name for h in result.data] == ["Airport Road Display"]


def test_hoardings_by_location_fallback(api_client) -> None:
    service = HoardingService(api_client)

    result = asyncio.run(service.hoardings_by_location("bangalore"))

    assert len(result.data) == 2
    assert api_client.paths() == ["/api/hoardings/location/bangalore"]


def test_path_segments_are_escaped(api_client) -> None:
    service = HoardingService(api_client)

    asyncio.run(service.hoardings_by_location("New/Delhi?x=1"))
    asyncio.run(service.hoardings_by_status("a/b c"))

    assert api_client.paths() == [
        "/api/hoardings/location/New%2FDelhi%3Fx%3D1",
        "/api/hoardings/status/a%2Fb%20c",
    ]


def test_update_hoarding_sends_images_as_multipart(api_client) -> None:
    api_client.responses[("PUT", "/api/hoardings/h1")] = {
        "_id": "h1",
        "name": "Renamed",
    }
    service = HoardingService(api_client)
    image = ("front.jpg", b"jpeg", "image/jpeg")

    result = asyncio.run(service.update_hoarding("h1", {"name": "Renamed"}, [image]))

    assert result.data.name == "Renamed"
    assert api_client.calls[0].data == {"name": "Renamed"}
    assert api_client.calls[0].files == [("images", image)]


def test_mutations_raise(api_client) -> None:
    api_client.responses[("DELETE", "/api/hoardings/h1/images")] = ApiResponseError(
        "Hoarding not found", status_code=404
    )
    service = HoardingService(api_client)

    with pytest.raises(ApiResponseError):
        asyncio.run(service.remove_image("h1", "https://img/1.jpg"))

    assert api_client.calls[0].json == {"imageUrl": "https://img/1.jpg"}


def test_list_users_fallback_by_role_and_search(api_client) -> None:
    service = UserService(api_client)

    result = asyncio.run(service.list_users(role=UserRole.PHOTOGRAPHER, search="john"))

    assert result.is_fallback
    assert [u.name for u in result.data.items] == ["John Smith"]
    assert api_client.paths() == ["/api/users"]


def test_list_photographers_uses_role_filter(api_client) -> None:
    api_client.responses[("GET", "/api/users")] = {
        "users": [sample_data.USERS[1]],
        "pagination": {"total": 1, "page": 1, "limit": 20, "pages": 1},
    }
    service = UserService(api_client)

    result = asyncio.run(service.list_photographers())

    assert result.data.items[0].role == UserRole.PHOTOGRAPHER
    assert api_client.calls[0].params == {
        "role": UserRole.PHOTOGRAPHER,
        "search": None,
        "page": 1,
        "limit": 20,
    }


def test_get_user_not_found_in_samples(api_client) -> None:
    service = UserService(api_client)

    assert asyncio.run(service.get_user("4")).data.name == "John Smith"
    with pytest.raises(NotFoundError):
        asyncio.run(service.get_user("404"))


def test_get_profile_fallback_is_first_sample_user(api_client) -> None:
    result = asyncio.run(UserService(api_client).get_profile())

    assert result.is_fallback
    assert result.data.email == "admin@showit.max"
    assert result.data.company_name == "ShowIt Media"


def test_change_password_raises_on_failure(api_client) -> None:
    with pytest.raises(ApiTransportError):
        asyncio.run(UserService(api_client).change_password("old", "new"))

    assert api_client.calls[0].json == {"currentPassword": "old", "newPassword": "new"}


def test_list_clients_fallback_filters_status(api_client) -> None:
    service = ClientService(api_client)

    result = asyncio.run(service.list_clients(status="inactive"))

    assert result.is_fallback
    assert [c.name for c in result.data.items] == ["Fusion Brands"]
    assert result.data.items[0].contact_person == "Michael Johnson"


def test_client_contracts_fallback(api_client) -> None:
    result = asyncio.run(ClientService(api_client).client_contracts("3"))

    assert result.is_fallback
    assert result.data
    assert api_client.calls[0].params == {"clientId": "3"}


def test_contracts_raise_on_failure(api_client) -> None:
    with pytest.raises(ApiTransportError):
        asyncio.run(ContractService(api_client).list_contracts(status="active"))


def test_billing_analytics(api_client) -> None:
    api_client.responses[("GET", "/api/billings/analytics")] = {
        "totalAmount": 1000,
        "paidAmount": 600,
        "invoicesByStatus": {"paid": 3},
    }

    result = asyncio.run(BillingService(api_client).analytics())

    assert result.data.paid_amount == 600
    assert result.data.invoices_by_status == {"paid": 3}


def test_send_payment_reminder(api_client) -> None:
    api_client.responses[("POST", "/api/billings/invoice/inv-7/remind")] = (
        ApiEnvelope(success=True, code=200, message="Reminder sent", data=None)
    )

    result = asyncio.run(BillingService(api_client).send_payment_reminder("inv-7"))

    assert result.message == "Reminder sent"
    assert result.data is None
    assert api_client.calls[0].method == "POST"


def test_photo_upload_passes_file_through(api_client) -> None:
    api_client.responses[("POST", "/api/photos")] = {"_id": "p1", "status": "pending"}
    photo = ("site.jpg", b"jpeg", "image/jpeg")

    result = asyncio.run(
        PhotoService(api_client).upload_photo(photo, {"hoarding": "h1"})
    )

    assert result.data.id == "p1"
    assert api_client.calls[0].files == {"photo": photo}
    assert api_client.calls[0].data == {"hoarding": "h1"}


def test_assignment_reads_fall_back_to_empty(api_client) -> None:
    service = AssignmentService(api_client)

    assignments = asyncio.run(service.list_assignments(status="assigned"))
    stats = asyncio.run(service.dashboard_stats())
    photographers = asyncio.run(service.list_photographers())

    assert assignments.is_fallback
    assert assignments.data == []
    assert stats.data == PhotographerStats()
    assert stats.message == "Failed to fetch dashboard stats (sample data)"
    assert photographers.data == []


def test_assignment_status_update(api_client) -> None:
    api_client.responses[("PUT", "/api/assignments/a1/status")] = {
        "_id": "a1",
        "status": "completed",
    }

    result = asyncio.run(
        AssignmentService(api_client).update_status("a1", AssignmentStatus.COMPLETED)
    )

    assert result.data.status == "completed"
    assert api_client.calls[0].json == {"status": "completed"}
