"""Tests for search summaries and the search service."""

import asyncio

import pytest

from hoarding_dashboard.domain.errors import ApiShapeError
from hoarding_dashboard.domain.results import Provenance
from hoarding_dashboard.domain.search import SearchCategory
from hoarding_dashboard.services import sample_data
from hoarding_dashboard.services.search import (
    SearchService,
    build_result_set,
    summarize,
)


def test_summarize_hoarding() -> None:
    hit = summarize(SearchCategory.HOARDINGS, sample_data.HOARDINGS[0])

    assert hit.id == "mock-hoarding-1"
    assert hit.title == "MG Road Billboard"
    assert hit.subtitle == "Bangalore, 40x20 feet"


def test_summarize_contract_and_photo() -> None:
    contract = summarize(SearchCategory.CONTRACTS, sample_data.CONTRACTS[0])
    photo = summarize(SearchCategory.PHOTOS, sample_data.PHOTOS[0])

    assert contract.title == "Contract #mock-con"
    assert contract.subtitle == "ABC Corp - MG Road Billboard"
    assert photo.title == "Morning view of the MG Road billboard"
    assert photo.subtitle == "MG Road Billboard - 2025-04-01"


def test_summarize_user_assignment_and_billing() -> None:
    user = summarize(SearchCategory.USERS, {"id": "u1", "name": "Mia", "email": "m@x"})
    assignment = summarize(
        SearchCategory.ASSIGNMENTS,
        {
            "_id": "a1",
            "hoarding": {"name": "Airport Road Display"},
            "dueDate": "2025-05-02T10:00:00Z",
            "status": "in_progress",
        },
    )
    billing = summarize(
        SearchCategory.BILLINGS,
        {"_id": "b1", "invoiceNumber": "INV-7", "amount": 1500.0},
    )

    assert user.id == "u1"
    assert user.subtitle == "m@x"
    assert assignment.title == "Airport Road Display"
    assert assignment.subtitle == "Due 2025-05-02 - in_progress"
    assert billing.title == "Invoice #INV-7"
    assert billing.subtitle == "1500 - pending"


def test_summarize_requires_id() -> None:
    with pytest.raises(ApiShapeError):
        summarize(SearchCategory.USERS, {"name": "No Id"})


def test_build_result_set_keeps_known_groups_only() -> None:
    result = build_result_set(
        {"hoardings": sample_data.HOARDINGS[:2], "unknown": [{"_id": "x"}]}
    )

    assert list(result.groups) == [SearchCategory.HOARDINGS]
    assert [hit.id for hit in result.hits(SearchCategory.HOARDINGS)] == [
        "mock-hoarding-1",
        "mock-hoarding-2",
    ]
    assert result.hits(SearchCategory.PHOTOS) == ()


def test_build_result_set_rejects_non_grouped_payload() -> None:
    with pytest.raises(ApiShapeError):
        build_result_set([{"_id": "x"}])


def test_empty_result_set_has_no_results() -> None:
    result = build_result_set({"hoardings": [], "users": []})

    assert not result.has_results
    assert result.preview() == {}


def test_search_sends_category_and_filters(api_client) -> None:
    api_client.responses[("GET", "/api/search")] = {"users": sample_data.SEARCH_USERS}
    service = SearchService(api_client)

    result = asyncio.run(
        service.search("mike", SearchCategory.USERS, {"status": "active"})
    )

    assert result.provenance == Provenance.LIVE
    assert api_client.calls[0].params == {
        "query": "mike",
        "type": SearchCategory.USERS,
        "status": "active",
    }
    assert result.data.hits(SearchCategory.USERS)[2].subtitle == (
        "client@example.com (client)"
    )


def test_search_fallback_is_restricted_to_category(api_client) -> None:
    service = SearchService(api_client)

    result = asyncio.run(service.search("mg", SearchCategory.PHOTOS))

    assert result.is_fallback
    assert result.message == "Search results (sample data)"
    assert list(result.data.groups) == [SearchCategory.PHOTOS]


def test_malformed_search_response_falls_back(api_client) -> None:
    api_client.responses[("GET", "/api/search")] = ["not", "grouped"]
    service = SearchService(api_client)

    result = asyncio.run(service.search("mg"))

    assert result.is_fallback
    assert result.data.has_results


def test_public_search_fallback_lists_active_hoardings(api_client) -> None:
    service = SearchService(api_client)

    result = asyncio.run(service.public_search("board"))

    ids = [hit.id for hit in result.data.hits(SearchCategory.HOARDINGS)]
    assert result.is_fallback
    assert ids == ["mock-hoarding-1", "mock-hoarding-2", "mock-hoarding-4"]
    assert api_client.paths() == ["/api/public-search"]
