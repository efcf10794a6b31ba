"""Helpers shared by the resource services."""

import logging
import math
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from hoarding_dashboard.domain.envelope import ApiEnvelope
from hoarding_dashboard.domain.errors import ApiError, ApiShapeError
from hoarding_dashboard.domain.resources import Page
from hoarding_dashboard.domain.results import Provenance, ServiceResult

M = TypeVar("M", bound=BaseModel)
T = TypeVar("T")

_logger = logging.getLogger(__name__)


async def read_with_fallback(
    fetch: Callable[[], Awaitable[ServiceResult[T]]],
    fallback: Callable[[], ServiceResult[T]],
    *,
    action: str,
) -> ServiceResult[T]:
    """Run a read call, substituting tagged sample data when it fails."""
    try:
        return await fetch()
    except ApiError as exc:
        _logger.warning("%s failed, using sample data: %s", action, exc.message)
        return fallback()


def segment(value: str) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(str(value), safe="")


def live(envelope: ApiEnvelope, data: T) -> ServiceResult[T]:
    """Wrap parsed backend data in a live result."""
    return ServiceResult(data=data, message=envelope.message, code=envelope.code)


def sample(data: T, message: str) -> ServiceResult[T]:
    """Wrap sample data in a fallback result."""
    return ServiceResult(
        data=data,
        message=f"{message} (sample data)",
        provenance=Provenance.FALLBACK,
    )


def parse_model(model: type[M], payload: Any) -> M:
    """Validate a payload into a model, mapping failures to ApiShapeError."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise ApiShapeError(f"Unexpected {model.__name__} payload") from exc


def parse_models(model: type[M], payload: Any) -> list[M]:
    """Validate a list payload into models."""
    if not isinstance(payload, list):
        raise ApiShapeError(f"Expected a list of {model.__name__}")
    return [parse_model(model, item) for item in payload]


def parse_page(model: type[M], payload: Any, key: str) -> Page[M]:
    """Parse either a bare list or a ``{key: [...], pagination: {...}}`` body."""
    if isinstance(payload, list):
        items = parse_models(model, payload)
        return Page(items=items, total=len(items), page=1, limit=len(items), pages=1)
    if not isinstance(payload, dict) or key not in payload:
        raise ApiShapeError(f"Missing '{key}' in paginated response")
    items = parse_models(model, payload[key])
    pagination = payload.get("pagination") or {}
    total = int(pagination.get("total", len(items)))
    limit = int(pagination.get("limit", len(items) or 1))
    return Page(
        items=items,
        total=total,
        page=int(pagination.get("page", 1)),
        limit=limit,
        pages=int(pagination.get("pages", math.ceil(total / limit) if limit else 1)),
    )


def paginate(items: list[T], page: int = 1, limit: int = 10) -> Page[T]:
    """Slice an in-memory list into a page."""
    page = max(page, 1)
    limit = max(limit, 1)
    start = (page - 1) * limit
    return Page(
        items=items[start : start + limit],
        total=len(items),
        page=page,
        limit=limit,
        pages=math.ceil(len(items) / limit),
    )


def matches(query: str | None, *fields: str | None) -> bool:
    """Case-insensitive substring match against any of the fields."""
    if not query:
        return True
    needle = query.lower()
    return any(needle in (value or "").lower() for value in fields)
