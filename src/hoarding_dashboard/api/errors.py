"""Mapping of backend API failures onto dashboard HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from hoarding_dashboard.domain.errors import ApiError


def http_status_for(exc: ApiError) -> int:
    """Pass client errors through; anything else is a bad gateway."""
    if exc.status_code is not None and 400 <= exc.status_code < 500:  # noqa: PLR2004
        return exc.status_code
    return status.HTTP_502_BAD_GATEWAY


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=http_status_for(exc), content={"detail": exc.message}
        )
