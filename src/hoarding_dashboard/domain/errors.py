"""Error taxonomy for dashboard API calls."""

GENERIC_ERROR_MESSAGE = "Something went wrong"


class ApiError(Exception):
    """Base error for failed backend calls."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiTransportError(ApiError):
    """The request never produced a response."""


class ApiResponseError(ApiError):
    """The backend answered with an error status or ``success: false``."""


class ApiShapeError(ApiError):
    """The backend answered with a payload missing expected fields."""


class NotFoundError(ApiError):
    """A requested record is absent from both backend and sample data."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=404)


def error_message(exc: BaseException) -> str:
    """Return the best human-readable message for a failure."""
    if isinstance(exc, ApiError) and exc.message:
        return exc.message
    return str(exc) or GENERIC_ERROR_MESSAGE
