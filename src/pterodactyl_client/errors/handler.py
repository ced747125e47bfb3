"""Classification of non-2xx panel responses into exceptions."""

from typing import Any

import httpx
import pydantic

from pterodactyl_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    UnparseableErrorBodyError,
    ValidationError,
)
from pterodactyl_client.errors.models import ErrorEnvelope

STATUS_EXCEPTIONS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: ValidationError,
    429: RateLimitError,
}


def exception_class_for(status_code: int) -> type[APIError]:
    """Pick the most specific APIError subclass for ``status_code``."""
    if status_code in STATUS_EXCEPTIONS:
        return STATUS_EXCEPTIONS[status_code]
    if 400 <= status_code < 500:
        return ClientError
    if 500 <= status_code < 600:
        return ServerError
    return APIError


def _retry_after(response: httpx.Response) -> int | None:
    # Only the delta-seconds form is understood; HTTP dates are ignored.
    try:
        return int(response.headers["retry-after"])
    except (KeyError, ValueError):
        return None


def _decode_error_body(response: httpx.Response) -> ErrorEnvelope:
    try:
        return ErrorEnvelope.model_validate_json(response.content)
    except pydantic.ValidationError as e:
        raise UnparseableErrorBodyError(
            f"HTTP {response.status_code}: error body is not a panel error envelope ({e.errors()[0]['msg']})",
            status_code=response.status_code,
            response=response,
        ) from e


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching APIError for a non-2xx response; return quietly otherwise.

    Any JSON object is accepted as an error envelope, so the status code is
    always reported. Bodies that are empty, not JSON or not an object raise
    UnparseableErrorBodyError instead, which carries the status code too.

    Args:
        response: Response whose body has already been read

    Raises:
        APIError: Subclass chosen by ``exception_class_for``
        UnparseableErrorBodyError: The error body could not be decoded
    """
    if response.is_success:
        return

    envelope = _decode_error_body(response)
    exc_class = exception_class_for(response.status_code)

    kwargs: dict[str, Any] = {
        "status_code": response.status_code,
        "response": response,
        "errors": envelope.errors,
    }
    if exc_class is RateLimitError:
        kwargs["retry_after"] = _retry_after(response)
    elif exc_class is ValidationError:
        kwargs["validation_errors"] = [error for error in envelope.errors if error.meta]

    raise exc_class(envelope.to_exception_message(response.status_code), **kwargs)
