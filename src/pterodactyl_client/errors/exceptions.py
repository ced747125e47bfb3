"""Structured exceptions for panel API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from pterodactyl_client.errors.models import ErrorObject


class PterodactylError(Exception):
    """Base exception for everything raised by this library."""

    pass


class ConfigError(PterodactylError):
    """Client configuration was rejected at construction time."""

    pass


class InvalidBaseURLError(ConfigError):
    """Base URL is not an absolute http(s) URL with a host."""

    def __init__(self, message: str, base_url: str):
        super().__init__(message)
        self.base_url = base_url


class InvalidCredentialPrefixError(ConfigError):
    """API key does not carry the prefix required by its key type."""

    def __init__(self, message: str, expected_prefix: str):
        super().__init__(message)
        self.expected_prefix = expected_prefix


class RequestBuildError(PterodactylError):
    """Request URL could not be composed from the base URL and path."""

    pass


class TransportError(PterodactylError):
    """Network-level failure: DNS, refused connection, timeout, protocol error."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(PterodactylError):
    """Response body did not match the expected shape."""

    pass


class UnparseableErrorBodyError(DecodeError):
    """Non-2xx response whose body is not a readable error envelope."""

    def __init__(self, message: str, status_code: int, response: "httpx.Response | None" = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class PaginationLimitError(PterodactylError):
    """A bounded list walk ran out of pages before the server reported the last one."""

    def __init__(self, message: str, max_pages: int):
        super().__init__(message)
        self.max_pages = max_pages


class APIError(PterodactylError):
    """Base exception for non-2xx panel responses."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        errors: "list[ErrorObject] | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.errors = errors if errors is not None else []

    @property
    def code(self) -> str | None:
        """Error code of the first reported error, e.g. ``NotFoundHttpException``."""
        return self.errors[0].code if self.errors else None

    @property
    def status(self) -> str | None:
        return self.errors[0].status if self.errors else None

    @property
    def detail(self) -> str | None:
        return self.errors[0].detail if self.errors else None


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class UnauthorizedError(ClientError):
    """401 Unauthorized."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class ValidationError(ClientError):
    """422 Unprocessable Entity (validation errors)."""

    def __init__(self, message: str, validation_errors: "list[ErrorObject] | None" = None, **kwargs):
        super().__init__(message, **kwargs)
        self.validation_errors = validation_errors if validation_errors is not None else []


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
