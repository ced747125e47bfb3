"""Error taxonomy and panel error envelope handling."""

from pterodactyl_client.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConfigError,
    ConflictError,
    DecodeError,
    ForbiddenError,
    InvalidBaseURLError,
    InvalidCredentialPrefixError,
    NotFoundError,
    PaginationLimitError,
    PterodactylError,
    RateLimitError,
    RequestBuildError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnparseableErrorBodyError,
    ValidationError,
)
from pterodactyl_client.errors.handler import raise_for_status
from pterodactyl_client.errors.models import ErrorEnvelope, ErrorObject

__all__ = [
    "APIError",
    "BadRequestError",
    "ClientError",
    "ConfigError",
    "ConflictError",
    "DecodeError",
    "ErrorEnvelope",
    "ErrorObject",
    "ForbiddenError",
    "InvalidBaseURLError",
    "InvalidCredentialPrefixError",
    "NotFoundError",
    "PaginationLimitError",
    "PterodactylError",
    "RateLimitError",
    "RequestBuildError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
    "UnparseableErrorBodyError",
    "ValidationError",
    "raise_for_status",
]
