"""Pydantic models for panel envelopes, resources and request bodies.

Resource models live in :mod:`pterodactyl_client.models.application` and
:mod:`pterodactyl_client.models.client_api`.
"""

from pterodactyl_client.models.base import PanelModel, RequestOptions
from pterodactyl_client.models.envelope import (
    Envelope,
    Meta,
    PaginatedEnvelope,
    Pagination,
    PaginationOptions,
)

__all__ = [
    "Envelope",
    "Meta",
    "PaginatedEnvelope",
    "Pagination",
    "PaginationOptions",
    "PanelModel",
    "RequestOptions",
]
