"""Response envelopes and pagination shapes shared by every panel resource.

Single resources arrive as ``{"object": "user", "attributes": {...}}``; lists as
``{"object": "list", "data": [<envelope>, ...], "meta": {"pagination": {...}}}``.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


@dataclass
class PaginationOptions:
    """Page request for list endpoints.

    Unset, zero or negative ``page``/``per_page`` values are not sent, so the
    panel's own defaults apply. ``include`` names relationships to embed.
    """

    page: int | None = None
    per_page: int | None = None
    include: list[str] = field(default_factory=list)

    def to_params(self) -> dict[str, str]:
        params = {}
        if self.page is not None and self.page > 0:
            params["page"] = str(self.page)
        if self.per_page is not None and self.per_page > 0:
            params["per_page"] = str(self.per_page)
        if self.include:
            params["include"] = ",".join(self.include)
        return params


class Pagination(BaseModel):
    """Server-reported position of a page within the full result set."""

    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    # Fractal sends an empty array when there is no previous or next page.
    links: dict[str, Any] | list[Any] | None = None

    @property
    def has_more(self) -> bool:
        return self.current_page < self.total_pages


class Meta(BaseModel):
    pagination: Pagination = Pagination()


class Envelope(BaseModel, Generic[T]):
    """Single resource wrapper."""

    model_config = ConfigDict(extra="allow")

    object: str | None = None
    attributes: T


class PaginatedEnvelope(BaseModel, Generic[T]):
    """Paginated list wrapper."""

    model_config = ConfigDict(extra="allow")

    object: str | None = None
    data: list[Envelope[T]] = []
    meta: Meta = Meta()

    def items(self) -> list[T]:
        """Flatten ``data[i].attributes`` in server order."""
        return [item.attributes for item in self.data]
