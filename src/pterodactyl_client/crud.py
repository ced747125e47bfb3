"""Generic operations shared by every panel resource.

Each function takes the resource's model class and wraps it in the matching
envelope, so services reduce to one call with a fixed path.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel

from pterodactyl_client.errors.exceptions import PaginationLimitError
from pterodactyl_client.models.envelope import Envelope, Meta, PaginatedEnvelope, PaginationOptions
from pterodactyl_client.transport.requester import Body, Requester

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

DEFAULT_PAGE_SIZE = 100


async def list_page(
    requester: Requester,
    path: str,
    model: type[T],
    options: PaginationOptions | None = None,
) -> tuple[list[T], Meta]:
    """Fetch one page of ``path`` and flatten it.

    Returns:
        The page's items in server order, and the pagination metadata
    """
    request = requester.build_request("GET", path, options=options)
    page = await requester.execute(request, PaginatedEnvelope[model])
    return page.items(), page.meta


async def list_all(
    requester: Requester,
    path: str,
    model: type[T],
    per_page: int = DEFAULT_PAGE_SIZE,
    *,
    max_pages: int | None = None,
) -> list[T]:
    """Walk every page of ``path``, one request at a time, and return all items in page order.

    The walk ends once the reported current page reaches the reported page
    count; an empty result (``total_pages`` of 0) ends after the first page.
    Any failing page aborts the walk and its error propagates; items from
    earlier pages are discarded.

    Args:
        per_page: Page size; non-positive values fall back to 100
        max_pages: Stop with PaginationLimitError if more pages remain after
            this many requests. None walks until the server says it is done.

    Raises:
        PaginationLimitError: ``max_pages`` fetched and pages remain
    """
    if per_page <= 0:
        per_page = DEFAULT_PAGE_SIZE

    results: list[T] = []
    options = PaginationOptions(page=1, per_page=per_page)

    while True:
        items, meta = await list_page(requester, path, model, options)
        results.extend(items)

        pagination = meta.pagination
        logger.debug(f"Fetched page {pagination.current_page}/{pagination.total_pages} of {path} ({len(items)} items)")

        if pagination.current_page >= pagination.total_pages:
            return results

        if max_pages is not None and options.page >= max_pages:
            raise PaginationLimitError(
                f"{path} still has pages after {max_pages} requests "
                f"(server reports page {pagination.current_page} of {pagination.total_pages})",
                max_pages=max_pages,
            )
        options.page += 1


async def get(requester: Requester, path: str, resource_id: int | str, model: type[T]) -> T:
    """Fetch ``path/resource_id`` and unwrap its attributes."""
    request = requester.build_request("GET", f"{path}/{resource_id}")
    envelope = await requester.execute(request, Envelope[model])
    return envelope.attributes


async def create(requester: Requester, path: str, body: Body, model: type[T]) -> T:
    """POST ``body`` to ``path`` and unwrap the created resource."""
    request = requester.build_request("POST", path, body=body)
    envelope = await requester.execute(request, Envelope[model])
    return envelope.attributes


async def update(
    requester: Requester,
    path: str,
    resource_id: int | str,
    body: Body,
    model: type[T],
    method: str = "PATCH",
) -> T:
    """Send ``body`` to ``path/resource_id`` and unwrap the updated resource.

    Most application endpoints update with PATCH; several client endpoints use POST.
    """
    request = requester.build_request(method, f"{path}/{resource_id}", body=body)
    envelope = await requester.execute(request, Envelope[model])
    return envelope.attributes


async def delete(requester: Requester, path: str, resource_id: int | str) -> None:
    """DELETE ``path/resource_id``. The panel answers 204 with no body."""
    request = requester.build_request("DELETE", f"{path}/{resource_id}")
    await requester.execute(request)
