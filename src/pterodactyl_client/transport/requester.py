"""Request construction and response processing for every panel call.

``build_request`` turns a panel-relative path into an authenticated
``httpx.Request``; ``send`` performs exactly one exchange and classifies the
status; ``execute`` additionally decodes a 2xx body into a pydantic model.
Nothing here retries.

Example:
    ```python
    request = requester.build_request("GET", "/api/application/users", options=PaginationOptions(page=2))
    page = await requester.execute(request, PaginatedEnvelope[User])
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol, TypeVar

import httpx
import pydantic

from pterodactyl_client.errors.exceptions import DecodeError, RequestBuildError, TransportError
from pterodactyl_client.errors.handler import raise_for_status
from pterodactyl_client.models.base import RequestOptions
from pterodactyl_client.models.envelope import PaginationOptions

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=pydantic.BaseModel)

Body = RequestOptions | Mapping[str, Any]


class Requester(Protocol):
    """What resource services need from the client."""

    def build_request(
        self,
        method: str,
        path: str,
        *,
        body: Body | None = None,
        content: str | bytes | None = None,
        content_type: str | None = None,
        options: PaginationOptions | None = None,
    ) -> httpx.Request: ...

    async def send(self, request: httpx.Request) -> httpx.Response: ...

    async def execute(self, request: httpx.Request, response_model: type[M] | None = None) -> M | None: ...


class HTTPRequester:
    """Requester backed by a shared ``httpx.AsyncClient``.

    Holds no mutable state, so one instance can serve any number of
    concurrent calls; connection reuse is left to the HTTP client's pool.

    Args:
        base_url: Panel URL (scheme and host) that request paths resolve against
        api_key: Bearer token sent with every request
        http_client: The client that performs the exchanges
        timeout: Per-request timeout in seconds; None uses the client's own
    """

    def __init__(
        self,
        *,
        base_url: httpx.URL,
        api_key: str,
        http_client: httpx.AsyncClient,
        timeout: float | None = None,
    ) -> None:
        self._base_url = base_url
        self._api_key = api_key
        self._http_client = http_client
        self._timeout = httpx.USE_CLIENT_DEFAULT if timeout is None else httpx.Timeout(timeout)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    def build_request(
        self,
        method: str,
        path: str,
        *,
        body: Body | None = None,
        content: str | bytes | None = None,
        content_type: str | None = None,
        options: PaginationOptions | None = None,
    ) -> httpx.Request:
        """Build an authenticated request for ``path``.

        Args:
            method: HTTP method
            path: Path relative to the base URL; may carry its own query string
            body: JSON body; request option models are dumped without None fields
            content: Raw body, sent as-is with ``content_type``
            content_type: Content type of ``content``
            options: Pagination parameters, set on top of the path's query

        Returns:
            Request ready for ``send``/``execute``

        Raises:
            RequestBuildError: If the path cannot be parsed or resolved
        """
        try:
            url = httpx.URL(path)
            if options is not None:
                for key, value in options.to_params().items():
                    url = url.copy_set_param(key, value)
            url = self._base_url.join(url)
        except httpx.InvalidURL as e:
            raise RequestBuildError(f"failed to build request URL from {path!r}: {e}") from e

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Accept": "application/json",
        }

        payload = None
        if body is not None:
            payload = body.to_payload() if isinstance(body, RequestOptions) else dict(body)
            headers["Content-Type"] = "application/json"
        elif content is not None and content_type:
            headers["Content-Type"] = content_type

        return self._http_client.build_request(
            method, url, headers=headers, json=payload, content=content, timeout=self._timeout
        )

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Perform one exchange and raise for non-2xx statuses.

        The body is read in full and the connection released before this
        returns, whichever way it returns.

        Raises:
            TransportError: DNS, connection, timeout or protocol failure
            APIError: Non-2xx status with a decodable error envelope
            UnparseableErrorBodyError: Non-2xx status with an unreadable body
        """
        logger.debug(f"Request {request.method} {request.url}")

        try:
            response = await self._http_client.send(request)
        except httpx.RequestError as e:
            raise TransportError(f"failed to execute request {request.method} {request.url}: {e}", cause=e) from e

        logger.debug(f"Response {request.method} {request.url}: {response.status_code}")

        raise_for_status(response)
        return response

    async def execute(self, request: httpx.Request, response_model: type[M] | None = None) -> M | None:
        """Send ``request`` and decode its 2xx body into ``response_model``.

        With no model (204 endpoints) the body is never decoded.

        Raises:
            DecodeError: A 2xx body does not match ``response_model``
        """
        response = await self.send(request)
        if response_model is None:
            return None

        try:
            return response_model.model_validate_json(response.content)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"failed to decode successful response into {response_model.__name__}: {e.error_count()} error(s)"
            ) from e
