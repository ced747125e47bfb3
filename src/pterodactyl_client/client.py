"""Panel client: configuration, validation and the service facade.

Example:
    ```python
    from pterodactyl_client import Client, KeyType, with_timeout

    async with Client("https://panel.example.com", "ptla_...", KeyType.APPLICATION, with_timeout(5)) as panel:
        nodes = await panel.application_api.nodes.list_all()
    ```

A Client is cheap to build but owns a connection-pooled ``httpx.AsyncClient``;
reuse one instance rather than creating one per request. Once built it is
never mutated and is safe to share between concurrent tasks.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

import httpx

from pterodactyl_client.application import ApplicationAPI
from pterodactyl_client.auth.credentials import CredentialResolver
from pterodactyl_client.auth.keys import KeyType, validate_api_key
from pterodactyl_client.client_api import ClientAPI
from pterodactyl_client.errors.exceptions import ConfigError, InvalidBaseURLError
from pterodactyl_client.transport.requester import HTTPRequester

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass
class HTTPSettings:
    """HTTP settings that ``ClientOption`` callables adjust before the client is built."""

    timeout: float | None = None
    transport: httpx.AsyncBaseTransport | None = None
    http_client: httpx.AsyncClient | None = None


ClientOption = Callable[[HTTPSettings], None]


def with_http_client(http_client: httpx.AsyncClient) -> ClientOption:
    """Use ``http_client`` for every request instead of the default one.

    The caller keeps ownership: closing the Client does not close it.
    """

    def apply(settings: HTTPSettings) -> None:
        settings.http_client = http_client

    return apply


def with_transport(transport: httpx.AsyncBaseTransport) -> ClientOption:
    """Swap only the connector of the default HTTP client (proxies, tracing, test doubles).

    Raises ConfigError if an earlier option already supplied a whole HTTP
    client; configure that client's transport directly instead.
    """

    def apply(settings: HTTPSettings) -> None:
        if settings.http_client is not None:
            raise ConfigError("with_transport cannot follow with_http_client; set the transport on that client")
        settings.transport = transport

    return apply


def with_timeout(seconds: float) -> ClientOption:
    """Change the request timeout (default 10 seconds).

    With ``with_http_client`` the timeout is attached to each request rather
    than set on that client, which is left as the caller configured it.
    """

    def apply(settings: HTTPSettings) -> None:
        settings.timeout = seconds

    return apply


def _parse_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise InvalidBaseURLError(f"invalid base URL {base_url!r}: {e}", base_url=base_url) from e

    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidBaseURLError(
            f"invalid base URL {base_url!r}: must be an absolute http(s) URL with a host",
            base_url=base_url,
        )
    return url


class Client:
    """Entry point to the panel's application and client APIs.

    Args:
        base_url: Panel URL, scheme and host (e.g. ``https://panel.example.com``)
        api_key: ``ptla_`` key for KeyType.APPLICATION, ``ptlc_`` key for KeyType.CLIENT
        key_type: Which API the key belongs to
        *options: ``with_http_client``/``with_transport``/``with_timeout`` results,
            applied in order; later options win

    Raises:
        InvalidCredentialPrefixError: Key prefix does not match ``key_type``
        InvalidBaseURLError: ``base_url`` is not an absolute http(s) URL
        ConfigError: Options were combined in an unsupported way

    Attributes:
        application_api: Administrative API services (users, nodes, servers, ...)
        client_api: End-user API services (servers, account, files, ...)
    """

    def __init__(self, base_url: str, api_key: str, key_type: KeyType, *options: ClientOption) -> None:
        validate_api_key(api_key, key_type)
        url = _parse_base_url(base_url)

        settings = HTTPSettings()
        for option in options:
            option(settings)

        self._owns_http_client = settings.http_client is None
        request_timeout = None
        if settings.http_client is not None:
            http_client = settings.http_client
            request_timeout = settings.timeout
        else:
            timeout = DEFAULT_TIMEOUT if settings.timeout is None else settings.timeout
            http_client = httpx.AsyncClient(timeout=timeout, transport=settings.transport)

        self._key_type = key_type
        self._requester = HTTPRequester(
            base_url=url, api_key=api_key, http_client=http_client, timeout=request_timeout
        )

        self.application_api = ApplicationAPI(self._requester)
        self.client_api = ClientAPI(self._requester)

        logger.debug(f"Configured {key_type.value} client for {url} (key ***)")

    @classmethod
    def from_env(
        cls,
        key_type: KeyType,
        *options: ClientOption,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ) -> "Client":
        """Build a client from ``PTERO_BASE_URL`` and ``PTERO_API_KEY`` (or ``PTERO_API_KEY_FILE``).

        Values may come from the process environment or a .env file.

        Raises:
            CredentialNotFoundError: A required variable is unset
            CredentialFileError: The key file cannot be read
        """
        resolver = CredentialResolver(dotenv_path=dotenv_path, load_dotenv=load_dotenv)
        return cls(resolver.resolve_base_url(), resolver.resolve_api_key(), key_type, *options)

    @property
    def base_url(self) -> httpx.URL:
        return self._requester.base_url

    @property
    def key_type(self) -> KeyType:
        return self._key_type

    @property
    def requester(self) -> HTTPRequester:
        """Request builder and response processor shared by every service."""
        return self._requester

    async def aclose(self) -> None:
        """Close the HTTP client if this Client created it."""
        if self._owns_http_client:
            await self._requester.http_client.aclose()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
