"""pterodactyl-client - async Python client for the Pterodactyl panel API.

Covers both halves of the panel API:
- Application API (``ptla_`` keys): users, nodes, locations, servers, nests and eggs
- Client API (``ptlc_`` keys): the account and the servers it can access

Example:
    ```python
    import asyncio

    from pterodactyl_client import Client, KeyType


    async def main():
        async with Client.from_env(KeyType.APPLICATION) as panel:
            for node in await panel.application_api.nodes.list_all():
                print(node.id, node.name)


    asyncio.run(main())
    ```
"""

from pterodactyl_client.auth import KeyType
from pterodactyl_client.client import Client, ClientOption, with_http_client, with_timeout, with_transport
from pterodactyl_client.errors import (
    APIError,
    ConfigError,
    DecodeError,
    NotFoundError,
    PaginationLimitError,
    PterodactylError,
    RateLimitError,
    TransportError,
    ValidationError,
)
from pterodactyl_client.models import PaginationOptions

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "Client",
    "ClientOption",
    "ConfigError",
    "DecodeError",
    "KeyType",
    "NotFoundError",
    "PaginationLimitError",
    "PaginationOptions",
    "PterodactylError",
    "RateLimitError",
    "TransportError",
    "ValidationError",
    "__version__",
    "with_http_client",
    "with_timeout",
    "with_transport",
]
