"""Client (end-user) API: what an account can see and do on its own servers.

Requires a ``ptlc_`` key. Server-scoped services hang off ``servers(identifier)``,
where ``identifier`` is the short server ID shown in the panel URL.

Example:
    ```python
    async with Client(url, "ptlc_...", KeyType.CLIENT) as panel:
        for server in await panel.client_api.list_all_servers():
            resources = await panel.client_api.servers(server.identifier).get_resources()
    ```
"""

from pterodactyl_client import crud
from pterodactyl_client.client_api.account import AccountService, APIKeysService
from pterodactyl_client.client_api.servers import ServerService
from pterodactyl_client.models.client_api import ClientServer, SystemPermissions
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester

CLIENT_PATH = "/api/client"


class ClientAPI:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list_servers(self, options: PaginationOptions | None = None) -> tuple[list[ClientServer], Meta]:
        """List one page of the servers the account can access."""
        return await crud.list_page(self._requester, CLIENT_PATH, ClientServer, options)

    async def list_all_servers(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[ClientServer]:
        return await crud.list_all(self._requester, CLIENT_PATH, ClientServer, per_page)

    async def list_permissions(self) -> SystemPermissions:
        """Describe every permission key that can be granted to subusers."""
        request = self._requester.build_request("GET", f"{CLIENT_PATH}/permissions")
        envelope = await self._requester.execute(request, Envelope[SystemPermissions])
        return envelope.attributes

    def servers(self, identifier: str) -> ServerService:
        return ServerService(self._requester, identifier)

    def account(self) -> AccountService:
        return AccountService(self._requester)


__all__ = ["APIKeysService", "AccountService", "ClientAPI", "ServerService"]
