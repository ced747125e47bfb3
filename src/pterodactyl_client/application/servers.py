"""Servers and their databases (``/api/application/servers``)."""

from __future__ import annotations

from urllib.parse import quote

from pterodactyl_client import crud
from pterodactyl_client.models.application import (
    Database,
    DatabaseCreateOptions,
    Server,
    ServerCreateOptions,
    ServerDeleteOptions,
    ServerUpdateBuildOptions,
    ServerUpdateDetailsOptions,
    ServerUpdateStartupOptions,
)
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Body, Requester

SERVERS_PATH = "/api/application/servers"


class ServersService:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Server], Meta]:
        return await crud.list_page(self._requester, SERVERS_PATH, Server, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[Server]:
        return await crud.list_all(self._requester, SERVERS_PATH, Server, per_page)

    async def get(self, server_id: int) -> Server:
        return await crud.get(self._requester, SERVERS_PATH, server_id, Server)

    async def get_external(self, external_id: str) -> Server:
        request = self._requester.build_request("GET", f"{SERVERS_PATH}/external/{quote(external_id, safe='')}")
        envelope = await self._requester.execute(request, Envelope[Server])
        return envelope.attributes

    async def create(self, options: ServerCreateOptions) -> Server:
        """Queue a new server for installation.

        The returned server is not installed yet; poll ``get`` until
        ``container.installed`` is true.
        """
        return await crud.create(self._requester, SERVERS_PATH, options, Server)

    async def update_details(self, server_id: int, options: ServerUpdateDetailsOptions) -> Server:
        return await self._patch(server_id, "details", options)

    async def update_build(self, server_id: int, options: ServerUpdateBuildOptions) -> Server:
        return await self._patch(server_id, "build", options)

    async def update_startup(self, server_id: int, options: ServerUpdateStartupOptions) -> Server:
        return await self._patch(server_id, "startup", options)

    async def suspend(self, server_id: int) -> None:
        await self._post_action(server_id, "suspend")

    async def unsuspend(self, server_id: int) -> None:
        await self._post_action(server_id, "unsuspend")

    async def reinstall(self, server_id: int) -> None:
        await self._post_action(server_id, "reinstall")

    async def delete(self, server_id: int, force: bool = False) -> None:
        """Delete a server. ``force`` deletes it even if the node cannot be reached."""
        body = ServerDeleteOptions(force=True) if force else None
        request = self._requester.build_request("DELETE", f"{SERVERS_PATH}/{server_id}", body=body)
        await self._requester.execute(request)

    def databases(self, server_id: int) -> DatabasesService:
        return DatabasesService(self._requester, server_id)

    async def _patch(self, server_id: int, section: str, body: Body) -> Server:
        request = self._requester.build_request("PATCH", f"{SERVERS_PATH}/{server_id}/{section}", body=body)
        envelope = await self._requester.execute(request, Envelope[Server])
        return envelope.attributes

    async def _post_action(self, server_id: int, action: str) -> None:
        request = self._requester.build_request("POST", f"{SERVERS_PATH}/{server_id}/{action}")
        await self._requester.execute(request)


class DatabasesService:
    """Databases of one server."""

    def __init__(self, requester: Requester, server_id: int) -> None:
        self._requester = requester
        self._path = f"{SERVERS_PATH}/{server_id}/databases"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Database], Meta]:
        return await crud.list_page(self._requester, self._path, Database, options)

    async def get(self, database_id: int) -> Database:
        return await crud.get(self._requester, self._path, database_id, Database)

    async def create(self, options: DatabaseCreateOptions) -> Database:
        return await crud.create(self._requester, self._path, options, Database)

    async def reset_password(self, database_id: int) -> None:
        request = self._requester.build_request("POST", f"{self._path}/{database_id}/reset-password")
        await self._requester.execute(request)

    async def delete(self, database_id: int) -> None:
        await crud.delete(self._requester, self._path, database_id)
