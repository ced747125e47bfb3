"""Databases of a server, managed by its owner."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.client_api import (
    ClientDatabase,
    ClientDatabaseCreateOptions,
    ClientDatabaseEnvelope,
)
from pterodactyl_client.models.envelope import Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester


class ClientDatabasesService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/databases"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[ClientDatabase], Meta]:
        return await crud.list_page(self._requester, self._path, ClientDatabase, options)

    async def create(self, options: ClientDatabaseCreateOptions) -> ClientDatabase:
        """Create a database; the returned object carries its password."""
        request = self._requester.build_request("POST", self._path, body=options)
        envelope = await self._requester.execute(request, ClientDatabaseEnvelope)
        return envelope.database()

    async def rotate_password(self, database_id: str) -> ClientDatabase:
        request = self._requester.build_request("POST", f"{self._path}/{database_id}/rotate-password")
        envelope = await self._requester.execute(request, ClientDatabaseEnvelope)
        return envelope.database()

    async def delete(self, database_id: str) -> None:
        await crud.delete(self._requester, self._path, database_id)
