"""Subusers sharing access to a server (``.../users``)."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.client_api import Subuser, SubuserCreateOptions, SubuserUpdateOptions
from pterodactyl_client.models.envelope import Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester


class SubusersService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/users"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Subuser], Meta]:
        return await crud.list_page(self._requester, self._path, Subuser, options)

    async def create(self, options: SubuserCreateOptions) -> Subuser:
        """Invite a user by email with the given permission keys (e.g. ``control.console``)."""
        return await crud.create(self._requester, self._path, options, Subuser)

    async def details(self, uuid: str) -> Subuser:
        return await crud.get(self._requester, self._path, uuid, Subuser)

    async def update(self, uuid: str, options: SubuserUpdateOptions) -> Subuser:
        return await crud.update(self._requester, self._path, uuid, options, Subuser, method="POST")

    async def delete(self, uuid: str) -> None:
        await crud.delete(self._requester, self._path, uuid)
