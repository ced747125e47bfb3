"""Backups of a server (``.../backups``)."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.client_api import Backup, BackupCreateOptions, SignedURL
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester


class BackupsService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/backups"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Backup], Meta]:
        return await crud.list_page(self._requester, self._path, Backup, options)

    async def create(self, options: BackupCreateOptions | None = None) -> Backup:
        """Start a backup. It completes asynchronously; poll ``details`` for ``completed_at``."""
        return await crud.create(self._requester, self._path, options if options is not None else BackupCreateOptions(), Backup)

    async def details(self, uuid: str) -> Backup:
        return await crud.get(self._requester, self._path, uuid, Backup)

    async def download(self, uuid: str) -> SignedURL:
        request = self._requester.build_request("GET", f"{self._path}/{uuid}/download")
        envelope = await self._requester.execute(request, Envelope[SignedURL])
        return envelope.attributes

    async def delete(self, uuid: str) -> None:
        await crud.delete(self._requester, self._path, uuid)
