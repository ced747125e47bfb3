"""Nests and their eggs (``/api/application/nests``). Read-only."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.application import Egg, Nest
from pterodactyl_client.models.envelope import Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester

NESTS_PATH = "/api/application/nests"


class NestsService:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Nest], Meta]:
        return await crud.list_page(self._requester, NESTS_PATH, Nest, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[Nest]:
        return await crud.list_all(self._requester, NESTS_PATH, Nest, per_page)

    async def get(self, nest_id: int) -> Nest:
        return await crud.get(self._requester, NESTS_PATH, nest_id, Nest)

    def eggs(self, nest_id: int) -> EggsService:
        return EggsService(self._requester, nest_id)


class EggsService:
    def __init__(self, requester: Requester, nest_id: int) -> None:
        self._requester = requester
        self._path = f"{NESTS_PATH}/{nest_id}/eggs"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Egg], Meta]:
        return await crud.list_page(self._requester, self._path, Egg, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[Egg]:
        return await crud.list_all(self._requester, self._path, Egg, per_page)

    async def get(self, egg_id: int) -> Egg:
        return await crud.get(self._requester, self._path, egg_id, Egg)
