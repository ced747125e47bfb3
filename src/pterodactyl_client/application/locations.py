"""Node locations (``/api/application/locations``)."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.application import Location, LocationCreateOptions, LocationUpdateOptions
from pterodactyl_client.models.envelope import Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester

LOCATIONS_PATH = "/api/application/locations"


class LocationsService:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Location], Meta]:
        return await crud.list_page(self._requester, LOCATIONS_PATH, Location, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[Location]:
        return await crud.list_all(self._requester, LOCATIONS_PATH, Location, per_page)

    async def get(self, location_id: int) -> Location:
        return await crud.get(self._requester, LOCATIONS_PATH, location_id, Location)

    async def create(self, options: LocationCreateOptions) -> Location:
        return await crud.create(self._requester, LOCATIONS_PATH, options, Location)

    async def update(self, location_id: int, options: LocationUpdateOptions) -> Location:
        return await crud.update(self._requester, LOCATIONS_PATH, location_id, options, Location)

    async def delete(self, location_id: int) -> None:
        await crud.delete(self._requester, LOCATIONS_PATH, location_id)
