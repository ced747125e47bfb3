"""Allocations assigned to a server (``.../network/allocations``)."""

from pterodactyl_client import crud
from pterodactyl_client.models.application import Allocation
from pterodactyl_client.models.client_api import AllocationNoteOptions
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester


class NetworkService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/network/allocations"

    async def list_allocations(self, options: PaginationOptions | None = None) -> tuple[list[Allocation], Meta]:
        return await crud.list_page(self._requester, self._path, Allocation, options)

    async def assign_allocation(self) -> Allocation:
        """Assign a free allocation from the node. Requires automatic allocation on the panel."""
        request = self._requester.build_request("POST", self._path)
        envelope = await self._requester.execute(request, Envelope[Allocation])
        return envelope.attributes

    async def set_allocation_note(self, allocation_id: int, notes: str | None) -> Allocation:
        """Set the note of an allocation; None clears it."""
        return await crud.update(
            self._requester, self._path, allocation_id, AllocationNoteOptions(notes=notes), Allocation, method="POST"
        )

    async def set_primary_allocation(self, allocation_id: int) -> Allocation:
        request = self._requester.build_request("POST", f"{self._path}/{allocation_id}/primary")
        envelope = await self._requester.execute(request, Envelope[Allocation])
        return envelope.attributes

    async def unassign_allocation(self, allocation_id: int) -> None:
        await crud.delete(self._requester, self._path, allocation_id)
