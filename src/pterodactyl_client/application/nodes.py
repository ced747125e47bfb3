"""Nodes and their allocations (``/api/application/nodes``)."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.application import (
    Allocation,
    AllocationCreateOptions,
    Node,
    NodeConfiguration,
    NodeCreateOptions,
    NodeUpdateOptions,
)
from pterodactyl_client.models.envelope import Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester

NODES_PATH = "/api/application/nodes"


class NodesService:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Node], Meta]:
        return await crud.list_page(self._requester, NODES_PATH, Node, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[Node]:
        return await crud.list_all(self._requester, NODES_PATH, Node, per_page)

    async def get(self, node_id: int) -> Node:
        return await crud.get(self._requester, NODES_PATH, node_id, Node)

    async def get_configuration(self, node_id: int) -> NodeConfiguration:
        """Fetch the Wings daemon configuration for a node.

        This endpoint answers with the bare configuration object, not an envelope.
        """
        request = self._requester.build_request("GET", f"{NODES_PATH}/{node_id}/configuration")
        return await self._requester.execute(request, NodeConfiguration)

    async def create(self, options: NodeCreateOptions) -> Node:
        return await crud.create(self._requester, NODES_PATH, options, Node)

    async def update(self, node_id: int, options: NodeUpdateOptions) -> Node:
        return await crud.update(self._requester, NODES_PATH, node_id, options, Node)

    async def delete(self, node_id: int) -> None:
        await crud.delete(self._requester, NODES_PATH, node_id)

    def allocations(self, node_id: int) -> AllocationsService:
        return AllocationsService(self._requester, node_id)


class AllocationsService:
    """IP/port allocations of one node."""

    def __init__(self, requester: Requester, node_id: int) -> None:
        self._requester = requester
        self._path = f"{NODES_PATH}/{node_id}/allocations"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Allocation], Meta]:
        return await crud.list_page(self._requester, self._path, Allocation, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[Allocation]:
        return await crud.list_all(self._requester, self._path, Allocation, per_page)

    async def create(self, options: AllocationCreateOptions) -> None:
        """Create allocations for every port in ``options.ports``. The panel answers 204."""
        request = self._requester.build_request("POST", self._path, body=options)
        await self._requester.execute(request)

    async def delete(self, allocation_id: int) -> None:
        await crud.delete(self._requester, self._path, allocation_id)
