"""Startup variables of a server (``.../startup``)."""

from pterodactyl_client import crud
from pterodactyl_client.models.client_api import StartupVariable, UpdateVariableOptions
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester


class StartupService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/startup"

    async def list_variables(self, options: PaginationOptions | None = None) -> tuple[list[StartupVariable], Meta]:
        return await crud.list_page(self._requester, self._path, StartupVariable, options)

    async def update_variable(self, key: str, value: str) -> StartupVariable:
        """Set an editable variable by its environment name."""
        request = self._requester.build_request(
            "PUT", f"{self._path}/variable", body=UpdateVariableOptions(key=key, value=value)
        )
        envelope = await self._requester.execute(request, Envelope[StartupVariable])
        return envelope.attributes
