"""Server settings (``.../settings``)."""

from pterodactyl_client.models.client_api import RenameOptions
from pterodactyl_client.transport.requester import Requester


class SettingsService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/settings"

    async def rename(self, name: str, description: str | None = None) -> None:
        request = self._requester.build_request(
            "POST", f"{self._path}/rename", body=RenameOptions(name=name, description=description)
        )
        await self._requester.execute(request)

    async def reinstall(self) -> None:
        """Reinstall the server. Files are kept but the install script runs again."""
        request = self._requester.build_request("POST", f"{self._path}/reinstall")
        await self._requester.execute(request)
