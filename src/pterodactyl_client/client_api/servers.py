"""A single server seen from its owner's or subuser's account (``/api/client/servers/{identifier}``)."""

from pterodactyl_client.client_api.backups import BackupsService
from pterodactyl_client.client_api.databases import ClientDatabasesService
from pterodactyl_client.client_api.files import FilesService
from pterodactyl_client.client_api.network import NetworkService
from pterodactyl_client.client_api.schedules import SchedulesService
from pterodactyl_client.client_api.settings import SettingsService
from pterodactyl_client.client_api.startup import StartupService
from pterodactyl_client.client_api.subusers import SubusersService
from pterodactyl_client.models.client_api import (
    ClientServer,
    DataEnvelope,
    Resources,
    SendCommandOptions,
    SetPowerStateOptions,
    WebsocketDetails,
)
from pterodactyl_client.models.envelope import Envelope
from pterodactyl_client.transport.requester import Requester

SERVERS_PATH = "/api/client/servers"


class ServerService:
    def __init__(self, requester: Requester, identifier: str) -> None:
        self._requester = requester
        self._identifier = identifier
        self._path = f"{SERVERS_PATH}/{identifier}"

    @property
    def identifier(self) -> str:
        return self._identifier

    async def get_details(self) -> ClientServer:
        request = self._requester.build_request("GET", self._path)
        envelope = await self._requester.execute(request, Envelope[ClientServer])
        return envelope.attributes

    async def get_websocket(self) -> WebsocketDetails:
        """Fetch the token and socket URL for the server console."""
        request = self._requester.build_request("GET", f"{self._path}/websocket")
        envelope = await self._requester.execute(request, DataEnvelope[WebsocketDetails])
        return envelope.data

    async def get_resources(self) -> Resources:
        """Fetch live power state and resource usage."""
        request = self._requester.build_request("GET", f"{self._path}/resources")
        envelope = await self._requester.execute(request, Envelope[Resources])
        return envelope.attributes

    async def send_command(self, command: str) -> None:
        """Send a console command. The server must be running."""
        request = self._requester.build_request(
            "POST", f"{self._path}/command", body=SendCommandOptions(command=command)
        )
        await self._requester.execute(request)

    async def set_power_state(self, signal: str) -> None:
        """Send a power signal: ``start``, ``stop``, ``restart`` or ``kill``."""
        request = self._requester.build_request(
            "POST", f"{self._path}/power", body=SetPowerStateOptions(signal=signal)
        )
        await self._requester.execute(request)

    def databases(self) -> ClientDatabasesService:
        return ClientDatabasesService(self._requester, self._path)

    def files(self) -> FilesService:
        return FilesService(self._requester, self._path)

    def schedules(self) -> SchedulesService:
        return SchedulesService(self._requester, self._path)

    def network(self) -> NetworkService:
        return NetworkService(self._requester, self._path)

    def users(self) -> SubusersService:
        return SubusersService(self._requester, self._path)

    def backups(self) -> BackupsService:
        return BackupsService(self._requester, self._path)

    def startup(self) -> StartupService:
        return StartupService(self._requester, self._path)

    def settings(self) -> SettingsService:
        return SettingsService(self._requester, self._path)
