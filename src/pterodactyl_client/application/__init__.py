"""Application (administrative) API, reachable with ``ptla_`` keys."""

from pterodactyl_client.application.locations import LocationsService
from pterodactyl_client.application.nests import EggsService, NestsService
from pterodactyl_client.application.nodes import AllocationsService, NodesService
from pterodactyl_client.application.servers import DatabasesService, ServersService
from pterodactyl_client.application.users import UsersService
from pterodactyl_client.transport.requester import Requester


class ApplicationAPI:
    """Resource families of ``/api/application``, all sharing one requester."""

    def __init__(self, requester: Requester) -> None:
        self.users = UsersService(requester)
        self.nodes = NodesService(requester)
        self.locations = LocationsService(requester)
        self.servers = ServersService(requester)
        self.nests = NestsService(requester)


__all__ = [
    "AllocationsService",
    "ApplicationAPI",
    "DatabasesService",
    "EggsService",
    "LocationsService",
    "NestsService",
    "NodesService",
    "ServersService",
    "UsersService",
]
