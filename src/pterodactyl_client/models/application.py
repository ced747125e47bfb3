"""Resources and request bodies of the application (administrative) API."""

from datetime import datetime
from typing import Any

from pydantic import Field

from pterodactyl_client.models.base import PanelModel, RequestOptions

# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


class User(PanelModel):
    id: int
    external_id: str | None = None
    uuid: str = ""
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    language: str = ""
    root_admin: bool = False
    two_factor: bool = Field(default=False, alias="2fa")
    created_at: datetime | None = None
    updated_at: datetime | None = None


class UserCreateOptions(RequestOptions):
    email: str
    username: str
    first_name: str
    last_name: str
    password: str | None = None
    root_admin: bool | None = None
    external_id: str | None = None
    language: str | None = None


class UserUpdateOptions(RequestOptions):
    email: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    password: str | None = None
    root_admin: bool | None = None
    external_id: str | None = None
    language: str | None = None


# ---------------------------------------------------------------------------
# Locations
# ---------------------------------------------------------------------------


class Location(PanelModel):
    id: int
    short: str = ""
    long: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class LocationCreateOptions(RequestOptions):
    short: str
    long: str | None = None


class LocationUpdateOptions(RequestOptions):
    short: str | None = None
    long: str | None = None


# ---------------------------------------------------------------------------
# Nodes and allocations
# ---------------------------------------------------------------------------


class Node(PanelModel):
    id: int
    uuid: str = ""
    public: bool = False
    name: str = ""
    description: str | None = None
    location_id: int = 0
    fqdn: str = ""
    scheme: str = ""
    behind_proxy: bool = False
    maintenance_mode: bool = False
    memory: int = 0
    memory_overallocate: int = 0
    disk: int = 0
    disk_overallocate: int = 0
    upload_size: int = 0
    daemon_listen: int = 0
    daemon_sftp: int = 0
    daemon_base: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    allocated_resources: dict[str, int] | None = None


class NodeConfiguration(PanelModel):
    """Wings configuration for a node. Returned without an envelope."""

    debug: bool = False
    uuid: str = ""
    token_id: str = ""
    token: str = ""
    api: dict[str, Any] = {}
    system: dict[str, Any] = {}
    allowed_mounts: list[str] = []
    remote: str = ""


class NodeCreateOptions(RequestOptions):
    name: str
    location_id: int
    fqdn: str
    scheme: str
    memory: int
    memory_overallocate: int
    disk: int
    disk_overallocate: int
    daemon_sftp: int
    daemon_listen: int
    description: str | None = None
    public: bool | None = None
    behind_proxy: bool | None = None
    maintenance_mode: bool | None = None
    upload_size: int | None = None
    daemon_base: str | None = None


class NodeUpdateOptions(RequestOptions):
    name: str | None = None
    description: str | None = None
    location_id: int | None = None
    fqdn: str | None = None
    scheme: str | None = None
    public: bool | None = None
    behind_proxy: bool | None = None
    maintenance_mode: bool | None = None
    memory: int | None = None
    memory_overallocate: int | None = None
    disk: int | None = None
    disk_overallocate: int | None = None
    upload_size: int | None = None
    daemon_sftp: int | None = None
    daemon_listen: int | None = None


class Allocation(PanelModel):
    """A node IP/port pair. Also used by the client API's network endpoints."""

    id: int
    ip: str = ""
    ip_alias: str | None = None
    alias: str | None = None
    port: int = 0
    notes: str | None = None
    assigned: bool | None = None
    is_default: bool | None = None


class AllocationCreateOptions(RequestOptions):
    ip: str
    ports: list[str]
    alias: str | None = None


# ---------------------------------------------------------------------------
# Servers and server databases
# ---------------------------------------------------------------------------


class ServerLimits(PanelModel):
    memory: int = 0
    swap: int = 0
    disk: int = 0
    io: int = 0
    cpu: int = 0
    threads: str | None = None
    oom_disabled: bool | None = None


class ServerFeatureLimits(PanelModel):
    databases: int = 0
    allocations: int = 0
    backups: int = 0


class ServerContainer(PanelModel):
    startup_command: str = ""
    image: str = ""
    installed: bool = False
    environment: dict[str, Any] = {}


class Server(PanelModel):
    id: int
    external_id: str | None = None
    uuid: str = ""
    identifier: str = ""
    name: str = ""
    description: str | None = None
    status: str | None = None
    suspended: bool = False
    limits: ServerLimits = ServerLimits()
    feature_limits: ServerFeatureLimits = ServerFeatureLimits()
    user: int = 0
    node: int = 0
    allocation: int = 0
    nest: int = 0
    egg: int = 0
    container: ServerContainer = ServerContainer()
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ServerAllocationOptions(RequestOptions):
    default: int
    additional: list[int] | None = None


class ServerDeployOptions(RequestOptions):
    locations: list[int]
    dedicated_ip: bool = False
    port_range: list[str] = []


class ServerCreateOptions(RequestOptions):
    name: str
    user: int
    egg: int
    docker_image: str
    startup: str
    environment: dict[str, str]
    limits: ServerLimits
    feature_limits: ServerFeatureLimits
    nest: int | None = None
    description: str | None = None
    external_id: str | None = None
    node_id: int | None = None
    allocation: ServerAllocationOptions | None = None
    deploy: ServerDeployOptions | None = None
    skip_scripts: bool | None = None
    oom_disabled: bool | None = None
    start_on_completion: bool | None = None


class ServerUpdateDetailsOptions(RequestOptions):
    name: str
    user: int
    external_id: str | None = None
    description: str | None = None


class ServerUpdateBuildOptions(RequestOptions):
    allocation: int
    limits: ServerLimits
    feature_limits: ServerFeatureLimits
    add_allocations: list[int] | None = None
    remove_allocations: list[int] | None = None
    oom_disabled: bool | None = None


class ServerUpdateStartupOptions(RequestOptions):
    startup: str
    environment: dict[str, str]
    egg: int
    image: str
    skip_scripts: bool | None = None


class ServerDeleteOptions(RequestOptions):
    force: bool = False


class Database(PanelModel):
    id: int
    server: int = 0
    host: int = 0
    database: str = ""
    username: str = ""
    remote: str = ""
    max_connections: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DatabaseCreateOptions(RequestOptions):
    database: str
    remote: str
    host: int


# ---------------------------------------------------------------------------
# Nests and eggs
# ---------------------------------------------------------------------------


class Nest(PanelModel):
    id: int
    uuid: str = ""
    author: str = ""
    name: str = ""
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Egg(PanelModel):
    id: int
    uuid: str = ""
    name: str = ""
    nest: int = 0
    author: str = ""
    description: str | None = None
    docker_image: str = ""
    docker_images: dict[str, str] = {}
    config: dict[str, Any] = {}
    startup: str = ""
    script: dict[str, Any] = {}
    created_at: datetime | None = None
    updated_at: datetime | None = None
