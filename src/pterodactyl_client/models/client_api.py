"""Resources and request bodies of the client (end-user) API."""

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from pterodactyl_client.models.application import ServerFeatureLimits, ServerLimits
from pterodactyl_client.models.base import PanelModel, RequestOptions
from pterodactyl_client.models.envelope import Envelope

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """``{"data": {...}}`` wrapper used by the websocket and two-factor endpoints."""

    data: T


# ---------------------------------------------------------------------------
# Servers
# ---------------------------------------------------------------------------


class SFTPDetails(PanelModel):
    ip: str = ""
    port: int = 0


class ClientServer(PanelModel):
    server_owner: bool = False
    identifier: str
    internal_id: int | None = None
    uuid: str = ""
    name: str = ""
    node: str = ""
    sftp_details: SFTPDetails = SFTPDetails()
    description: str | None = None
    limits: ServerLimits = ServerLimits()
    invocation: str = ""
    docker_image: str = ""
    egg_features: list[str] | None = None
    feature_limits: ServerFeatureLimits = ServerFeatureLimits()
    status: str | None = None
    is_suspended: bool = False
    is_installing: bool = False
    is_transferring: bool = False


class WebsocketDetails(PanelModel):
    token: str
    socket: str


class ResourceUsage(PanelModel):
    memory_bytes: int = 0
    cpu_absolute: float = 0.0
    disk_bytes: int = 0
    network_rx_bytes: int = 0
    network_tx_bytes: int = 0
    uptime: int = 0


class Resources(PanelModel):
    current_state: str = ""
    is_suspended: bool = False
    resources: ResourceUsage = ResourceUsage()


class PermissionGroup(PanelModel):
    description: str = ""
    keys: dict[str, str] = {}


class SystemPermissions(PanelModel):
    permissions: dict[str, PermissionGroup] = {}


class SendCommandOptions(RequestOptions):
    command: str


class SetPowerStateOptions(RequestOptions):
    signal: str  # start, stop, restart or kill


class RenameOptions(RequestOptions):
    name: str
    description: str | None = None


# ---------------------------------------------------------------------------
# Account and API keys
# ---------------------------------------------------------------------------


class Account(PanelModel):
    id: int
    admin: bool = False
    username: str = ""
    email: str = ""
    first_name: str = ""
    last_name: str = ""
    language: str = ""


class TwoFactorDetails(PanelModel):
    image_url_data: str = ""
    secret: str | None = None


class TwoFactorEnableOptions(RequestOptions):
    code: str
    password: str | None = None


class TwoFactorDisableOptions(RequestOptions):
    password: str


class UpdateEmailOptions(RequestOptions):
    email: str
    password: str


class UpdatePasswordOptions(RequestOptions):
    current_password: str
    password: str
    password_confirmation: str


class APIKey(PanelModel):
    identifier: str
    description: str = ""
    allowed_ips: list[str] = []
    last_used_at: datetime | None = None
    created_at: datetime | None = None
    token: str | None = None  # Only set on creation, from meta.secret_token


class APIKeyCreateOptions(RequestOptions):
    description: str
    allowed_ips: list[str] | None = None


class APIKeyCreateMeta(BaseModel):
    secret_token: str = ""


class APIKeyCreateEnvelope(Envelope[APIKey]):
    meta: APIKeyCreateMeta = APIKeyCreateMeta()


# ---------------------------------------------------------------------------
# Databases
# ---------------------------------------------------------------------------


class DatabaseHost(PanelModel):
    address: str = ""
    port: int = 0


class ClientDatabase(PanelModel):
    id: str
    host: DatabaseHost = DatabaseHost()
    name: str = ""
    username: str = ""
    connections_from: str = ""
    max_connections: int | None = None
    password: str | None = None  # Only set on create/rotate, from relationships


class ClientDatabaseCreateOptions(RequestOptions):
    database: str
    remote: str


class DatabasePassword(BaseModel):
    password: str | None = None


class DatabasePasswordRelationships(BaseModel):
    password: Envelope[DatabasePassword] | None = None


class ClientDatabaseEnvelope(Envelope[ClientDatabase]):
    relationships: DatabasePasswordRelationships | None = None

    def database(self) -> ClientDatabase:
        """Return the database with the password relationship folded in."""
        db = self.attributes
        if self.relationships and self.relationships.password:
            db.password = self.relationships.password.attributes.password
        return db


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class FileObject(PanelModel):
    name: str
    mode: str = ""
    mode_bits: str = ""
    size: int = 0
    is_file: bool = False
    is_symlink: bool = False
    mimetype: str = ""
    created_at: datetime | None = None
    modified_at: datetime | None = None


class SignedURL(PanelModel):
    url: str


class RenameFile(RequestOptions):
    from_: str = Field(alias="from")
    to: str


class RenameFilesOptions(RequestOptions):
    root: str
    files: list[RenameFile]


class CopyFileOptions(RequestOptions):
    location: str


class CompressFilesOptions(RequestOptions):
    root: str
    files: list[str]


class DecompressFileOptions(RequestOptions):
    root: str
    file: str


class DeleteFilesOptions(RequestOptions):
    root: str
    files: list[str]


class CreateFolderOptions(RequestOptions):
    root: str
    name: str


# ---------------------------------------------------------------------------
# Schedules
# ---------------------------------------------------------------------------


class Task(PanelModel):
    id: int
    sequence_id: int = 0
    action: str = ""
    payload: str = ""
    time_offset: int = 0
    is_queued: bool = False
    continue_on_failure: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Cron(PanelModel):
    day_of_week: str = "*"
    day_of_month: str = "*"
    month: str = "*"
    hour: str = "*"
    minute: str = "*"


class Schedule(PanelModel):
    id: int
    name: str = ""
    cron: Cron = Cron()
    is_active: bool = False
    is_processing: bool = False
    only_when_online: bool = False
    last_run_at: datetime | None = None
    next_run_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    tasks: list[Task] = []


class ScheduleCreateOptions(RequestOptions):
    name: str
    minute: str = "*"
    hour: str = "*"
    day_of_month: str = "*"
    month: str = "*"
    day_of_week: str = "*"
    is_active: bool | None = None
    only_when_online: bool | None = None


class ScheduleUpdateOptions(RequestOptions):
    name: str | None = None
    minute: str | None = None
    hour: str | None = None
    day_of_month: str | None = None
    month: str | None = None
    day_of_week: str | None = None
    is_active: bool | None = None
    only_when_online: bool | None = None


class TaskList(BaseModel):
    data: list[Envelope[Task]] = []


class ScheduleRelationships(BaseModel):
    tasks: TaskList | None = None


class ScheduleDetailEnvelope(Envelope[Schedule]):
    relationships: ScheduleRelationships | None = None

    def schedule(self) -> Schedule:
        """Return the schedule with its task relationship folded in."""
        schedule = self.attributes
        if self.relationships and self.relationships.tasks:
            schedule.tasks = [item.attributes for item in self.relationships.tasks.data]
        return schedule


class TaskCreateOptions(RequestOptions):
    action: str  # command, power or backup
    payload: str
    time_offset: int = 0
    continue_on_failure: bool | None = None


class TaskUpdateOptions(RequestOptions):
    action: str | None = None
    payload: str | None = None
    time_offset: int | None = None
    continue_on_failure: bool | None = None


# ---------------------------------------------------------------------------
# Network, subusers, backups, startup
# ---------------------------------------------------------------------------


class AllocationNoteOptions(RequestOptions):
    notes: str | None = None

    def to_payload(self) -> dict[str, Any]:
        # An explicit null clears the note.
        return {"notes": self.notes}


class Subuser(PanelModel):
    uuid: str
    username: str = ""
    email: str = ""
    image: str | None = None
    two_factor_enabled: bool = Field(default=False, alias="2fa_enabled")
    created_at: datetime | None = None
    permissions: list[str] = []


class SubuserCreateOptions(RequestOptions):
    email: str
    permissions: list[str]


class SubuserUpdateOptions(RequestOptions):
    permissions: list[str]


class Backup(PanelModel):
    uuid: str
    is_successful: bool = False
    is_locked: bool = False
    name: str = ""
    ignored_files: list[str] = []
    checksum: str | None = None
    bytes: int = 0
    created_at: datetime | None = None
    completed_at: datetime | None = None


class BackupCreateOptions(RequestOptions):
    name: str | None = None
    ignored: str | None = None
    is_locked: bool | None = None


class StartupVariable(PanelModel):
    name: str = ""
    description: str = ""
    env_variable: str
    default_value: str | None = None
    server_value: str | None = None
    is_editable: bool = False
    rules: str = ""


class UpdateVariableOptions(RequestOptions):
    key: str
    value: str
