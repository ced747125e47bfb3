"""The authenticated user's own account (``/api/client/account``)."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.client_api import (
    Account,
    APIKey,
    APIKeyCreateEnvelope,
    APIKeyCreateOptions,
    DataEnvelope,
    TwoFactorDetails,
    TwoFactorDisableOptions,
    TwoFactorEnableOptions,
    UpdateEmailOptions,
    UpdatePasswordOptions,
)
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Body, Requester

ACCOUNT_PATH = "/api/client/account"


class AccountService:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def get_details(self) -> Account:
        request = self._requester.build_request("GET", ACCOUNT_PATH)
        envelope = await self._requester.execute(request, Envelope[Account])
        return envelope.attributes

    async def get_two_factor_details(self) -> TwoFactorDetails:
        """Fetch the TOTP enrolment data (QR code URL) for enabling two-factor auth."""
        request = self._requester.build_request("GET", f"{ACCOUNT_PATH}/two-factor")
        envelope = await self._requester.execute(request, DataEnvelope[TwoFactorDetails])
        return envelope.data

    async def enable_two_factor(self, options: TwoFactorEnableOptions) -> None:
        await self._send("POST", "two-factor", options)

    async def disable_two_factor(self, options: TwoFactorDisableOptions) -> None:
        await self._send("DELETE", "two-factor", options)

    async def update_email(self, options: UpdateEmailOptions) -> None:
        await self._send("PUT", "email", options)

    async def update_password(self, options: UpdatePasswordOptions) -> None:
        await self._send("PUT", "password", options)

    def api_keys(self) -> APIKeysService:
        return APIKeysService(self._requester)

    async def _send(self, method: str, section: str, body: Body) -> None:
        request = self._requester.build_request(method, f"{ACCOUNT_PATH}/{section}", body=body)
        await self._requester.execute(request)


class APIKeysService:
    """Client API keys of the account."""

    def __init__(self, requester: Requester) -> None:
        self._requester = requester
        self._path = f"{ACCOUNT_PATH}/api-keys"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[APIKey], Meta]:
        return await crud.list_page(self._requester, self._path, APIKey, options)

    async def create(self, options: APIKeyCreateOptions) -> APIKey:
        """Create a key. The secret token is only returned here, on ``APIKey.token``."""
        request = self._requester.build_request("POST", self._path, body=options)
        envelope = await self._requester.execute(request, APIKeyCreateEnvelope)
        api_key = envelope.attributes
        api_key.token = envelope.meta.secret_token
        return api_key

    async def delete(self, identifier: str) -> None:
        await crud.delete(self._requester, self._path, identifier)
