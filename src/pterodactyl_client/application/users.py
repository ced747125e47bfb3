"""Panel user accounts (``/api/application/users``)."""

from __future__ import annotations

from urllib.parse import quote

from pterodactyl_client import crud
from pterodactyl_client.models.application import User, UserCreateOptions, UserUpdateOptions
from pterodactyl_client.models.envelope import Envelope, Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester

USERS_PATH = "/api/application/users"


class UsersService:
    def __init__(self, requester: Requester) -> None:
        self._requester = requester

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[User], Meta]:
        return await crud.list_page(self._requester, USERS_PATH, User, options)

    async def list_all(self, per_page: int = crud.DEFAULT_PAGE_SIZE) -> list[User]:
        return await crud.list_all(self._requester, USERS_PATH, User, per_page)

    async def get(self, user_id: int) -> User:
        return await crud.get(self._requester, USERS_PATH, user_id, User)

    async def get_external(self, external_id: str) -> User:
        """Look a user up by the ID an external system assigned to it."""
        request = self._requester.build_request("GET", f"{USERS_PATH}/external/{quote(external_id, safe='')}")
        envelope = await self._requester.execute(request, Envelope[User])
        return envelope.attributes

    async def create(self, options: UserCreateOptions) -> User:
        return await crud.create(self._requester, USERS_PATH, options, User)

    async def update(self, user_id: int, options: UserUpdateOptions) -> User:
        return await crud.update(self._requester, USERS_PATH, user_id, options, User)

    async def delete(self, user_id: int) -> None:
        await crud.delete(self._requester, USERS_PATH, user_id)
