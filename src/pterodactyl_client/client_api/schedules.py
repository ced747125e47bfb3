"""Scheduled tasks of a server (``.../schedules``)."""

from __future__ import annotations

from pterodactyl_client import crud
from pterodactyl_client.models.client_api import (
    Schedule,
    ScheduleCreateOptions,
    ScheduleDetailEnvelope,
    ScheduleUpdateOptions,
    Task,
    TaskCreateOptions,
    TaskUpdateOptions,
)
from pterodactyl_client.models.envelope import Meta, PaginationOptions
from pterodactyl_client.transport.requester import Requester


class SchedulesService:
    def __init__(self, requester: Requester, server_path: str) -> None:
        self._requester = requester
        self._path = f"{server_path}/schedules"

    async def list(self, options: PaginationOptions | None = None) -> tuple[list[Schedule], Meta]:
        return await crud.list_page(self._requester, self._path, Schedule, options)

    async def create(self, options: ScheduleCreateOptions) -> Schedule:
        return await crud.create(self._requester, self._path, options, Schedule)

    async def details(self, schedule_id: int) -> Schedule:
        """Fetch a schedule together with its tasks."""
        request = self._requester.build_request("GET", f"{self._path}/{schedule_id}")
        envelope = await self._requester.execute(request, ScheduleDetailEnvelope)
        return envelope.schedule()

    async def update(self, schedule_id: int, options: ScheduleUpdateOptions) -> Schedule:
        return await crud.update(self._requester, self._path, schedule_id, options, Schedule, method="POST")

    async def delete(self, schedule_id: int) -> None:
        await crud.delete(self._requester, self._path, schedule_id)

    async def create_task(self, schedule_id: int, options: TaskCreateOptions) -> Task:
        return await crud.create(self._requester, self._tasks_path(schedule_id), options, Task)

    async def update_task(self, schedule_id: int, task_id: int, options: TaskUpdateOptions) -> Task:
        return await crud.update(self._requester, self._tasks_path(schedule_id), task_id, options, Task, method="POST")

    async def delete_task(self, schedule_id: int, task_id: int) -> None:
        await crud.delete(self._requester, self._tasks_path(schedule_id), task_id)

    def _tasks_path(self, schedule_id: int) -> str:
        return f"{self._path}/{schedule_id}/tasks"
