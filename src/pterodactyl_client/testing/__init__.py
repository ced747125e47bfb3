"""Testing utilities for code built on pterodactyl_client.

``MockPanel`` stands in for a panel: queue the responses it should give, plug
its transport into a ``Client`` and inspect the requests it received.
Responses are served in the order they were queued, one per request.

Example:
    ```python
    from pterodactyl_client import Client, KeyType, with_transport
    from pterodactyl_client.testing import MockPanel, envelope


    async def test_get_user():
        panel = MockPanel()
        panel.add_response(json=envelope("user", {"id": 1, "username": "admin"}))

        async with Client("https://panel.test", "ptla_test", KeyType.APPLICATION, with_transport(panel.transport)) as c:
            user = await c.application_api.users.get(1)

        assert user.username == "admin"
        assert panel.requests[0].url.path == "/api/application/users/1"
    ```
"""

import json
from collections import deque
from typing import Any

import httpx


def envelope(object_name: str, attributes: dict[str, Any], **extra: Any) -> dict[str, Any]:
    """Build a single-resource body: ``{"object": ..., "attributes": ...}`` plus ``extra`` keys."""
    return {"object": object_name, "attributes": attributes, **extra}


def paginated(
    object_name: str,
    items: list[dict[str, Any]],
    *,
    current_page: int = 1,
    total_pages: int = 1,
    per_page: int = 50,
    total: int | None = None,
) -> dict[str, Any]:
    """Build a list body whose ``data`` wraps each of ``items`` in an envelope."""
    return {
        "object": "list",
        "data": [envelope(object_name, item) for item in items],
        "meta": {
            "pagination": {
                "total": len(items) if total is None else total,
                "count": len(items),
                "per_page": per_page,
                "current_page": current_page,
                "total_pages": total_pages,
                "links": [],
            }
        },
    }


def error_body(status: int, code: str, detail: str, source_field: str | None = None) -> dict[str, Any]:
    """Build a panel error body with one entry."""
    error: dict[str, Any] = {"code": code, "status": str(status), "detail": detail}
    if source_field is not None:
        error["meta"] = {"source_field": source_field, "rule": "required"}
    return {"errors": [error]}


class MockPanel:
    """Scripted panel backed by ``httpx.MockTransport``.

    Attributes:
        requests: Every request received, in order. Bodies are already read.
    """

    def __init__(self) -> None:
        self._queue: deque[httpx.Response | Exception] = deque()
        self.requests: list[httpx.Request] = []

    @property
    def transport(self) -> httpx.MockTransport:
        """Transport to pass to ``with_transport``."""
        return httpx.MockTransport(self._handle)

    def add_response(
        self,
        status_code: int = 200,
        *,
        json: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Queue a response. Without ``json`` or ``text`` the body is empty."""
        if json is not None:
            response = httpx.Response(status_code, json=json, headers=headers)
        elif text is not None:
            response = httpx.Response(status_code, text=text, headers=headers)
        else:
            response = httpx.Response(status_code, headers=headers)
        self._queue.append(response)

    def add_exception(self, exc: Exception) -> None:
        """Queue an exception to raise instead of answering, e.g. ``httpx.ConnectError``."""
        self._queue.append(exc)

    def json_body(self, index: int = -1) -> Any:
        """Decode the JSON body of a received request."""
        return json.loads(self.requests[index].content)

    @property
    def pending(self) -> int:
        """Number of queued responses not served yet."""
        return len(self._queue)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._queue:
            raise AssertionError(f"unexpected request {request.method} {request.url}: no response queued")

        queued = self._queue.popleft()
        if isinstance(queued, Exception):
            raise queued
        return queued


__all__ = ["MockPanel", "envelope", "error_body", "paginated"]
