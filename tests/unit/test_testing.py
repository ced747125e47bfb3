"""Tests for the MockPanel helper."""

import httpx
import pytest

from pterodactyl_client.testing import MockPanel, envelope, error_body, paginated


@pytest.mark.unit
def test_envelope_builder():
    assert envelope("user", {"id": 1}) == {"object": "user", "attributes": {"id": 1}}
    assert envelope("api_key", {}, meta={"secret_token": "t"})["meta"] == {"secret_token": "t"}


@pytest.mark.unit
def test_paginated_builder():
    body = paginated("node", [{"id": 1}, {"id": 2}], current_page=2, total_pages=3, total=6)

    assert [item["attributes"]["id"] for item in body["data"]] == [1, 2]
    assert body["meta"]["pagination"]["count"] == 2
    assert body["meta"]["pagination"]["total"] == 6
    assert body["meta"]["pagination"]["current_page"] == 2


@pytest.mark.unit
def test_error_body_builder():
    body = error_body(422, "ValidationException", "Required.", "name")

    assert body["errors"][0]["status"] == "422"
    assert body["errors"][0]["meta"]["source_field"] == "name"


async def test_serves_responses_in_order():
    panel = MockPanel()
    panel.add_response(json={"n": 1})
    panel.add_response(201, text="two")

    async with httpx.AsyncClient(transport=panel.transport) as client:
        first = await client.get("https://panel.test/a")
        second = await client.post("https://panel.test/b", json={"x": 1})

    assert first.json() == {"n": 1}
    assert second.status_code == 201
    assert [r.url.path for r in panel.requests] == ["/a", "/b"]
    assert panel.json_body() == {"x": 1}
    assert panel.pending == 0


async def test_unexpected_request_fails_loudly():
    panel = MockPanel()

    async with httpx.AsyncClient(transport=panel.transport) as client:
        with pytest.raises(AssertionError, match="no response queued"):
            await client.get("https://panel.test/a")


async def test_queued_exception_is_raised():
    panel = MockPanel()
    panel.add_exception(httpx.ConnectError("refused"))

    async with httpx.AsyncClient(transport=panel.transport) as client:
        with pytest.raises(httpx.ConnectError):
            await client.get("https://panel.test/a")
