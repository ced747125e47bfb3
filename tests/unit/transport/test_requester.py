"""Tests for request construction and response processing."""

import asyncio
import json

import httpx
import pytest

from pterodactyl_client.errors import (
    DecodeError,
    NotFoundError,
    RequestBuildError,
    ServerError,
    TransportError,
    UnparseableErrorBodyError,
)
from pterodactyl_client.models.application import User, UserUpdateOptions
from pterodactyl_client.models.envelope import Envelope, PaginationOptions
from pterodactyl_client.testing import MockPanel, envelope, error_body
from pterodactyl_client.transport import HTTPRequester

BASE_URL = httpx.URL("https://panel.example.com")
API_KEY = "ptla_secret_key"


@pytest.fixture
def panel():
    return MockPanel()


@pytest.fixture
async def requester(panel):
    async with httpx.AsyncClient(transport=panel.transport) as http_client:
        yield HTTPRequester(base_url=BASE_URL, api_key=API_KEY, http_client=http_client)


class TestBuildRequest:
    """Test authenticated request construction."""

    async def test_headers(self, requester):
        request = requester.build_request("GET", "/api/application/users")

        assert request.headers["Authorization"] == f"Bearer {API_KEY}"
        assert request.headers["Accept"] == "application/json"
        assert "Content-Type" not in request.headers

    async def test_path_resolved_against_base_url(self, requester):
        request = requester.build_request("GET", "/api/application/users/1")

        assert str(request.url) == "https://panel.example.com/api/application/users/1"

    async def test_path_with_existing_query(self, requester):
        request = requester.build_request("GET", "/api/client/servers/abc/files/list?directory=%2Fplugins")

        assert request.url.path == "/api/client/servers/abc/files/list"
        assert request.url.params["directory"] == "/plugins"

    async def test_pagination_params(self, requester):
        options = PaginationOptions(page=2, per_page=25, include=["allocations", "location"])

        request = requester.build_request("GET", "/api/application/nodes", options=options)

        assert request.url.params["page"] == "2"
        assert request.url.params["per_page"] == "25"
        assert request.url.params["include"] == "allocations,location"

    async def test_zero_pagination_values_are_omitted(self, requester):
        request = requester.build_request("GET", "/api/application/users", options=PaginationOptions(page=0, per_page=0))

        assert "page" not in request.url.params
        assert "per_page" not in request.url.params
        assert "include" not in request.url.params
        assert request.url.query == b""

    async def test_negative_pagination_values_are_omitted(self, requester):
        request = requester.build_request("GET", "/api/application/users", options=PaginationOptions(page=-1, per_page=5))

        assert "page" not in request.url.params
        assert request.url.params["per_page"] == "5"

    async def test_pagination_params_merge_with_existing_query(self, requester):
        request = requester.build_request("GET", "/api/client?type=admin", options=PaginationOptions(page=3))

        assert request.url.params["type"] == "admin"
        assert request.url.params["page"] == "3"

    async def test_options_body_skips_unset_fields(self, requester):
        request = requester.build_request(
            "PATCH", "/api/application/users/1", body=UserUpdateOptions(email="new@example.com", username="new")
        )

        assert request.headers["Content-Type"] == "application/json"
        body = json.loads(request.content)
        assert body["email"] == "new@example.com"
        assert "password" not in body

    async def test_mapping_body(self, requester):
        request = requester.build_request("POST", "/api/client/servers/abc/command", body={"command": "say hi"})

        assert json.loads(request.content) == {"command": "say hi"}
        assert request.headers["Content-Type"] == "application/json"

    async def test_raw_content(self, requester):
        request = requester.build_request("POST", "/write", content="motd=hello", content_type="text/plain")

        assert request.content == b"motd=hello"
        assert request.headers["Content-Type"] == "text/plain"

    async def test_unparseable_path(self, requester):
        with pytest.raises(RequestBuildError):
            requester.build_request("GET", "/api/application/users\x00")


class TestSend:
    """Test the single exchange and status classification."""

    async def test_success_returns_response(self, requester, panel):
        panel.add_response(json={"ok": True})

        response = await requester.send(requester.build_request("GET", "/api/client"))

        assert response.status_code == 200
        assert len(panel.requests) == 1

    async def test_api_error(self, requester, panel):
        panel.add_response(404, json=error_body(404, "NotFoundHttpException", "Not found."))

        with pytest.raises(NotFoundError) as exc_info:
            await requester.send(requester.build_request("GET", "/api/application/users/99"))

        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "NotFoundHttpException"

    async def test_unparseable_error_body(self, requester, panel):
        panel.add_response(502, text="<html>Bad Gateway</html>")

        with pytest.raises(UnparseableErrorBodyError) as exc_info:
            await requester.send(requester.build_request("GET", "/api/client"))

        assert exc_info.value.status_code == 502

    async def test_connection_error(self, requester, panel):
        cause = httpx.ConnectError("connection refused")
        panel.add_exception(cause)

        with pytest.raises(TransportError) as exc_info:
            await requester.send(requester.build_request("GET", "/api/client"))

        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    async def test_timeout(self, requester, panel):
        panel.add_exception(httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError):
            await requester.send(requester.build_request("GET", "/api/client"))

    async def test_no_retry_on_server_error(self, requester, panel):
        panel.add_response(503, json=error_body(503, "ServiceUnavailableHttpException", "Down."))
        panel.add_response(200, json={"ok": True})

        with pytest.raises(ServerError):
            await requester.send(requester.build_request("GET", "/api/client"))

        assert len(panel.requests) == 1
        assert panel.pending == 1

    async def test_cancellation_propagates(self):
        started = asyncio.Event()

        async def slow_handler(request):
            started.set()
            await asyncio.sleep(10)
            return httpx.Response(200)

        async with httpx.AsyncClient(transport=httpx.MockTransport(slow_handler)) as http_client:
            requester = HTTPRequester(base_url=BASE_URL, api_key=API_KEY, http_client=http_client)
            task = asyncio.create_task(requester.send(requester.build_request("GET", "/api/client")))
            await started.wait()
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task

    async def test_api_key_not_logged(self, requester, panel, caplog):
        import logging

        caplog.set_level(logging.DEBUG)
        panel.add_response(json={})

        await requester.send(requester.build_request("GET", "/api/client"))

        assert API_KEY not in caplog.text


class TestExecute:
    """Test success-body decoding."""

    async def test_decodes_into_model(self, requester, panel):
        panel.add_response(json=envelope("user", {"id": 1, "username": "admin", "email": "admin@example.com"}))

        result = await requester.execute(requester.build_request("GET", "/api/application/users/1"), Envelope[User])

        assert result.object == "user"
        assert result.attributes.username == "admin"

    @pytest.mark.parametrize(
        ("status_code", "response_kwargs"),
        [
            (204, {}),
            (200, {"text": "not json at all"}),
            (201, {"json": {"unexpected": True}}),
        ],
        ids=["no-content", "garbage", "unexpected-json"],
    )
    async def test_no_model_never_decodes(self, requester, panel, status_code, response_kwargs):
        panel.add_response(status_code, **response_kwargs)

        result = await requester.execute(requester.build_request("DELETE", "/api/application/users/1"))

        assert result is None

    async def test_shape_mismatch_is_decode_error(self, requester, panel):
        panel.add_response(json={"object": "user"})

        with pytest.raises(DecodeError) as exc_info:
            await requester.execute(requester.build_request("GET", "/api/application/users/1"), Envelope[User])

        assert not isinstance(exc_info.value, UnparseableErrorBodyError)

    async def test_invalid_json_is_decode_error(self, requester, panel):
        panel.add_response(text="{truncated")

        with pytest.raises(DecodeError):
            await requester.execute(requester.build_request("GET", "/api/application/users/1"), Envelope[User])

    async def test_error_status_wins_over_model(self, requester, panel):
        panel.add_response(500, json=error_body(500, "HttpException", "Server error."))

        with pytest.raises(ServerError):
            await requester.execute(requester.build_request("GET", "/api/application/users/1"), Envelope[User])
