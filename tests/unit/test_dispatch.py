"""
Unit tests for RequestDispatcher.

Tests cover:
- Demo mode simulation
- Live mode calls against a mocked upstream
- Error shaping for failures and unknown endpoints
"""

import json

import httpx
import pytest

from playground.dispatch import RequestDispatcher, format_response
from playground.errors import DispatchError
from playground.forms import build_request

API_URL = "http://upstream.test"


def make_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("Connection refused", request=request)


class TestDemoMode:
    """Dispatch without network."""

    @pytest.mark.asyncio
    async def test_lock_creda_example(self):
        async with make_client(refuse) as client:
            dispatcher = RequestDispatcher(client, API_URL, demo_mode=True)

            result = await dispatcher.submit("lock-creda", {"amount": "1000000000000000000000"})

        assert result.request.body == {"amount": "1000000000000000000000"}
        assert result.response["calldata"].startswith("0xbec697db")

    @pytest.mark.asyncio
    async def test_no_network_calls(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        async with make_client(handler) as client:
            dispatcher = RequestDispatcher(client, API_URL)
            await dispatcher.submit("health")

        assert calls == []

    @pytest.mark.asyncio
    async def test_unknown_endpoint_is_error_shaped(self):
        async with make_client(refuse) as client:
            dispatcher = RequestDispatcher(client, API_URL)

            result = await dispatcher.submit("mint-nft", {"amount": "1"})

        assert result.request is None
        assert result.response == {"error": "Unknown endpoint"}


class TestLiveMode:
    """Dispatch to a mocked upstream API."""

    @pytest.mark.asyncio
    async def test_post_body_forwarded(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"calldata": "0xbec697db00"})

        async with make_client(handler) as client:
            dispatcher = RequestDispatcher(client, API_URL + "/", demo_mode=False)

            result = await dispatcher.submit("lock-creda", {"amount": "42"})

        assert seen == {
            "method": "POST",
            "url": "http://upstream.test/api/v1/calldata/lock-creda",
            "content_type": "application/json",
            "body": {"amount": "42"},
        }
        assert result.response == {"calldata": "0xbec697db00"}

    @pytest.mark.asyncio
    async def test_get_has_no_body(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["content"] = request.content
            return httpx.Response(200, json={"status": "ok", "version": "0.1.0"})

        async with make_client(handler) as client:
            dispatcher = RequestDispatcher(client, API_URL, demo_mode=False)

            result = await dispatcher.submit("health")

        assert seen == {"method": "GET", "content": b""}
        assert result.response == {"status": "ok", "version": "0.1.0"}

    @pytest.mark.asyncio
    async def test_upstream_error_body_shown_verbatim(self):
        error = {
            "message": "Invalid Ethereum address: 0x12",
            "status_code": 400,
            "error_type": "INVALID_ADDRESS",
        }

        async with make_client(lambda request: httpx.Response(400, json=error)) as client:
            dispatcher = RequestDispatcher(client, API_URL, demo_mode=False)

            result = await dispatcher.submit("creda-approve", {"spender": "0x12", "amount": "1"})

        assert result.response == error

    @pytest.mark.asyncio
    async def test_connection_failure_rendered(self):
        async with make_client(refuse) as client:
            dispatcher = RequestDispatcher(client, API_URL, demo_mode=False)

            result = await dispatcher.submit("lock-creda", {"amount": "1"})

        assert result.response == {"error": True, "message": "Connection refused"}
        assert result.request.url == "/api/v1/calldata/lock-creda"

    @pytest.mark.asyncio
    async def test_invalid_json_rendered(self):
        async with make_client(lambda request: httpx.Response(502, text="Bad Gateway")) as client:
            dispatcher = RequestDispatcher(client, API_URL, demo_mode=False)

            result = await dispatcher.submit("lock-creda", {"amount": "1"})

        assert result.response["error"] is True
        assert "Invalid JSON" in result.response["message"]

    @pytest.mark.asyncio
    async def test_send_raises_dispatch_error(self):
        async with make_client(refuse) as client:
            dispatcher = RequestDispatcher(client, API_URL, demo_mode=False)

            with pytest.raises(DispatchError) as exc_info:
                await dispatcher.send("lock-creda", build_request("lock-creda", {"amount": "1"}))

        assert exc_info.value.details["url"] == "http://upstream.test/api/v1/calldata/lock-creda"


class TestFormatResponse:
    """Tests for display formatting."""

    def test_two_space_indent(self):
        assert format_response({"calldata": "0x"}) == '{\n  "calldata": "0x"\n}'

    def test_result_text(self):
        text = format_response({"error": True, "message": "boom"})

        assert json.loads(text) == {"error": True, "message": "boom"}
