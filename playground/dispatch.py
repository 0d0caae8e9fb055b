"""
Request dispatch for the playground.

Sends a request descriptor either to the upstream calldata API (live mode)
or to the local simulator (demo mode), and shapes the outcome for display.

Invariants:
    - submit() never raises; failures come back as error-shaped dicts
    - One outstanding call per submit, no retries
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from .errors import DispatchError, UnknownEndpointError
from .forms import RequestDescriptor, build_request
from .simulate import UNKNOWN_ENDPOINT, simulate_response

logger = logging.getLogger(__name__)


def format_response(data: Any) -> str:
    """Display text for a response payload."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def error_response(message: str) -> dict[str, Any]:
    return {"error": True, "message": message}


@dataclass
class DispatchResult:
    """Outcome of a playground submission."""

    request: RequestDescriptor | None
    response: Any

    @property
    def text(self) -> str:
        return format_response(self.response)

    def to_dict(self) -> dict[str, Any]:
        return {
            "request": self.request.to_dict() if self.request else None,
            "response": self.response,
            "text": self.text,
        }


class RequestDispatcher:
    """Dispatches playground requests.

    Args:
        client: HTTP client used in live mode
        api_url: Upstream API base URL
        demo_mode: Fabricate responses instead of calling the API
    """

    def __init__(self, client: httpx.AsyncClient, api_url: str, demo_mode: bool = True) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self.demo_mode = demo_mode

    async def send(self, name: str, request: RequestDescriptor) -> Any:
        """Send one request and return the decoded response.

        Raises:
            DispatchError: If the live call fails or returns non-JSON
        """
        if self.demo_mode:
            return simulate_response(name, request.body)

        url = self._api_url + request.url
        try:
            response = await self._client.request(
                request.method,
                url,
                headers={"Content-Type": "application/json"},
                json=request.body if request.method != "GET" else None,
            )
        except httpx.HTTPError as e:
            raise DispatchError(str(e) or type(e).__name__, url=url) from e

        try:
            return response.json()
        except ValueError as e:
            raise DispatchError(f"Invalid JSON from {url}: {e}", url=url) from e

    async def submit(self, name: str, values: Mapping[str, Any] | None = None) -> DispatchResult:
        """Build and send the request for a submitted form."""
        try:
            request = build_request(name, values)
        except UnknownEndpointError:
            logger.info(f"Unknown endpoint requested: {name!r}")
            return DispatchResult(request=None, response=dict(UNKNOWN_ENDPOINT))

        try:
            data = await self.send(name, request)
        except Exception as e:
            logger.warning(f"Dispatch to {request.url} failed: {e}")
            return DispatchResult(request=request, response=error_response(str(e)))

        return DispatchResult(request=request, response=data)
