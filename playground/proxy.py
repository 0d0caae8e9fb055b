"""
Reverse proxy to the upstream calldata API.

Requests are passed through as-is: method, path, query string, headers
and body. The upstream response is streamed back with its status, headers
and raw (still encoded) body.

Invariants:
    - Hop-by-hop headers are never forwarded in either direction
    - Host is rewritten to the upstream origin
    - No retries, no buffering of the response body
"""

from __future__ import annotations

import logging

import httpx
from fastapi import Request
from starlette.background import BackgroundTask
from starlette.responses import StreamingResponse

from .errors import UpstreamError

logger = logging.getLogger(__name__)

HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
    }
)


def filter_request_headers(headers: list[tuple[str, str]]) -> list[tuple[str, str]]:
    """Headers to forward upstream; Host and Content-Length are set by httpx."""
    skip = HOP_BY_HOP_HEADERS | {"host", "content-length"}
    return [(k, v) for k, v in headers if k.lower() not in skip]


def filter_response_headers(headers: list[tuple[str, str]]) -> list[tuple[str, str]]:
    return [(k, v) for k, v in headers if k.lower() not in HOP_BY_HOP_HEADERS]


def upstream_url(base: str, request: Request) -> str:
    """Target URL, keeping the path exactly as the client sent it (escapes included)."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
    url = base.rstrip("/") + path
    if request.url.query:
        url += "?" + request.url.query
    return url


class UpstreamProxy:
    """Forwards requests to a single upstream origin.

    Args:
        client: Shared HTTP client
        base_url: Upstream origin, e.g. http://localhost:8000
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str) -> None:
        self._client = client
        self.base_url = base_url.rstrip("/")

    async def forward(self, request: Request) -> StreamingResponse:
        """Forward a request and stream back the upstream response.

        Raises:
            UpstreamError: 504 if the upstream is unreachable or times out,
                500 for any other transport failure
        """
        url = upstream_url(self.base_url, request)
        headers = filter_request_headers(request.headers.items())
        body = await request.body()

        upstream_request = self._client.build_request(
            request.method,
            url,
            headers=headers,
            content=body,
        )
        logger.debug(f"Proxy {request.method} {request.url.path} -> {url}")

        try:
            response = await self._client.send(upstream_request, stream=True)
        except (httpx.ConnectError, httpx.TimeoutException) as e:
            logger.warning(f"Upstream unavailable for {request.method} {url}: {e}")
            raise UpstreamError(f"Upstream unavailable: {e}", status_code=504, url=url) from e
        except httpx.HTTPError as e:
            logger.error(f"Proxy error for {request.method} {url}: {e}")
            raise UpstreamError(f"Proxy error: {e}", status_code=500, url=url) from e

        streaming = StreamingResponse(
            response.aiter_raw(),
            status_code=response.status_code,
            background=BackgroundTask(response.aclose),
        )
        # Set raw so repeated headers (Set-Cookie) survive
        streaming.raw_headers = [
            (k.encode("latin-1"), v.encode("latin-1"))
            for k, v in filter_response_headers(response.headers.multi_items())
        ]
        return streaming
