"""
FastAPI application factory for the calldata playground.

This module creates the app with:
- Shared upstream HTTP client lifecycle
- Playground routes under /playground
- Pass-through proxy for / and /api/* to the calldata API
- Static assets with index.html fallback for every other path

Usage:
    uvicorn playground.app:app --port 8080
"""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import Settings
from .dispatch import RequestDispatcher
from .errors import UnknownEndpointError, UpstreamError
from .proxy import UpstreamProxy
from .routes import router
from .simulate import API_VERSION, UNKNOWN_ENDPOINT

logger = logging.getLogger(__name__)

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class FallbackStaticFiles(StaticFiles):
    """Static files that answer unknown paths with index.html."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as exc:
            if exc.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


def make_lifespan(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Manage upstream client lifecycle."""
        client = httpx.AsyncClient(
            timeout=settings.upstream_timeout,
            follow_redirects=False,
            transport=transport,
        )

        app.state.proxy = UpstreamProxy(client, settings.upstream_base)
        app.state.dispatcher = RequestDispatcher(
            client, settings.upstream_base, demo_mode=settings.demo_mode
        )

        yield

        await client.aclose()

    return lifespan


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Configuration (loaded from env if not provided)
        transport: Optional httpx transport for the upstream client
    """
    settings = settings or Settings()

    app = FastAPI(
        title="Calldata Playground",
        description=(
            "Interactive playground for the game token calldata API. "
            "Requests to / and /api are proxied to the upstream API."
        ),
        version=API_VERSION,
        lifespan=make_lifespan(settings, transport),
    )
    app.state.settings = settings

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(UnknownEndpointError)
    async def unknown_endpoint_handler(request: Request, exc: UnknownEndpointError):
        return JSONResponse(status_code=404, content=dict(UNKNOWN_ENDPOINT))

    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError):
        return JSONResponse(
            status_code=exc.status_code,
            content=exc.to_dict(),
        )

    # Playground routes
    app.include_router(router, prefix="/playground")

    # Upstream proxy
    async def forward(request: Request):
        return await request.app.state.proxy.forward(request)

    app.add_api_route("/", forward, methods=["GET"], include_in_schema=False)
    app.add_api_route("/api", forward, methods=PROXY_METHODS, include_in_schema=False)
    app.add_api_route(
        "/api/{path:path}", forward, methods=PROXY_METHODS, include_in_schema=False
    )

    # Static assets, index.html for anything unmatched
    static_dir = settings.resolved_static_dir
    if static_dir.exists():
        app.mount("/", FallbackStaticFiles(directory=str(static_dir), html=True), name="frontend")
    else:
        logger.warning(f"Static directory {static_dir} not found; unmatched routes will return 404")

    return app


# Default app instance
app = create_app()
