"""
Calldata Playground - command line entry point.

Serves the playground UI and proxies / and /api/* to the calldata API.

Usage:
    calldata-playground --port 8080 --api-url http://localhost:8000
    python -m playground.main --live

Configuration comes from environment variables (PORT, API_URL, ...);
command line flags override them. See config.py for all settings.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import json_log_formatter
import uvicorn

from .app import create_app
from .config import Settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Configure logging based on configuration.

    Args:
        settings: Playground settings
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    if settings.log_format == "json":
        formatter: logging.Formatter = json_log_formatter.JSONFormatter()
    else:
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve the calldata API playground and proxy requests to the API"
    )
    parser.add_argument("--host", help="Bind host (env HOST)")
    parser.add_argument("--port", type=int, help="Listen port (env PORT, default 8080)")
    parser.add_argument("--api-url", help="Upstream API base URL (env API_URL)")
    parser.add_argument(
        "--live", action="store_true", help="Call the upstream API instead of simulating"
    )
    parser.add_argument("--static-dir", type=Path, help="Directory holding index.html")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Environment settings with command line overrides applied."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "api_url": args.api_url,
        "static_dir": args.static_dir,
    }
    if args.live:
        overrides["demo_mode"] = False
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    setup_logging(settings)

    logger.info(f"Playground running at http://localhost:{settings.port}")
    logger.info(f"API requests will be proxied to {settings.upstream_base} ({settings.mode} mode)")

    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
