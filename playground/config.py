"""
Configuration for the calldata playground.

Uses pydantic-settings for environment variable loading. Variable names
carry no prefix so `PORT` and `API_URL` work as-is.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_STATIC_DIR = Path(__file__).parent / "static"


class Settings(BaseSettings):
    """Playground configuration loaded from environment."""

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8080, description="Listen port")

    # Upstream calldata API
    api_url: str = Field(default="http://localhost:8000", description="Upstream API base URL")
    upstream_timeout: float | None = Field(
        default=None, description="Upstream timeout in seconds (unset = no timeout)"
    )

    # Dispatch
    demo_mode: bool = Field(default=True, description="Fabricate responses instead of calling the API")

    # Static assets
    static_dir: Path | None = Field(default=None, description="Directory holding index.html")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="text", description="'text' or 'json'")

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080"],
    )

    model_config = {"env_file": ".env", "extra": "ignore"}

    @property
    def upstream_base(self) -> str:
        """Upstream base URL without trailing slash."""
        return self.api_url.rstrip("/")

    @property
    def mode(self) -> str:
        return "demo" if self.demo_mode else "live"

    @property
    def resolved_static_dir(self) -> Path:
        return self.static_dir or DEFAULT_STATIC_DIR
