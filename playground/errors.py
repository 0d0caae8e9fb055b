"""
Error types for the calldata playground.

- PlaygroundError: Base exception
- UnknownEndpointError: Endpoint name not in the endpoint table
- DispatchError: Live request to the upstream API failed
- UpstreamError: Proxy could not reach the upstream API

Invariants:
    - All errors inherit from PlaygroundError
    - to_dict() output is JSON-serializable
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class PlaygroundError(Exception):
    """Base exception for all playground errors.

    Attributes:
        message: Error message
        code: Error code for programmatic handling
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or "PLAYGROUND_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dict."""
        return {
            "error": True,
            "message": self.message,
            "code": self.code,
            "details": self.details,
        }


class UnknownEndpointError(PlaygroundError):
    """Endpoint name is not one of the known endpoints."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown endpoint: {name!r}",
            code="UNKNOWN_ENDPOINT",
            details={"endpoint": name},
        )
        self.name = name


class DispatchError(PlaygroundError):
    """Live request to the upstream API failed.

    Raised when:
    - Upstream is unreachable
    - Response body is not valid JSON
    """

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(
            message,
            code="DISPATCH_ERROR",
            details={"url": url},
        )


class UpstreamError(PlaygroundError):
    """Proxy transport failure.

    Attributes:
        status_code: HTTP status returned to the client
    """

    def __init__(self, message: str, status_code: int = 502, url: Optional[str] = None) -> None:
        super().__init__(
            message,
            code="UPSTREAM_ERROR",
            details={"url": url},
        )
        self.status_code = status_code
