from __future__ import annotations

from typing import Sequence


class DokployMCPError(Exception):
    """Base error for the Dokploy MCP server."""


class ConfigurationError(DokployMCPError):
    """Raised when server configuration is missing or malformed."""


class ValidationError(DokployMCPError):
    """Raised when tool arguments do not satisfy the declared input contract."""

    def __init__(self, message: str, *, fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.fields = tuple(fields)


class NotFoundError(DokployMCPError):
    """Raised when a parent record or its default child cannot be located."""


class UpstreamError(DokployMCPError):
    """Raised when the Dokploy API answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Dokploy API error ({status_code}): {body}")
        self.status_code = status_code
        self.body = body


class TransportError(DokployMCPError):
    """Raised when the Dokploy API could not be reached at all."""


class DuplicateOperationError(DokployMCPError):
    """Raised at startup when two operations share a name."""


class UnknownOperationError(DokployMCPError):
    """Raised when a call names an operation that was never registered."""
