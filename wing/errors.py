"""Error taxonomy shared by the gateway, controller, and CLI.

Gateway failures are recoverable and surface inside the UI.
Only ``StartupError`` is fatal and ends the process with a non-zero status.
"""

from __future__ import annotations


class WingError(RuntimeError):
    """Base class for all wing errors."""


class GatewayError(WingError):
    """A version-control query or mutation failed."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        self.detail = detail.strip()
        super().__init__(f"{operation}: {self.detail}" if self.detail else operation)


class NotFoundError(GatewayError):
    """Selected path disappeared from disk between listing and fetch."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("file not found", path)


class ValidationError(WingError):
    """User input rejected before any gateway call."""


class StartupError(WingError):
    """Terminal or repository could not be prepared for the interactive session."""


__all__ = [
    "WingError",
    "GatewayError",
    "NotFoundError",
    "ValidationError",
    "StartupError",
]
