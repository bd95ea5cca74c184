"""Wayfound SDK exceptions."""

from __future__ import annotations


class WayfoundError(Exception):
    """Base exception."""


class ConfigError(WayfoundError):
    """Missing or invalid client configuration."""


class RequestFailedError(WayfoundError):
    """A call to the Wayfound API failed, at the transport or HTTP level."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SessionStateError(WayfoundError):
    """Lifecycle method called in the wrong state (nothing was sent)."""
