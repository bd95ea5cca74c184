"""Wayfound client configuration."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from wayfound.exceptions import ConfigError

DEFAULT_BASE_URL = "https://app.wayfound.ai"

SDK_LANGUAGE = "Python"
SDK_VERSION = "1.0.0"

RECORDING_ACTIVE_PATH = "/api/v1/recordings/active"
RECORDING_COMPLETED_PATH = "/api/v1/recordings/completed"
SESSIONS_PATH = "/api/v2/sessions"
SESSION_COMPLETED_PATH = "/api/v2/sessions/completed"


def _env(name: str) -> str | None:
    return os.environ.get(name) or None


def _env_timeout() -> float:
    raw = os.environ.get("WAYFOUND_TIMEOUT", "30.0")
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigError(f"WAYFOUND_TIMEOUT must be a number of seconds, got {raw!r}") from e


class WayfoundConfig(BaseModel):
    api_key: str | None = Field(default_factory=lambda: _env("WAYFOUND_API_KEY"))
    agent_id: str | None = Field(default_factory=lambda: _env("WAYFOUND_AGENT_ID"))
    application_id: str | None = Field(default_factory=lambda: _env("WAYFOUND_APPLICATION_ID"))
    base_url: str = Field(default_factory=lambda: os.environ.get("WAYFOUND_BASE_URL", DEFAULT_BASE_URL))
    timeout: float = Field(default_factory=_env_timeout)

    def merged(self, **overrides: object) -> WayfoundConfig:
        """Return a copy with every non-None override applied."""
        update = {k: v for k, v in overrides.items() if v is not None}
        return self.model_copy(update=update)
