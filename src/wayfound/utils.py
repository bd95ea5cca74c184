"""Shared utilities."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import orjson


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def utcnow_iso() -> str:
    """Current UTC time as ISO 8601 with millisecond precision and a Z suffix."""
    return utcnow().isoformat(timespec="milliseconds").replace("+00:00", "Z")


def json_dumps(obj: Any) -> bytes:
    # orjson serializes datetime, UUID and dataclasses natively
    return orjson.dumps(obj)


def json_loads(data: str | bytes) -> Any:
    return orjson.loads(data)
