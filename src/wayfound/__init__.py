"""Wayfound SDK: send agent recordings and sessions to Wayfound."""

import logging

from wayfound.config import SDK_VERSION, WayfoundConfig
from wayfound.exceptions import ConfigError, RequestFailedError, SessionStateError, WayfoundError
from wayfound.recording import Recording
from wayfound.session import Session
from wayfound.types import RecordingMessage, SessionMessage

__version__ = SDK_VERSION

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ConfigError",
    "Recording",
    "RecordingMessage",
    "RequestFailedError",
    "Session",
    "SessionMessage",
    "SessionStateError",
    "WayfoundConfig",
    "WayfoundError",
]
