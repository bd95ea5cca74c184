"""Message types sent to the Wayfound API."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Literal, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RecordingMessage(BaseModel):
    role: Literal["assistant", "user"]
    content: Union[str, list[Any]]


class SessionMessage(BaseModel):
    timestamp: Union[str, datetime]
    event_type: str
    attributes: dict[str, Any] = Field(default_factory=dict)


MessageLike = Union[BaseModel, Mapping[str, Any]]

# Langchain message type -> recording role
LANGCHAIN_ROLES = {"ai": "assistant", "human": "user"}


def serialize_messages(messages: Iterable[MessageLike] | None) -> list[Any]:
    """Convert caller messages to JSON-ready values, preserving order."""
    if messages is None:
        return []
    out: list[Any] = []
    for m in messages:
        if isinstance(m, BaseModel):
            out.append(m.model_dump(mode="json"))
        else:
            out.append(m)
    return out


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def messages_from_langchain_memory(memory: Any) -> list[RecordingMessage]:
    """Map a Langchain memory's chat history onto recording messages.

    Works with real Langchain memory objects (``memory.chat_memory.messages``
    holding messages with ``type`` and ``content``) and with plain dicts of
    the same shape. Messages that are neither ``ai`` nor ``human`` are dropped.
    """
    chat_memory = _field(memory, "chat_memory")
    raw = _field(chat_memory, "messages") if chat_memory is not None else None
    result = []
    for message in raw or []:
        role = LANGCHAIN_ROLES.get(_field(message, "type"))
        if role is None:
            logger.debug("Skipping langchain message of type %r", _field(message, "type"))
            continue
        result.append(RecordingMessage(role=role, content=_field(message, "content")))
    return result
