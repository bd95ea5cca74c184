"""Transcript recordings against the v1 recording API."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from wayfound.client import BaseClient
from wayfound.config import RECORDING_ACTIVE_PATH, RECORDING_COMPLETED_PATH
from wayfound.exceptions import RequestFailedError
from wayfound.types import MessageLike, messages_from_langchain_memory, serialize_messages
from wayfound.utils import utcnow_iso

logger = logging.getLogger(__name__)


class Recording(BaseClient):
    """An ongoing transcript recording.

    The first batch of messages creates the recording and stores the
    server-assigned ``recording_id``; later batches update it. Completing the
    recording clears the id, so the same object can start a new one.

    Example::

        async with Recording(api_key="...", agent_id="...") as recording:
            await recording.record_messages([{"role": "user", "content": "Hi"}])
            await recording.completed_recording(messages=[...])
    """

    def __init__(
        self,
        api_key: str | None = None,
        agent_id: str | None = None,
        *,
        recording_id: str | None = None,
        published: bool = True,
        **kwargs: Any,
    ) -> None:
        super().__init__(api_key, agent_id, **kwargs)
        self.recording_id = recording_id
        self.published = published

    @property
    def _params(self) -> dict[str, str]:
        return {"published": "true" if self.published else "false"}

    async def new_recording(self, initial_messages: Iterable[MessageLike] | None = None) -> str:
        """Create a recording from ``initial_messages`` and return its id."""
        prefix = "Error creating new recording"
        payload = {"agentId": self.agent_id, "messages": serialize_messages(initial_messages)}
        resp = await self._request(
            "POST", RECORDING_ACTIVE_PATH, payload, params=self._params, error_prefix=prefix
        )
        self.recording_id = self._identity(self._json(resp, prefix), resp, prefix)
        logger.info("Created recording %s", self.recording_id)
        return self.recording_id

    async def record_messages(self, messages: Iterable[MessageLike]) -> None:
        """Send a message batch, creating the recording on first use."""
        if not self.recording_id:
            await self.new_recording(messages)
            return

        payload = {"recordingId": self.recording_id, "messages": serialize_messages(messages)}
        await self._request(
            "PUT",
            RECORDING_ACTIVE_PATH,
            payload,
            params=self._params,
            error_prefix="Error updating recording request",
        )

    async def completed_recording(
        self,
        messages: Iterable[MessageLike] | None = None,
        first_message_at: str | None = None,
        last_message_at: str | None = None,
        visitor_id: str | None = None,
    ) -> None:
        """Mark the recording completed.

        Timestamps are ISO 8601 (UTC) and default to now. Only an HTTP 200
        counts as success; on success ``recording_id`` is reset to None. On
        failure it is left alone so the caller can retry.
        """
        prefix = "Error completing recording request"
        payload: dict[str, Any] = {
            "agentId": self.agent_id,
            "messages": serialize_messages(messages),
            "firstMessageAt": first_message_at or utcnow_iso(),
            "lastMessageAt": last_message_at or utcnow_iso(),
        }
        if visitor_id:
            payload["visitorId"] = visitor_id

        resp = await self._request(
            "POST", RECORDING_COMPLETED_PATH, payload, params=self._params, error_prefix=prefix
        )
        if resp.status_code != 200:
            raise RequestFailedError(f"{prefix}: {resp.status_code}", status_code=resp.status_code)
        logger.info("Completed recording %s", self.recording_id)
        self.recording_id = None

    async def record_messages_from_langchain_memory(self, memory: Any) -> None:
        """Record the chat history of a Langchain memory object."""
        await self.record_messages(messages_from_langchain_memory(memory))
