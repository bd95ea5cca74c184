"""Interaction sessions against the v2 session API."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable
from typing import Any

from wayfound.client import BaseClient
from wayfound.config import SESSION_COMPLETED_PATH, SESSIONS_PATH
from wayfound.exceptions import SessionStateError
from wayfound.types import MessageLike, serialize_messages

logger = logging.getLogger(__name__)

ALREADY_CREATED = "Session already completed. Use append_to_session to add more messages."
NOT_CREATED = "No session_id available. Create a session first before appending."


class Session(BaseClient):
    """An interaction session made of timestamped events.

    ``create`` may succeed once per instance and stores the server-assigned
    ``session_id``; after that, events are added with ``append_to_session``
    as many times as needed. Pass ``session_id`` to resume an existing one.

    Optional context (application, visitor and account fields) is sent with
    ``create`` only when set.
    """

    def __init__(
        self,
        api_key: str | None = None,
        agent_id: str | None = None,
        *,
        application_id: str | None = None,
        visitor_id: str | None = None,
        visitor_display_name: str | None = None,
        account_id: str | None = None,
        account_display_name: str | None = None,
        session_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(api_key, agent_id, **kwargs)
        self.application_id = application_id or self.config.application_id
        self.visitor_id = visitor_id
        self.visitor_display_name = visitor_display_name
        self.account_id = account_id
        self.account_display_name = account_display_name
        self.session_id = session_id

    def _context(self) -> dict[str, str]:
        fields = {
            "applicationId": self.application_id,
            "visitorId": self.visitor_id,
            "visitorDisplayName": self.visitor_display_name,
            "accountId": self.account_id,
            "accountDisplayName": self.account_display_name,
        }
        return {k: v for k, v in fields.items() if v is not None}

    async def _create(
        self, path: str, messages: Iterable[MessageLike] | None, async_mode: bool
    ) -> Any:
        if self.session_id is not None:
            raise SessionStateError(ALREADY_CREATED)

        prefix = "Error completing session request"
        payload: dict[str, Any] = {
            "agentId": self.agent_id,
            "messages": serialize_messages(messages),
            "async": async_mode,
        }
        payload.update(self._context())

        resp = await self._request("POST", path, payload, error_prefix=prefix)
        data = self._json(resp, prefix)
        self.session_id = self._identity(data, resp, prefix)
        logger.info("Created session %s", self.session_id)
        return data

    async def create(
        self, messages: Iterable[MessageLike] | None = None, async_mode: bool = True
    ) -> Any:
        """Create the session and return the response body.

        With ``async_mode=False`` the server processes the session before
        responding. Raises SessionStateError if this instance already has a
        session.
        """
        return await self._create(SESSIONS_PATH, messages, async_mode)

    async def complete_session(
        self, messages: Iterable[MessageLike] | None = None, async_mode: bool = True
    ) -> Any:
        """Deprecated: use :meth:`create`."""
        warnings.warn(
            "Session.complete_session() is deprecated; use Session.create()",
            DeprecationWarning,
            stacklevel=2,
        )
        logger.warning("complete_session() is deprecated, use create()")
        return await self._create(SESSION_COMPLETED_PATH, messages, async_mode)

    async def append_to_session(
        self, messages: Iterable[MessageLike] | None = None, async_mode: bool = True
    ) -> Any:
        """Append events to the existing session and return the response body."""
        if self.session_id is None:
            raise SessionStateError(NOT_CREATED)

        prefix = "Error appending to session"
        payload = {"messages": serialize_messages(messages), "async": async_mode}
        resp = await self._request(
            "PUT", f"{SESSIONS_PATH}/{self.session_id}", payload, error_prefix=prefix
        )
        return self._json(resp, prefix)
