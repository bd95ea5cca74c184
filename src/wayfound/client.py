"""Shared HTTP plumbing for the Wayfound API clients."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from wayfound.config import SDK_LANGUAGE, SDK_VERSION, WayfoundConfig
from wayfound.exceptions import ConfigError, RequestFailedError
from wayfound.utils import json_dumps, json_loads

logger = logging.getLogger(__name__)


class BaseClient:
    """Credentials, headers and the request/response contract.

    Every call builds a JSON payload, sends it with the bearer token and SDK
    identification headers, and turns any transport error or non-2xx status
    into a RequestFailedError. Nothing is retried.

    Instances are not safe for concurrent use: lifecycle state is read and
    then written without any locking.
    """

    def __init__(
        self,
        api_key: str | None = None,
        agent_id: str | None = None,
        *,
        config: WayfoundConfig | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.config = (config or WayfoundConfig()).merged(
            api_key=api_key, agent_id=agent_id, base_url=base_url, timeout=timeout
        )
        if not self.config.api_key:
            raise ConfigError("No API key: pass api_key or set WAYFOUND_API_KEY")
        if not self.config.agent_id:
            raise ConfigError("No agent ID: pass agent_id or set WAYFOUND_AGENT_ID")
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def api_key(self) -> str:
        return self.config.api_key

    @property
    def agent_id(self) -> str:
        return self.config.agent_id

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
            "X-SDK-Language": SDK_LANGUAGE,
            "X-SDK-Version": SDK_VERSION,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                timeout=self.config.timeout,
            )
            self._owns_client = True
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any],
        *,
        params: dict[str, str] | None = None,
        error_prefix: str,
    ) -> httpx.Response:
        """Send one JSON request; raise RequestFailedError on any failure."""
        client = await self._get_client()
        # absolute URL so injected clients need no base_url of their own
        url = f"{self.config.base_url.rstrip('/')}{path}"
        logger.debug("%s %s", method, url)
        try:
            resp = await client.request(
                method,
                url,
                params=params,
                content=json_dumps(payload),
                headers=self.headers,
                timeout=self.config.timeout,
            )
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("%s %s returned %d", method, path, status)
            raise RequestFailedError(f"{error_prefix}: {e}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RequestFailedError(f"{error_prefix}: {e}") from e
        return resp

    @staticmethod
    def _json(resp: httpx.Response, error_prefix: str) -> Any:
        if not resp.content:
            return {}
        try:
            data = json_loads(resp.content)
        except ValueError as e:
            raise RequestFailedError(
                f"{error_prefix}: invalid JSON response", status_code=resp.status_code
            ) from e
        return data

    @staticmethod
    def _identity(data: Any, resp: httpx.Response, error_prefix: str) -> str:
        identity = data.get("id") if isinstance(data, dict) else None
        if not identity:
            raise RequestFailedError(
                f"{error_prefix}: response has no id", status_code=resp.status_code
            )
        return str(identity)

    async def close(self) -> None:
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
