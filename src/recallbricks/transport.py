"""Authenticated request execution shared by every endpoint client."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, Optional

import httpx

from .config import AuthMode, ClientConfig
from .errors import INVALID_RESPONSE, MissingUserIdError, RecallBricksError
from .retry import RetryPolicy, Sleeper, execute_with_retry

logger = logging.getLogger("recallbricks.transport")


class RequestExecutor:
    """Owns the HTTP client for one configuration and runs requests through the retry loop."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._config = config
        self._policy = RetryPolicy.from_config(config)
        self._sleep = sleep
        self._client = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=self._headers(),
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def _headers(self) -> httpx.Headers:
        headers = httpx.Headers(
            {
                "User-Agent": self._config.user_agent,
                "Content-Type": "application/json",
            }
        )
        headers.update(self._config.headers)
        # header names are case-insensitive; only the configured credential goes out
        for mode in AuthMode:
            if mode.header in headers:
                del headers[mode.header]
        headers[self._config.auth_mode.header] = self._config.credential
        return headers

    def require_user_id(self, user_id: Optional[str]) -> None:
        if self._config.auth_mode is AuthMode.SERVICE_TOKEN and not (user_id and user_id.strip()):
            raise MissingUserIdError()

    def autonomous_url(self, group: str) -> str:
        base = self._config.autonomous_base_url
        if not base:
            url = httpx.URL(self._config.base_url)
            base = f"{url.scheme}://{url.netloc.decode('ascii')}/api/autonomous"
        return f"{base.rstrip('/')}/{group.strip('/')}"

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send one logical request, retrying per policy, and return the decoded body."""
        query = {key: value for key, value in (params or {}).items() if value is not None}

        async def attempt() -> Any:
            response = await self._client.request(method, url, json=json, params=query or None)
            logger.debug("%s %s -> %s", method, response.request.url.path, response.status_code)
            response.raise_for_status()
            return _decode(response)

        return await execute_with_retry(attempt, self._policy, sleep=self._sleep)

    async def close(self) -> None:
        await self._client.aclose()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise RecallBricksError(
            "Response body is not valid JSON",
            status_code=response.status_code,
            code=INVALID_RESPONSE,
        ) from exc


__all__ = ["RequestExecutor"]
