"""Shared plumbing for the autonomous feature clients."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..transport import RequestExecutor
from ..validation import path_segment


class AutonomousClient:
    """Base class binding a feature group's URL prefix to a shared executor."""

    group: str = ""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor
        self._base_url = executor.autonomous_url(self.group)

    def _url(self, *segments: str) -> str:
        if not segments:
            return self._base_url + "/"
        return "/".join((self._base_url, *segments))

    def _id(self, value: Optional[str], label: str) -> str:
        return path_segment(value, label)

    async def _get(self, *segments: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self._executor.request("GET", self._url(*segments), params=params)

    async def _post(self, *segments: str, json: Any = None) -> Any:
        return await self._executor.request("POST", self._url(*segments), json=json)

    async def _delete(self, *segments: str) -> Any:
        return await self._executor.request("DELETE", self._url(*segments))


def unwrap(body: Any, key: str) -> Any:
    """Return ``body[key]`` from a list envelope, passing other shapes through."""
    if isinstance(body, dict) and key in body:
        return body[key]
    return body


__all__ = ["AutonomousClient", "unwrap"]
