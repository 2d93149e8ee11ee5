"""Working memory: a limited-capacity set of memories an agent is actively attending to."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from ..validation import coerce_model, compact, require_text
from .base import AutonomousClient
from .models import WorkingMemorySessionConfig


class WorkingMemoryClient(AutonomousClient):
    group = "working-memory"

    async def create_session(
        self, config: Union[WorkingMemorySessionConfig, Mapping[str, Any]]
    ) -> Dict[str, Any]:
        session = coerce_model(WorkingMemorySessionConfig, config)
        return await self._post("sessions", json=session.to_wire())

    async def get_session(self, session_id: str) -> Dict[str, Any]:
        """Fetch a session together with its current ``items``."""
        return await self._get("sessions", self._id(session_id, "Session ID"))

    async def add_memory(
        self,
        session_id: str,
        memory_id: str,
        *,
        priority: Optional[int] = None,
        tags: Optional[List[str]] = None,
        relevance_score: Optional[float] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        session = self._id(session_id, "Session ID")
        payload = compact(
            memory_id=require_text(memory_id, "Memory ID"),
            priority=priority,
            tags=tags,
            relevance_score=relevance_score,
            metadata=metadata,
        )
        return await self._post("sessions", session, "items", json=payload)

    async def promote(self, item_id: str) -> Dict[str, Any]:
        return await self._post("items", self._id(item_id, "Item ID"), "promote")

    async def auto_manage(self, session_id: str) -> Dict[str, Any]:
        """Let the server evict low-priority items and promote relevant ones."""
        return await self._post("sessions", self._id(session_id, "Session ID"), "auto-manage")

    async def delete_session(self, session_id: str) -> bool:
        await self._delete("sessions", self._id(session_id, "Session ID"))
        return True


__all__ = ["WorkingMemoryClient"]
