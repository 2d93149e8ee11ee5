"""Memory health: staleness detection, verification and maintenance reports."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..validation import compact, optional_days, require_int_range, require_text
from .base import AutonomousClient, unwrap


class HealthClient(AutonomousClient):
    group = "health"

    async def get_stale(
        self,
        namespace: str,
        threshold_days: int,
        *,
        min_importance: Optional[float] = None,
        memory_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        params = {
            "namespace": require_text(namespace, "Namespace"),
            "threshold_days": require_int_range(threshold_days, "Threshold days", minimum=1),
            "min_importance": min_importance,
            "memory_type": memory_type,
            "limit": limit,
        }
        return unwrap(await self._get("stale", params=params), "memories")

    async def refresh(
        self,
        memory_id: str,
        verified_by: str,
        *,
        content: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """Mark a memory as verified, optionally updating its content."""
        memory = self._id(memory_id, "Memory ID")
        payload = compact(
            verified_by=require_text(verified_by, "verified_by"),
            content=content,
            metadata=metadata,
            tags=tags,
        )
        return await self._post("refresh", memory, json=payload)

    async def get_report(
        self,
        namespace: str,
        *,
        include_stale_memories: Optional[bool] = None,
        stale_threshold: Optional[int] = None,
        compare_with_days: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {
            "include_stale": include_stale_memories,
            "stale_threshold": optional_days(stale_threshold, "Stale threshold"),
            "compare_days": optional_days(compare_with_days, "Comparison window"),
        }
        return await self._get("report", self._id(namespace, "Namespace"), params=params)


__all__ = ["HealthClient"]
