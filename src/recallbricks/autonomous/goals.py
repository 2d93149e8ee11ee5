"""Hierarchical goal tracking with milestones and progress."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from ..validation import coerce_model, compact, require_text
from .base import AutonomousClient, unwrap
from .models import GoalConfig


class GoalsClient(AutonomousClient):
    group = "goals"

    async def create(self, goal: Union[GoalConfig, Mapping[str, Any]]) -> Dict[str, Any]:
        config = coerce_model(GoalConfig, goal)
        return await self._post(json=config.to_wire())

    async def get_active(
        self,
        namespace: str,
        *,
        type: Optional[str] = None,
        min_priority: Optional[int] = None,
        agent_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params = {
            "namespace": require_text(namespace, "Namespace"),
            "status": "active",
            "type": type,
            "min_priority": min_priority,
            "agent_id": agent_id,
        }
        return unwrap(await self._get(params=params), "goals")

    async def get(self, goal_id: str) -> Dict[str, Any]:
        return await self._get(self._id(goal_id, "Goal ID"))

    async def advance(
        self,
        goal_id: str,
        action: str,
        *,
        milestone_id: Optional[str] = None,
        progress_delta: Optional[float] = None,
        evidence: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Record an action taken toward a goal, optionally completing a milestone."""
        goal = self._id(goal_id, "Goal ID")
        payload = compact(
            action=require_text(action, "Action"),
            milestone_id=milestone_id,
            progress_delta=progress_delta,
            evidence=evidence,
        )
        return await self._post(goal, "advance", json=payload)

    async def complete(
        self,
        goal_id: str,
        *,
        outcome: Optional[Literal["success", "partial", "abandoned"]] = None,
        summary: Optional[str] = None,
        lessons_learned: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        goal = self._id(goal_id, "Goal ID")
        payload = compact(outcome=outcome, summary=summary, lessons_learned=lessons_learned)
        return await self._post(goal, "complete", json=payload)


__all__ = ["GoalsClient"]
