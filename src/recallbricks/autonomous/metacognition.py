"""Metacognition: self-assessment of output quality and calibration over time."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from ..validation import coerce_model, optional_days
from .base import AutonomousClient, unwrap
from .models import QualityAssessment


class MetacognitionClient(AutonomousClient):
    group = "metacognition"

    async def assess(self, assessment: Union[QualityAssessment, Mapping[str, Any]]) -> Dict[str, Any]:
        quality = coerce_model(QualityAssessment, assessment)
        return await self._post("assess", json=quality.to_wire())

    async def get_performance(
        self,
        agent_id: str,
        *,
        days: Optional[int] = None,
        content_type: Optional[str] = None,
    ) -> Dict[str, Any]:
        agent = self._id(agent_id, "Agent ID")
        params = {"days": optional_days(days), "content_type": content_type}
        return await self._get("performance", agent, params=params)

    async def get_insights(
        self,
        agent_id: str,
        *,
        min_importance: Optional[float] = None,
        type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        agent = self._id(agent_id, "Agent ID")
        params = {"min_importance": min_importance, "type": type, "limit": limit}
        return unwrap(await self._get("insights", agent, params=params), "insights")


__all__ = ["MetacognitionClient"]
