"""Uncertainty quantification for agent outputs."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ..validation import coerce_model, optional_days
from .base import AutonomousClient
from .models import UncertaintyAnalysis


class UncertaintyClient(AutonomousClient):
    group = "uncertainty"

    async def quantify(self, analysis: Union[UncertaintyAnalysis, Mapping[str, Any]]) -> Dict[str, Any]:
        config = coerce_model(UncertaintyAnalysis, analysis)
        return await self._post("quantify", json=config.to_wire())

    async def get_history(
        self,
        agent_id: str,
        *,
        days: Optional[int] = None,
        content_type: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        agent = self._id(agent_id, "Agent ID")
        params = {"days": optional_days(days), "content_type": content_type, "limit": limit}
        return await self._get("history", agent, params=params)


__all__ = ["UncertaintyClient"]
