"""Prospective memory: intentions that fire when their trigger conditions are met."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union

from ..validation import coerce_model, require_text
from .base import AutonomousClient, unwrap
from .models import IntentionConfig


class ProspectiveMemoryClient(AutonomousClient):
    group = "prospective-memory"

    async def create(self, intention: Union[IntentionConfig, Mapping[str, Any]]) -> Dict[str, Any]:
        config = coerce_model(IntentionConfig, intention)
        return await self._post("intentions", json=config.to_wire())

    async def get_pending(self, namespace: str) -> List[Dict[str, Any]]:
        require_text(namespace, "Namespace")
        body = await self._get("intentions", params={"namespace": namespace, "status": "pending"})
        return unwrap(body, "intentions")

    async def check_triggers(self, context: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._post("check-triggers", json={"context": context})

    async def complete(self, intention_id: str, result: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return await self._post(
            "intentions", self._id(intention_id, "Intention ID"), "complete", json={"result": result}
        )


__all__ = ["ProspectiveMemoryClient"]
