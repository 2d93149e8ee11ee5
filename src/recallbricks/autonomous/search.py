"""Hybrid search combining semantic, keyword, graph and recency signals."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Union

from ..validation import coerce_model, require_text
from .base import AutonomousClient
from .models import HybridSearchOptions


class HybridSearchClient(AutonomousClient):
    group = "search"

    async def hybrid(
        self,
        query: str,
        options: Optional[Union[HybridSearchOptions, Mapping[str, Any]]] = None,
    ) -> Dict[str, Any]:
        payload = {"query": require_text(query, "Query")}
        payload.update(coerce_model(HybridSearchOptions, options or {}).to_wire())
        return await self._post("hybrid", json=payload)


__all__ = ["HybridSearchClient"]
