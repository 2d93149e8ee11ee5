"""Async Python client for the RecallBricks memory API."""

from __future__ import annotations

import asyncio
import json
from typing import Any, Dict, List, Literal, Optional

import httpx

from .autonomous import (
    ContextClient,
    GoalsClient,
    HealthClient,
    HybridSearchClient,
    MemoryTypesClient,
    MetacognitionClient,
    ProspectiveMemoryClient,
    UncertaintyClient,
    WorkingMemoryClient,
)
from .config import ClientConfig
from .errors import InvalidInputError
from .retry import Sleeper
from .transport import RequestExecutor
from .validation import compact, path_segment, require_int_range, require_text

MAX_GRAPH_DEPTH = 10


class RecallBricks:
    """Client for the RecallBricks memory service.

    Every method validates its arguments locally, then sends a single logical
    request that is retried on network failures, 429 and 5xx responses.
    Successful JSON bodies are returned exactly as the server sent them.

    Under service-token auth the subject-scoped methods (``create_memory``,
    ``list_memories``, ``search``, ``predict_memories``, ``suggest_memories``,
    ``search_weighted``) require ``user_id``.

    Example::

        async with RecallBricks(ClientConfig(api_key="...")) as client:
            memory = await client.create_memory("User prefers dark mode", tags=["ui"])
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Sleeper = asyncio.sleep,
    ) -> None:
        self._config = config
        self._executor = RequestExecutor(config, transport=transport, sleep=sleep)
        self.working_memory = WorkingMemoryClient(self._executor)
        self.prospective = ProspectiveMemoryClient(self._executor)
        self.metacognition = MetacognitionClient(self._executor)
        self.memory_types = MemoryTypesClient(self._executor)
        self.goals = GoalsClient(self._executor)
        self.health = HealthClient(self._executor)
        self.uncertainty = UncertaintyClient(self._executor)
        self.context = ContextClient(self._executor)
        self.hybrid_search = HybridSearchClient(self._executor)

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def __aenter__(self) -> "RecallBricks":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        await self._executor.close()

    # Memories

    async def create_memory(
        self,
        text: str,
        *,
        user_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        tags: Optional[List[str]] = None,
        timestamp: Optional[str] = None,
    ) -> Dict[str, Any]:
        require_text(text, "Text")
        self._executor.require_user_id(user_id)
        payload = compact(text=text, user_id=user_id or None, metadata=metadata, tags=tags, timestamp=timestamp)
        return await self._executor.request("POST", "/memories", json=payload)

    async def list_memories(
        self,
        *,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort: Optional[Literal["asc", "desc"]] = None,
        sort_by: Optional[str] = None,
        tags: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        self._executor.require_user_id(user_id)
        params = {
            "user_id": user_id or None,
            "limit": limit,
            "offset": offset,
            "sort": sort or None,
            # the list endpoint takes its sort field in camelCase
            "sortBy": sort_by or None,
            "tags": ",".join(tags) if tags else None,
            "metadata": json.dumps(metadata) if metadata else None,
        }
        return await self._executor.request("GET", "/memories", params=params)

    async def search(
        self,
        query: str,
        *,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        threshold: Optional[float] = None,
        tags: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        require_text(query, "Query")
        self._executor.require_user_id(user_id)
        payload = compact(
            query=query,
            user_id=user_id or None,
            limit=limit,
            threshold=threshold,
            tags=tags,
            metadata=metadata,
        )
        return await self._executor.request("POST", "/memories/search", json=payload)

    async def get_relationships(self, memory_id: str) -> Dict[str, Any]:
        memory = path_segment(memory_id, "Memory ID")
        return await self._executor.request("GET", f"/memories/{memory}/relationships")

    async def get_graph_context(self, memory_id: str, depth: int = 2) -> Dict[str, Any]:
        memory = path_segment(memory_id, "Memory ID")
        require_int_range(depth, "Depth", minimum=1, maximum=MAX_GRAPH_DEPTH)
        return await self._executor.request("GET", f"/memories/{memory}/graph", params={"depth": depth})

    async def delete_memory(self, memory_id: str) -> bool:
        memory = path_segment(memory_id, "Memory ID")
        await self._executor.request("DELETE", f"/memories/{memory}")
        return True

    async def update_memory(
        self,
        memory_id: str,
        *,
        text: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        tags: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        memory = path_segment(memory_id, "Memory ID")
        updates = compact(text=text, metadata=metadata, tags=tags)
        if not updates:
            raise InvalidInputError("Updates are required")
        if text is not None and not text.strip():
            raise InvalidInputError("Text cannot be empty")
        return await self._executor.request("PATCH", f"/memories/{memory}", json=updates)

    # Metacognition

    async def predict_memories(
        self,
        *,
        user_id: Optional[str] = None,
        context: Optional[str] = None,
        recent_memory_ids: Optional[List[str]] = None,
        limit: Optional[int] = None,
    ) -> Dict[str, Any]:
        """Predict memories likely to be needed next from context and recent usage."""
        self._executor.require_user_id(user_id)
        payload = compact(
            user_id=user_id or None,
            context=context or None,
            recent_memory_ids=recent_memory_ids,
            limit=limit,
        )
        return await self._executor.request("POST", "/memories/predict", json=payload)

    async def suggest_memories(
        self,
        context: str,
        *,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        min_confidence: Optional[float] = None,
        include_reasoning: Optional[bool] = None,
    ) -> Dict[str, Any]:
        require_text(context, "Context")
        self._executor.require_user_id(user_id)
        payload = compact(
            context=context,
            user_id=user_id or None,
            limit=limit,
            min_confidence=min_confidence,
            include_reasoning=include_reasoning,
        )
        return await self._executor.request("POST", "/memories/suggest", json=payload)

    async def get_learning_metrics(self, days: int = 30) -> Dict[str, Any]:
        require_int_range(days, "Days", minimum=1)
        return await self._executor.request("GET", "/analytics/learning-metrics", params={"days": days})

    async def get_patterns(self, days: int = 30) -> Dict[str, Any]:
        require_int_range(days, "Days", minimum=1)
        return await self._executor.request("GET", "/analytics/patterns", params={"days": days})

    async def search_weighted(
        self,
        query: str,
        *,
        user_id: Optional[str] = None,
        limit: Optional[int] = None,
        weight_by_usage: Optional[bool] = None,
        decay_old_memories: Optional[bool] = None,
        adaptive_weights: Optional[bool] = None,
        min_helpfulness_score: Optional[float] = None,
    ) -> Dict[str, Any]:
        """Search ranked by semantic similarity blended with usage and helpfulness signals."""
        require_text(query, "Query")
        self._executor.require_user_id(user_id)
        payload = compact(
            query=query,
            user_id=user_id or None,
            limit=limit,
            weight_by_usage=weight_by_usage,
            decay_old_memories=decay_old_memories,
            adaptive_weights=adaptive_weights,
            min_helpfulness_score=min_helpfulness_score,
        )
        return await self._executor.request("POST", "/memories/search-weighted", json=payload)


__all__ = ["MAX_GRAPH_DEPTH", "RecallBricks"]
