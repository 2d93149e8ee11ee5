"""Typed long-term memories: episodic events, semantic facts and procedures."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Type, Union

from ..validation import coerce_model
from .base import AutonomousClient, unwrap
from .models import (
    EpisodicMemoryConfig,
    EpisodicMemoryFilters,
    MemoryFilters,
    ProceduralMemoryConfig,
    ProceduralMemoryFilters,
    RequestModel,
    SemanticMemoryConfig,
    SemanticMemoryFilters,
)

Options = Union[RequestModel, Mapping[str, Any]]


class MemoryTypesClient(AutonomousClient):
    group = "memory-types"

    async def _create(self, kind: str, model: Type[RequestModel], memory: Options) -> Dict[str, Any]:
        config = coerce_model(model, memory)
        return await self._post(kind, json=config.to_wire())

    async def _list(
        self, kind: str, model: Type[MemoryFilters], filters: Optional[Options]
    ) -> List[Dict[str, Any]]:
        params = coerce_model(model, filters or {}).to_params()
        return unwrap(await self._get(kind, params=params), "memories")

    async def create_episodic(self, memory: Union[EpisodicMemoryConfig, Mapping[str, Any]]) -> Dict[str, Any]:
        return await self._create("episodic", EpisodicMemoryConfig, memory)

    async def get_episodic(
        self, filters: Optional[Union[EpisodicMemoryFilters, Mapping[str, Any]]] = None
    ) -> List[Dict[str, Any]]:
        return await self._list("episodic", EpisodicMemoryFilters, filters)

    async def create_semantic(self, memory: Union[SemanticMemoryConfig, Mapping[str, Any]]) -> Dict[str, Any]:
        return await self._create("semantic", SemanticMemoryConfig, memory)

    async def get_semantic(
        self, filters: Optional[Union[SemanticMemoryFilters, Mapping[str, Any]]] = None
    ) -> List[Dict[str, Any]]:
        return await self._list("semantic", SemanticMemoryFilters, filters)

    async def create_procedural(
        self, memory: Union[ProceduralMemoryConfig, Mapping[str, Any]]
    ) -> Dict[str, Any]:
        return await self._create("procedural", ProceduralMemoryConfig, memory)

    async def get_procedural(
        self, filters: Optional[Union[ProceduralMemoryFilters, Mapping[str, Any]]] = None
    ) -> List[Dict[str, Any]]:
        return await self._list("procedural", ProceduralMemoryFilters, filters)


__all__ = ["MemoryTypesClient"]
