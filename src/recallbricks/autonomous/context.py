"""Context building: assemble a token-budgeted prompt context from memory sources."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from ..validation import coerce_model
from .base import AutonomousClient
from .models import ContextBuildConfig


class ContextClient(AutonomousClient):
    group = "context"

    async def build(self, config: Union[ContextBuildConfig, Mapping[str, Any]]) -> Dict[str, Any]:
        build = coerce_model(ContextBuildConfig, config)
        return await self._post("build", json=build.to_wire())


__all__ = ["ContextClient"]
