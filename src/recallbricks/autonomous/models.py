"""Pydantic models describing structured request options for autonomous features."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, confloat, conint, constr


NonEmptyStr = constr(min_length=1, strip_whitespace=True)
NonNegativeInt = conint(ge=0)
UnitFloat = confloat(ge=0, le=1)


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


# Working memory


class WorkingMemorySessionConfig(RequestModel):
    namespace: NonEmptyStr
    capacity: Optional[conint(ge=1)] = None
    ttl_seconds: Optional[conint(ge=1)] = None
    agent_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


# Prospective memory


class TriggerCondition(RequestModel):
    type: Literal["time", "event", "context", "keyword", "semantic"]
    value: str
    parameters: Optional[Dict[str, Any]] = None


class IntentionAction(RequestModel):
    type: NonEmptyStr
    parameters: Optional[Dict[str, Any]] = None


class IntentionConfig(RequestModel):
    namespace: NonEmptyStr
    description: NonEmptyStr
    triggers: List[TriggerCondition] = Field(..., min_length=1)
    action: IntentionAction
    priority: Optional[int] = None
    expires_at: Optional[str] = None
    agent_id: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None


# Metacognition


class GroundTruth(RequestModel):
    score: float
    source: str
    feedback: Optional[str] = None


class QualityAssessment(RequestModel):
    agent_id: NonEmptyStr
    content: NonEmptyStr
    content_type: Literal["response", "decision", "retrieval", "reasoning"]
    self_score: Optional[UnitFloat] = None
    confidence: Optional[UnitFloat] = None
    reasoning: Optional[str] = None
    ground_truth: Optional[GroundTruth] = None
    context: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


# Typed memories


class EpisodicMemoryConfig(RequestModel):
    namespace: NonEmptyStr
    content: NonEmptyStr
    timestamp: Optional[str] = None
    location: Optional[str] = None
    entities: Optional[List[str]] = None
    emotional_valence: Optional[confloat(ge=-1, le=1)] = None
    importance: Optional[UnitFloat] = None
    agent_id: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class SemanticMemoryConfig(RequestModel):
    namespace: NonEmptyStr
    content: NonEmptyStr
    category: Optional[str] = None
    confidence: Optional[UnitFloat] = None
    source: Optional[str] = None
    related_concepts: Optional[List[str]] = None
    agent_id: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class ProcedureStep(RequestModel):
    order: NonNegativeInt
    description: NonEmptyStr
    input: Optional[Dict[str, Any]] = None
    output: Optional[Dict[str, Any]] = None
    conditions: Optional[List[str]] = None


class ProceduralMemoryConfig(RequestModel):
    namespace: NonEmptyStr
    name: NonEmptyStr
    description: NonEmptyStr
    steps: List[ProcedureStep] = Field(..., min_length=1)
    triggers: Optional[List[str]] = None
    success_rate: Optional[UnitFloat] = None
    agent_id: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


class MemoryFilters(RequestModel):
    """Shared list filters; list-valued fields are comma-joined as query parameters."""

    namespace: Optional[str] = None
    agent_id: Optional[str] = None
    query: Optional[str] = None
    limit: Optional[NonNegativeInt] = None
    offset: Optional[NonNegativeInt] = None

    def to_params(self) -> Dict[str, Any]:
        params = self.to_wire()
        for key, value in params.items():
            if isinstance(value, list):
                params[key] = ",".join(str(item) for item in value)
        return params


class EpisodicMemoryFilters(MemoryFilters):
    entities: Optional[List[str]] = None
    location: Optional[str] = None
    min_importance: Optional[float] = None
    from_timestamp: Optional[str] = None
    to_timestamp: Optional[str] = None


class SemanticMemoryFilters(MemoryFilters):
    category: Optional[str] = None
    min_confidence: Optional[float] = None
    related_to: Optional[List[str]] = None


class ProceduralMemoryFilters(MemoryFilters):
    trigger: Optional[str] = None
    min_success_rate: Optional[float] = None


# Goals


class MilestoneConfig(RequestModel):
    description: NonEmptyStr
    target_value: Optional[float] = None
    current_value: Optional[float] = None


class GoalConfig(RequestModel):
    namespace: NonEmptyStr
    title: NonEmptyStr
    description: NonEmptyStr
    type: Literal["achievement", "maintenance", "learning", "optimization"]
    priority: Optional[int] = None
    parent_goal_id: Optional[str] = None
    milestones: Optional[List[MilestoneConfig]] = None
    success_criteria: Optional[List[str]] = None
    deadline: Optional[str] = None
    agent_id: Optional[str] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None


# Uncertainty


class Evidence(RequestModel):
    source: str
    strength: float
    description: str


class UncertaintyAnalysis(RequestModel):
    agent_id: NonEmptyStr
    content: NonEmptyStr
    content_type: Literal["response", "decision", "prediction", "retrieval"]
    self_confidence: Optional[UnitFloat] = None
    known_unknowns: Optional[List[str]] = None
    assumptions: Optional[List[str]] = None
    evidence: Optional[List[Evidence]] = None
    context: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


# Context building


class ContextSource(RequestModel):
    type: Literal["working_memory", "episodic", "semantic", "procedural", "search"]
    config: Dict[str, Any] = Field(default_factory=dict)
    weight: Optional[float] = None
    max_items: Optional[conint(ge=1)] = None


class ContextBuildConfig(RequestModel):
    namespace: NonEmptyStr
    agent_id: Optional[str] = None
    query: Optional[str] = None
    sources: Optional[List[ContextSource]] = None
    max_tokens: Optional[conint(ge=1)] = None
    recency_bias: Optional[UnitFloat] = None
    relevance_threshold: Optional[UnitFloat] = None
    include_prospective: Optional[bool] = None
    include_goals: Optional[bool] = None
    session_id: Optional[str] = None
    additional_context: Optional[Dict[str, Any]] = None
    metadata: Optional[Dict[str, Any]] = None


# Hybrid search


class TimeRange(RequestModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True, by_alias=True)


class HybridSearchOptions(RequestModel):
    namespace: Optional[str] = None
    agent_id: Optional[str] = None
    limit: Optional[conint(ge=1)] = None
    threshold: Optional[UnitFloat] = None
    memory_types: Optional[List[Literal["episodic", "semantic", "procedural", "general"]]] = None
    semantic_weight: Optional[float] = None
    keyword_weight: Optional[float] = None
    graph_weight: Optional[float] = None
    recency_weight: Optional[float] = None
    tags: Optional[List[str]] = None
    metadata: Optional[Dict[str, Any]] = None
    time_range: Optional[TimeRange] = None
    include_relationships: Optional[bool] = None
    expand_query: Optional[bool] = None
    rerank: Optional[bool] = None

    def to_wire(self) -> Dict[str, Any]:
        payload = self.model_dump(mode="json", exclude_none=True, exclude={"time_range"})
        if self.time_range is not None:
            payload["time_range"] = self.time_range.to_wire()
        return payload


__all__ = [
    "ContextBuildConfig",
    "ContextSource",
    "EpisodicMemoryConfig",
    "EpisodicMemoryFilters",
    "Evidence",
    "GoalConfig",
    "GroundTruth",
    "HybridSearchOptions",
    "IntentionAction",
    "IntentionConfig",
    "MilestoneConfig",
    "ProceduralMemoryConfig",
    "ProceduralMemoryFilters",
    "ProcedureStep",
    "QualityAssessment",
    "SemanticMemoryConfig",
    "SemanticMemoryFilters",
    "TimeRange",
    "TriggerCondition",
    "UncertaintyAnalysis",
    "WorkingMemorySessionConfig",
]
