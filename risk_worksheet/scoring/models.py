"""
Records passed between the scoring stages.

Catalog -> SourceScores
Estimates -> AnalyzedRisk
[AnalyzedRisk] -> [PrioritizedRisk]
AnalyzedRisk x new estimates -> RiskComparison
"""

import math
from typing import ClassVar, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer

Classification = Literal["very low", "low", "medium", "high", "very high"]
Priority = Literal["low", "medium", "high"]


class RiskSourceIndicator(BaseModel):
    """Binary contributing factor within a source category."""

    id: str
    name: str
    value: int = Field(0, description="1 when the source is present, 0 otherwise")


class RiskSourceCategory(BaseModel):
    risks: List[RiskSourceIndicator]


class RiskSourceCatalog(BaseModel):
    """Four causal categories of risk-source indicators."""

    technical: RiskSourceCategory
    cost: RiskSourceCategory
    schedule: RiskSourceCategory
    management: RiskSourceCategory

    CATEGORIES: ClassVar[Tuple[str, ...]] = ("technical", "cost", "schedule", "management")

    def category(self, name: str) -> RiskSourceCategory:
        return getattr(self, name)


class SourceScores(BaseModel):
    technical_score: float
    cost_score: float
    schedule_score: float
    management_score: float
    total_score: float


class AnalyzedRisk(BaseModel):
    """Aggregated expert view of one risk event."""

    model_config = ConfigDict(frozen=True)

    risk_id: str
    probability: float
    loss: float
    magnitude: float = Field(..., description="probability * loss")
    classification: Classification
    expert_probabilities: List[float]
    expert_losses: List[float]
    expert_weights: Optional[List[float]] = None


class PriorityThresholds(BaseModel):
    min: float
    max: float
    mpr: float = Field(..., description="Width of one priority band, (max - min) / 3")
    low_threshold: float
    high_threshold: float


class PrioritizedRisk(AnalyzedRisk):
    priority: Priority
    priority_thresholds: PriorityThresholds


class RiskSnapshot(BaseModel):
    probability: float
    loss: float
    magnitude: float
    classification: Classification


class RiskComparison(BaseModel):
    """Before/after view of a risk once a mitigation measure is applied."""

    before: RiskSnapshot
    after: RiskSnapshot
    reduction: float
    reduction_percentage: float
    improved: bool

    @field_serializer("reduction_percentage", when_used="json")
    def _serialize_percentage(self, value: float) -> Optional[float]:
        # JSON has no representation for nan/inf, report them as null
        return value if math.isfinite(value) else None
