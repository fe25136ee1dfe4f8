from pydantic import BaseModel
from typing import List, Optional

from risk_worksheet.scoring.models import AnalyzedRisk, PrioritizedRisk


class AnalyzeRiskRequest(BaseModel):
    """Expert-panel estimates for one risk event."""
    risk_id: Optional[str] = None
    expert_probabilities: Optional[List[float]] = None
    expert_losses: Optional[List[float]] = None
    expert_weights: Optional[List[float]] = None


class AnalyzedRisksResponse(BaseModel):
    """Every analyzed risk in the project."""
    risks: List[AnalyzedRisk]
    count: int


class PrioritizedRisksResponse(BaseModel):
    """Analyzed risks ranked into priority bands, largest magnitude first."""
    risks: List[PrioritizedRisk]
    count: int
