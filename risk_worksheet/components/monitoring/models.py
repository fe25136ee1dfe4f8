from pydantic import BaseModel
from typing import Dict, List, Optional

from risk_worksheet.schemas.project import MonitoringResult


class MonitorRiskRequest(BaseModel):
    """Post-mitigation expert estimates for an analyzed risk."""
    risk_id: Optional[str] = None
    new_expert_probabilities: Optional[List[float]] = None
    new_expert_losses: Optional[List[float]] = None
    expert_weights: Optional[List[float]] = None


class MonitoringResultsResponse(BaseModel):
    """All monitoring results keyed by risk id."""
    results: Dict[str, MonitoringResult]
    count: int
    improved_count: int
