"""Records the worksheet keeps per risk id once a stage has run."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from risk_worksheet.scoring.models import RiskComparison


class MitigationPlan(BaseModel):
    """Measure assigned to an analyzed risk."""

    risk_id: str
    measure_id: str
    measure_name: str
    assigned_at: datetime


class MonitoringResult(BaseModel):
    """Re-evaluation of one risk compared with its original analysis."""

    risk_id: str
    comparison: RiskComparison
    mitigation_measure: Optional[MitigationPlan] = None
    evaluated_at: datetime
