from pydantic import BaseModel
from typing import Literal

from risk_worksheet.scoring.models import RiskSourceCatalog, SourceScores

SourceCategory = Literal["technical", "cost", "schedule", "management"]


class UpdateIndicatorRequest(BaseModel):
    """Set a single indicator; omit value to flip its current state."""
    value: int | None = None


class RiskSourcesResponse(BaseModel):
    """Working catalog together with the probabilities it produces."""
    risk_sources: RiskSourceCatalog
    probabilities: SourceScores
