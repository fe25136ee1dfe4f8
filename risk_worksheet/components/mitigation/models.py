from pydantic import BaseModel
from typing import Dict, List, Optional

from risk_worksheet.schemas.catalog import MitigationMeasure
from risk_worksheet.schemas.project import MitigationPlan


class AssignMitigationRequest(BaseModel):
    """Request to assign a catalog measure to a risk."""
    risk_id: Optional[str] = None
    measure_id: Optional[str] = None


class MitigationMeasuresResponse(BaseModel):
    """Mitigation measure catalog."""
    measures: List[MitigationMeasure]
    count: int


class MitigationPlansResponse(BaseModel):
    """All plans keyed by risk id."""
    plans: Dict[str, MitigationPlan]
    count: int
