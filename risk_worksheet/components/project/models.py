from pydantic import BaseModel

from risk_worksheet.scoring.models import SourceScores


class ProjectStatusResponse(BaseModel):
    """Progress of the project through the four worksheet stages."""
    risk_sources_probabilities: SourceScores
    selected_events_count: int
    analyzed_risks_count: int
    mitigation_plans_count: int
    monitored_risks_count: int


class ResetResponse(BaseModel):
    message: str
