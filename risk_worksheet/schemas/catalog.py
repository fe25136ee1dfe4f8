"""
Static catalog entries: risk events and mitigation measures.

Risk-source indicators live with the scoring records because the source
aggregation consumes them directly.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class RiskEvent(BaseModel):
    """Distinct risk the project can track through the worksheet."""

    id: str = Field(..., description="Event id, e.g. tr1")
    name: str


class RiskEventCatalog(BaseModel):
    """Risk events grouped by the four causal categories."""

    technical: List[RiskEvent]
    cost: List[RiskEvent]
    schedule: List[RiskEvent]
    management: List[RiskEvent]


class MitigationMeasure(BaseModel):
    """Catalog entry for an action that reduces a risk's magnitude."""

    # Catalog entries carry free-form fields beyond id and name
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Measure id, e.g. m3")
    name: str
    description: Optional[str] = None
