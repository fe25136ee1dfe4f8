from datetime import datetime
from typing import Optional

from risk_worksheet.components.base.component import BaseComponent
from risk_worksheet.components.base.exceptions import MeasureNotFoundError, RiskNotFoundError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.schemas.project import MitigationPlan
from risk_worksheet.utils.estimates import require
from .models import AssignMitigationRequest, MitigationMeasuresResponse, MitigationPlansResponse


class MitigationService(BaseComponent[AssignMitigationRequest, MitigationPlan]):
    """Stage 3: mitigation planning as a component."""

    def __init__(self, store: Optional[ProjectStore] = None):
        self.store = store or get_project_store()

    @property
    def component_name(self) -> str:
        return "mitigation"

    async def process(self, request: AssignMitigationRequest) -> MitigationPlan:
        """Assign a catalog measure to a risk that has already been analyzed."""
        require(self.component_name, risk_id=request.risk_id, measure_id=request.measure_id)

        measure = self.store.catalogs.find_measure(request.measure_id)

        with self.store.transaction() as state:
            if request.risk_id not in state.analyzed_risks:
                raise RiskNotFoundError(
                    f"Risk {request.risk_id} not found. Analyze the risk first.",
                    component=self.component_name,
                    details={"risk_id": request.risk_id},
                )
            if measure is None:
                raise MeasureNotFoundError(
                    f"Mitigation measure {request.measure_id} not found",
                    component=self.component_name,
                    details={"measure_id": request.measure_id},
                )

            plan = MitigationPlan(
                risk_id=request.risk_id,
                measure_id=measure.id,
                measure_name=measure.name,
                assigned_at=datetime.now(),
            )
            state.mitigation_plans[request.risk_id] = plan

        self.logger.info("Mitigation assigned", risk_id=plan.risk_id, measure_id=plan.measure_id)
        return plan

    async def get_measures(self) -> MitigationMeasuresResponse:
        measures = self.store.catalogs.mitigation_measures()
        return MitigationMeasuresResponse(measures=measures, count=len(measures))

    async def get_plans(self) -> MitigationPlansResponse:
        with self.store.transaction() as state:
            plans = dict(state.mitigation_plans)
        return MitigationPlansResponse(plans=plans, count=len(plans))
