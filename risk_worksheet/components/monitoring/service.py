from datetime import datetime
from typing import Optional

from risk_worksheet.components.base.component import BaseComponent
from risk_worksheet.components.base.exceptions import MonitoringNotFoundError, RiskNotFoundError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.schemas.project import MonitoringResult
from risk_worksheet.scoring import compare
from risk_worksheet.utils.estimates import require, validate_panel
from .models import MonitorRiskRequest, MonitoringResultsResponse


class MonitoringService(BaseComponent[MonitorRiskRequest, MonitoringResult]):
    """Stage 4: post-mitigation monitoring as a component."""

    def __init__(self, store: Optional[ProjectStore] = None):
        self.store = store or get_project_store()

    @property
    def component_name(self) -> str:
        return "monitoring"

    async def process(self, request: MonitorRiskRequest) -> MonitoringResult:
        """Re-evaluate an analyzed risk and compare it with its analysis."""
        require(
            self.component_name,
            risk_id=request.risk_id,
            new_expert_probabilities=request.new_expert_probabilities,
            new_expert_losses=request.new_expert_losses,
        )

        with self.store.transaction() as state:
            original = state.analyzed_risks.get(request.risk_id)
            if original is None:
                raise RiskNotFoundError(
                    f"Risk {request.risk_id} not found. Analyze the risk first.",
                    component=self.component_name,
                    details={"risk_id": request.risk_id},
                )

            weights = validate_panel(
                request.new_expert_probabilities,
                request.new_expert_losses,
                request.expert_weights,
                component=self.component_name,
                probabilities_field="new_expert_probabilities",
                losses_field="new_expert_losses",
            )
            comparison = compare(
                original,
                request.new_expert_probabilities,
                request.new_expert_losses,
                weights,
            )

            result = MonitoringResult(
                risk_id=request.risk_id,
                comparison=comparison,
                mitigation_measure=state.mitigation_plans.get(request.risk_id),
                evaluated_at=datetime.now(),
            )
            state.monitoring_results[request.risk_id] = result

        self.logger.info(
            "Risk re-evaluated",
            risk_id=result.risk_id,
            before=comparison.before.magnitude,
            after=comparison.after.magnitude,
            reduction=comparison.reduction,
            improved=comparison.improved,
        )
        return result

    async def get_results(self) -> MonitoringResultsResponse:
        with self.store.transaction() as state:
            results = dict(state.monitoring_results)
        return MonitoringResultsResponse(
            results=results,
            count=len(results),
            improved_count=sum(1 for r in results.values() if r.comparison.improved),
        )

    async def get_result(self, risk_id: str) -> MonitoringResult:
        with self.store.transaction() as state:
            result = state.monitoring_results.get(risk_id)
        if result is None:
            raise MonitoringNotFoundError(
                f"No monitoring data for risk {risk_id}",
                component=self.component_name,
                details={"risk_id": risk_id},
            )
        return result
