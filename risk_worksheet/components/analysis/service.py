from typing import Optional

from risk_worksheet.components.base.component import BaseComponent
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.scoring import analyze, prioritize
from risk_worksheet.scoring.models import AnalyzedRisk
from risk_worksheet.utils.estimates import require, validate_panel
from .models import AnalyzeRiskRequest, AnalyzedRisksResponse, PrioritizedRisksResponse


class RiskAnalysisService(BaseComponent[AnalyzeRiskRequest, AnalyzedRisk]):
    """Stage 2: quantitative risk analysis as a component."""

    def __init__(self, store: Optional[ProjectStore] = None):
        self.store = store or get_project_store()

    @property
    def component_name(self) -> str:
        return "risk_analysis"

    async def process(self, request: AnalyzeRiskRequest) -> AnalyzedRisk:
        """Aggregate the expert panel for one risk and store the result."""
        require(
            self.component_name,
            risk_id=request.risk_id,
            expert_probabilities=request.expert_probabilities,
            expert_losses=request.expert_losses,
        )
        weights = validate_panel(
            request.expert_probabilities,
            request.expert_losses,
            request.expert_weights,
            component=self.component_name,
        )

        analysis = analyze(
            request.risk_id,
            request.expert_probabilities,
            request.expert_losses,
            weights,
        )

        with self.store.transaction() as state:
            replaced = request.risk_id in state.analyzed_risks
            state.analyzed_risks[request.risk_id] = analysis

        self.logger.info(
            "Risk analyzed",
            risk_id=analysis.risk_id,
            probability=analysis.probability,
            loss=analysis.loss,
            magnitude=analysis.magnitude,
            classification=analysis.classification,
            weighted=weights is not None,
            replaced=replaced,
        )
        return analysis

    async def list_analyzed(self) -> AnalyzedRisksResponse:
        with self.store.transaction() as state:
            risks = list(state.analyzed_risks.values())
        return AnalyzedRisksResponse(risks=risks, count=len(risks))

    async def prioritize(self) -> PrioritizedRisksResponse:
        """Rank every analyzed risk; an empty project yields an empty list."""
        with self.store.transaction() as state:
            risks = list(state.analyzed_risks.values())

        ranked = prioritize(risks)
        if ranked:
            thresholds = ranked[0].priority_thresholds
            self.logger.info(
                "Risks prioritized",
                count=len(ranked),
                min=thresholds.min,
                max=thresholds.max,
                mpr=thresholds.mpr,
            )
        return PrioritizedRisksResponse(risks=ranked, count=len(ranked))
