from typing import Optional

from pydantic import BaseModel

from risk_worksheet.components.base.component import BaseComponent
from risk_worksheet.scoring import aggregate_sources
from .models import ProjectStatusResponse, ResetResponse
from .state import ProjectStore, get_project_store


class ProjectService(BaseComponent[BaseModel, ProjectStatusResponse]):
    """Project-wide status and reset."""

    def __init__(self, store: Optional[ProjectStore] = None):
        self.store = store or get_project_store()

    @property
    def component_name(self) -> str:
        return "project"

    async def process(self, request: Optional[BaseModel] = None) -> ProjectStatusResponse:
        """Summarize how far the project has progressed."""
        with self.store.transaction() as state:
            return ProjectStatusResponse(
                risk_sources_probabilities=aggregate_sources(state.risk_sources),
                selected_events_count=len(state.selected_events),
                analyzed_risks_count=len(state.analyzed_risks),
                mitigation_plans_count=len(state.mitigation_plans),
                monitored_risks_count=len(state.monitoring_results),
            )

    async def reset(self) -> ResetResponse:
        self.store.reset()
        self.logger.info("Project data reset")
        return ResetResponse(message="Project data reset")
