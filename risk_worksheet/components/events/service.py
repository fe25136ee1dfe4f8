from typing import Optional

from risk_worksheet.components.base.component import BaseComponent
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.schemas.catalog import RiskEventCatalog
from risk_worksheet.utils.estimates import require
from .models import SelectEventsRequest, SelectedEventsResponse


class RiskEventsService(BaseComponent[SelectEventsRequest, SelectedEventsResponse]):
    """Stage 1: risk-event selection as a component."""

    def __init__(self, store: Optional[ProjectStore] = None):
        self.store = store or get_project_store()

    @property
    def component_name(self) -> str:
        return "risk_events"

    async def process(self, request: SelectEventsRequest) -> SelectedEventsResponse:
        """Replace the project's selection of relevant risk events."""
        require(self.component_name, selected_events=request.selected_events)

        with self.store.transaction() as state:
            state.selected_events = list(request.selected_events)
            response = self._selection(state.selected_events)

        self.logger.info("Risk events selected", count=response.count)
        return response

    async def get_catalog(self) -> RiskEventCatalog:
        return self.store.catalogs.risk_events()

    async def get_selected(self) -> SelectedEventsResponse:
        with self.store.transaction() as state:
            return self._selection(state.selected_events)

    def _selection(self, selected_events) -> SelectedEventsResponse:
        return SelectedEventsResponse(
            selected_events=list(selected_events),
            count=len(selected_events),
        )
