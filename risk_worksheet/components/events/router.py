from fastapi import APIRouter, Depends, HTTPException
from .service import RiskEventsService
from .models import SelectEventsRequest, SelectedEventsResponse
from risk_worksheet.components.base.exceptions import ComponentError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.schemas.catalog import RiskEventCatalog

router = APIRouter(prefix="/risk-events", tags=["Stage 1: Identification"])


def get_service(store: ProjectStore = Depends(get_project_store)) -> RiskEventsService:
    return RiskEventsService(store)


@router.get("", response_model=RiskEventCatalog)
async def get_risk_events(
    service: RiskEventsService = Depends(get_service),
) -> RiskEventCatalog:
    """Get the risk-event catalog."""
    return await service.get_catalog()


@router.post("/select", response_model=SelectedEventsResponse)
async def select_risk_events(
    request: SelectEventsRequest,
    service: RiskEventsService = Depends(get_service),
) -> SelectedEventsResponse:
    """Select the risk events relevant to the project."""
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.get("/selected", response_model=SelectedEventsResponse)
async def get_selected_risk_events(
    service: RiskEventsService = Depends(get_service),
) -> SelectedEventsResponse:
    """Get the currently selected risk events."""
    return await service.get_selected()
