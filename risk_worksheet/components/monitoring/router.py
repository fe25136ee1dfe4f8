from fastapi import APIRouter, Depends, HTTPException
from .service import MonitoringService
from .models import MonitorRiskRequest, MonitoringResultsResponse
from risk_worksheet.components.base.exceptions import ComponentError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.schemas.project import MonitoringResult

router = APIRouter(prefix="/monitoring", tags=["Stage 4: Monitoring"])


def get_service(store: ProjectStore = Depends(get_project_store)) -> MonitoringService:
    return MonitoringService(store)


@router.post("/monitor-risk", response_model=MonitoringResult)
async def monitor_risk(
    request: MonitorRiskRequest,
    service: MonitoringService = Depends(get_service),
) -> MonitoringResult:
    """Evaluate a risk after its mitigation measure was applied."""
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.get("/results", response_model=MonitoringResultsResponse)
async def get_monitoring_results(
    service: MonitoringService = Depends(get_service),
) -> MonitoringResultsResponse:
    """Get all monitoring results."""
    return await service.get_results()


@router.get("/results/{risk_id}", response_model=MonitoringResult)
async def get_monitoring_result(
    risk_id: str,
    service: MonitoringService = Depends(get_service),
) -> MonitoringResult:
    """Get the monitoring result of one risk."""
    try:
        return await service.get_result(risk_id)
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())
