from fastapi import APIRouter, Depends, HTTPException
from .service import MitigationService
from .models import AssignMitigationRequest, MitigationMeasuresResponse, MitigationPlansResponse
from risk_worksheet.components.base.exceptions import ComponentError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.schemas.project import MitigationPlan

router = APIRouter(prefix="/mitigation", tags=["Stage 3: Planning"])


def get_service(store: ProjectStore = Depends(get_project_store)) -> MitigationService:
    return MitigationService(store)


@router.get("/measures", response_model=MitigationMeasuresResponse)
async def get_mitigation_measures(
    service: MitigationService = Depends(get_service),
) -> MitigationMeasuresResponse:
    """Get the mitigation measure catalog."""
    return await service.get_measures()


@router.post("/assign", response_model=MitigationPlan)
async def assign_mitigation(
    request: AssignMitigationRequest,
    service: MitigationService = Depends(get_service),
) -> MitigationPlan:
    """Assign a mitigation measure to an analyzed risk."""
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.get("/plans", response_model=MitigationPlansResponse)
async def get_mitigation_plans(
    service: MitigationService = Depends(get_service),
) -> MitigationPlansResponse:
    """Get all mitigation plans."""
    return await service.get_plans()
