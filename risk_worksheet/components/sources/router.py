from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from .service import RiskSourcesService
from .models import RiskSourcesResponse, UpdateIndicatorRequest
from risk_worksheet.components.base.exceptions import ComponentError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.scoring.models import RiskSourceCatalog

router = APIRouter(prefix="/risk-sources", tags=["Stage 1: Identification"])


def get_service(store: ProjectStore = Depends(get_project_store)) -> RiskSourcesService:
    return RiskSourcesService(store)


@router.get("", response_model=RiskSourceCatalog)
async def get_risk_sources(
    service: RiskSourcesService = Depends(get_service),
) -> RiskSourceCatalog:
    """Get the risk-source catalog."""
    return await service.get_catalog()


@router.get("/current", response_model=RiskSourcesResponse)
async def get_current_risk_sources(
    service: RiskSourcesService = Depends(get_service),
) -> RiskSourcesResponse:
    """Get the project's working catalog and its probabilities."""
    return await service.get_current()


@router.post("", response_model=RiskSourcesResponse)
async def update_risk_sources(
    request: RiskSourceCatalog,
    service: RiskSourcesService = Depends(get_service),
) -> RiskSourcesResponse:
    """Replace the working catalog and recalculate group probabilities."""
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.put("/{category}/{indicator_id}", response_model=RiskSourcesResponse)
async def set_risk_source_indicator(
    category: str,
    indicator_id: str,
    request: Optional[UpdateIndicatorRequest] = None,
    service: RiskSourcesService = Depends(get_service),
) -> RiskSourcesResponse:
    """Set or toggle a single indicator."""
    try:
        return await service.set_indicator(category, indicator_id, request or UpdateIndicatorRequest())
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())
