from fastapi import APIRouter, Depends, HTTPException
from .service import RiskAnalysisService
from .models import AnalyzeRiskRequest, AnalyzedRisksResponse, PrioritizedRisksResponse
from risk_worksheet.components.base.exceptions import ComponentError
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.scoring.models import AnalyzedRisk

router = APIRouter(prefix="/analysis", tags=["Stage 2: Analysis"])


def get_service(store: ProjectStore = Depends(get_project_store)) -> RiskAnalysisService:
    return RiskAnalysisService(store)


@router.post("/analyze-risk", response_model=AnalyzedRisk)
async def analyze_risk(
    request: AnalyzeRiskRequest,
    service: RiskAnalysisService = Depends(get_service),
) -> AnalyzedRisk:
    """Calculate probability, loss, magnitude and classification of one risk."""
    try:
        return await service.process(request)
    except ComponentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.to_dict())


@router.get("/analyzed-risks", response_model=AnalyzedRisksResponse)
async def get_analyzed_risks(
    service: RiskAnalysisService = Depends(get_service),
) -> AnalyzedRisksResponse:
    """Get all analyzed risks."""
    return await service.list_analyzed()


@router.post("/prioritize-risks", response_model=PrioritizedRisksResponse)
async def prioritize_risks(
    service: RiskAnalysisService = Depends(get_service),
) -> PrioritizedRisksResponse:
    """Rank all analyzed risks into low/medium/high priority."""
    return await service.prioritize()
