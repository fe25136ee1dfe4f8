from .service import RiskAnalysisService
from .models import AnalyzeRiskRequest, AnalyzedRisksResponse, PrioritizedRisksResponse
from .router import router

__all__ = [
    "RiskAnalysisService",
    "AnalyzeRiskRequest",
    "AnalyzedRisksResponse",
    "PrioritizedRisksResponse",
    "router",
]
