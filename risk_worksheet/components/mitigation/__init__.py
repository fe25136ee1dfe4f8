from .service import MitigationService
from .models import AssignMitigationRequest, MitigationMeasuresResponse, MitigationPlansResponse
from .router import router

__all__ = [
    "MitigationService",
    "AssignMitigationRequest",
    "MitigationMeasuresResponse",
    "MitigationPlansResponse",
    "router",
]
