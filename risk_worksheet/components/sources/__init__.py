from .service import RiskSourcesService
from .models import RiskSourcesResponse, UpdateIndicatorRequest
from .router import router

__all__ = ["RiskSourcesService", "RiskSourcesResponse", "UpdateIndicatorRequest", "router"]
