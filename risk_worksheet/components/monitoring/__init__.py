from .service import MonitoringService
from .models import MonitorRiskRequest, MonitoringResultsResponse
from .router import router

__all__ = ["MonitoringService", "MonitorRiskRequest", "MonitoringResultsResponse", "router"]
