from .service import RiskEventsService
from .models import SelectEventsRequest, SelectedEventsResponse
from .router import router

__all__ = ["RiskEventsService", "SelectEventsRequest", "SelectedEventsResponse", "router"]
