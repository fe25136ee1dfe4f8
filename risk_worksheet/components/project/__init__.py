from .state import ProjectState, ProjectStore, get_project_store
from .service import ProjectService
from .models import ProjectStatusResponse, ResetResponse
from .router import router

__all__ = [
    "ProjectState",
    "ProjectStore",
    "get_project_store",
    "ProjectService",
    "ProjectStatusResponse",
    "ResetResponse",
    "router",
]
