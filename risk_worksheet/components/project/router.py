from fastapi import APIRouter, Depends
from .service import ProjectService
from .models import ProjectStatusResponse, ResetResponse
from .state import ProjectStore, get_project_store

router = APIRouter(prefix="/project", tags=["Project"])


def get_service(store: ProjectStore = Depends(get_project_store)) -> ProjectService:
    return ProjectService(store)


@router.get("/status", response_model=ProjectStatusResponse)
async def get_project_status(
    service: ProjectService = Depends(get_service),
) -> ProjectStatusResponse:
    """Get overall project status."""
    return await service.process()


@router.post("/reset", response_model=ResetResponse)
async def reset_project(
    service: ProjectService = Depends(get_service),
) -> ResetResponse:
    """Restore the original source catalog and clear all stage data."""
    return await service.reset()
