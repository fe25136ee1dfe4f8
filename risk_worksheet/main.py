from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from risk_worksheet.components.base.config import get_settings
from risk_worksheet.components.base.logging import configure_logging, get_logger
from risk_worksheet.components.sources.router import router as sources_router
from risk_worksheet.components.events.router import router as events_router
from risk_worksheet.components.analysis.router import router as analysis_router
from risk_worksheet.components.mitigation.router import router as mitigation_router
from risk_worksheet.components.monitoring.router import router as monitoring_router
from risk_worksheet.components.project.router import router as project_router
from risk_worksheet.components.sources.service import RiskSourcesService
from risk_worksheet.components.events.service import RiskEventsService
from risk_worksheet.components.analysis.service import RiskAnalysisService
from risk_worksheet.components.mitigation.service import MitigationService
from risk_worksheet.components.monitoring.service import MonitoringService
from risk_worksheet.components.project.service import ProjectService
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.services.catalog_store import get_catalog_store


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    settings = get_settings()
    configure_logging(settings.environment, settings.log_level)
    logger = get_logger("main")

    logger.info("Starting Risk Management Worksheet API", version=settings.app_version)

    # Fail at startup rather than on the first request if a catalog is broken
    catalogs = get_catalog_store()
    logger.info("Catalogs ready", **catalogs.summary())

    yield

    logger.info("Shutting down Risk Management Worksheet API")


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount stage routers
app.include_router(sources_router, prefix="/api/v1")
app.include_router(events_router, prefix="/api/v1")
app.include_router(analysis_router, prefix="/api/v1")
app.include_router(mitigation_router, prefix="/api/v1")
app.include_router(monitoring_router, prefix="/api/v1")
app.include_router(project_router, prefix="/api/v1")


@app.get("/api/v1/health")
async def health_check(store: ProjectStore = Depends(get_project_store)):
    """Health check endpoint, aggregated over every stage component."""
    components = [
        RiskSourcesService(store),
        RiskEventsService(store),
        RiskAnalysisService(store),
        MitigationService(store),
        MonitoringService(store),
        ProjectService(store),
    ]
    checks = [await component.health_check() for component in components]
    healthy = all(check["status"] == "healthy" for check in checks)
    return {
        "status": "healthy" if healthy else "degraded",
        "version": settings.app_version,
        "components": checks,
    }


@app.get("/api/v1/config")
async def get_config():
    """Get current configuration (non-sensitive)."""
    return {
        "app_name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "expert_panel_size": settings.expert_panel_size,
        "indicators_per_category": settings.indicators_per_category,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "risk_worksheet.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
    )
