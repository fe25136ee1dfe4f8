"""Shared Pydantic schemas for catalog and project records."""

from risk_worksheet.schemas.catalog import MitigationMeasure, RiskEvent, RiskEventCatalog
from risk_worksheet.schemas.project import MitigationPlan, MonitoringResult

__all__ = [
    "MitigationMeasure",
    "MitigationPlan",
    "MonitoringResult",
    "RiskEvent",
    "RiskEventCatalog",
]
