import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from pydantic import BaseModel, Field

from risk_worksheet.schemas.project import MitigationPlan, MonitoringResult
from risk_worksheet.scoring.models import AnalyzedRisk, RiskSourceCatalog
from risk_worksheet.services.catalog_store import CatalogStore, get_catalog_store


class ProjectState(BaseModel):
    """Everything the worksheet remembers about the current project.

    The last three collections are keyed by risk id; writing the same id
    again replaces the previous record.
    """

    risk_sources: RiskSourceCatalog
    selected_events: List[str] = Field(default_factory=list)
    analyzed_risks: Dict[str, AnalyzedRisk] = Field(default_factory=dict)
    mitigation_plans: Dict[str, MitigationPlan] = Field(default_factory=dict)
    monitoring_results: Dict[str, MonitoringResult] = Field(default_factory=dict)


class ProjectStore:
    """Single ownership point for the project state.

    Every read that leads to a write goes through ``transaction()`` so two
    requests touching the same risk id are serialized.
    """

    def __init__(self, catalogs: Optional[CatalogStore] = None):
        self.catalogs = catalogs or get_catalog_store()
        self._lock = threading.RLock()
        self._state = self._fresh_state()

    def _fresh_state(self) -> ProjectState:
        return ProjectState(risk_sources=self.catalogs.risk_sources())

    @contextmanager
    def transaction(self) -> Iterator[ProjectState]:
        with self._lock:
            yield self._state

    def reset(self) -> None:
        """Restore the original source catalog and drop all stage data."""
        with self._lock:
            self._state = self._fresh_state()


_store: ProjectStore | None = None
_store_lock = threading.Lock()


def get_project_store() -> ProjectStore:
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = ProjectStore()
    return _store
