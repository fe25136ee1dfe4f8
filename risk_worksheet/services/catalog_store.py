"""
Catalog Store

Loads the static risk-source, risk-event and mitigation-measure catalogs
from JSON once per process and hands out copies so the pristine catalogs
can always be restored on project reset.
"""

import json
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from risk_worksheet.components.base.config import get_settings
from risk_worksheet.components.base.exceptions import CatalogLoadError
from risk_worksheet.components.base.logging import get_logger
from risk_worksheet.schemas.catalog import MitigationMeasure, RiskEventCatalog
from risk_worksheet.scoring.models import RiskSourceCatalog

logger = get_logger(__name__)


class CatalogStore:
    """
    Read-only access to the three static catalogs.

    The risk-source catalog is returned as a deep copy on every call because
    the project mutates its working copy when indicators are toggled.
    """

    _instance: Optional["CatalogStore"] = None
    _lock = threading.Lock()

    def __init__(self, catalog_dir: Optional[Path] = None):
        settings = get_settings()
        self.catalog_dir = Path(catalog_dir or settings.catalog_dir)
        self.indicators_per_category = settings.indicators_per_category

        self._risk_sources = self._load_risk_sources(settings.risk_sources_file)
        self._risk_events = RiskEventCatalog.model_validate(
            self._read_json(settings.risk_events_file)
        )
        self._measures = self._load_measures(settings.mitigation_measures_file)

        logger.info(
            "Catalogs loaded",
            catalog_dir=str(self.catalog_dir),
            measures=len(self._measures),
        )

    @classmethod
    def get_instance(cls) -> "CatalogStore":
        """Thread-safe singleton instance"""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def _read_json(self, filename: str) -> Any:
        filepath = self.catalog_dir / filename
        try:
            with open(filepath, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                f"Failed to load catalog {filename}: {e}",
                component="catalog",
                details={"path": str(filepath)},
            ) from e

    def _load_risk_sources(self, filename: str) -> RiskSourceCatalog:
        try:
            catalog = RiskSourceCatalog.model_validate(self._read_json(filename))
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid risk-source catalog: {e}", component="catalog") from e

        for name in RiskSourceCatalog.CATEGORIES:
            count = len(catalog.category(name).risks)
            if count != self.indicators_per_category:
                raise CatalogLoadError(
                    f"Category '{name}' has {count} indicators, expected {self.indicators_per_category}",
                    component="catalog",
                    details={"category": name, "count": count},
                )
        return catalog

    def _load_measures(self, filename: str) -> List[MitigationMeasure]:
        try:
            return [MitigationMeasure.model_validate(m) for m in self._read_json(filename)]
        except ValidationError as e:
            raise CatalogLoadError(f"Invalid mitigation catalog: {e}", component="catalog") from e

    def risk_sources(self) -> RiskSourceCatalog:
        return self._risk_sources.model_copy(deep=True)

    def risk_events(self) -> RiskEventCatalog:
        return self._risk_events.model_copy(deep=True)

    def mitigation_measures(self) -> List[MitigationMeasure]:
        return list(self._measures)

    def find_measure(self, measure_id: str) -> Optional[MitigationMeasure]:
        for measure in self._measures:
            if measure.id == measure_id:
                return measure
        return None

    def summary(self) -> Dict[str, int]:
        return {
            "risk_source_indicators": sum(
                len(self._risk_sources.category(name).risks) for name in RiskSourceCatalog.CATEGORIES
            ),
            "risk_events": sum(
                len(getattr(self._risk_events, name)) for name in RiskSourceCatalog.CATEGORIES
            ),
            "mitigation_measures": len(self._measures),
        }


def get_catalog_store() -> CatalogStore:
    return CatalogStore.get_instance()
