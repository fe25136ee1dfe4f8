from typing import Optional

from risk_worksheet.components.base.component import BaseComponent
from risk_worksheet.components.base.exceptions import (
    IndicatorNotFoundError,
    InvalidCardinalityError,
    InvalidEstimateError,
)
from risk_worksheet.components.project.state import ProjectStore, get_project_store
from risk_worksheet.scoring import aggregate_sources
from risk_worksheet.scoring.models import RiskSourceCatalog
from .models import RiskSourcesResponse, UpdateIndicatorRequest


class RiskSourcesService(BaseComponent[RiskSourceCatalog, RiskSourcesResponse]):
    """Stage 1: risk-source identification as a component."""

    def __init__(self, store: Optional[ProjectStore] = None):
        self.store = store or get_project_store()

    @property
    def component_name(self) -> str:
        return "risk_sources"

    async def process(self, request: RiskSourceCatalog) -> RiskSourcesResponse:
        """Replace the working catalog and score it."""
        self._validate_catalog(request)

        with self.store.transaction() as state:
            state.risk_sources = request.model_copy(deep=True)
            response = self._build_response(state.risk_sources)

        self.logger.info("Risk sources updated", total_score=response.probabilities.total_score)
        return response

    async def get_catalog(self) -> RiskSourceCatalog:
        """Pristine catalog, every indicator absent."""
        return self.store.catalogs.risk_sources()

    async def get_current(self) -> RiskSourcesResponse:
        with self.store.transaction() as state:
            return self._build_response(state.risk_sources)

    async def set_indicator(
        self, category: str, indicator_id: str, request: UpdateIndicatorRequest
    ) -> RiskSourcesResponse:
        """Toggle or set one indicator in the working catalog."""
        if category not in RiskSourceCatalog.CATEGORIES:
            raise InvalidEstimateError(
                f"Unknown risk-source category '{category}'",
                component=self.component_name,
                details={"category": category, "allowed": list(RiskSourceCatalog.CATEGORIES)},
            )
        if request.value is not None and request.value not in (0, 1):
            raise InvalidEstimateError(
                "Indicator value must be 0 or 1",
                component=self.component_name,
                details={"indicator_id": indicator_id, "value": request.value},
            )

        with self.store.transaction() as state:
            indicator = next(
                (i for i in state.risk_sources.category(category).risks if i.id == indicator_id),
                None,
            )
            if indicator is None:
                raise IndicatorNotFoundError(
                    f"Indicator {indicator_id} not found in category '{category}'",
                    component=self.component_name,
                )
            indicator.value = 1 - indicator.value if request.value is None else request.value
            response = self._build_response(state.risk_sources)

        self.logger.info(
            "Risk source indicator set",
            category=category,
            indicator_id=indicator_id,
            value=indicator.value,
        )
        return response

    def _validate_catalog(self, catalog: RiskSourceCatalog) -> None:
        expected = self.store.catalogs.indicators_per_category
        for name in RiskSourceCatalog.CATEGORIES:
            indicators = catalog.category(name).risks
            if len(indicators) != expected:
                raise InvalidCardinalityError(
                    f"Category '{name}' must contain {expected} indicators, got {len(indicators)}",
                    component=self.component_name,
                    details={"category": name, "expected": expected, "actual": len(indicators)},
                )
            non_binary = [i.id for i in indicators if i.value not in (0, 1)]
            if non_binary:
                raise InvalidEstimateError(
                    f"Indicator values in '{name}' must be 0 or 1",
                    component=self.component_name,
                    details={"category": name, "indicators": non_binary},
                )

    def _build_response(self, catalog: RiskSourceCatalog) -> RiskSourcesResponse:
        return RiskSourcesResponse(
            risk_sources=catalog.model_copy(deep=True),
            probabilities=aggregate_sources(catalog),
        )
