"""
Stage 1: risk-source probabilities.

Each category score is the share of present indicators out of a fixed
panel of 18, the total is the plain sum of the four category scores and
is not bounded to [0, 1].
"""

from typing import Iterable

from .models import RiskSourceCatalog, RiskSourceIndicator, SourceScores

INDICATORS_PER_CATEGORY = 18


def score_category(indicators: Iterable[RiskSourceIndicator]) -> float:
    """Sum of indicator values divided by 18 (not by the list length)."""
    return sum(indicator.value for indicator in indicators) / INDICATORS_PER_CATEGORY


def aggregate_sources(catalog: RiskSourceCatalog) -> SourceScores:
    technical = score_category(catalog.technical.risks)
    cost = score_category(catalog.cost.risks)
    schedule = score_category(catalog.schedule.risks)
    management = score_category(catalog.management.risks)

    return SourceScores(
        technical_score=technical,
        cost_score=cost,
        schedule_score=schedule,
        management_score=management,
        total_score=technical + cost + schedule + management,
    )
