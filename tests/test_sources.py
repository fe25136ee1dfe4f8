"""
Tests for stage 1: risk-source category probabilities.
"""

from __future__ import annotations

import pytest

from risk_worksheet.scoring import RiskSourceCatalog, aggregate_sources, score_category
from risk_worksheet.scoring.models import RiskSourceIndicator

CATEGORIES = ("technical", "cost", "schedule", "management")


def make_catalog(present: dict[str, int]) -> RiskSourceCatalog:
    """Catalog with the first ``present[category]`` indicators set to 1."""
    data = {}
    for category in CATEGORIES:
        count = present.get(category, 0)
        data[category] = {
            "risks": [
                {"id": f"{category[0]}{i}", "name": f"{category} source {i}", "value": int(i < count)}
                for i in range(18)
            ]
        }
    return RiskSourceCatalog.model_validate(data)


def test_empty_catalog_scores_zero():
    scores = aggregate_sources(make_catalog({}))
    assert scores.technical_score == 0
    assert scores.cost_score == 0
    assert scores.schedule_score == 0
    assert scores.management_score == 0
    assert scores.total_score == 0


@pytest.mark.parametrize("count", [0, 1, 9, 17, 18])
def test_category_score_is_share_of_present_indicators(count):
    scores = aggregate_sources(make_catalog({"cost": count}))
    assert scores.cost_score == pytest.approx(count / 18)
    assert scores.technical_score == 0


def test_total_is_plain_sum_and_may_exceed_one():
    scores = aggregate_sources(make_catalog({"technical": 18, "cost": 9, "schedule": 18, "management": 6}))
    assert scores.technical_score == 1.0
    assert scores.cost_score == pytest.approx(0.5)
    assert scores.total_score == pytest.approx(1.0 + 0.5 + 1.0 + 6 / 18)
    assert scores.total_score > 1


def test_score_category_divides_by_eighteen_not_length():
    indicators = [RiskSourceIndicator(id="x1", name="only", value=1)]
    assert score_category(indicators) == pytest.approx(1 / 18)
