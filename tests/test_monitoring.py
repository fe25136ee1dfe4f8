"""
Tests for stage 4: before/after comparison.
"""

from __future__ import annotations

import math

import pytest

from risk_worksheet.scoring import AnalyzedRisk, analyze, compare


def before_with(probability: float, loss: float) -> AnalyzedRisk:
    return analyze("tr1", [probability] * 10, [loss] * 10)


def test_reduction_and_percentage():
    before = before_with(1.0, 0.5)
    comparison = compare(before, [0.4] * 10, [0.5] * 10)

    assert before.magnitude == 0.5
    assert comparison.after.magnitude == pytest.approx(0.2)
    assert comparison.reduction == pytest.approx(0.3)
    assert comparison.reduction_percentage == pytest.approx(60.0)
    assert comparison.improved is True


def test_equal_magnitude_is_not_improved():
    before = before_with(1.0, 0.5)
    comparison = compare(before, [0.5] * 10, [1.0] * 10)

    assert comparison.after.magnitude == before.magnitude
    assert comparison.reduction == 0
    assert comparison.improved is False


def test_worse_risk_has_negative_reduction():
    before = before_with(0.2, 0.5)
    comparison = compare(before, [0.8] * 10, [0.5] * 10)

    assert comparison.reduction < 0
    assert comparison.reduction_percentage < 0
    assert comparison.improved is False
    assert comparison.after.classification == "very high"


def test_snapshots_copy_original_analysis():
    before = before_with(0.3, 0.6)
    comparison = compare(before, [0.2] * 10, [0.6] * 10)

    assert comparison.before.probability == before.probability
    assert comparison.before.loss == before.loss
    assert comparison.before.magnitude == before.magnitude
    assert comparison.before.classification == "medium"
    assert comparison.after.classification == "low"
    # the original record is left as it was
    assert before.probability == pytest.approx(0.3)


def test_weights_apply_to_both_new_panels():
    before = before_with(0.5, 0.5)
    probabilities = [0.1] * 9 + [0.9]
    losses = [0.2] * 9 + [0.4]
    comparison = compare(before, probabilities, losses, [0] * 9 + [1])

    assert comparison.after.probability == pytest.approx(0.9)
    assert comparison.after.loss == pytest.approx(0.4)


def test_zero_original_magnitude_gives_non_finite_percentage():
    before = before_with(0.0, 0.5)

    unchanged = compare(before, [0.0] * 10, [0.5] * 10)
    assert math.isnan(unchanged.reduction_percentage)

    worse = compare(before, [0.5] * 10, [0.5] * 10)
    assert worse.reduction_percentage == -math.inf


def test_non_finite_percentage_serializes_as_null():
    before = before_with(0.0, 0.5)
    comparison = compare(before, [0.0] * 10, [0.5] * 10)

    assert comparison.model_dump(mode="json")["reduction_percentage"] is None
