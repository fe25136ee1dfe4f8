"""
Tests for stage 2: expert aggregation, magnitude and classification.
"""

from __future__ import annotations

import math

import pytest

from risk_worksheet.scoring import aggregate, analyze, classify, magnitude

PROBABILITIES = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 0.7]
LOSSES = [0.2, 0.2, 0.4, 0.4, 0.6, 0.6, 0.8, 0.8, 0.3, 0.7]


def test_aggregate_without_weights_is_mean():
    assert aggregate(PROBABILITIES) == pytest.approx(sum(PROBABILITIES) / 10)
    assert aggregate(PROBABILITIES, None) == aggregate(PROBABILITIES, [])


def test_aggregate_with_weights():
    weights = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    expected = sum(v * w for v, w in zip(PROBABILITIES, weights)) / sum(weights)
    assert aggregate(PROBABILITIES, weights) == pytest.approx(expected)


def test_equal_weights_match_unweighted_mean():
    assert aggregate(PROBABILITIES, [3.5] * 10) == pytest.approx(aggregate(PROBABILITIES))


def test_zero_weight_sum_is_not_finite():
    result = aggregate(PROBABILITIES, [0] * 10)
    assert not math.isfinite(result)


@pytest.mark.parametrize(
    "probability, label",
    [
        (0.0, "very low"),
        (0.0999, "very low"),
        (0.1, "low"),
        (0.2499, "low"),
        (0.25, "medium"),
        (0.4999, "medium"),
        (0.5, "high"),
        (0.7499, "high"),
        (0.75, "very high"),
        (1.0, "very high"),
    ],
)
def test_classify_half_open_bands(probability, label):
    assert classify(probability) == label


def test_magnitude_is_product():
    assert magnitude(0.3, 0.7) == 0.3 * 0.7
    assert magnitude(0, 0.9) == 0


def test_analyze_composes_stages():
    risk = analyze("tr1", PROBABILITIES, LOSSES)
    assert risk.risk_id == "tr1"
    assert risk.probability == pytest.approx(0.52)
    assert risk.loss == pytest.approx(0.5)
    assert risk.magnitude == risk.probability * risk.loss
    assert risk.classification == "high"
    assert risk.expert_probabilities == PROBABILITIES
    assert risk.expert_losses == LOSSES
    assert risk.expert_weights is None


def test_analyze_applies_weights_to_both_panels():
    weights = [0, 0, 0, 0, 0, 0, 0, 0, 1, 0]
    risk = analyze("tr2", PROBABILITIES, LOSSES, weights)
    assert risk.probability == pytest.approx(0.9)
    assert risk.loss == pytest.approx(0.3)
    assert risk.classification == "very high"
    assert risk.expert_weights == weights


def test_analyze_is_deterministic():
    first = analyze("tr3", PROBABILITIES, LOSSES, list(range(1, 11)))
    second = analyze("tr3", PROBABILITIES, LOSSES, list(range(1, 11)))
    assert first == second
    assert first.model_dump() == second.model_dump()
