"""
Tests for stage 2b: priority bands and ranking.
"""

from __future__ import annotations

import pytest

from risk_worksheet.scoring import AnalyzedRisk, prioritize


def risk_with_magnitude(risk_id: str, value: float) -> AnalyzedRisk:
    # Engine output only matters through magnitude here
    return AnalyzedRisk(
        risk_id=risk_id,
        probability=0.5,
        loss=0.5,
        magnitude=value,
        classification="high",
        expert_probabilities=[0.5] * 10,
        expert_losses=[0.5] * 10,
    )


def test_empty_input_gives_empty_output():
    assert prioritize([]) == []


def test_three_bands_sorted_descending():
    risks = [risk_with_magnitude("a", 10), risk_with_magnitude("b", 20), risk_with_magnitude("c", 30)]

    ranked = prioritize(risks)

    assert [r.magnitude for r in ranked] == [30, 20, 10]
    assert [r.priority for r in ranked] == ["high", "medium", "low"]
    thresholds = ranked[0].priority_thresholds
    assert thresholds.min == 10
    assert thresholds.max == 30
    assert thresholds.mpr == pytest.approx(20 / 3)
    assert thresholds.low_threshold == pytest.approx(10 + 20 / 3)
    assert thresholds.high_threshold == pytest.approx(10 + 40 / 3)
    assert all(r.priority_thresholds == thresholds for r in ranked)


def test_single_risk_lands_in_high_band():
    # Degenerate range: mpr is 0 and the upper band is inclusive
    ranked = prioritize([risk_with_magnitude("solo", 0.42)])

    assert len(ranked) == 1
    assert ranked[0].priority == "high"
    assert ranked[0].priority_thresholds.min == 0.42
    assert ranked[0].priority_thresholds.max == 0.42
    assert ranked[0].priority_thresholds.mpr == 0


def test_equal_magnitudes_all_high_and_keep_input_order():
    risks = [risk_with_magnitude(rid, 0.25) for rid in ("x", "y", "z")]

    ranked = prioritize(risks)

    assert [r.risk_id for r in ranked] == ["x", "y", "z"]
    assert {r.priority for r in ranked} == {"high"}


def test_threshold_boundaries_are_inclusive_upwards():
    # min=0, max=3 -> thresholds at exactly 1 and 2
    risks = [risk_with_magnitude(str(m), m) for m in (0, 1, 2, 3)]

    by_id = {r.risk_id: r.priority for r in prioritize(risks)}

    assert by_id == {"0": "low", "1": "medium", "2": "high", "3": "high"}


def test_prioritize_keeps_analysis_fields():
    original = risk_with_magnitude("tr1", 0.3)
    ranked = prioritize([original, risk_with_magnitude("tr2", 0.1)])

    top = ranked[0]
    assert top.risk_id == "tr1"
    assert top.expert_probabilities == original.expert_probabilities
    assert top.classification == original.classification
