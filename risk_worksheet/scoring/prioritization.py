"""
Stage 2b: rank analyzed risks into three priority bands.

The bands split the [min, max] magnitude range into equal thirds. Both
thresholds are inclusive on their upper side, so when every magnitude is
equal (including a single risk) mpr is 0 and every risk falls into "high".
"""

from typing import Iterable, List

from .models import AnalyzedRisk, Priority, PrioritizedRisk, PriorityThresholds


def compute_thresholds(magnitudes: List[float]) -> PriorityThresholds:
    lowest = min(magnitudes)
    highest = max(magnitudes)
    mpr = (highest - lowest) / 3

    return PriorityThresholds(
        min=lowest,
        max=highest,
        mpr=mpr,
        low_threshold=lowest + mpr,
        high_threshold=lowest + 2 * mpr,
    )


def assign_priority(risk_magnitude: float, thresholds: PriorityThresholds) -> Priority:
    if risk_magnitude < thresholds.low_threshold:
        return "low"
    if risk_magnitude < thresholds.high_threshold:
        return "medium"
    return "high"


def prioritize(risks: Iterable[AnalyzedRisk]) -> List[PrioritizedRisk]:
    """
    Attach a priority band and the shared thresholds to every risk.

    Args:
        risks: Analyzed risks in any order; may be empty

    Returns:
        Prioritized risks sorted by magnitude, largest first. Ties keep
        their input order.
    """
    risks = list(risks)
    if not risks:
        return []

    thresholds = compute_thresholds([risk.magnitude for risk in risks])

    prioritized = [
        PrioritizedRisk(
            **risk.model_dump(),
            priority=assign_priority(risk.magnitude, thresholds),
            priority_thresholds=thresholds,
        )
        for risk in risks
    ]
    # sorted() is stable, ties keep insertion order
    return sorted(prioritized, key=lambda r: r.magnitude, reverse=True)
