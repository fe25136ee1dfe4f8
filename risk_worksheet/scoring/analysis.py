"""
Stage 2: expert-panel aggregation and classification of a single risk.
"""

import math
from typing import Optional, Sequence

from .models import AnalyzedRisk, Classification

# Upper bounds of the half-open probability bands, checked in order
CLASSIFICATION_BANDS = (
    (0.10, "very low"),
    (0.25, "low"),
    (0.50, "medium"),
    (0.75, "high"),
)


def aggregate(values: Sequence[float], weights: Optional[Sequence[float]] = None) -> float:
    """
    Combine one estimate per expert into a single value.

    Without weights (None or empty) this is the arithmetic mean. With weights
    it is sum(value_i * weight_i) / sum(weight_i), pairing values and weights
    by position.

    A weight vector summing to zero yields nan rather than raising; callers
    must reject all-zero weights before getting here.

    Args:
        values: Expert estimates
        weights: Optional per-expert weights, same length as values

    Returns:
        Aggregated estimate
    """
    if not weights:
        return sum(values) / len(values)

    weighted_sum = 0.0
    weight_sum = 0.0
    for value, weight in zip(values, weights):
        weighted_sum += value * weight
        weight_sum += weight

    if weight_sum == 0:
        return math.nan
    return weighted_sum / weight_sum


def magnitude(probability: float, loss: float) -> float:
    return probability * loss


def classify(probability: float) -> Classification:
    """Map a probability to its qualitative band."""
    for upper_bound, label in CLASSIFICATION_BANDS:
        if probability < upper_bound:
            return label
    return "very high"


def analyze(
    risk_id: str,
    expert_probabilities: Sequence[float],
    expert_losses: Sequence[float],
    expert_weights: Optional[Sequence[float]] = None,
) -> AnalyzedRisk:
    """Aggregate both panels with the same weights and score the result."""
    probability = aggregate(expert_probabilities, expert_weights)
    loss = aggregate(expert_losses, expert_weights)

    return AnalyzedRisk(
        risk_id=risk_id,
        probability=probability,
        loss=loss,
        magnitude=magnitude(probability, loss),
        classification=classify(probability),
        expert_probabilities=list(expert_probabilities),
        expert_losses=list(expert_losses),
        expert_weights=list(expert_weights) if expert_weights is not None else None,
    )
