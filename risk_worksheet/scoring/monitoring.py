"""
Stage 4: re-evaluate a risk after mitigation and compare with its analysis.
"""

import math
from typing import Optional, Sequence

from .analysis import aggregate, classify, magnitude
from .models import AnalyzedRisk, RiskComparison, RiskSnapshot


def reduction_percentage(reduction: float, original_magnitude: float) -> float:
    """reduction / original * 100, non-finite when the original magnitude is 0."""
    if original_magnitude == 0:
        if reduction == 0:
            return math.nan
        return math.copysign(math.inf, reduction)
    return reduction / original_magnitude * 100


def compare(
    before: AnalyzedRisk,
    new_probabilities: Sequence[float],
    new_losses: Sequence[float],
    expert_weights: Optional[Sequence[float]] = None,
) -> RiskComparison:
    """
    Aggregate post-mitigation estimates and diff them against ``before``.

    Args:
        before: The risk's original analysis (left untouched)
        new_probabilities: Post-mitigation probability estimates
        new_losses: Post-mitigation loss estimates
        expert_weights: Optional weights applied to both new panels

    Returns:
        Comparison with both snapshots, the magnitude reduction and whether
        the risk strictly improved
    """
    probability = aggregate(new_probabilities, expert_weights)
    loss = aggregate(new_losses, expert_weights)
    after_magnitude = magnitude(probability, loss)

    reduction = before.magnitude - after_magnitude

    return RiskComparison(
        before=RiskSnapshot(
            probability=before.probability,
            loss=before.loss,
            magnitude=before.magnitude,
            classification=before.classification,
        ),
        after=RiskSnapshot(
            probability=probability,
            loss=loss,
            magnitude=after_magnitude,
            classification=classify(probability),
        ),
        reduction=reduction,
        reduction_percentage=reduction_percentage(reduction, before.magnitude),
        improved=after_magnitude < before.magnitude,
    )
