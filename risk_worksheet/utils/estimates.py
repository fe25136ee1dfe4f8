"""
Boundary validation for expert-panel estimates.

The scoring functions trust their inputs; everything they assume about
panel size, value range and weights is checked here before any project
state is touched.
"""

import math
from typing import List, Optional, Sequence

from risk_worksheet.components.base.config import get_settings
from risk_worksheet.components.base.exceptions import (
    InvalidCardinalityError,
    InvalidEstimateError,
    InvalidWeightsError,
    MissingParameterError,
)


def require(component: str, **params) -> None:
    """Raise MissingParameterError naming every absent parameter."""
    missing = [name for name, value in params.items() if value is None or value == ""]
    if missing:
        raise MissingParameterError(
            f"Missing required parameters: {', '.join(missing)}",
            component=component,
            details={"missing": missing},
        )


def _check_panel(name: str, values: Sequence[float], component: str, panel_size: int) -> None:
    if len(values) != panel_size:
        raise InvalidCardinalityError(
            f"{panel_size} expert estimates required for {name}, got {len(values)}",
            component=component,
            details={"field": name, "expected": panel_size, "actual": len(values)},
        )


def validate_panel(
    probabilities: Sequence[float],
    losses: Sequence[float],
    weights: Optional[Sequence[float]],
    component: str,
    probabilities_field: str = "expert_probabilities",
    losses_field: str = "expert_losses",
) -> Optional[List[float]]:
    """
    Check one set of expert estimates.

    Probabilities and losses must each hold exactly one value per expert,
    every value finite and within [0, 1]. Weights, when given, must match
    the panel size, be non-negative and not sum to zero.

    Returns:
        The weights to aggregate with; an empty list is treated as absent
        and comes back as None.
    """
    panel_size = get_settings().expert_panel_size

    _check_panel(probabilities_field, probabilities, component, panel_size)
    _check_panel(losses_field, losses, component, panel_size)

    for field, values in ((probabilities_field, probabilities), (losses_field, losses)):
        out_of_range = [i for i, v in enumerate(values) if not (math.isfinite(v) and 0 <= v <= 1)]
        if out_of_range:
            raise InvalidEstimateError(
                f"Estimates in {field} must lie within [0, 1]",
                component=component,
                details={"field": field, "indexes": out_of_range},
            )

    if not weights:
        return None

    _check_panel("expert_weights", weights, component, panel_size)
    negative = [i for i, w in enumerate(weights) if not math.isfinite(w) or w < 0]
    if negative:
        raise InvalidEstimateError(
            "Expert weights must be finite and non-negative",
            component=component,
            details={"field": "expert_weights", "indexes": negative},
        )
    total = sum(weights)
    if total == 0:
        raise InvalidWeightsError(
            "Expert weights sum to zero",
            component=component,
            details={"field": "expert_weights"},
        )
    if not math.isfinite(total):
        raise InvalidWeightsError(
            "Expert weights sum is not finite",
            component=component,
            details={"field": "expert_weights"},
        )
    return list(weights)
