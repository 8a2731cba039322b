"""Normalize raw site metrics onto the 1-10 suitability scale."""

from typing import Callable, Optional

import numpy as np

from solarsite.exceptions import InvalidInputError
from solarsite.types import CriterionSpec, ScoringPolicy
from solarsite.utils.logging import get_logger

logger = get_logger(__name__)

MIN_SCORE = 1.0
MAX_SCORE = 10.0
# Reserved for "could not evaluate", distinct from a poor score
UNAVAILABLE_SCORE = 0.0

ELEVATION_RANGE_M = (50.0, 1500.0)
ELEVATION_IN_RANGE_SCORE = 10.0
ELEVATION_OUT_OF_RANGE_SCORE = 2.0

# ESA WorldCover: 10 trees, 20 shrub, 30 grass, 40 cropland, 50 built-up, 60 bare
FAVORABLE_LAND_COVER_CODES = frozenset({30, 40, 60})
FAVORABLE_LAND_COVER_SCORE = 10.0
UNFAVORABLE_LAND_COVER_SCORE = 3.0

GOVERNMENT_LAND_CODE = 1
GOVERNMENT_LAND_SCORE = 10.0
PRIVATE_LAND_SCORE = 5.0

Scorer = Callable[[CriterionSpec, Optional[float]], float]


def is_unavailable(value: Optional[float]) -> bool:
    """True for None, NaN, or infinite raw values."""
    return value is None or not np.isfinite(float(value))


def score_linear_threshold(criterion: CriterionSpec, value: Optional[float]) -> float:
    """Interpolate linearly between the worst (1) and best (10) thresholds.

    Values beyond either threshold are clamped to that threshold's score.
    """
    if is_unavailable(value):
        return UNAVAILABLE_SCORE

    value = float(value)
    best = criterion.thresholds.best
    worst = criterion.thresholds.worst

    # np.interp wants increasing sample points
    if criterion.higher_is_better:
        score = np.interp(value, [worst, best], [MIN_SCORE, MAX_SCORE])
    else:
        score = np.interp(value, [best, worst], [MAX_SCORE, MIN_SCORE])

    return float(score)


def score_elevation_range(criterion: CriterionSpec, value: Optional[float]) -> float:
    """Fixed score depending on whether elevation lies in the closed optimal band."""
    if is_unavailable(value):
        return UNAVAILABLE_SCORE

    low, high = ELEVATION_RANGE_M
    if low <= value <= high:
        return ELEVATION_IN_RANGE_SCORE
    return ELEVATION_OUT_OF_RANGE_SCORE


def score_land_cover(criterion: CriterionSpec, value: Optional[float]) -> float:
    """Fixed score depending on whether the land-cover code is favorable."""
    if is_unavailable(value):
        return UNAVAILABLE_SCORE

    if value in FAVORABLE_LAND_COVER_CODES:
        return FAVORABLE_LAND_COVER_SCORE
    return UNFAVORABLE_LAND_COVER_SCORE


def score_manual_ownership(criterion: CriterionSpec, value: Optional[float]) -> float:
    """Government land scores 10, any other ownership code scores 5.

    Raises:
        InvalidInputError: If no ownership code was supplied
    """
    if is_unavailable(value):
        raise InvalidInputError(
            "Land ownership must be supplied by the caller",
            details={"criterion": criterion.key, "value": value}
        )

    if value == GOVERNMENT_LAND_CODE:
        return GOVERNMENT_LAND_SCORE
    return PRIVATE_LAND_SCORE


POLICY_SCORERS: dict[ScoringPolicy, Scorer] = {
    ScoringPolicy.LINEAR_THRESHOLD: score_linear_threshold,
    ScoringPolicy.ELEVATION_RANGE: score_elevation_range,
    ScoringPolicy.LAND_COVER_CATEGORY: score_land_cover,
    ScoringPolicy.MANUAL_OWNERSHIP: score_manual_ownership,
}


def score_criterion(criterion: CriterionSpec, raw_value: Optional[float]) -> float:
    """Score one raw value according to its criterion's policy.

    Args:
        criterion: Catalog entry describing the policy
        raw_value: Raw measurement, or None if unavailable

    Returns:
        Score in [1, 10], or 0 if the value is unavailable
    """
    scorer = POLICY_SCORERS[criterion.policy]
    score = scorer(criterion, raw_value)

    logger.debug(
        f"Scored criterion: {criterion.key}",
        policy=criterion.policy.value,
        raw_value=raw_value,
        score=score,
    )

    return score
