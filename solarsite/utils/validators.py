"""Input validation utilities."""

from collections.abc import Mapping
from numbers import Integral, Real
from typing import Any, Iterable

from solarsite.exceptions import InvalidInputError
from solarsite.utils.logging import get_logger

logger = get_logger(__name__)


def fits_float(value: Real) -> bool:
    """True if the number converts to a float without overflowing."""
    try:
        float(value)
    except OverflowError:
        return False
    return True


def is_metric_value(value: Any) -> bool:
    """True for a float-convertible real number or None (unavailable).

    Booleans are rejected.
    """
    if value is None:
        return True
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return fits_float(value)


def validate_raw_metrics(metrics: Any, required_keys: Iterable[str]) -> bool:
    """Validate the shape of a raw metrics mapping.

    Every required key must be present. Values must be numbers or None;
    None marks a metric the acquisition pipeline could not produce.

    Args:
        metrics: Mapping of criterion key -> raw value
        required_keys: Keys that must be present

    Returns:
        True if valid

    Raises:
        InvalidInputError: If metrics is not a mapping, keys are missing,
            or values are not numeric
    """
    if not isinstance(metrics, Mapping):
        raise InvalidInputError(
            "Raw metrics must be a mapping",
            details={"type": type(metrics).__name__}
        )

    required = list(required_keys)

    missing = [key for key in required if key not in metrics]
    if missing:
        raise InvalidInputError(
            "Missing required metrics",
            details={"missing": missing}
        )

    invalid = {
        key: type(metrics[key]).__name__
        for key in required
        if not is_metric_value(metrics[key])
    }
    if invalid:
        raise InvalidInputError(
            "Metric values must be numbers or null",
            details={"invalid": invalid}
        )

    extra = sorted(set(metrics) - set(required))
    if extra:
        logger.debug("Ignoring unscored metrics", keys=extra)

    return True


def validate_land_ownership(code: Any) -> bool:
    """Validate the manually supplied land-ownership code.

    Args:
        code: Integer ownership code (1 = government, other = private)

    Returns:
        True if valid

    Raises:
        InvalidInputError: If the code is missing or not an integer
    """
    if code is None or isinstance(code, bool) or not isinstance(code, Integral):
        raise InvalidInputError(
            "Land ownership code must be an integer",
            details={"value": code}
        )
    if not fits_float(code):
        raise InvalidInputError(
            "Land ownership code is out of range",
            details={"value": code}
        )
    return True
