"""
Small stateless helpers used across the scara_control package.

Provides angle normalization into the canonical ``[-180, 180)`` range,
signed angular distance, finiteness checks, and the half-away-from-zero
rounding used by the step quantizer.
"""

from __future__ import annotations

import math

import numpy as np


def normalize_angle(angle: float) -> float:
    """Map *angle* (degrees) into the half-open range ``[-180, 180)``.

    Works for negative inputs and inputs of any magnitude; the result is
    congruent to *angle* modulo 360.

    Args:
        angle: Angle in degrees.

    Returns:
        The equivalent angle in ``[-180, 180)``.
    """
    wrapped = math.fmod(angle + 180.0, 360.0)
    if wrapped < 0.0:
        wrapped += 360.0
    result = wrapped - 180.0
    # fmod of a tiny negative value can land exactly on +180 after the shift
    if result >= 180.0:
        result -= 360.0
    return result


def angular_distance(a: float, b: float) -> float:
    """Return the magnitude of the shortest rotation from *b* to *a* (degrees).

    Args:
        a: First angle in degrees.
        b: Second angle in degrees.

    Returns:
        A value in ``[0, 180]``.
    """
    return abs(normalize_angle(a - b))


def is_finite(*values: float) -> bool:
    """Return True when every value is a finite number."""
    return bool(np.all(np.isfinite(np.asarray(values, dtype=np.float64))))


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, breaking ties away from zero.

    Python's built-in ``round`` uses banker's rounding; the stepper
    calibration expects ``2.5 -> 3`` and ``-2.5 -> -3``.

    Args:
        value: A finite real number.

    Returns:
        The rounded integer.

    Raises:
        ValueError: If *value* is not finite.
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value!r}")
    whole = math.floor(abs(value))
    # Compare the exact fractional part; adding 0.5 first can round up by one ulp
    magnitude = whole + 1 if abs(value) - whole >= 0.5 else whole
    return -magnitude if value < 0 else magnitude
