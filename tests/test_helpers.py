import math

import pytest

from scara_control.utils.helpers import (
    angular_distance,
    is_finite,
    normalize_angle,
    round_half_away_from_zero,
)

ANGLES = [
    0.0, -0.0, 90.0, 179.999, 180.0, -180.0, -181.0,
    359.0, 360.0, -540.0, 900.5, 1e6 + 0.3, -7777.25,
]


@pytest.mark.parametrize("angle", ANGLES)
def test_normalize_range_and_congruence(angle):
    n = normalize_angle(angle)
    assert -180.0 <= n < 180.0
    diff = (angle - n) % 360.0
    assert min(diff, 360.0 - diff) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("angle", ANGLES)
def test_normalize_idempotent(angle):
    once = normalize_angle(angle)
    assert normalize_angle(once) == once


def test_normalize_boundaries():
    assert normalize_angle(180.0) == -180.0
    assert normalize_angle(-180.0) == -180.0
    assert normalize_angle(270.0) == -90.0
    assert normalize_angle(-270.0) == 90.0


def test_angular_distance_wraps():
    assert angular_distance(170.0, -170.0) == pytest.approx(20.0)
    assert angular_distance(10.0, 350.0) == pytest.approx(20.0)
    assert angular_distance(0.0, 180.0) == pytest.approx(180.0)


def test_is_finite():
    assert is_finite(1.0, -2.0, 0.0)
    assert not is_finite(1.0, math.nan)
    assert not is_finite(math.inf)


@pytest.mark.parametrize(
    "value, expected",
    [
        (2.5, 3), (-2.5, -3), (0.5, 1), (-0.5, -1), (2.4999, 2), (-0.2, 0), (-0.0, 0),
        (1600.0, 1600), (0.49999999999999994, 0), (-0.49999999999999994, 0),
        (4.499999999999999, 4),
    ],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_round_rejects_nan():
    with pytest.raises(ValueError):
        round_half_away_from_zero(math.nan)
