import math

import pytest

from scara_control.kinematics.geometry import JointLimits, LinkGeometry, forward_kinematics


def test_forward_kinematics_straight_up():
    x, y = forward_kinematics(LinkGeometry(100.0, 100.0), 90.0, 0.0)
    assert x == pytest.approx(0.0, abs=1e-9)
    assert y == pytest.approx(200.0)


def test_forward_kinematics_folded_elbow():
    # Forearm turned back 90 deg from an upper arm pointing along +X
    x, y = forward_kinematics(LinkGeometry(100.0, 50.0), 0.0, 90.0)
    assert x == pytest.approx(100.0)
    assert y == pytest.approx(50.0)


def test_max_reach():
    assert LinkGeometry(120.0, 80.0).max_reach == 200.0


@pytest.mark.parametrize("l1, l2", [(0.0, 100.0), (100.0, -1.0), (math.nan, 100.0)])
def test_link_geometry_rejects_bad_lengths(l1, l2):
    with pytest.raises(ValueError):
        LinkGeometry(l1, l2)


def test_joint_limits_inclusive():
    limits = JointLimits(0.0, 180.0)
    assert limits.contains(0.0)
    assert limits.contains(180.0)
    assert not limits.contains(-0.01)
    assert not limits.contains(180.01)


@pytest.mark.parametrize("lo, hi", [(10.0, 10.0), (90.0, 0.0), (-200.0, 200.0)])
def test_joint_limits_validation(lo, hi):
    with pytest.raises(ValueError):
        JointLimits(lo, hi)
