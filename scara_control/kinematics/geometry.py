"""
Immutable geometry of the two-link arm.

Classes:
    LinkGeometry: Lengths of the upper arm and forearm.
    JointLimits: Allowed shoulder range in the mathematical frame.

Functions:
    forward_kinematics: End-effector position from joint angles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from scara_control.utils.constants import (
    LINK1_LENGTH_MM,
    LINK2_LENGTH_MM,
    SHOULDER_LIMITS_DEG,
)


@dataclass(frozen=True)
class LinkGeometry:
    """Link lengths of the arm in millimetres.

    Attributes:
        l1: Shoulder-to-elbow length.
        l2: Elbow-to-end-effector length.
    """

    l1: float = LINK1_LENGTH_MM
    l2: float = LINK2_LENGTH_MM

    def __post_init__(self) -> None:
        """Reject non-positive or non-finite link lengths."""
        for name, length in (("l1", self.l1), ("l2", self.l2)):
            if not math.isfinite(length) or length <= 0.0:
                raise ValueError(f"Link length {name} must be positive, got {length}")

    @property
    def max_reach(self) -> float:
        """Distance from the shoulder at full extension."""
        return self.l1 + self.l2


@dataclass(frozen=True)
class JointLimits:
    """Inclusive shoulder range in degrees, mathematical frame.

    Attributes:
        min: Lower bound.
        max: Upper bound.
    """

    min: float = SHOULDER_LIMITS_DEG[0]
    max: float = SHOULDER_LIMITS_DEG[1]

    def __post_init__(self) -> None:
        """Enforce ``min < max`` and a width of at most one turn."""
        if not self.min < self.max:
            raise ValueError(f"Joint limits need min < max, got [{self.min}, {self.max}]")
        if self.max - self.min > 360.0:
            raise ValueError(
                f"Joint limit range is {self.max - self.min} deg wide; at most 360 allowed"
            )

    def contains(self, angle: float) -> bool:
        """Return True if *angle* lies within the closed range."""
        return self.min <= angle <= self.max


def forward_kinematics(
    geometry: LinkGeometry, theta1: float, theta2: float
) -> Tuple[float, float]:
    """Compute the end-effector position for a pair of joint angles.

    *theta2* is the elbow angle relative to the upper arm, so the forearm
    points along ``theta1 + theta2``.

    Args:
        geometry: Link lengths.
        theta1: Shoulder angle in degrees.
        theta2: Elbow angle in degrees.

    Returns:
        Tuple ``(x, y)`` in millimetres.
    """
    cum_angles = np.radians(np.cumsum([theta1, theta2]))
    lengths = np.array([geometry.l1, geometry.l2])
    x = float(np.sum(lengths * np.cos(cum_angles)))
    y = float(np.sum(lengths * np.sin(cum_angles)))
    return x, y
