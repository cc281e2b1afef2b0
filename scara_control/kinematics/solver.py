"""
Inverse kinematics for the two-link planar arm.

Every reachable target has two mathematical solutions (elbow configuration
A with a positive elbow angle, and its mirror B).  The solver computes both
and keeps the one that respects the shoulder limits; when both do, it keeps
the one needing the smaller shoulder rotation from the last accepted angle.

The solver itself holds no mutable state.  The caller passes the current
shoulder angle in and decides whether to commit the accepted pose.

Classes:
    Pose: A pair of normalized joint angles.
    RejectionReason: Why a target produced no command.
    IKResult: Tagged outcome of a solve (pose or rejection).
    IKSolver: Candidate generation and selection.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from scara_control.kinematics.geometry import JointLimits, LinkGeometry
from scara_control.utils.constants import REACH_TOLERANCE_MM
from scara_control.utils.helpers import angular_distance, is_finite, normalize_angle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pose:
    """Joint angles in the mathematical frame, degrees in ``[-180, 180)``.

    Attributes:
        theta1: Shoulder angle measured from +X.
        theta2: Elbow angle relative to the upper arm.
    """

    theta1: float
    theta2: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.theta1, self.theta2


class RejectionReason(Enum):
    """Reasons a target does not produce a motor command."""

    UNREACHABLE = "unreachable"
    LIMIT_VIOLATION = "limit_violation"
    NON_FINITE_RESULT = "non_finite_result"


@dataclass(frozen=True)
class IKResult:
    """Outcome of a solve: exactly one of ``pose`` or ``reason`` is set.

    Attributes:
        pose: The selected pose when the target was accepted.
        reason: The rejection reason otherwise.
    """

    pose: Optional[Pose] = None
    reason: Optional[RejectionReason] = None

    @classmethod
    def accepted(cls, pose: Pose) -> "IKResult":
        return cls(pose=pose)

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "IKResult":
        return cls(reason=reason)

    @property
    def ok(self) -> bool:
        """True when a pose was selected."""
        return self.pose is not None


@dataclass(frozen=True)
class IKSolver:
    """Two-solution inverse kinematics with limit and continuity selection.

    Attributes:
        geometry: Link lengths.
        limits: Inclusive shoulder range in the mathematical frame.
        reach_tolerance: Slack (mm) allowed beyond ``l1 + l2``.
    """

    geometry: LinkGeometry = field(default_factory=LinkGeometry)
    limits: JointLimits = field(default_factory=JointLimits)
    reach_tolerance: float = REACH_TOLERANCE_MM

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def is_reachable(self, x: float, y: float) -> bool:
        """Return True if ``(x, y)`` lies within full extension plus tolerance."""
        return math.hypot(x, y) <= self.geometry.max_reach + self.reach_tolerance

    def candidates(self, x: float, y: float) -> Tuple[Pose, Pose]:
        """Return both elbow solutions for ``(x, y)``, A first.

        No reach or limit checks are applied; targets beyond reach are
        solved as if at full extension because the elbow cosine is clamped.

        Args:
            x: Target X in millimetres.
            y: Target Y in millimetres.

        Returns:
            ``(pose_a, pose_b)`` with ``pose_a.theta2 >= 0`` before
            normalization and ``pose_b`` its mirror.
        """
        l1, l2 = self.geometry.l1, self.geometry.l2
        cos_theta2 = (x * x + y * y - l1 * l1 - l2 * l2) / (2.0 * l1 * l2)
        # Absorb floating-point overshoot at the reach boundary
        cos_theta2 = max(-1.0, min(1.0, cos_theta2))
        theta2_a = math.acos(cos_theta2)
        return self._pose_for_elbow(x, y, theta2_a), self._pose_for_elbow(x, y, -theta2_a)

    def select(self, pose_a: Pose, pose_b: Pose, current_theta1: float) -> IKResult:
        """Pick one of two candidates according to limits, then continuity.

        Args:
            pose_a: Elbow configuration A.
            pose_b: Elbow configuration B.
            current_theta1: Last accepted shoulder angle (degrees).

        Returns:
            The accepted candidate, or a ``LIMIT_VIOLATION`` rejection.
        """
        valid_a = self.limits.contains(pose_a.theta1)
        valid_b = self.limits.contains(pose_b.theta1)
        logger.debug(
            "IK candidates A=%s valid=%s B=%s valid=%s",
            pose_a.as_tuple(), valid_a, pose_b.as_tuple(), valid_b,
        )

        if valid_a and not valid_b:
            return IKResult.accepted(pose_a)
        if valid_b and not valid_a:
            return IKResult.accepted(pose_b)
        if valid_a and valid_b:
            dist_a = angular_distance(pose_a.theta1, current_theta1)
            dist_b = angular_distance(pose_b.theta1, current_theta1)
            return IKResult.accepted(pose_a if dist_a <= dist_b else pose_b)

        logger.warning(
            "IK: both solutions violate shoulder limits [%s, %s]: %s %s",
            self.limits.min, self.limits.max, pose_a.as_tuple(), pose_b.as_tuple(),
        )
        return IKResult.rejected(RejectionReason.LIMIT_VIOLATION)

    def solve(self, x: float, y: float, current_theta1: float) -> IKResult:
        """Solve for ``(x, y)`` and select a single pose.

        Does not modify any state; committing the accepted shoulder angle
        is the caller's job.

        Args:
            x: Target X in millimetres.
            y: Target Y in millimetres.
            current_theta1: Last accepted shoulder angle (degrees).

        Returns:
            An ``IKResult`` holding the selected pose or a rejection reason.
        """
        if not is_finite(x, y, current_theta1):
            logger.error("IK: non-finite input x=%s y=%s theta1=%s", x, y, current_theta1)
            return IKResult.rejected(RejectionReason.NON_FINITE_RESULT)
        if not self.is_reachable(x, y):
            logger.warning("IK: outside reach (%s, %s)", x, y)
            return IKResult.rejected(RejectionReason.UNREACHABLE)

        pose_a, pose_b = self.candidates(x, y)
        if not is_finite(*pose_a.as_tuple(), *pose_b.as_tuple()):
            logger.error("IK: non-finite candidates %s %s", pose_a, pose_b)
            return IKResult.rejected(RejectionReason.NON_FINITE_RESULT)
        return self.select(pose_a, pose_b, current_theta1)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _pose_for_elbow(self, x: float, y: float, theta2_rad: float) -> Pose:
        """Derive the shoulder angle for one elbow candidate."""
        k1 = self.geometry.l1 + self.geometry.l2 * math.cos(theta2_rad)
        k2 = self.geometry.l2 * math.sin(theta2_rad)
        theta1_rad = math.atan2(y, x) - math.atan2(k2, k1)
        return Pose(
            theta1=normalize_angle(math.degrees(theta1_rad)),
            theta2=normalize_angle(math.degrees(theta2_rad)),
        )
