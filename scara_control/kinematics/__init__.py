"""
Planar two-link kinematics.

Provides the immutable arm geometry, shoulder joint limits, forward
kinematics, and the inverse kinematics solver with solution selection.
"""

from scara_control.kinematics.geometry import JointLimits, LinkGeometry, forward_kinematics
from scara_control.kinematics.solver import IKResult, IKSolver, Pose, RejectionReason

__all__ = [
    "JointLimits",
    "LinkGeometry",
    "forward_kinematics",
    "IKResult",
    "IKSolver",
    "Pose",
    "RejectionReason",
]
