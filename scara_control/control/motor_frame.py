"""
Math-frame to motor-frame translation, step quantization, and the wire format.

The stepper firmware understands a single command, ``M,<step1>,<step2>``,
giving absolute step targets for the shoulder and elbow motors.  This
module turns a ``Pose`` (or raw motor-frame degrees for manual jogging)
into that line.

Classes:
    NonFiniteResultError: Raised when a value to be sent is NaN or infinite.
    JointDrive: Per-joint calibration (gearing, zero offset, direction).
    MotorCommand: A pair of signed step counts.
    MotorTranslator: Pose -> motor degrees -> ``MotorCommand``.

Functions:
    degrees_to_steps: Quantize motor-frame degrees into steps.
    format_command: Serialize two step counts into the wire line.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Tuple

from scara_control.kinematics.solver import Pose
from scara_control.utils.constants import (
    COMMAND_PREFIX,
    COMMAND_SEPARATOR,
    COMMAND_TERMINATOR,
    ELBOW_DIRECTION,
    ELBOW_GEAR_RATIO,
    ELBOW_ZERO_OFFSET_DEG,
    SHOULDER_DIRECTION,
    SHOULDER_GEAR_RATIO,
    SHOULDER_ZERO_OFFSET_DEG,
    STEPS_PER_MOTOR_REV,
)
from scara_control.utils.helpers import is_finite, round_half_away_from_zero


class NonFiniteResultError(ValueError):
    """An angle or step value became NaN or infinite."""


@dataclass(frozen=True)
class JointDrive:
    """Calibration of one joint's motor.

    Attributes:
        gear_ratio: Motor rotation per joint rotation.
        zero_offset: Math-frame angle (degrees) at which the motor reads 0.
        direction: Sign applied to motor degrees on the IK path (+1 or -1).
    """

    gear_ratio: float = 1.0
    zero_offset: float = 0.0
    direction: int = 1

    def __post_init__(self) -> None:
        """Validate gearing and direction."""
        if not math.isfinite(self.gear_ratio) or self.gear_ratio == 0.0:
            raise ValueError(f"Gear ratio must be finite and non-zero, got {self.gear_ratio}")
        if self.direction not in (-1, 1):
            raise ValueError(f"Direction must be +1 or -1, got {self.direction}")

    def to_motor_frame(self, math_angle: float) -> float:
        """Return ``math_angle - zero_offset``.

        Raises:
            NonFiniteResultError: If the input or result is not finite.
        """
        motor_angle = math_angle - self.zero_offset
        if not is_finite(math_angle, motor_angle):
            raise NonFiniteResultError(
                f"Non-finite motor angle from {math_angle!r} (offset {self.zero_offset!r})"
            )
        return motor_angle


def degrees_to_steps(
    degrees: float, gear_ratio: float, steps_per_rev: int = STEPS_PER_MOTOR_REV
) -> int:
    """Convert joint-side motor-frame degrees into a signed step count.

    ``steps = round(degrees / 360 * steps_per_rev * gear_ratio)`` with ties
    rounded away from zero.

    Args:
        degrees: Motor-frame rotation in degrees.
        gear_ratio: Motor rotation per joint rotation.
        steps_per_rev: Motor steps per motor revolution.

    Returns:
        The quantized step count.

    Raises:
        NonFiniteResultError: If the unrounded step value is not finite.
    """
    raw = degrees / 360.0 * steps_per_rev * gear_ratio
    if not is_finite(raw):
        raise NonFiniteResultError(
            f"Non-finite step value from {degrees!r} deg x {gear_ratio!r}"
        )
    return round_half_away_from_zero(raw)


def format_command(step1: int, step2: int) -> str:
    """Return the wire line ``M,<step1>,<step2>\\n``."""
    fields = (COMMAND_PREFIX, str(int(step1)), str(int(step2)))
    return COMMAND_SEPARATOR.join(fields) + COMMAND_TERMINATOR


@dataclass(frozen=True)
class MotorCommand:
    """Absolute step targets for the shoulder and elbow motors.

    Attributes:
        step1: Shoulder motor steps.
        step2: Elbow motor steps.
    """

    step1: int
    step2: int

    def to_line(self) -> str:
        """Serialize to the newline-terminated wire format."""
        return format_command(self.step1, self.step2)

    def __str__(self) -> str:
        return self.to_line().rstrip(COMMAND_TERMINATOR)


@dataclass(frozen=True)
class MotorTranslator:
    """Turns poses or motor-frame degrees into ``MotorCommand`` values.

    Attributes:
        shoulder: Shoulder drive calibration.
        elbow: Elbow drive calibration.
        steps_per_rev: Motor steps per motor revolution (incl. microstepping).
    """

    shoulder: JointDrive = field(
        default_factory=lambda: JointDrive(
            SHOULDER_GEAR_RATIO, SHOULDER_ZERO_OFFSET_DEG, SHOULDER_DIRECTION
        )
    )
    elbow: JointDrive = field(
        default_factory=lambda: JointDrive(ELBOW_GEAR_RATIO, ELBOW_ZERO_OFFSET_DEG, ELBOW_DIRECTION)
    )
    steps_per_rev: int = STEPS_PER_MOTOR_REV

    def to_motor_frame(self, pose: Pose) -> Tuple[float, float]:
        """Return the motor-frame degrees of both joints for *pose*."""
        return (
            self.shoulder.to_motor_frame(pose.theta1),
            self.elbow.to_motor_frame(pose.theta2),
        )

    def pose_to_command(self, pose: Pose) -> MotorCommand:
        """Translate, apply each joint's direction, and quantize *pose*.

        Raises:
            NonFiniteResultError: If any intermediate value is not finite.
        """
        motor1, motor2 = self.to_motor_frame(pose)
        return MotorCommand(
            step1=degrees_to_steps(
                self.shoulder.direction * motor1, self.shoulder.gear_ratio, self.steps_per_rev
            ),
            step2=degrees_to_steps(
                self.elbow.direction * motor2, self.elbow.gear_ratio, self.steps_per_rev
            ),
        )

    def motor_degrees_to_command(self, j1_motor_deg: float, j2_motor_deg: float) -> MotorCommand:
        """Quantize motor-frame degrees directly, with no offsets or direction.

        Raises:
            NonFiniteResultError: If either step value is not finite.
        """
        return MotorCommand(
            step1=degrees_to_steps(j1_motor_deg, self.shoulder.gear_ratio, self.steps_per_rev),
            step2=degrees_to_steps(j2_motor_deg, self.elbow.gear_ratio, self.steps_per_rev),
        )
