"""
Default calibration constants for the two-link SCARA arm.

These values describe the reference build: two 100 mm links, a 3:1
reduction on the shoulder, a direct-drive elbow, and 1600-step motors
(including microstepping).  Every value can be overridden through
``ScaraConfig``.
"""

from __future__ import annotations

from typing import Tuple

# ---------------------------------------------------------------------------
# Geometry (millimetres)
# ---------------------------------------------------------------------------
LINK1_LENGTH_MM: float = 100.0
LINK2_LENGTH_MM: float = 100.0

# Slack allowed beyond full extension before a target counts as unreachable
REACH_TOLERANCE_MM: float = 0.1

# ---------------------------------------------------------------------------
# Motors and gearing
# ---------------------------------------------------------------------------
STEPS_PER_MOTOR_REV: int = 1600

# Motor rotation per joint rotation
SHOULDER_GEAR_RATIO: float = 3.0
ELBOW_GEAR_RATIO: float = 1.0

# ---------------------------------------------------------------------------
# Frames (degrees).  motor_angle = math_angle - zero_offset
# ---------------------------------------------------------------------------
SHOULDER_ZERO_OFFSET_DEG: float = 90.0
ELBOW_ZERO_OFFSET_DEG: float = 0.0

# Sign applied to motor-frame degrees on the IK path before quantizing
SHOULDER_DIRECTION: int = -1
ELBOW_DIRECTION: int = -1

# ---------------------------------------------------------------------------
# Shoulder limits in the mathematical frame: in front of the wall only,
# 0 deg (right) through 90 deg (up) to 180 deg (left)
# ---------------------------------------------------------------------------
SHOULDER_LIMITS_DEG: Tuple[float, float] = (0.0, 180.0)

# Home pose: arm fully extended, pointing straight up
HOME_THETA1_DEG: float = 90.0

# ---------------------------------------------------------------------------
# Wire protocol
# ---------------------------------------------------------------------------
COMMAND_PREFIX: str = "M"
COMMAND_SEPARATOR: str = ","
COMMAND_TERMINATOR: str = "\n"

DEFAULT_SERIAL_PORT: str = "/dev/ttyACM0"
DEFAULT_BAUDRATE: int = 115200
DEFAULT_WRITE_TIMEOUT_S: float = 1.0
