"""
Calibration configuration for the SCARA arm.

All constants that shape solver and command output live in one dataclass.
Configurations are fixed once a controller is built; to change the arm,
build a new controller from a new config.

Classes:
    ScaraConfig: Geometry, limits, gearing, offsets, and serial settings.

Functions:
    load_config: Read a JSON file of overrides into a ``ScaraConfig``.
    save_config: Write a ``ScaraConfig`` to JSON.
"""

from __future__ import annotations

import dataclasses
import json
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

from scara_control.control.motor_frame import JointDrive
from scara_control.kinematics.geometry import JointLimits, LinkGeometry
from scara_control.utils.constants import (
    DEFAULT_BAUDRATE,
    DEFAULT_SERIAL_PORT,
    DEFAULT_WRITE_TIMEOUT_S,
    ELBOW_DIRECTION,
    ELBOW_GEAR_RATIO,
    ELBOW_ZERO_OFFSET_DEG,
    HOME_THETA1_DEG,
    LINK1_LENGTH_MM,
    LINK2_LENGTH_MM,
    REACH_TOLERANCE_MM,
    SHOULDER_DIRECTION,
    SHOULDER_GEAR_RATIO,
    SHOULDER_LIMITS_DEG,
    SHOULDER_ZERO_OFFSET_DEG,
    STEPS_PER_MOTOR_REV,
)

# Fields that must be finite real numbers
_REAL_FIELDS = (
    "l1_mm",
    "l2_mm",
    "shoulder_gear_ratio",
    "elbow_gear_ratio",
    "shoulder_zero_offset_deg",
    "elbow_zero_offset_deg",
    "home_theta1_deg",
    "reach_tolerance_mm",
    "write_timeout_s",
)
_INT_FIELDS = ("steps_per_motor_rev", "shoulder_direction", "elbow_direction", "baudrate")


def _require_real(name: str, value: Any) -> None:
    """Raise ``ValueError`` unless *value* is a finite int or float."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value!r}")


@dataclass
class ScaraConfig:
    """Every recognised calibration constant of the arm.

    Attributes:
        l1_mm: Upper-arm length.
        l2_mm: Forearm length.
        steps_per_motor_rev: Motor steps per revolution (incl. microstepping).
        shoulder_gear_ratio: Shoulder motor turns per joint turn.
        elbow_gear_ratio: Elbow motor turns per joint turn.
        shoulder_zero_offset_deg: Math angle at which the shoulder motor reads 0.
        elbow_zero_offset_deg: Math angle at which the elbow motor reads 0.
        shoulder_direction: Sign applied to shoulder motor degrees on IK moves.
        elbow_direction: Sign applied to elbow motor degrees on IK moves.
        shoulder_limits_deg: Inclusive ``(min, max)`` shoulder range, math frame.
        home_theta1_deg: Initial tracked shoulder angle.
        reach_tolerance_mm: Slack allowed beyond full extension.
        serial_port: Device path used by ``SerialTransport``.
        baudrate: Serial baud rate.
        write_timeout_s: Serial write timeout in seconds.
    """

    l1_mm: float = LINK1_LENGTH_MM
    l2_mm: float = LINK2_LENGTH_MM
    steps_per_motor_rev: int = STEPS_PER_MOTOR_REV
    shoulder_gear_ratio: float = SHOULDER_GEAR_RATIO
    elbow_gear_ratio: float = ELBOW_GEAR_RATIO
    shoulder_zero_offset_deg: float = SHOULDER_ZERO_OFFSET_DEG
    elbow_zero_offset_deg: float = ELBOW_ZERO_OFFSET_DEG
    shoulder_direction: int = SHOULDER_DIRECTION
    elbow_direction: int = ELBOW_DIRECTION
    shoulder_limits_deg: Tuple[float, float] = SHOULDER_LIMITS_DEG
    home_theta1_deg: float = HOME_THETA1_DEG
    reach_tolerance_mm: float = REACH_TOLERANCE_MM
    serial_port: str = DEFAULT_SERIAL_PORT
    baudrate: int = DEFAULT_BAUDRATE
    write_timeout_s: float = DEFAULT_WRITE_TIMEOUT_S

    def __post_init__(self) -> None:
        """Coerce JSON lists to tuples and validate every field group."""
        for name in _REAL_FIELDS:
            _require_real(name, getattr(self, name))
        for name in _INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.serial_port, str):
            raise ValueError(f"serial_port must be a string, got {self.serial_port!r}")

        if not isinstance(self.shoulder_limits_deg, (list, tuple)):
            raise ValueError(
                f"shoulder_limits_deg needs (min, max), got {self.shoulder_limits_deg!r}"
            )
        self.shoulder_limits_deg = tuple(self.shoulder_limits_deg)
        if len(self.shoulder_limits_deg) != 2:
            raise ValueError(
                f"shoulder_limits_deg needs (min, max), got {self.shoulder_limits_deg}"
            )
        for bound in self.shoulder_limits_deg:
            _require_real("shoulder_limits_deg", bound)

        if self.steps_per_motor_rev <= 0:
            raise ValueError(
                f"steps_per_motor_rev must be positive, got {self.steps_per_motor_rev}"
            )
        if self.reach_tolerance_mm < 0.0:
            raise ValueError(f"reach_tolerance_mm must be >= 0, got {self.reach_tolerance_mm}")
        # Building the derived objects runs their own validation
        self.link_geometry()
        self.joint_limits()
        self.shoulder_drive()
        self.elbow_drive()

    # ------------------------------------------------------------------
    # Derived objects
    # ------------------------------------------------------------------

    def link_geometry(self) -> LinkGeometry:
        return LinkGeometry(self.l1_mm, self.l2_mm)

    def joint_limits(self) -> JointLimits:
        lo, hi = self.shoulder_limits_deg
        return JointLimits(lo, hi)

    def shoulder_drive(self) -> JointDrive:
        return JointDrive(
            self.shoulder_gear_ratio, self.shoulder_zero_offset_deg, self.shoulder_direction
        )

    def elbow_drive(self) -> JointDrive:
        return JointDrive(self.elbow_gear_ratio, self.elbow_zero_offset_deg, self.elbow_direction)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serialisable dictionary of all fields."""
        data = dataclasses.asdict(self)
        data["shoulder_limits_deg"] = list(self.shoulder_limits_deg)
        return data


def load_config(path: str | Path) -> ScaraConfig:
    """Read a JSON object of field overrides; missing fields keep defaults.

    Args:
        path: Path to a JSON file.

    Returns:
        A validated ``ScaraConfig``.

    Raises:
        ValueError: On unknown keys, a non-object document, or invalid values.
    """
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    known = {f.name for f in dataclasses.fields(ScaraConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {unknown}")
    return ScaraConfig(**data)


def save_config(cfg: ScaraConfig, path: str | Path) -> None:
    """Write *cfg* to *path* as indented JSON."""
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(cfg.to_dict(), fh, indent=2)
