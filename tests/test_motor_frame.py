import math

import pytest

from scara_control.control.motor_frame import (
    JointDrive,
    MotorCommand,
    MotorTranslator,
    NonFiniteResultError,
    degrees_to_steps,
    format_command,
)
from scara_control.kinematics.solver import Pose


def test_full_turn_is_one_motor_rev():
    assert degrees_to_steps(360.0, 1.0, 1600) == 1600
    assert degrees_to_steps(-360.0, 1.0, 1600) == -1600


def test_gear_ratio_scales_steps():
    assert degrees_to_steps(90.0, 3.0, 1600) == 1200
    assert degrees_to_steps(0.0, 3.0, 1600) == 0


def test_steps_round_to_nearest():
    # 1 deg at 1600 steps/rev is 4.444... steps
    assert degrees_to_steps(1.0, 1.0, 1600) == 4
    assert degrees_to_steps(-1.0, 1.0, 1600) == -4
    assert degrees_to_steps(1.2, 1.0, 1600) == 5


@pytest.mark.parametrize("degrees, ratio", [(math.nan, 1.0), (math.inf, 1.0), (10.0, math.inf)])
def test_non_finite_steps_raise(degrees, ratio):
    with pytest.raises(NonFiniteResultError):
        degrees_to_steps(degrees, ratio, 1600)


def test_format_command():
    assert format_command(0, 0) == "M,0,0\n"
    assert format_command(-648, 368) == "M,-648,368\n"
    assert str(MotorCommand(12, -5)) == "M,12,-5"
    assert MotorCommand(12, -5).to_line() == "M,12,-5\n"


def test_motor_frame_subtracts_offsets():
    translator = MotorTranslator(JointDrive(3.0, 90.0, -1), JointDrive(1.0, 15.0, -1))
    assert translator.to_motor_frame(Pose(90.0, 0.0)) == (0.0, -15.0)
    assert translator.to_motor_frame(Pose(45.0, 30.0)) == (-45.0, 15.0)


def test_home_pose_is_motor_zero():
    assert MotorTranslator().pose_to_command(Pose(90.0, 0.0)) == MotorCommand(0, 0)


def test_pose_command_applies_direction():
    translator = MotorTranslator(JointDrive(3.0, 90.0, -1), JointDrive(1.0, 0.0, 1))
    # shoulder: -(0 - 90) deg * 3 -> 1200 steps; elbow: +90 deg -> 400 steps
    assert translator.pose_to_command(Pose(0.0, 90.0)) == MotorCommand(1200, 400)


def test_direct_degrees_ignore_offsets_and_direction():
    translator = MotorTranslator()
    assert translator.motor_degrees_to_command(360.0, -360.0) == MotorCommand(4800, -1600)
    assert translator.motor_degrees_to_command(0.0, 0.0) == MotorCommand(0, 0)


def test_non_finite_offset_raises():
    translator = MotorTranslator(shoulder=JointDrive(3.0, math.inf, -1))
    with pytest.raises(NonFiniteResultError):
        translator.pose_to_command(Pose(90.0, 0.0))


@pytest.mark.parametrize("ratio, direction", [(0.0, 1), (math.nan, 1), (1.0, 0), (1.0, 2)])
def test_joint_drive_validation(ratio, direction):
    with pytest.raises(ValueError):
        JointDrive(ratio, 0.0, direction)
