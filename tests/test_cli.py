import argparse
import json
import math

import pytest

from run_scara import _run_solve, main
from scara_control.configs import ScaraConfig
from scara_control.control.arm_controller import ScaraController
from scara_control.control.interfaces import RecordingTransport
from scara_control.control.motor_frame import JointDrive, MotorTranslator


def test_move_dry_run(capsys):
    assert main(["--mode", "move", "--x", "0", "--y", "200"]) == 0
    out = capsys.readouterr().out
    assert "theta1=90.00" in out
    assert "[dry run] M,0,0" in out


def test_rotate_dry_run(capsys):
    assert main(["--mode", "rotate", "--j1", "360", "--j2", "-360"]) == 0
    assert "[dry run] M,4800,-1600" in capsys.readouterr().out


def test_unreachable_exit_code(capsys):
    assert main(["--mode", "move", "--x", "500", "--y", "0"]) == 1
    out = capsys.readouterr().out
    assert "UNREACHABLE" in out
    assert "[dry run]" not in out


def test_solve_sends_nothing(capsys):
    assert main(["--mode", "solve", "--x", "150", "--y", "0"]) == 0
    out = capsys.readouterr().out
    assert "Command: M,648,368" in out
    assert "[dry run]" not in out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "arm.json"
    path.write_text(json.dumps({"shoulder_gear_ratio": 1.0}))
    assert main(["--mode", "rotate", "--j1", "360", "--j2", "0", "--config", str(path)]) == 0
    assert "[dry run] M,1600,0" in capsys.readouterr().out


def test_home(capsys):
    assert main(["--mode", "home"]) == 0
    assert "[dry run] M,0,0" in capsys.readouterr().out


def test_invalid_config_exits_cleanly(tmp_path):
    path = tmp_path / "arm.json"
    path.write_text('{"shoulder_zero_offset_deg": Infinity}')
    with pytest.raises(SystemExit, match="Invalid config"):
        main(["--mode", "solve", "--x", "0", "--y", "200", "--config", str(path)])


def test_solve_non_finite_command_is_rejected(capsys):
    base = ScaraController.from_config(ScaraConfig(), RecordingTransport())
    translator = MotorTranslator(shoulder=JointDrive(3.0, math.inf, -1))
    controller = ScaraController(base.solver, translator, base.transport)
    args = argparse.Namespace(mode="solve", x=0.0, y=200.0)

    assert _run_solve(controller, args) == 1
    out = capsys.readouterr().out
    assert "Rejected: NON_FINITE_RESULT" in out
    assert "Command:" not in out


def test_non_finite_target_exit_code(capsys):
    assert main(["--mode", "move", "--x", "nan", "--y", "0"]) == 1
    assert "Rejected: NON_FINITE_RESULT" in capsys.readouterr().out
