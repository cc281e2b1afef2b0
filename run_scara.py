#!/usr/bin/env python3
"""
Command-line entry point for the SCARA arm controller.

Solves a target, jogs joints, or homes the arm, and sends the resulting
``M,<step1>,<step2>`` command either to a serial port or, without
``--port``, to an in-memory transport whose lines are printed (dry run).

Usage examples::

    # Dry run: print the command for a target
    python run_scara.py --mode move --x 150 --y 0

    # Send to the board
    python run_scara.py --mode move --x 0 --y 200 --port /dev/ttyACM0

    # Jog the shoulder by 10 motor-frame degrees
    python run_scara.py --mode rotate --j1 10 --j2 0 --port /dev/ttyACM0

    # IK only, nothing sent
    python run_scara.py --mode solve --x 100 --y 100
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from scara_control.configs import ScaraConfig, load_config
from scara_control.control.arm_controller import MoveResult, ScaraController
from scara_control.control.interfaces import RecordingTransport, Transport
from scara_control.control.motor_frame import NonFiniteResultError
from scara_control.control.serial_transport import SerialTransport
from scara_control.kinematics.solver import RejectionReason

# ======================================================================
# Mode runners
# ======================================================================


def _require(args: argparse.Namespace, *names: str) -> None:
    """Exit with a usage error if any of *names* was not supplied."""
    missing = [f"--{n}" for n in names if getattr(args, n) is None]
    if missing:
        raise SystemExit(f"--mode {args.mode} requires {', '.join(missing)}")


def _report(result: MoveResult) -> int:
    """Print a command outcome and return the process exit code."""
    if not result.ok:
        print(f"Rejected: {result.reason.name}")
        return 1
    if result.pose is not None:
        print(f"Pose: theta1={result.pose.theta1:.2f} theta2={result.pose.theta2:.2f}")
    print(f"Command: {result.command} ({'sent' if result.delivered else 'NOT delivered'})")
    return 0 if result.delivered else 2


def _run_move(controller: ScaraController, args: argparse.Namespace) -> int:
    _require(args, "x", "y")
    return _report(controller.move_to(args.x, args.y))


def _run_rotate(controller: ScaraController, args: argparse.Namespace) -> int:
    _require(args, "j1", "j2")
    return _report(controller.rotate(args.j1, args.j2))


def _run_home(controller: ScaraController, args: argparse.Namespace) -> int:
    return _report(controller.home())


def _run_solve(controller: ScaraController, args: argparse.Namespace) -> int:
    """Print the selected pose and its command without sending anything."""
    _require(args, "x", "y")
    result = controller.solve(args.x, args.y)
    if not result.ok:
        print(f"Rejected: {result.reason.name}")
        return 1
    try:
        command = controller.translator.pose_to_command(result.pose)
    except NonFiniteResultError:
        print(f"Rejected: {RejectionReason.NON_FINITE_RESULT.name}")
        return 1
    print(f"Pose: theta1={result.pose.theta1:.2f} theta2={result.pose.theta2:.2f}")
    print(f"Command: {command}")
    return 0


# Mapping from mode name to runner function
_MODE_DISPATCH = {
    "move": _run_move,
    "rotate": _run_rotate,
    "home": _run_home,
    "solve": _run_solve,
}


# ======================================================================
# CLI
# ======================================================================


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list; defaults to ``sys.argv[1:]``.

    Returns:
        Parsed ``argparse.Namespace``.
    """
    parser = argparse.ArgumentParser(description="Two-link SCARA arm controller")
    parser.add_argument("--mode", choices=sorted(_MODE_DISPATCH), default="move")
    parser.add_argument("--x", type=float, help="target X (mm)")
    parser.add_argument("--y", type=float, help="target Y (mm)")
    parser.add_argument("--j1", type=float, help="shoulder motor-frame degrees")
    parser.add_argument("--j2", type=float, help="elbow motor-frame degrees")
    parser.add_argument("--config", help="JSON file of calibration overrides")
    parser.add_argument("--port", help="serial device; omit for a dry run")
    parser.add_argument("--baudrate", type=int)
    parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"]
    )
    return parser.parse_args(argv)


def _build_transport(cfg: ScaraConfig, args: argparse.Namespace) -> Transport:
    if args.port is None:
        return RecordingTransport()
    transport = SerialTransport(
        port=args.port,
        baudrate=args.baudrate or cfg.baudrate,
        write_timeout=cfg.write_timeout_s,
    )
    transport.open()
    return transport


def main(argv: Optional[List[str]] = None) -> int:
    """Run one CLI command and return its exit code."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = load_config(args.config) if args.config else ScaraConfig()
    except ValueError as exc:
        raise SystemExit(f"Invalid config: {exc}")
    transport = _build_transport(cfg, args)
    controller = ScaraController.from_config(cfg, transport)
    try:
        code = _MODE_DISPATCH[args.mode](controller, args)
    finally:
        if isinstance(transport, SerialTransport):
            transport.close()

    if isinstance(transport, RecordingTransport):
        for line in transport.lines:
            sys.stdout.write(f"[dry run] {line}")
    return code


# ------------------------------------------------------------------
# Entry point
# ------------------------------------------------------------------
if __name__ == "__main__":
    sys.exit(main())
