"""
High-level arm commands: move to a point, jog joints directly, go home.

Classes:
    MoveResult: Tagged outcome of a command (pose/command or rejection).
    ScaraController: Owns the arm state and drives the whole pipeline
        target -> IK -> motor frame -> steps -> wire line -> transport.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from scara_control.configs import ScaraConfig
from scara_control.control.interfaces import LoggingPresenter, Presenter, Transport
from scara_control.control.motor_frame import MotorCommand, MotorTranslator, NonFiniteResultError
from scara_control.kinematics.solver import IKResult, IKSolver, Pose, RejectionReason
from scara_control.robots.arm_state import ArmState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """What happened to one command request.

    Attributes:
        pose: Selected pose (``move_to``/``home`` only).
        command: The command handed to the transport, if any.
        reason: Why nothing was sent; ``None`` on success.
        delivered: Whether the transport reported a completed write.
    """

    pose: Optional[Pose] = None
    command: Optional[MotorCommand] = None
    reason: Optional[RejectionReason] = None
    delivered: bool = False

    @property
    def ok(self) -> bool:
        """True when a command was produced (regardless of delivery)."""
        return self.reason is None

    @classmethod
    def rejected(cls, reason: RejectionReason) -> "MoveResult":
        return cls(reason=reason)


class ScaraController:
    """Runs the geometry-to-motion pipeline for a two-link arm.

    All commands hold the arm-state lock from solve to transport
    completion, so state updates never interleave and at most one write
    is outstanding at a time.
    """

    def __init__(
        self,
        solver: IKSolver,
        translator: MotorTranslator,
        transport: Transport,
        state: Optional[ArmState] = None,
        presenter: Optional[Presenter] = None,
    ) -> None:
        self.solver = solver
        self.translator = translator
        self.transport = transport
        self.state = state if state is not None else ArmState()
        self.presenter = presenter if presenter is not None else LoggingPresenter()

    @classmethod
    def from_config(
        cls,
        cfg: ScaraConfig,
        transport: Transport,
        presenter: Optional[Presenter] = None,
    ) -> "ScaraController":
        """Build a controller from a ``ScaraConfig``."""
        solver = IKSolver(
            geometry=cfg.link_geometry(),
            limits=cfg.joint_limits(),
            reach_tolerance=cfg.reach_tolerance_mm,
        )
        translator = MotorTranslator(
            shoulder=cfg.shoulder_drive(),
            elbow=cfg.elbow_drive(),
            steps_per_rev=cfg.steps_per_motor_rev,
        )
        return cls(solver, translator, transport, ArmState(cfg.home_theta1_deg), presenter)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def solve(self, x: float, y: float) -> IKResult:
        """Run IK against the current state without moving or committing."""
        with self.state.locked():
            return self.solver.solve(x, y, self.state.theta1)

    def move_to(self, x: float, y: float) -> MoveResult:
        """Move the end effector to ``(x, y)`` (mm, math frame).

        On success the shoulder angle is committed to the arm state, the
        command is sent, and the pose is presented.  Rejections leave the
        state untouched and send nothing.

        Args:
            x: Target X in millimetres.
            y: Target Y in millimetres.

        Returns:
            A ``MoveResult``.
        """
        logger.debug("move_to (%s, %s)", x, y)
        with self.state.locked():
            result = self.solver.solve(x, y, self.state.theta1)
            if not result.ok:
                return MoveResult.rejected(result.reason)

            pose = result.pose
            try:
                command = self.translator.pose_to_command(pose)
            except NonFiniteResultError as exc:
                logger.error("Command suppressed for %s: %s", pose, exc)
                return MoveResult.rejected(RejectionReason.NON_FINITE_RESULT)

            self.state.commit(pose.theta1)
            delivered = self._dispatch(command)
            self.presenter.show(pose)
            return MoveResult(pose=pose, command=command, delivered=delivered)

    def rotate(self, j1_motor_deg: float, j2_motor_deg: float) -> MoveResult:
        """Jog both joints by motor-frame degrees, bypassing IK.

        No limit checks and no arm-state update are performed; the caller
        is responsible for staying within safe bounds.

        Args:
            j1_motor_deg: Shoulder motor-frame degrees.
            j2_motor_deg: Elbow motor-frame degrees.

        Returns:
            A ``MoveResult`` without a pose.
        """
        with self.state.locked():
            try:
                command = self.translator.motor_degrees_to_command(j1_motor_deg, j2_motor_deg)
            except NonFiniteResultError as exc:
                logger.error("Rotate command suppressed: %s", exc)
                return MoveResult.rejected(RejectionReason.NON_FINITE_RESULT)
            return MoveResult(command=command, delivered=self._dispatch(command))

    def home(self) -> MoveResult:
        """Move to full extension pointing straight up, ``(0, l1 + l2)``."""
        result = self.move_to(0.0, self.solver.geometry.max_reach)
        if result.ok:
            logger.info("Arm homed")
        return result

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _dispatch(self, command: MotorCommand) -> bool:
        """Hand one command to the transport and report the outcome."""
        logger.info("Sending: %s", command)
        delivered = self.transport.send(command.to_line())
        if not delivered:
            logger.warning("Transport did not deliver %s", command)
        return delivered
