"""
Capability interfaces the controller talks to, plus in-process defaults.

The controller knows nothing about how commands reach the hardware or how
poses are shown; it only calls ``Transport.send`` and ``Presenter.show``.

Classes:
    Transport: Abstract sink for wire command lines.
    Presenter: Abstract sink for accepted poses.
    RecordingTransport: Keeps every line in memory (dry runs, tests).
    LoggingPresenter: Reports poses through ``logging``.
"""

from __future__ import annotations

import abc
import logging
from dataclasses import dataclass, field
from typing import List

from scara_control.kinematics.solver import Pose

logger = logging.getLogger(__name__)


class Transport(abc.ABC):
    """Delivers one newline-terminated ASCII command at a time.

    Implementations must complete (or fail) a write before returning, so
    that callers never have two writes in flight.
    """

    @abc.abstractmethod
    def send(self, line: str) -> bool:
        """Write *line* to the device.

        Args:
            line: A single command terminated by ``"\\n"``.

        Returns:
            True if the write completed, False if it failed.
        """
        raise NotImplementedError


class Presenter(abc.ABC):
    """Receives each accepted pose for display."""

    @abc.abstractmethod
    def show(self, pose: Pose) -> None:
        raise NotImplementedError


@dataclass
class RecordingTransport(Transport):
    """Transport that appends every line to ``lines``.

    Attributes:
        lines: Lines received so far, in order.
        fail: When True, ``send`` records nothing and reports failure.
    """

    lines: List[str] = field(default_factory=list)
    fail: bool = False

    def send(self, line: str) -> bool:
        if self.fail:
            return False
        self.lines.append(line)
        return True


class LoggingPresenter(Presenter):
    """Logs both joint angles to two decimals."""

    def show(self, pose: Pose) -> None:
        logger.info("theta1=%.2f theta2=%.2f", pose.theta1, pose.theta2)
