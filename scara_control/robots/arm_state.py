"""
Open-loop arm state shared across solves.

Classes:
    ArmState: Last accepted shoulder angle behind a re-entrant lock.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator

from scara_control.utils.constants import HOME_THETA1_DEG
from scara_control.utils.helpers import normalize_angle


@dataclass
class ArmState:
    """The shoulder angle of the most recently accepted pose.

    The value starts at the home angle and changes only through
    ``commit``.  Readers that need a consistent read-then-write (a solve
    followed by a commit) must hold ``locked()`` for the whole sequence.

    Attributes:
        home_theta1: Angle restored by ``reset`` (degrees, math frame).
    """

    home_theta1: float = HOME_THETA1_DEG
    _theta1: float = field(init=False, repr=False, compare=False)
    _lock: threading.RLock = field(
        init=False, repr=False, compare=False, default_factory=threading.RLock
    )

    def __post_init__(self) -> None:
        self._theta1 = normalize_angle(self.home_theta1)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def theta1(self) -> float:
        """Last accepted shoulder angle in degrees, ``[-180, 180)``."""
        with self._lock:
            return self._theta1

    def commit(self, theta1: float) -> None:
        """Record the shoulder angle of a newly accepted pose.

        Args:
            theta1: Shoulder angle in degrees; stored normalized.
        """
        with self._lock:
            self._theta1 = normalize_angle(theta1)

    def reset(self) -> None:
        """Restore the home angle."""
        self.commit(self.home_theta1)

    @contextmanager
    def locked(self) -> Iterator["ArmState"]:
        """Hold exclusive access for a read-solve-commit sequence."""
        with self._lock:
            yield self
