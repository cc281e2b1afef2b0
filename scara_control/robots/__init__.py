"""
Tracked state of the physical arm.

The arm runs open-loop, so the only memory is the shoulder angle of the
last accepted pose, used to keep consecutive solutions continuous.
"""

from scara_control.robots.arm_state import ArmState

__all__ = ["ArmState"]
