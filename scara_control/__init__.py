"""
SCARA Control.

Computes and dispatches joint commands for a two-link planar (SCARA-style)
arm: inverse kinematics with joint-limit and continuity-aware solution
selection, translation into the motor frame, step quantization, and the
single-line wire command consumed by the stepper firmware.

Modules:
    kinematics: Link geometry, forward kinematics, and the IK solver.
    robots: Tracked arm state shared across solves.
    control: Motor-frame translation, command formatting, transports, and
        the high-level controller.
    configs: Calibration configuration and JSON persistence.
    utils: Shared constants and small stateless helpers.
"""

__version__ = "0.1.0"
