import pytest

from scara_control.configs import ScaraConfig
from scara_control.control.arm_controller import ScaraController
from scara_control.control.interfaces import RecordingTransport
from scara_control.kinematics.geometry import JointLimits, LinkGeometry
from scara_control.kinematics.solver import IKSolver


@pytest.fixture
def solver():
    return IKSolver(LinkGeometry(100.0, 100.0), JointLimits(0.0, 180.0))


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def controller(transport):
    return ScaraController.from_config(ScaraConfig(), transport)
