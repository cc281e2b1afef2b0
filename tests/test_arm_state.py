from scara_control.robots.arm_state import ArmState


def test_starts_at_home():
    assert ArmState().theta1 == 90.0
    assert ArmState(home_theta1=450.0).theta1 == 90.0


def test_commit_normalizes():
    state = ArmState()
    state.commit(190.0)
    assert state.theta1 == -170.0


def test_reset_restores_home():
    state = ArmState(home_theta1=30.0)
    state.commit(-45.0)
    state.reset()
    assert state.theta1 == 30.0


def test_locked_is_reentrant():
    state = ArmState()
    with state.locked():
        with state.locked():
            state.commit(12.0)
    assert state.theta1 == 12.0
