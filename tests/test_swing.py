import pytest
from cricket_sim import constants as C
from cricket_sim.config import create_test_config
from cricket_sim.flight import FlightController
from cricket_sim.swing import REST_POSE, SwingAnimation


def test_idle_swing_is_at_rest():
    swing = SwingAnimation()
    assert not swing.active
    assert swing.update(0.1) == REST_POSE


def test_duration():
    swing = SwingAnimation()
    expected = C.SWING_FRAME / C.SWING_STEP + C.SWING_HOLD
    assert swing.duration == pytest.approx(expected)


def test_mid_swing_pose():
    swing = SwingAnimation()
    swing.start()
    pose = swing.update(0.1)
    assert swing.active
    assert pose.rotation_z < 0.0
    assert pose.rotation_x > 0.0
    assert pose.offset_x > C.BAT_REST_X
    assert pose.offset_y > C.BAT_REST_Y


def test_swing_finishes_and_returns_to_rest():
    swing = SwingAnimation()
    swing.start()
    for _ in range(10):
        pose = swing.update(0.1)
    assert not swing.active
    assert pose == REST_POSE


def test_swing_is_started_by_launch_only():
    ctrl = FlightController(config=create_test_config())
    swing = SwingAnimation()
    ctrl.add_launch_listener(swing.start)
    ctrl.tick(0.02)
    assert not swing.active
    ctrl.launch()
    assert swing.active
    # The swing runs on its own clock; flight ticks do not advance it
    arc_before = ctrl.arc
    swing.update(0.05)
    assert ctrl.arc == arc_before
