import pytest
from cricket_sim import collision
from cricket_sim import constants as C
from cricket_sim.config import create_test_config


@pytest.fixture
def bouncy():
    return create_test_config(restitution=0.5)


def test_airborne_sample_continues(bouncy):
    result = collision.resolve(y=2.0, vy=-3.0, vx=5.0, x=10.0, config=bouncy)
    assert isinstance(result, collision.Continue)


def test_bounce_creates_new_arc_at_ground(bouncy):
    result = collision.resolve(y=C.GROUND_THRESHOLD, vy=-10.0, vx=5.0, x=12.0, config=bouncy)
    assert isinstance(result, collision.Bounce)
    arc = result.arc
    assert arc.x0 == 12.0
    assert arc.y0 == C.GROUND_THRESHOLD
    assert arc.vx0 == 5.0
    assert arc.vy0 == pytest.approx(5.0)
    assert arc.t == 0.0
    assert result.impact_speed == pytest.approx(10.0)


def test_below_threshold_sample_is_contact(bouncy):
    result = collision.resolve(y=0.0, vy=-10.0, vx=5.0, x=12.0, config=bouncy)
    assert isinstance(result, collision.Bounce)
    assert result.arc.y0 == C.GROUND_THRESHOLD


def test_weak_rebound_lands(bouncy):
    # 1.0 * 0.5 = 0.5 is not above the minimum bounce velocity
    result = collision.resolve(y=C.GROUND_THRESHOLD, vy=-1.0, vx=5.0, x=30.0, config=bouncy)
    assert isinstance(result, collision.Land)
    snap = result.snapshot
    assert snap.position == (30.0, C.GROUND_THRESHOLD)
    assert snap.velocity == (0.0, 0.0)
    assert snap.phase == 'LANDED'


def test_zero_restitution_always_lands():
    cfg = create_test_config(restitution=0.0)
    result = collision.resolve(y=C.GROUND_THRESHOLD, vy=-40.0, vx=5.0, x=30.0, config=cfg)
    assert isinstance(result, collision.Land)
    assert result.impact_speed == pytest.approx(40.0)


def test_custom_minimum_bounce_velocity(bouncy):
    result = collision.resolve(y=C.GROUND_THRESHOLD, vy=-4.0, vx=0.0, x=0.0,
                               config=bouncy, min_bounce_velocity=2.5)
    assert isinstance(result, collision.Land)
