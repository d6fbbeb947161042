import numpy as np
import pytest
from cricket_sim import predictor
from cricket_sim import constants as C
from cricket_sim.config import create_test_config


@pytest.mark.parametrize('angle', [10.0, 30.0, 45.0, 60.0, 80.0])
@pytest.mark.parametrize('speed', [5.0, 20.0, 50.0])
def test_landing_matches_level_ground_range(angle, speed):
    cfg = create_test_config(angle=angle, speed=speed, restitution=0.0)
    preview = predictor.predict(cfg)
    expected = speed ** 2 * np.sin(2.0 * np.radians(angle)) / cfg.gravity
    assert preview.landing_x == pytest.approx(expected)
    assert predictor.analytic_range(cfg) == pytest.approx(expected)


def test_reference_shot():
    cfg = create_test_config(angle=45.0, speed=20.0, gravity=9.8)
    preview = predictor.predict(cfg)
    assert preview.range == pytest.approx(40.8, abs=0.05)
    assert preview.apex_height == pytest.approx(10.2, abs=0.05)
    assert preview.time_to_apex == pytest.approx(preview.total_time / 2.0)
    assert preview.apex[0] == pytest.approx(preview.landing_x / 2.0)


def test_samples_start_at_launch_origin_and_end_at_launch_height():
    preview = predictor.predict(create_test_config())
    assert len(preview) == C.PREVIEW_STEPS + 1
    np.testing.assert_allclose(preview.points[0], [C.LAUNCH_X, C.LAUNCH_HEIGHT])
    np.testing.assert_allclose(preview.points[-1], [preview.landing_x, C.LAUNCH_HEIGHT],
                               atol=1e-9)


def test_samples_above_ground_and_ordered():
    preview = predictor.predict(create_test_config(angle=70.0, speed=35.0))
    assert np.all(preview.points[:, 1] >= C.GROUND_THRESHOLD)
    assert np.all(np.diff(preview.points[:, 0]) > 0)


def test_apex_is_highest_sample():
    preview = predictor.predict(create_test_config(angle=50.0, speed=25.0))
    assert preview.points[:, 1].max() <= preview.apex[1] + 1e-9


def test_custom_step_count():
    preview = predictor.predict(create_test_config(), steps=60)
    assert len(preview) == 61


def test_invalid_step_count():
    with pytest.raises(ValueError):
        predictor.predict(create_test_config(), steps=0)


def test_points_are_read_only():
    preview = predictor.predict(create_test_config())
    with pytest.raises(ValueError):
        preview.points[0, 0] = 5.0


def test_flat_shot_has_zero_flight_time():
    preview = predictor.predict(create_test_config(angle=0.0, speed=20.0))
    assert preview.total_time == 0.0
    assert preview.landing_x == 0.0
    np.testing.assert_allclose(preview.points[:, 1], C.LAUNCH_HEIGHT)


def test_preview_shares_origin_with_live_arc():
    from cricket_sim.state import create_initial_arc
    cfg = create_test_config()
    arc = create_initial_arc(cfg)
    preview = predictor.predict(cfg)
    assert (arc.x0, arc.y0) == tuple(preview.points[0])


def test_compute_markers_keys():
    markers = predictor.compute_markers(create_test_config())
    assert set(markers) == {'time_to_apex', 'apex_x', 'apex_y', 'landing_x', 'total_time'}
    assert predictor.flight_time(create_test_config()) == pytest.approx(markers['total_time'])


def test_predict_is_pure():
    cfg = create_test_config()
    a = predictor.predict(cfg)
    b = predictor.predict(cfg)
    np.testing.assert_array_equal(a.points, b.points)
    assert a.apex == b.apex
