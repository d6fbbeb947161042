import math

import pytest
from cricket_sim import validation
from cricket_sim import constants as C
from cricket_sim.config import SimulationConfig, create_test_config
from cricket_sim.state import FlightSnapshot, Stats


def _snap(x=1.0, y=2.0, vx=3.0, vy=4.0, phase='FLYING'):
    return FlightSnapshot(phase=phase, position=(x, y), velocity=(vx, vy))


# ============================================================================
# check_above_ground tests
# ============================================================================

def test_check_above_ground_valid():
    assert validation.check_above_ground(C.GROUND_THRESHOLD)
    assert validation.check_above_ground(5.0)

def test_check_above_ground_invalid():
    with pytest.raises(validation.ValidationError):
        validation.check_above_ground(C.GROUND_THRESHOLD - 0.01)

def test_check_above_ground_tolerance():
    y = C.GROUND_THRESHOLD - 1e-12
    assert validation.check_above_ground(y)
    with pytest.raises(validation.ValidationError):
        validation.check_above_ground(y, tolerance=0.0)


# ============================================================================
# check_finite tests
# ============================================================================

def test_check_finite_valid():
    assert validation.check_finite(_snap())

@pytest.mark.parametrize('bad', [float('nan'), float('inf'), -float('inf')])
def test_check_finite_invalid(bad):
    with pytest.raises(validation.ValidationError):
        validation.check_finite(_snap(vy=bad))


# ============================================================================
# check_max_height_monotonic / check_config tests
# ============================================================================

def test_max_height_monotonic():
    assert validation.check_max_height_monotonic(2.0, 2.0)
    assert validation.check_max_height_monotonic(2.0, 3.0)
    with pytest.raises(validation.ValidationError):
        validation.check_max_height_monotonic(3.0, 2.0)

def test_check_config_valid():
    assert validation.check_config(create_test_config())

def test_check_config_clamped_input_passes():
    cfg = SimulationConfig(angle=200.0, speed=-1.0, gravity=0.0, restitution=1.0)
    assert validation.check_config(cfg)


# ============================================================================
# validate_snapshot tests
# ============================================================================

def test_validate_snapshot_ok():
    ok, msg = validation.validate_snapshot(_snap(), Stats(max_height=1.0),
                                           previous_max_height=0.5)
    assert ok and msg is None

def test_validate_snapshot_abort():
    with pytest.raises(validation.ValidationError):
        validation.validate_snapshot(_snap(y=-2.0), Stats())

def test_validate_snapshot_no_abort():
    ok, msg = validation.validate_snapshot(_snap(y=-2.0), Stats(), abort_on_error=False)
    assert not ok
    assert 'below ground' in msg

def test_validate_snapshot_max_height_drop():
    ok, msg = validation.validate_snapshot(_snap(), Stats(max_height=1.0),
                                           previous_max_height=2.0,
                                           abort_on_error=False)
    assert not ok
    assert 'decreased' in msg


# ============================================================================
# Energy / suite tests
# ============================================================================

def test_mechanical_energy_at_ground():
    e = validation.compute_mechanical_energy(C.GROUND_THRESHOLD, 3.0, 4.0, 9.8)
    assert e == pytest.approx(12.5)

def test_mechanical_energy_potential():
    e = validation.compute_mechanical_energy(C.GROUND_THRESHOLD + 2.0, 0.0, 0.0, 9.8)
    assert math.isclose(e, 19.6)

def test_run_validation_suite_pass():
    results = validation.run_validation_suite(_snap(), create_test_config())
    assert results['all_passed']
    assert results['finite'] == 'PASS'

def test_run_validation_suite_failure(capsys):
    results = validation.run_validation_suite(_snap(y=-1.0), create_test_config(),
                                              verbose=True)
    assert not results['all_passed']
    assert results['above_ground'].startswith('FAIL')
    out = capsys.readouterr().out
    assert '✗ above_ground' in out
    assert '✓ finite' in out
