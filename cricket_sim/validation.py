"""
Cricket Shot Simulation - Validation Checks

This module implements invariant checks on flight snapshots:
- Ball never stored below the ground threshold
- Finite position and velocity
- Max height monotonic within a flight
- Configuration inside its documented ranges

Each check returns True or raises ValidationError.
"""

from typing import Optional, Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig
from .state import FlightSnapshot, Stats


class ValidationError(Exception):
    """Raised when a flight invariant is violated."""
    pass


def check_above_ground(y: float, threshold: float = C.GROUND_THRESHOLD,
                       tolerance: float = 1e-9) -> bool:
    """
    Verify the stored ball height is not below the ground threshold.

    Args:
        y: Ball centre height (m)
        threshold: Ground threshold (m)
        tolerance: Allowable floating-point slack (m)
    """
    if y < threshold - tolerance:
        raise ValidationError(
            f"Ball below ground: y = {y:.6f} m, threshold = {threshold:.3f} m"
        )
    return True


def check_finite(snapshot: FlightSnapshot) -> bool:
    """Check that position and velocity contain no NaN/inf."""
    values = np.array(snapshot.position + snapshot.velocity, dtype=np.float64)
    if not np.all(np.isfinite(values)):
        raise ValidationError(
            f"Non-finite flight state: position={snapshot.position}, "
            f"velocity={snapshot.velocity}"
        )
    return True


def check_max_height_monotonic(previous: float, current: float,
                               tolerance: float = C.ZERO_TOLERANCE) -> bool:
    """
    Check that max height has not decreased between two ticks.

    Args:
        previous: Max height at the previous tick (m)
        current: Max height now (m)
    """
    if current < previous - tolerance:
        raise ValidationError(
            f"Max height decreased: {previous:.6f} m -> {current:.6f} m"
        )
    return True


def check_config(config: SimulationConfig) -> bool:
    """Check that every config value is inside its range."""
    if not C.ANGLE_MIN <= config.angle <= C.ANGLE_MAX:
        raise ValidationError(f"Angle out of range: {config.angle}")
    if not C.SPEED_MIN <= config.speed <= C.SPEED_MAX:
        raise ValidationError(f"Speed out of range: {config.speed}")
    if not 0.0 < config.gravity <= C.GRAVITY_MAX:
        raise ValidationError(f"Gravity out of range: {config.gravity}")
    if not C.RESTITUTION_MIN <= config.restitution < 1.0:
        raise ValidationError(f"Restitution out of range: {config.restitution}")
    return True


def validate_snapshot(snapshot: FlightSnapshot, stats: Stats,
                      previous_max_height: Optional[float] = None,
                      abort_on_error: bool = True) -> Tuple[bool, Optional[str]]:
    """
    Perform all per-tick checks.

    Args:
        snapshot: Current flight snapshot
        stats: Current stats
        previous_max_height: Max height at the previous tick, if any
        abort_on_error: If True, raise exception on first error
    """
    try:
        check_finite(snapshot)
        check_above_ground(snapshot.y)
        if previous_max_height is not None:
            check_max_height_monotonic(previous_max_height, stats.max_height)
        return True, None
    except ValidationError as e:
        if abort_on_error:
            raise
        return False, str(e)


def compute_mechanical_energy(y: float, vx: float, vy: float, gravity: float) -> float:
    """
    Specific mechanical energy above the ground threshold.

    E = (vx^2 + vy^2)/2 + g*(y - threshold)   (J/kg)
    """
    return 0.5 * (vx * vx + vy * vy) + gravity * (y - C.GROUND_THRESHOLD)


def run_validation_suite(snapshot: FlightSnapshot, config: SimulationConfig,
                         verbose: bool = False) -> dict:
    """
    Run all validation checks and return results.

    Args:
        snapshot: Snapshot to validate
        config: Config to validate
        verbose: Print results

    Returns:
        Dictionary of validation results
    """
    results = {
        'finite': None,
        'above_ground': None,
        'config': None,
        'all_passed': True
    }

    checks = [
        ('finite', lambda: check_finite(snapshot)),
        ('above_ground', lambda: check_above_ground(snapshot.y)),
        ('config', lambda: check_config(config)),
    ]

    for name, check in checks:
        try:
            check()
            results[name] = 'PASS'
            if verbose:
                print(f"  ✓ {name}")
        except ValidationError as e:
            results[name] = f'FAIL: {e}'
            results['all_passed'] = False
            if verbose:
                print(f"  ✗ {name}: {e}")

    return results
