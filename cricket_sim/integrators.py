"""
Cricket Shot Simulation - Kinematic Integration

This module evaluates the closed-form parabolic solution of one arc. There
is no numerical drift: the position after any number of ticks equals the
exact position at the accumulated elapsed time.
"""

import math
from typing import Optional, Tuple

from . import constants as C
from .state import Arc

Sample = Tuple[float, float, float, float]


def clamp_dt(dt: float, max_dt: float = C.MAX_DT) -> float:
    """
    Limit a driver-supplied time step.

    Irregular calling cadence (a stalled frame, a background tab) would
    otherwise advance the flight past a ground contact in one step.
    """
    return min(dt, max_dt)


def position_at(arc: Arc, t: float, gravity: float) -> Sample:
    """
    Evaluate the arc at elapsed time t.

    x  = x0 + vx0*t
    y  = y0 + vy0*t - g*t^2/2
    vx = vx0
    vy = vy0 - g*t

    Args:
        arc: Arc being flown
        t: Elapsed time on the arc (s)
        gravity: Gravitational acceleration (m/s^2)

    Returns:
        (x, y, vx, vy) tuple
    """
    x = arc.x0 + arc.vx0 * t
    y = arc.y0 + arc.vy0 * t - 0.5 * gravity * t * t
    vx = arc.vx0
    vy = arc.vy0 - gravity * t
    return x, y, vx, vy


def advance(arc: Arc, dt: float, gravity: float) -> Sample:
    """
    Advance the arc clock by dt and return the new sample.

    The caller owns the arc and is expected to have clamped dt already.

    Args:
        arc: Arc being flown (its t is incremented in place)
        dt: Time step (s)
        gravity: Gravitational acceleration (m/s^2)

    Returns:
        (x, y, vx, vy) tuple at the new elapsed time

    Raises:
        ValueError: If dt is not a positive finite number
    """
    if not math.isfinite(dt) or dt <= 0:
        raise ValueError(f"Time step dt must be positive, got {dt}")
    arc.t += dt
    return position_at(arc, arc.t, gravity)


def contact_time(arc: Arc, gravity: float,
                 threshold: float = C.GROUND_THRESHOLD) -> Optional[float]:
    """
    Time at which the arc descends through the ground threshold.

    Solves y0 + vy0*t - g*t^2/2 = threshold for the later root.

    Returns:
        Contact time (s), or None if the arc starts below the threshold
    """
    drop = arc.y0 - threshold
    disc = arc.vy0 * arc.vy0 + 2.0 * gravity * drop
    if disc < 0.0:
        return None
    return (arc.vy0 + math.sqrt(disc)) / gravity


def ground_contact(arc: Arc, gravity: float,
                   threshold: float = C.GROUND_THRESHOLD) -> Sample:
    """
    Refine a sample that has reached the ground to the exact contact point.

    A tick can overshoot the ground by up to one step, which would report an
    impact speed larger than the real one. The contact sample is taken at
    the analytic crossing time instead, clamped to the arc clock.

    Returns:
        (x, threshold, vx, vy) at the moment of contact
    """
    t_hit = contact_time(arc, gravity, threshold)
    if t_hit is None:
        t_hit = arc.t
    t_hit = min(max(t_hit, 0.0), arc.t)
    x, _, vx, vy = position_at(arc, t_hit, gravity)
    return x, threshold, vx, vy
