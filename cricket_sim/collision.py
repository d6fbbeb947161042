"""
Cricket Shot Simulation - Ground Collision and Bounce Response

Classifies each flight sample as airborne, bouncing or landed.

Landing is decided from the post-restitution vertical speed, not the raw
impact speed. A bounce too weak to clear the ground for one more tick would
otherwise register a second contact immediately. With restitution below 1
the bounce speeds form a strictly decreasing geometric sequence, so every
flight ends after a finite number of bounces. Restitution 0 is simply the
no-bounce case of the same rule.
"""

from dataclasses import dataclass
from typing import Union

from . import constants as C
from .config import SimulationConfig
from .state import Arc, FlightSnapshot


@dataclass(frozen=True)
class Continue:
    """Ball is still above the ground."""


@dataclass(frozen=True)
class Bounce:
    """Ball bounced; flight continues on a new arc."""
    arc: Arc
    impact_speed: float


@dataclass(frozen=True)
class Land:
    """Ball has come to rest on the ground."""
    snapshot: FlightSnapshot
    impact_speed: float


Resolution = Union[Continue, Bounce, Land]


def resolve(y: float, vy: float, vx: float, x: float,
            config: SimulationConfig,
            threshold: float = C.GROUND_THRESHOLD,
            min_bounce_velocity: float = C.MIN_BOUNCE_VELOCITY) -> Resolution:
    """
    Decide what happens to the ball at a sample point.

    Args:
        y: Ball centre height (m)
        vy: Vertical velocity (m/s)
        vx: Horizontal velocity (m/s)
        x: Horizontal position (m)
        config: Shot configuration (restitution)
        threshold: Ground contact height (ball radius)
        min_bounce_velocity: Smallest rebound speed that still bounces (m/s)

    Returns:
        Continue, Bounce(new arc) or Land(final snapshot)
    """
    if y > threshold:
        return Continue()

    impact_speed = abs(vy)
    rebound = impact_speed * config.restitution

    if rebound > min_bounce_velocity:
        new_arc = Arc(x0=x, y0=threshold, vx0=vx, vy0=rebound, t=0.0)
        return Bounce(arc=new_arc, impact_speed=impact_speed)

    snapshot = FlightSnapshot(
        phase='LANDED',
        position=(x, threshold),
        velocity=(0.0, 0.0),
    )
    return Land(snapshot=snapshot, impact_speed=impact_speed)
