"""
Cricket Shot Simulation - Flight State

This module defines the state containers owned by the flight controller:
the live parabolic arc, the stats record, the bounded trail and the
read-only snapshot handed to observers. No duplicated state is allowed
anywhere; observers only ever receive copies.
"""

from collections import deque
from dataclasses import dataclass, field, replace
from typing import Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig


@dataclass
class Arc:
    """
    One continuous parabolic flight segment.

    Attributes:
        x0: Origin x (m)
        y0: Origin height (m)
        vx0: Initial horizontal velocity (m/s)
        vy0: Initial vertical velocity (m/s)
        t: Elapsed time on this arc (s), owned and advanced by the caller
    """

    x0: float = C.LAUNCH_X
    y0: float = C.LAUNCH_HEIGHT
    vx0: float = 0.0
    vy0: float = 0.0
    t: float = 0.0

    def copy(self) -> 'Arc':
        """Create a copy of the arc."""
        return replace(self)

    def apex_height(self, gravity: float) -> float:
        """Highest centre height reached on this arc (m)."""
        if self.vy0 <= 0.0:
            return self.y0
        return self.y0 + self.vy0 ** 2 / (2.0 * gravity)

    def __str__(self) -> str:
        return (
            f"Arc(origin=({self.x0:.2f}, {self.y0:.2f})m, "
            f"v0=({self.vx0:.2f}, {self.vy0:.2f})m/s, t={self.t:.3f}s)"
        )


@dataclass(frozen=True)
class FlightSnapshot:
    """Immutable view of the ball for rendering collaborators."""

    phase: str
    position: Tuple[float, float]
    velocity: Tuple[float, float]

    @property
    def x(self) -> float:
        return self.position[0]

    @property
    def y(self) -> float:
        return self.position[1]

    @property
    def speed(self) -> float:
        """Magnitude of velocity (m/s)."""
        return float(np.hypot(*self.velocity))


@dataclass
class Stats:
    """
    Derived flight statistics.

    Heights are measured above the launch baseline (LAUNCH_HEIGHT), range
    from the launch origin.
    """

    velocity_x: float = 0.0
    velocity_y: float = 0.0
    max_height: float = 0.0
    range: float = 0.0
    elapsed_time: float = 0.0
    current_height: float = 0.0

    def copy(self) -> 'Stats':
        """Create a copy of the stats."""
        return replace(self)

    def to_dict(self) -> dict:
        return {
            'velocity_x': self.velocity_x,
            'velocity_y': self.velocity_y,
            'max_height': self.max_height,
            'range': self.range,
            'elapsed_time': self.elapsed_time,
            'current_height': self.current_height,
        }


@dataclass
class TrailHistory:
    """Bounded ordered history of past ball positions."""

    capacity: int = C.TRAIL_CAPACITY
    _points: deque = field(init=False, repr=False)

    def __post_init__(self):
        if self.capacity < 1:
            raise ValueError(f"Trail capacity must be positive, got {self.capacity}")
        self._points = deque(maxlen=self.capacity)

    def append(self, x: float, y: float):
        """Record a position, dropping the oldest entry past capacity."""
        self._points.append((float(x), float(y)))

    def clear(self):
        self._points.clear()

    def __len__(self) -> int:
        return len(self._points)

    def as_array(self) -> np.ndarray:
        """Copy of the trail as an (n, 2) array, oldest first."""
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.array(self._points, dtype=np.float64)


def create_initial_arc(config: SimulationConfig) -> Arc:
    """
    Create the launch arc for a shot.

    Returns:
        Arc at the shared launch origin with velocity decomposed from the
        configured angle and speed.
    """
    vx, vy = config.launch_velocity
    return Arc(x0=C.LAUNCH_X, y0=C.LAUNCH_HEIGHT, vx0=vx, vy0=vy, t=0.0)
