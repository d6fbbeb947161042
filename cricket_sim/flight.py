"""
Cricket Shot Flight Controller

This module handles the state machine for a single shot. It owns the only
mutable simulation state (arc, stats, trail, preview) and changes it solely
through set_config / launch / tick / reset, all called from the driver's
thread. Observers get copies.

Transitions:
  - IDLE    --launch-->  FLYING   initial arc at the launch origin
  - FLYING  --tick-->    FLYING   airborne or bounced (arc replaced)
  - FLYING  --tick-->    LANDED   rebound too weak; stats frozen
  - LANDED  is launch-ready: the gate is open and the preview is live again
  - any     --reset-->   IDLE     arc, stats and trail cleared
"""

from enum import Enum, auto
import logging
import math
from typing import Callable, List, Optional

import numpy as np

from . import constants as C
from .collision import Bounce, Continue, Land, resolve
from .config import SimulationConfig, create_config, create_default_config
from .integrators import advance, clamp_dt, ground_contact
from .predictor import TrajectoryPreview, predict
from .state import Arc, FlightSnapshot, Stats, TrailHistory, create_initial_arc
from .stats import StatsReporter

logger = logging.getLogger(__name__)


class FlightPhase(Enum):
    IDLE = auto()
    FLYING = auto()
    LANDED = auto()


class FlightController:
    """
    Owns the flight phase and drives integrator, resolver and stats per tick.
    """

    def __init__(self, config: SimulationConfig = None,
                 trail_capacity: int = C.TRAIL_CAPACITY,
                 max_dt: float = C.MAX_DT):
        self.config = config or create_default_config()
        self.max_dt = max_dt
        self.phase = FlightPhase.IDLE
        self.bounce_count = 0

        self._arc: Optional[Arc] = None
        self._flight_config: Optional[SimulationConfig] = None
        self._position = (C.LAUNCH_X, C.LAUNCH_HEIGHT)
        self._velocity = (0.0, 0.0)
        self._stats = StatsReporter()
        self._trail = TrailHistory(capacity=trail_capacity)
        self._preview: Optional[TrajectoryPreview] = predict(self.config)
        self._launch_listeners: List[Callable[[], None]] = []

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def set_config(self, angle: float = None, speed: float = None,
                   gravity: float = None, restitution: float = None) -> SimulationConfig:
        """
        Update the shot configuration; omitted values are kept.

        A flight in progress keeps the config it was launched with; the new
        values apply to the next launch. While not flying the preview is
        recomputed immediately.

        Returns:
            The clamped configuration now in effect for the next launch
        """
        current = self.config
        self.config = create_config(
            angle=current.angle if angle is None else angle,
            speed=current.speed if speed is None else speed,
            gravity=current.gravity if gravity is None else gravity,
            restitution=current.restitution if restitution is None else restitution,
        )
        if self.phase != FlightPhase.FLYING:
            self._preview = predict(self.config)
        return self.config

    def launch(self) -> bool:
        """
        Start a flight if the launch gate is open.

        Returns:
            True if a flight was started, False if the call was ignored
        """
        if not self.can_launch:
            logger.debug("Launch ignored: ball already in flight")
            return False

        self._flight_config = self.config
        self._arc = create_initial_arc(self._flight_config)
        self._position = (self._arc.x0, self._arc.y0)
        self._velocity = (self._arc.vx0, self._arc.vy0)
        self._trail.clear()
        self._stats.reset()
        self._preview = None
        self.bounce_count = 0
        self.phase = FlightPhase.FLYING

        cfg = self._flight_config
        logger.info(f"Launch: angle={cfg.angle:.1f}deg, speed={cfg.speed:.1f}m/s, "
                    f"g={cfg.gravity:.2f}m/s^2, e={cfg.restitution:.2f}")

        for listener in list(self._launch_listeners):
            listener()
        return True

    def tick(self, dt: float) -> FlightPhase:
        """
        Advance the flight by one driver tick.

        Non-positive or non-finite dt, or a tick while not flying, is a no-op.

        Args:
            dt: Elapsed wall time since the previous tick (s)

        Returns:
            Phase after the tick
        """
        if self.phase != FlightPhase.FLYING:
            return self.phase
        if dt is None or not math.isfinite(dt) or dt <= 0:
            return self.phase

        dt = clamp_dt(dt, self.max_dt)
        cfg = self._flight_config
        arc = self._arc

        x, y, vx, vy = advance(arc, dt, cfg.gravity)
        if y <= C.GROUND_THRESHOLD:
            x, y, vx, vy = ground_contact(arc, cfg.gravity)

        outcome = resolve(y, vy, vx, x, cfg)

        if isinstance(outcome, Continue):
            self._set_sample(x, y, vx, vy, dt)

        elif isinstance(outcome, Bounce):
            self._arc = outcome.arc
            self.bounce_count += 1
            new = outcome.arc
            logger.debug(f"Bounce #{self.bounce_count} at x={new.x0:.2f}m, "
                         f"impact={outcome.impact_speed:.2f}m/s, "
                         f"rebound={new.vy0:.2f}m/s")
            self._set_sample(new.x0, new.y0, new.vx0, new.vy0, dt)

        elif isinstance(outcome, Land):
            snap = outcome.snapshot
            self._arc = None
            self._position = snap.position
            self._velocity = snap.velocity
            self._trail.append(*snap.position)
            self._stats.land(snap.x, snap.y, dt)
            self.phase = FlightPhase.LANDED
            # Preview was discarded for the flight; the gate is open again
            self._preview = predict(self.config)
            stats = self._stats.snapshot()
            logger.info(f"Landed at x={snap.x:.2f}m after {self.bounce_count} bounce(s), "
                        f"t={stats.elapsed_time:.2f}s, max_height={stats.max_height:.2f}m")

        return self.phase

    def reset(self):
        """Force IDLE and clear all derived state. Idempotent."""
        self.phase = FlightPhase.IDLE
        self._arc = None
        self._flight_config = None
        self._position = (C.LAUNCH_X, C.LAUNCH_HEIGHT)
        self._velocity = (0.0, 0.0)
        self._stats.reset()
        self._trail.clear()
        self.bounce_count = 0
        self._preview = predict(self.config)

    def add_launch_listener(self, callback: Callable[[], None]):
        """Register a callback run once per accepted launch."""
        self._launch_listeners.append(callback)

    def remove_launch_listener(self, callback: Callable[[], None]):
        self._launch_listeners.remove(callback)

    def _set_sample(self, x: float, y: float, vx: float, vy: float, dt: float):
        self._position = (x, y)
        self._velocity = (vx, vy)
        self._trail.append(x, y)
        self._stats.update(x, y, vx, vy, dt)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    @property
    def can_launch(self) -> bool:
        return self.phase != FlightPhase.FLYING

    @property
    def current_state(self) -> FlightSnapshot:
        return FlightSnapshot(
            phase=self.phase.name,
            position=self._position,
            velocity=self._velocity,
        )

    @property
    def stats(self) -> Stats:
        return self._stats.snapshot()

    @property
    def trail_history(self) -> np.ndarray:
        return self._trail.as_array()

    @property
    def trajectory_preview(self) -> Optional[TrajectoryPreview]:
        """Preview of the next shot; None while a flight is in progress."""
        if self.phase == FlightPhase.FLYING:
            return None
        return self._preview

    @property
    def arc(self) -> Optional[Arc]:
        """Copy of the live arc, None unless flying."""
        return self._arc.copy() if self._arc is not None else None

    @property
    def flight_config(self) -> Optional[SimulationConfig]:
        """Config captured at launch for the current or last flight."""
        return self._flight_config

    def get_phase(self) -> FlightPhase:
        return self.phase
