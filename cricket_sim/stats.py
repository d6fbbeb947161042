"""
Cricket Shot Simulation - Stats Reporter

Derives the published flight statistics from each integrator sample.
"""

import logging

from . import constants as C
from .state import Stats

logger = logging.getLogger(__name__)


class StatsReporter:
    """
    Owns the Stats record of the current flight.

    max_height only ever grows within one flight (bounces included);
    elapsed_time accumulates across bounces and is cleared only by a new
    launch or a reset.
    """

    def __init__(self):
        self._stats = Stats()
        self.frozen = False

    def reset(self):
        """Zero every field and unfreeze."""
        self._stats = Stats()
        self.frozen = False

    def update(self, x: float, y: float, vx: float, vy: float, dt: float):
        """
        Fold one flight sample into the stats.

        Args:
            x, y: Ball position (m)
            vx, vy: Ball velocity (m/s)
            dt: Time advanced by this tick (s)
        """
        if self.frozen:
            return
        s = self._stats
        height = y - C.LAUNCH_HEIGHT
        s.velocity_x = vx
        s.velocity_y = vy
        s.max_height = max(s.max_height, height)
        s.range = x - C.LAUNCH_X
        s.elapsed_time += dt
        s.current_height = height

    def land(self, x: float, y: float, dt: float):
        """Publish the final landing snapshot and freeze."""
        if self.frozen:
            return
        s = self._stats
        s.velocity_x = 0.0
        s.velocity_y = 0.0
        s.max_height = max(s.max_height, y - C.LAUNCH_HEIGHT)
        s.range = x - C.LAUNCH_X
        s.elapsed_time += dt
        s.current_height = 0.0
        self.frozen = True
        logger.debug(f"Stats frozen: range={s.range:.2f}m, "
                     f"max_height={s.max_height:.2f}m, t={s.elapsed_time:.2f}s")

    def snapshot(self) -> Stats:
        """Copy of the current stats."""
        return self._stats.copy()
