"""
Cricket Shot Simulation - Bat Swing Animation

Cosmetic, finite-duration bat swing started by a launch event. It runs on
its own clock and never reads or writes flight state; wire it up with
FlightController.add_launch_listener(swing.start).
"""

from typing import NamedTuple

import numpy as np

from . import constants as C


class BatPose(NamedTuple):
    """Bat transform relative to its rest pose."""
    rotation_z: float  # rad
    rotation_x: float  # rad
    offset_x: float  # m
    offset_y: float  # m


REST_POSE = BatPose(0.0, 0.0, C.BAT_REST_X, C.BAT_REST_Y)


class SwingAnimation:
    """
    Bat swing: progress 0 -> 1 with amount sin(progress*pi), then a short
    hold before snapping back to rest.
    """

    def __init__(self, step: float = C.SWING_STEP, frame: float = C.SWING_FRAME,
                 hold: float = C.SWING_HOLD):
        self.rate = step / frame  # progress per second
        self.hold = hold
        self.progress = 0.0
        self._hold_left = 0.0
        self.active = False

    @property
    def duration(self) -> float:
        """Total time from start to rest (s)."""
        return 1.0 / self.rate + self.hold

    def start(self):
        """Begin (or restart) the swing."""
        self.progress = 0.0
        self._hold_left = self.hold
        self.active = True

    def update(self, dt: float) -> BatPose:
        """Advance the animation clock and return the pose to draw."""
        if not self.active:
            return REST_POSE
        if dt > 0:
            if self.progress < 1.0:
                self.progress = min(1.0, self.progress + self.rate * dt)
            else:
                self._hold_left -= dt
                if self._hold_left <= 0.0:
                    self.active = False
                    return REST_POSE
        return self.pose()

    def pose(self) -> BatPose:
        if not self.active:
            return REST_POSE
        amount = float(np.sin(self.progress * np.pi))
        return BatPose(
            rotation_z=-amount * C.SWING_ROTATION_Z,
            rotation_x=amount * C.SWING_ROTATION_X,
            offset_x=C.BAT_REST_X + amount * C.SWING_OFFSET_X,
            offset_y=C.BAT_REST_Y + amount * C.SWING_OFFSET_Y,
        )
