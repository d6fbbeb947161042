"""
Cricket Shot Simulation - Trajectory Preview

Pure functions that sample the first, unbounced arc of a shot before it is
launched, plus the apex and landing markers drawn alongside the preview.

The preview returns to launch height, so landing_x is the distance at which
the ball is back at bat height. Bounces are not previewed.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from . import constants as C
from .config import SimulationConfig


@dataclass(frozen=True)
class TrajectoryPreview:
    """
    Sampled preview of the first arc.

    Attributes:
        points: (n, 2) array of (x, y) samples in flight order
        time_to_apex: Time from launch to apex (s)
        apex: Apex position (x, y) in m
        landing_x: Horizontal position back at launch height (m)
        total_time: Time to return to launch height (s)
    """

    points: np.ndarray
    time_to_apex: float
    apex: Tuple[float, float]
    landing_x: float
    total_time: float

    @property
    def apex_height(self) -> float:
        """Apex height above the launch baseline (m)."""
        return self.apex[1] - C.LAUNCH_HEIGHT

    @property
    def range(self) -> float:
        """Horizontal distance from launch to landing marker (m)."""
        return self.landing_x - C.LAUNCH_X

    def __len__(self) -> int:
        return len(self.points)


def flight_time(config: SimulationConfig) -> float:
    """Time for the first arc to return to launch height (s)."""
    _, vy = config.launch_velocity
    return 2.0 * vy / config.gravity


def analytic_range(config: SimulationConfig) -> float:
    """Level-ground range v^2 sin(2*theta) / g (m)."""
    return float(config.speed ** 2 * np.sin(2.0 * config.angle_rad) / config.gravity)


def compute_markers(config: SimulationConfig) -> dict:
    """
    Apex and landing markers for the first arc.

    Returns:
        Dictionary with time_to_apex, apex_x, apex_y, landing_x, total_time
    """
    vx, vy = config.launch_velocity
    g = config.gravity
    time_to_apex = vy / g
    total_time = 2.0 * vy / g
    return {
        'time_to_apex': time_to_apex,
        'apex_x': C.LAUNCH_X + vx * time_to_apex,
        'apex_y': C.LAUNCH_HEIGHT + vy * vy / (2.0 * g),
        'landing_x': C.LAUNCH_X + vx * total_time,
        'total_time': total_time,
    }


def predict(config: SimulationConfig, steps: int = C.PREVIEW_STEPS) -> TrajectoryPreview:
    """
    Sample the unbounced first arc of a shot.

    Args:
        config: Shot configuration
        steps: Number of intervals; steps + 1 samples are evaluated

    Returns:
        TrajectoryPreview with samples at or above the ground threshold
    """
    if steps < 1:
        raise ValueError(f"Preview needs at least one step, got {steps}")

    vx, vy = config.launch_velocity
    g = config.gravity
    markers = compute_markers(config)

    t = np.linspace(0.0, markers['total_time'], steps + 1)
    x = C.LAUNCH_X + vx * t
    y = C.LAUNCH_HEIGHT + vy * t - 0.5 * g * t ** 2
    keep = y >= C.GROUND_THRESHOLD
    points = np.column_stack((x[keep], y[keep]))
    points.setflags(write=False)

    return TrajectoryPreview(
        points=points,
        time_to_apex=markers['time_to_apex'],
        apex=(markers['apex_x'], markers['apex_y']),
        landing_x=markers['landing_x'],
        total_time=markers['total_time'],
    )
