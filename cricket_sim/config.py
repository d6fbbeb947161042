"""
Cricket Shot Simulation - Configuration

This module provides a SimulationConfig dataclass for dependency injection,
allowing different shot parameters to be passed without modifying global
constants.

Every field is clamped into its documented range on construction, so a
config object is always safe to fly: the driver is the only source of
configuration and out-of-range input is corrected rather than rejected.
"""

from dataclasses import dataclass
import logging
import math
from typing import Tuple

import numpy as np

from . import constants as C

logger = logging.getLogger(__name__)


def _clamp_field(name: str, value: float, lo: float, hi: float,
                 default: float) -> float:
    """Clamp one config value into [lo, hi], logging any correction."""
    try:
        value = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Config {name}={value!r} is not a number, using {default}")
        return default
    if not math.isfinite(value):
        logger.warning(f"Config {name}={value} is not finite, using {default}")
        return default
    clamped = min(max(value, lo), hi)
    if clamped != value:
        logger.warning(f"Config {name}={value} out of range [{lo}, {hi}], "
                       f"clamped to {clamped}")
    return clamped


@dataclass(frozen=True)
class SimulationConfig:
    """
    Immutable configuration for one shot.

    Using frozen=True ensures configs cannot be accidentally modified.
    Create new configs via dataclass replace() if needed.

    Attributes:
        angle: Launch angle above horizontal (deg), [0, 90]
        speed: Launch speed (m/s), [5, 50]
        gravity: Gravitational acceleration (m/s^2), (0, 20]
        restitution: Fraction of vertical speed kept per bounce, [0, 0.95]
    """

    angle: float = C.DEFAULT_ANGLE
    speed: float = C.DEFAULT_SPEED
    gravity: float = C.DEFAULT_GRAVITY
    restitution: float = C.DEFAULT_RESTITUTION

    def __post_init__(self):
        """Clamp every field into its valid range."""
        # Zero or negative gravity falls to the epsilon floor, not the default
        gravity = self.gravity
        try:
            if float(gravity) <= 0.0:
                logger.warning(f"Config gravity={gravity} is not positive, "
                               f"clamped to {C.GRAVITY_EPSILON}")
                gravity = C.GRAVITY_EPSILON
        except (TypeError, ValueError):
            pass

        object.__setattr__(self, 'angle', _clamp_field(
            'angle', self.angle, C.ANGLE_MIN, C.ANGLE_MAX, C.DEFAULT_ANGLE))
        object.__setattr__(self, 'speed', _clamp_field(
            'speed', self.speed, C.SPEED_MIN, C.SPEED_MAX, C.DEFAULT_SPEED))
        object.__setattr__(self, 'gravity', _clamp_field(
            'gravity', gravity, C.GRAVITY_EPSILON, C.GRAVITY_MAX, C.DEFAULT_GRAVITY))
        object.__setattr__(self, 'restitution', _clamp_field(
            'restitution', self.restitution, C.RESTITUTION_MIN, C.RESTITUTION_MAX,
            C.DEFAULT_RESTITUTION))

    @property
    def angle_rad(self) -> float:
        """Launch angle (rad)."""
        return float(np.radians(self.angle))

    @property
    def launch_velocity(self) -> Tuple[float, float]:
        """Initial velocity components (vx, vy) in m/s."""
        rad = self.angle_rad
        return float(self.speed * np.cos(rad)), float(self.speed * np.sin(rad))


def create_default_config() -> SimulationConfig:
    """Create a SimulationConfig with default values from constants."""
    return SimulationConfig()


def create_config(angle: float = C.DEFAULT_ANGLE, speed: float = C.DEFAULT_SPEED,
                  gravity: float = C.DEFAULT_GRAVITY,
                  restitution: float = C.DEFAULT_RESTITUTION) -> SimulationConfig:
    """Create a clamped SimulationConfig from raw driver input."""
    return SimulationConfig(angle=angle, speed=speed, gravity=gravity,
                            restitution=restitution)


def create_test_config(angle: float = 45.0, speed: float = 20.0,
                       **overrides) -> SimulationConfig:
    """Create a config suitable for testing.

    Any keyword arg accepted by SimulationConfig can be passed as an override.
    Defaults to a no-bounce shot at Earth gravity.
    """
    defaults = dict(angle=angle, speed=speed, gravity=9.8, restitution=0.0)
    defaults.update(overrides)
    return SimulationConfig(**defaults)
