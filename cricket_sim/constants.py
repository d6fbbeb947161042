"""
Cricket Shot Simulation - Physical Constants and Simulation Parameters

This module defines the scene geometry, configuration ranges, solver limits
and animation timings used throughout the simulation.

All lengths are in metres, times in seconds, angles in degrees unless the
name says otherwise.
"""

import numpy as np

# =============================================================================
# SCENE GEOMETRY
# =============================================================================

# Launch origin shared by the live flight and the trajectory preview
LAUNCH_X = 0.0  # m
LAUNCH_HEIGHT = 1.2  # m (bat contact height, baseline for height stats)

# Ball radius; the ball centre never rests below this height
BALL_RADIUS = 0.125  # m
GROUND_THRESHOLD = BALL_RADIUS

# =============================================================================
# CONFIGURATION RANGES
# =============================================================================

ANGLE_MIN = 0.0  # deg
ANGLE_MAX = 90.0  # deg

SPEED_MIN = 5.0  # m/s
SPEED_MAX = 50.0  # m/s

# Gravity must stay strictly positive (preview flight time divides by it)
GRAVITY_EPSILON = 1e-3  # m/s^2
GRAVITY_MAX = 20.0  # m/s^2

# Restitution >= 1 would add energy on every bounce
RESTITUTION_MIN = 0.0
RESTITUTION_MAX = 0.95

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_ANGLE = 45.0  # deg
DEFAULT_SPEED = 28.0  # m/s
DEFAULT_GRAVITY = 9.8  # m/s^2
DEFAULT_RESTITUTION = 0.5

# =============================================================================
# SOLVER PARAMETERS
# =============================================================================

# Largest time step a single tick may advance
MAX_DT = 0.05  # s

# Post-restitution vertical speed below which the ball lands
MIN_BOUNCE_VELOCITY = 0.5  # m/s

# Trail length cap (points)
TRAIL_CAPACITY = 600

# Number of intervals sampled for the trajectory preview
PREVIEW_STEPS = 120

# Headless driver
DRIVER_DT = 1.0 / 60.0  # s (display refresh cadence)
MAX_FLIGHT_TIME = 600.0  # s

# Numerical tolerance
ZERO_TOLERANCE = 1e-10

# =============================================================================
# SWING ANIMATION (cosmetic)
# =============================================================================

SWING_STEP = 0.075  # progress per frame
SWING_FRAME = 0.016  # s per frame
SWING_HOLD = 0.25  # s held at end of swing before returning to rest

# Bat rest pose
BAT_REST_X = -0.55  # m
BAT_REST_Y = 0.45  # m

# Swing amplitudes
SWING_ROTATION_Z = np.pi / 2.3  # rad
SWING_ROTATION_X = np.pi / 9.0  # rad
SWING_OFFSET_X = 0.85  # m
SWING_OFFSET_Y = 0.25  # m
