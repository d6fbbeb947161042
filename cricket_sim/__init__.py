"""
Cricket Shot Flight Simulation Package

Tick-driven flight of a struck cricket ball under constant gravity, with
ground bounces and a pre-launch trajectory preview.

Modules:
    - constants: Scene geometry, ranges and solver limits
    - config: Immutable, clamped shot configuration
    - state: Arc, stats, trail and snapshot containers
    - integrators: Closed-form arc evaluation and ground contact
    - collision: Bounce / landing resolution
    - predictor: Trajectory preview and markers
    - stats: Stats reporter
    - flight: Flight state machine
    - swing: Cosmetic bat swing animation
    - validation: Invariant checks
    - export: Stats CSV export
    - main: Headless driver
"""

from .config import SimulationConfig, create_config, create_default_config, create_test_config
from .flight import FlightController, FlightPhase
from .predictor import TrajectoryPreview, predict
from .state import Arc, FlightSnapshot, Stats
from .main import run_simulation, SimulationLog

__version__ = "1.0.0"
__author__ = "Cricket Simulation Team"

__all__ = [
    'SimulationConfig',
    'create_config',
    'create_default_config',
    'create_test_config',
    'FlightController',
    'FlightPhase',
    'TrajectoryPreview',
    'predict',
    'Arc',
    'FlightSnapshot',
    'Stats',
    'run_simulation',
    'SimulationLog',
]
