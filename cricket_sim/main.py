"""
Cricket Shot Simulation - Headless Driver

This module drives a FlightController at a fixed tick rate, standing in for
a display refresh loop:
- One launch, ticks until the ball lands or max_time elapses
- Per-tick invariant validation
- Telemetry logging with CSV export
"""

import csv
import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from . import constants as C
from .config import SimulationConfig, create_default_config
from .flight import FlightController, FlightPhase
from .state import FlightSnapshot
from .validation import (
    ValidationError, check_config, compute_mechanical_energy, validate_snapshot,
)

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class SimulationLog:
    """Container for logged flight data, one entry per tick."""
    time: List[float] = field(default_factory=list)
    position_x: List[float] = field(default_factory=list)
    position_y: List[float] = field(default_factory=list)
    velocity_x: List[float] = field(default_factory=list)
    velocity_y: List[float] = field(default_factory=list)
    max_height: List[float] = field(default_factory=list)
    range: List[float] = field(default_factory=list)
    current_height: List[float] = field(default_factory=list)
    bounce_count: List[int] = field(default_factory=list)
    phase_name: List[str] = field(default_factory=list)

    def append(self, controller: FlightController):
        """Log data from the current tick."""
        snap = controller.current_state
        stats = controller.stats
        self.time.append(stats.elapsed_time)
        self.position_x.append(snap.x)
        self.position_y.append(snap.y)
        self.velocity_x.append(snap.velocity[0])
        self.velocity_y.append(snap.velocity[1])
        self.max_height.append(stats.max_height)
        self.range.append(stats.range)
        self.current_height.append(stats.current_height)
        self.bounce_count.append(controller.bounce_count)
        self.phase_name.append(snap.phase)

    def bounce_indices(self) -> List[int]:
        """Indices of the ticks on which a bounce occurred."""
        return [i for i in range(1, len(self.bounce_count))
                if self.bounce_count[i] > self.bounce_count[i - 1]]

    def to_csv(self, filename: str):
        """Write logged telemetry to CSV for offline analysis."""
        os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
        header = [
            'time', 'pos_x', 'pos_y', 'vel_x', 'vel_y',
            'max_height', 'range', 'current_height', 'bounces', 'phase'
        ]

        with open(filename, 'w', newline='') as fh:
            writer = csv.writer(fh)
            writer.writerow(header)
            for i in range(len(self.time)):
                writer.writerow([
                    self.time[i], self.position_x[i], self.position_y[i],
                    self.velocity_x[i], self.velocity_y[i],
                    self.max_height[i], self.range[i], self.current_height[i],
                    self.bounce_count[i], self.phase_name[i],
                ])


def check_termination(controller: FlightController, max_time: float) -> tuple:
    """
    Check if the run should stop.

    Args:
        controller: Flight controller being driven
        max_time: Maximum allowed flight time (s)

    Returns:
        (should_terminate, reason) tuple
    """
    phase = controller.get_phase()

    if phase == FlightPhase.LANDED:
        stats = controller.stats
        return True, (
            f"LANDED - range {stats.range:.2f} m after "
            f"{controller.bounce_count} bounce(s)"
        )

    if phase == FlightPhase.IDLE:
        return True, "IDLE - no flight in progress"

    if controller.stats.elapsed_time >= max_time:
        return True, "Maximum flight time reached"

    return False, None


def run_simulation(config: SimulationConfig = None, dt: float = None,
                   max_time: float = None, verbose: bool = True,
                   controller: FlightController = None) -> tuple:
    """
    Fly one shot from launch to landing.

    Args:
        config: Shot configuration. If None a default is created.
        dt: Tick length (default: 60 Hz display cadence)
        max_time: Maximum flight time before the run is abandoned
        verbose: Print progress updates
        controller: Existing controller to drive (config is applied to it)

    Returns:
        (final_state, log, termination_reason) tuple
    """
    if config is None:
        config = create_default_config()
    if dt is None:
        dt = C.DRIVER_DT
    if max_time is None:
        max_time = C.MAX_FLIGHT_TIME

    check_config(config)

    if controller is None:
        controller = FlightController(config=config)
    else:
        controller.reset()
        controller.set_config(config.angle, config.speed, config.gravity,
                              config.restitution)

    log = SimulationLog()

    logger.info(f"Starting simulation: dt={dt}s, max_time={max_time}s, "
                f"angle={config.angle}deg, speed={config.speed}m/s")

    if verbose:
        print("\n" + "=" * 72)
        print(f"CRICKET SHOT SIMULATION | dt={dt:.4f}s | angle={config.angle:.1f}deg "
              f"| v0={config.speed:.1f}m/s | e={config.restitution:.2f}")
        print("=" * 72)
        print(f"{'Time (s)':^10} | {'X (m)':^10} | {'Y (m)':^10} | "
              f"{'Vy (m/s)':^10} | {'Bounces':^8} | {'Phase':<10}")
        print("-" * 72)

    controller.launch()
    log.append(controller)

    start_time = time.time()
    step_count = 0
    last_bounces = 0
    gravity = controller.flight_config.gravity
    snap = controller.current_state
    energy_prev = compute_mechanical_energy(snap.y, *snap.velocity, gravity)
    reason = None

    while True:
        should_terminate, reason = check_termination(controller, max_time)
        if should_terminate:
            logger.info(f"Simulation terminated: {reason}")
            if verbose:
                print(f"\nTermination: {reason}")
            break

        previous_max = controller.stats.max_height
        controller.tick(dt)
        step_count += 1

        try:
            validate_snapshot(controller.current_state, controller.stats,
                              previous_max_height=previous_max)
        except ValidationError as e:
            logger.error(f"Validation failed: {e}")
            if verbose:
                print(f"\nValidation Error: {e}")
            reason = f"Validation failure: {e}"
            break

        log.append(controller)

        if controller.bounce_count > last_bounces:
            snap = controller.current_state
            energy = compute_mechanical_energy(snap.y, *snap.velocity, gravity)
            _validate_energy(energy, energy_prev, controller.stats.elapsed_time)
            energy_prev = energy
            last_bounces = controller.bounce_count
            if verbose:
                _print_status(controller.current_state, controller)

    elapsed = time.time() - start_time
    final_state = controller.current_state
    _log_completion(controller, step_count, elapsed, verbose)

    return final_state, log, reason


def _validate_energy(energy: float, energy_prev: float, t: float):
    """Warn if a bounce returned more energy than the ball arrived with."""
    if energy > energy_prev + 1e-6:
        logger.warning(f"Energy gain at bounce t={t:.2f}s: "
                       f"{energy_prev:.4f} -> {energy:.4f} J/kg")


def _print_status(snap: FlightSnapshot, controller: FlightController):
    """Print a formatted status row."""
    msg = (f"{controller.stats.elapsed_time:10.2f} | {snap.x:10.2f} | {snap.y:10.3f} | "
           f"{snap.velocity[1]:10.2f} | {controller.bounce_count:^8d} | {snap.phase:<10}")
    print(msg)
    logger.debug(msg)


def _log_completion(controller: FlightController, steps: int, elapsed: float,
                    verbose: bool):
    """Log and print run statistics."""
    stats = controller.stats
    logger.info(f"Simulation complete: {steps} ticks in {elapsed:.3f}s")
    logger.info(f"Final stats: range={stats.range:.2f}m, "
                f"max_height={stats.max_height:.2f}m, t={stats.elapsed_time:.2f}s")

    if verbose:
        print("-" * 72)
        print("SIMULATION COMPLETED")
        print("-" * 72)
        print(f"Flight Time:  {stats.elapsed_time:.2f} s")
        print(f"Range:        {stats.range:.2f} m")
        print(f"Max Height:   {stats.max_height:.2f} m")
        print(f"Bounces:      {controller.bounce_count}")
        print("-" * 72)
        print(f"Ticks:        {steps:,}")
        print(f"Wall Time:    {elapsed:.3f} s")
        print("=" * 72)
