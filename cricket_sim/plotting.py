"""
Cricket Shot Simulation - Plotting

Trajectory and stats plots for a logged flight. Plots are written to files
with the non-interactive Agg backend.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for batch processing
import matplotlib.pyplot as plt
import numpy as np

from . import constants as C
from .predictor import TrajectoryPreview

logger = logging.getLogger(__name__)


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class TrajectoryData:
    """Numpy view of a SimulationLog used in plotting.

    Attributes:
        time: Flight time (s)
        x: Horizontal position (m)
        y: Ball centre height (m)
        vx: Horizontal velocity (m/s)
        vy: Vertical velocity (m/s)
        max_height: Running max height above launch baseline (m)
        bounce_idx: Indices of bounce ticks
    """
    time: np.ndarray
    x: np.ndarray
    y: np.ndarray
    vx: np.ndarray
    vy: np.ndarray
    max_height: np.ndarray
    bounce_idx: np.ndarray


def extract_log_data(log) -> TrajectoryData:
    """Convert list-based log fields into arrays."""
    bounce_idx = log.bounce_indices() if hasattr(log, 'bounce_indices') else []
    return TrajectoryData(
        time=np.asarray(log.time, dtype=np.float64),
        x=np.asarray(log.position_x, dtype=np.float64),
        y=np.asarray(log.position_y, dtype=np.float64),
        vx=np.asarray(log.velocity_x, dtype=np.float64),
        vy=np.asarray(log.velocity_y, dtype=np.float64),
        max_height=np.asarray(log.max_height, dtype=np.float64),
        bounce_idx=np.asarray(bounce_idx, dtype=int),
    )


# =============================================================================
# Plots
# =============================================================================

def plot_trajectory(data: TrajectoryData, preview: Optional[TrajectoryPreview],
                    filename: str) -> str:
    """Actual path vs predicted first arc, with apex and landing markers."""
    fig, ax = plt.subplots(figsize=(11, 5))

    ax.axhline(C.GROUND_THRESHOLD, color='#2e7d32', lw=1.0, ls='-',
               label='Ground contact')
    ax.plot(data.x, data.y, color='#d32f2f', lw=1.8, label='Actual path')

    if len(data.bounce_idx):
        ax.scatter(data.x[data.bounce_idx], data.y[data.bounce_idx],
                   color='#d32f2f', marker='v', s=30, zorder=3, label='Bounce')

    if preview is not None and len(preview):
        ax.plot(preview.points[:, 0], preview.points[:, 1], color='#fbc02d',
                lw=1.4, ls='--', label='Predicted path')
        ax.scatter([preview.apex[0]], [preview.apex[1]], color='#f57f17',
                   marker='^', s=50, zorder=4,
                   label=f'Apex ({preview.apex_height:.1f} m)')
        ax.scatter([preview.landing_x], [C.LAUNCH_HEIGHT], color='#f57f17',
                   marker='x', s=50, zorder=4,
                   label=f'Landing ({preview.range:.1f} m)')

    ax.set_xlabel('Distance (m)')
    ax.set_ylabel('Height (m)')
    ax.set_title('Shot Trajectory')
    ax.set_ylim(bottom=0.0)
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper right', fontsize=8)

    fig.tight_layout()
    fig.savefig(filename, dpi=120)
    plt.close(fig)
    return filename


def plot_stats(data: TrajectoryData, filename: str) -> str:
    """Velocity components and max height against flight time."""
    fig, (ax_v, ax_h) = plt.subplots(2, 1, figsize=(9, 6), sharex=True)

    ax_v.plot(data.time, data.vx, label='Vx')
    ax_v.plot(data.time, data.vy, label='Vy')
    ax_v.axhline(0.0, color='k', lw=0.5)
    ax_v.set_ylabel('Velocity (m/s)')
    ax_v.grid(True, alpha=0.3)
    ax_v.legend(fontsize=8)

    ax_h.plot(data.time, data.y - C.LAUNCH_HEIGHT, label='Height')
    ax_h.plot(data.time, data.max_height, ls='--', label='Max height')
    ax_h.set_xlabel('Flight time (s)')
    ax_h.set_ylabel('Height above bat (m)')
    ax_h.grid(True, alpha=0.3)
    ax_h.legend(fontsize=8)

    fig.tight_layout()
    fig.savefig(filename, dpi=120)
    plt.close(fig)
    return filename


def generate_all_plots(log, preview: Optional[TrajectoryPreview],
                       output_dir: str) -> List[str]:
    """
    Write every plot for a flight.

    Returns:
        Paths of the files written
    """
    os.makedirs(output_dir, exist_ok=True)
    data = extract_log_data(log)
    paths = [
        plot_trajectory(data, preview, os.path.join(output_dir, 'trajectory.png')),
        plot_stats(data, os.path.join(output_dir, 'stats.png')),
    ]
    for p in paths:
        logger.info(f"Saved plot {p}")
    return paths
