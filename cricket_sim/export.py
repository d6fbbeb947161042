"""
Cricket Shot Simulation - Stats Export

Formats a stats snapshot as label/value/unit rows for spreadsheet export.
"""

import csv
import io
import logging
import os
import time
from datetime import datetime
from typing import List, Optional

from .config import SimulationConfig
from .state import Stats

logger = logging.getLogger(__name__)

TITLE = 'Cricket Projectile Motion Simulation Data'


def stats_rows(config: SimulationConfig, stats: Stats,
               timestamp: Optional[str] = None) -> List[list]:
    """
    Build the export rows.

    Args:
        config: Shot configuration
        stats: Stats snapshot to export
        timestamp: Text for the "Generated:" row (default: now)

    Returns:
        List of rows, each a list of cells
    """
    if timestamp is None:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    return [
        [TITLE],
        ['Generated:', timestamp],
        [''],
        ['Parameter', 'Value', 'Unit'],
        ['Launch Angle', config.angle, '°'],
        ['Initial Velocity', config.speed, 'm/s'],
        ['Gravity', config.gravity, 'm/s²'],
        ['Restitution', config.restitution, ''],
        [''],
        ['Results', '', ''],
        ['Velocity X', f"{stats.velocity_x:.2f}", 'm/s'],
        ['Velocity Y', f"{stats.velocity_y:.2f}", 'm/s'],
        ['Max Height', f"{stats.max_height:.2f}", 'm'],
        ['Range (Distance)', f"{stats.range:.2f}", 'm'],
        ['Flight Time', f"{stats.elapsed_time:.2f}", 's'],
        ['Current Height', f"{stats.current_height:.2f}", 'm'],
    ]


def format_stats_csv(config: SimulationConfig, stats: Stats,
                     timestamp: Optional[str] = None) -> str:
    """Render the export rows as CSV text."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')
    writer.writerows(stats_rows(config, stats, timestamp))
    return buf.getvalue()


def default_export_filename() -> str:
    return f"cricket_simulation_{int(time.time() * 1000)}.csv"


def export_stats_csv(filename: str, config: SimulationConfig, stats: Stats,
                     timestamp: Optional[str] = None) -> str:
    """
    Write the stats export to a file.

    Returns:
        Path written
    """
    os.makedirs(os.path.dirname(filename) or '.', exist_ok=True)
    with open(filename, 'w', newline='', encoding='utf-8') as fh:
        fh.write(format_stats_csv(config, stats, timestamp))
    logger.info(f"Stats exported to {filename}")
    return filename
