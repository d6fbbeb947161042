"""
Unit tests for plot generation functionality.

Tests that plots are created correctly and files are generated.
"""

import os
import tempfile
import unittest

import numpy as np

from cricket_sim.config import create_test_config
from cricket_sim.main import run_simulation
from cricket_sim.plotting import (
    TrajectoryData,
    extract_log_data,
    generate_all_plots,
    plot_trajectory,
)
from cricket_sim.predictor import predict


class TestExtractLogData(unittest.TestCase):
    """Tests for converting a log into plotting arrays."""

    @classmethod
    def setUpClass(cls):
        cls.config = create_test_config(restitution=0.6)
        _, cls.log, _ = run_simulation(cls.config, dt=0.02, verbose=False)

    def test_returns_arrays(self):
        data = extract_log_data(self.log)
        self.assertIsInstance(data, TrajectoryData)
        self.assertEqual(len(data.time), len(self.log.time))
        self.assertEqual(data.x.dtype, np.float64)

    def test_bounce_indices(self):
        data = extract_log_data(self.log)
        self.assertEqual(len(data.bounce_idx), self.log.bounce_count[-1])


class TestGeneratePlots(unittest.TestCase):
    """Tests that plot files are written."""

    def setUp(self):
        self.config = create_test_config(restitution=0.6)
        _, self.log, _ = run_simulation(self.config, dt=0.02, verbose=False)

    def test_generate_all_plots(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            paths = generate_all_plots(self.log, predict(self.config), tmpdir)
            self.assertEqual(len(paths), 2)
            for path in paths:
                self.assertTrue(os.path.exists(path))
                self.assertGreater(os.path.getsize(path), 0)

    def test_trajectory_without_preview(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, 'trajectory.png')
            plot_trajectory(extract_log_data(self.log), None, path)
            self.assertTrue(os.path.exists(path))


if __name__ == '__main__':
    unittest.main()
