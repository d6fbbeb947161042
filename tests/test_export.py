import os
import re
import tempfile

from cricket_sim import export
from cricket_sim.config import create_test_config
from cricket_sim.state import Stats


def sample_stats():
    return Stats(velocity_x=14.142, velocity_y=-3.456, max_height=10.204,
                 range=40.816, elapsed_time=2.886, current_height=0.0)


def test_stats_rows_layout():
    rows = export.stats_rows(create_test_config(), sample_stats(), timestamp='now')
    assert rows[0] == [export.TITLE]
    assert rows[1] == ['Generated:', 'now']
    assert ['Parameter', 'Value', 'Unit'] in rows
    assert ['Max Height', '10.20', 'm'] in rows
    assert ['Range (Distance)', '40.82', 'm'] in rows
    assert ['Flight Time', '2.89', 's'] in rows
    assert ['Velocity Y', '-3.46', 'm/s'] in rows


def test_format_stats_csv():
    text = export.format_stats_csv(create_test_config(), sample_stats(), timestamp='now')
    lines = text.splitlines()
    assert lines[0] == export.TITLE
    assert 'Parameter,Value,Unit' in lines
    assert 'Launch Angle,45.0,°' in lines
    assert 'Velocity X,14.14,m/s' in lines


def test_export_stats_csv_writes_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = os.path.join(tmpdir, 'exports', 'shot.csv')
        written = export.export_stats_csv(path, create_test_config(), sample_stats(),
                                          timestamp='now')
        assert written == path
        with open(path, encoding='utf-8') as fh:
            content = fh.read()
    assert 'Current Height,0.00,m' in content


def test_default_export_filename():
    assert re.fullmatch(r'cricket_simulation_\d+\.csv', export.default_export_filename())
