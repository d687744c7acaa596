"""
End-to-end run of main.run_simulation on a small scenario
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from main import run_simulation


def test_run_simulation_writes_reports(tmp_path):
    trajectory = tmp_path / "trajectory.png"
    progress = tmp_path / "progress.png"
    cabin = tmp_path / "cabin.png"
    config_path = tmp_path / "small.yaml"
    config_path.write_text(f"""
simulation:
  cabin:
    num_rows: 6
    seats_per_row: 2
  boarding:
    policy: batched_section
    num_sections: 3
    people_per_section: 1
  analysis:
    plot_trajectory: true
    trajectory_filename: {trajectory.as_posix()}
    progress_filename: {progress.as_posix()}
    cabin_snapshot_filename: {cabin.as_posix()}
  random_seed: 17
  time_step: 0.01
""", encoding="utf-8")

    boarding_time = run_simulation(str(config_path))

    assert boarding_time is not None and boarding_time > 0
    assert trajectory.exists()
    assert progress.exists()
    assert cabin.exists()
