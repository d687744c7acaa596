"""
Cabin Renderer Tests

The renderer only reads simulator state.
"""

import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from boarding_order import RandomOrderPolicy
from simulator.core.aisle import initialize
from simulator.core.parameters import ModelParameters
from visualizer.cabin_renderer import CabinRenderer


def partially_boarded():
    params = ModelParameters(seed=13)
    simulator = initialize(6, 4, params)
    simulator.apply_order_policy(RandomOrderPolicy(), params.rng)
    for passenger in simulator.passengers:
        for _ in range(40):
            simulator.tick(0.01)
            if simulator.board_next(passenger):
                break
    return simulator


def snapshot(simulator):
    return ([(p.state, p.position) for p in simulator.passengers],
            [seat.occupied for _, _, seat in simulator.seat_grid],
            simulator.now)


def test_draw_does_not_change_state():
    simulator = partially_boarded()
    before = snapshot(simulator)

    fig, ax = plt.subplots()
    CabinRenderer(simulator).draw(ax)
    plt.close(fig)

    assert snapshot(simulator) == before


def test_draw_adds_one_patch_per_seat_and_resident():
    simulator = partially_boarded()
    fig, ax = plt.subplots()
    CabinRenderer(simulator).draw(ax)
    expected = len(simulator.seat_grid) + len(simulator.aisle_residents())
    assert len(ax.patches) == expected
    plt.close(fig)


def test_save_snapshot(tmp_path):
    simulator = partially_boarded()
    output = tmp_path / "cabin.png"
    CabinRenderer(simulator).save_snapshot(str(output))
    assert output.exists() and output.stat().st_size > 0
