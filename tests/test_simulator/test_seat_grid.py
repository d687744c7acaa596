"""
Seat Grid Tests

Occupancy contract and cabin geometry.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from simulator.core.errors import InvariantViolation
from simulator.core.seat import CabinLayout, SeatGrid


def test_seats_start_unoccupied():
    grid = SeatGrid(3, 4)
    assert len(grid) == 12
    assert grid.occupied_count() == 0
    assert all(not seat.occupied for _, _, seat in grid)


def test_mark_occupied_once():
    grid = SeatGrid(2, 2)
    grid.mark_occupied(1, 0)
    assert grid.seat_at(1, 0).occupied
    assert grid.occupied_count() == 1


def test_mark_occupied_twice_is_invariant_violation():
    grid = SeatGrid(2, 2)
    grid.mark_occupied(0, 1)
    with pytest.raises(InvariantViolation):
        grid.mark_occupied(0, 1)


def test_row_positions():
    grid = SeatGrid(20, 4)
    assert grid.row_position(0) == 50.0
    assert grid.row_position(1) == 70.0
    assert grid.row_position(19) == 430.0


def test_seat_x_skips_aisle_after_middle_seat():
    grid = SeatGrid(1, 4)
    assert [grid.seat_x(col) for col in range(4)] == [300.0, 316.0, 342.0, 358.0]


def test_aisle_origin_four_abreast():
    grid = SeatGrid(5, 4)
    assert grid.aisle_origin() == (326.0, 50.0)


def test_aisle_origin_single_seat_rows():
    grid = SeatGrid(5, 1)
    assert grid.aisle_origin() == (310.0, 50.0)


def test_custom_layout():
    layout = CabinLayout(start_y=0.0, row_spacing=5.0, seat_height=5.0)
    grid = SeatGrid(3, 2, layout)
    assert grid.row_position(2) == 20.0
    assert grid.aisle_origin()[1] == 0.0
