"""
Seat Grid - Cabin seat storage and geometry

This module provides:
- Seat: occupancy record for a single seat
- CabinLayout: drawing-space geometry of the cabin
- SeatGrid: row x column arena of seats, addressed by (row, col) index
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import InvariantViolation


@dataclass
class Seat:
    """
    A single seat.

    Attributes:
        occupied: Set once when its passenger sits down, never cleared
    """
    occupied: bool = False


@dataclass
class CabinLayout:
    """
    Cabin geometry in simulation units.

    Rows run along +y starting at start_y. Within a row, seats are laid out
    along +x from seat_start_x; the aisle opens after the middle seat.
    """
    start_y: float = 50.0
    row_spacing: float = 10.0
    seat_width: float = 10.0
    seat_height: float = 10.0
    seat_spacing: float = 6.0
    aisle_width: float = 16.0
    seat_start_x: float = 300.0

    @classmethod
    def from_config(cls, cabin_config) -> 'CabinLayout':
        """Create CabinLayout from a CabinConfig"""
        return cls(
            start_y=cabin_config.start_y,
            row_spacing=cabin_config.row_spacing,
            seat_width=cabin_config.seat_width,
            seat_height=cabin_config.seat_height,
            seat_spacing=cabin_config.seat_spacing,
            aisle_width=cabin_config.aisle_width,
            seat_start_x=cabin_config.seat_start_x,
        )


class SeatGrid:
    """
    Owns every Seat of the cabin.

    Passengers refer to their seat by (row, col) index only, so the grid is
    the single place where occupancy changes.
    """

    def __init__(self, num_rows: int, seats_per_row: int, layout: CabinLayout = None):
        self.num_rows = num_rows
        self.seats_per_row = seats_per_row
        self.layout = layout if layout is not None else CabinLayout()
        self._seats: List[List[Seat]] = [
            [Seat() for _ in range(seats_per_row)]
            for _ in range(num_rows)
        ]

    def seat_at(self, row: int, col: int) -> Seat:
        return self._seats[row][col]

    def mark_occupied(self, row: int, col: int):
        """
        Mark a seat as occupied.

        Raises:
            InvariantViolation: If the seat is already occupied
        """
        seat = self._seats[row][col]
        if seat.occupied:
            raise InvariantViolation(f"Seat ({row}, {col}) is already occupied")
        seat.occupied = True

    def occupied_count(self) -> int:
        return sum(1 for _, _, seat in self if seat.occupied)

    def __iter__(self) -> Iterator[Tuple[int, int, Seat]]:
        for row, row_seats in enumerate(self._seats):
            for col, seat in enumerate(row_seats):
                yield row, col, seat

    def __len__(self) -> int:
        return self.num_rows * self.seats_per_row

    # --- Geometry ---

    @property
    def aisle_after_col(self) -> int:
        """Index of the seat directly left of the aisle"""
        return max(self.seats_per_row // 2 - 1, 0)

    def row_position(self, row: int) -> float:
        """Aisle coordinate at which a passenger for this row stops"""
        return self.layout.start_y + row * (self.layout.seat_height + self.layout.row_spacing)

    def seat_x(self, col: int) -> float:
        """Left edge of the seat in column col"""
        layout = self.layout
        x = layout.seat_start_x + col * layout.seat_width
        if col > self.aisle_after_col:
            # Every gap except the aisle is a plain seat gap
            x += (col - 1) * layout.seat_spacing + layout.aisle_width
        else:
            x += col * layout.seat_spacing
        return x

    def aisle_origin(self) -> Tuple[float, float]:
        """Point where passengers enter the aisle, level with row 0"""
        left = self.aisle_after_col
        x = self.seat_x(left) + self.layout.seat_width
        return x, self.layout.start_y

    def __repr__(self) -> str:
        return f"SeatGrid(rows={self.num_rows}, seats_per_row={self.seats_per_row}, occupied={self.occupied_count()})"
