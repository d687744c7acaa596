from enum import Enum
from typing import Iterable, Optional, Tuple

from .errors import InvariantViolation
from .seat import SeatGrid


class PassengerState(Enum):
    NOT_BOARDED = "NOT_BOARDED"
    IN_AISLE = "IN_AISLE"
    WAITING = "WAITING"
    SEATED = "SEATED"


class Passenger:
    """
    Passenger walking the aisle towards an assigned seat

    State machine:
        NOT_BOARDED -> IN_AISLE -> WAITING -> SEATED

    Design:
    - Plain record plus transitions; no rendering, no SimPy process
    - The seat is addressed by its (row, col) index in the SeatGrid
    - Position is the aisle coordinate along the direction of travel
    - Timestamps are simulation-clock seconds supplied by the caller
    """

    RADIUS = 5.0

    def __init__(self, row: int, seat: int, velocity: float, wait_duration: float):
        """
        Initialize passenger

        Args:
            row: Target seat row
            seat: Target seat column
            velocity: Aisle speed (units per second)
            wait_duration: Seconds spent blocking the aisle at the seat row
        """
        self.row = row
        self.seat = seat
        self.velocity = velocity
        self.wait_duration = wait_duration

        self.state = PassengerState.NOT_BOARDED
        self.position = 0.0
        self.last_update_time: Optional[float] = None

        # Passenger metrics (self-tracking)
        self.board_time: Optional[float] = None
        self.wait_start_time: Optional[float] = None
        self.seated_time: Optional[float] = None

    @property
    def name(self) -> str:
        return f"R{self.row}S{self.seat}"

    @property
    def seat_index(self) -> Tuple[int, int]:
        return self.row, self.seat

    @classmethod
    def min_following_distance(cls) -> float:
        """Smallest centre-to-centre gap between two aisle-resident passengers"""
        return 2 * cls.RADIUS + 1

    def is_in_aisle(self) -> bool:
        """True while the passenger occupies aisle space (moving or waiting)"""
        return self.state in (PassengerState.IN_AISLE, PassengerState.WAITING)

    def is_seated(self) -> bool:
        return self.state == PassengerState.SEATED

    # ========================================
    # State transitions
    # ========================================

    def board(self, origin_position: float, now: float):
        """
        Enter the aisle at the origin.

        Caller must have checked the admission gate first.
        """
        if self.state != PassengerState.NOT_BOARDED:
            raise InvariantViolation(f"Passenger {self.name} cannot board from state {self.state.value}")
        self.state = PassengerState.IN_AISLE
        self.position = origin_position
        self.board_time = now
        self.last_update_time = now

    def advance(self, elapsed: float, neighbors: Iterable['Passenger'], seat_grid: SeatGrid, now: float):
        """
        Move along the aisle without closing in on anyone ahead.

        Args:
            elapsed: Seconds since the previous tick
            neighbors: Aisle-resident passengers (may include self)
            seat_grid: Grid holding this passenger's seat
            now: Simulation time after this tick
        """
        if self.state != PassengerState.IN_AISLE:
            raise InvariantViolation(f"Passenger {self.name} cannot advance from state {self.state.value}")

        target = self.position + elapsed * self.velocity
        spacing = self.min_following_distance()

        # O(n) per passenger: cap the move at every neighbor strictly ahead
        for other in neighbors:
            if other is self or not other.is_in_aisle():
                continue
            if other.position <= self.position:
                continue
            target = min(target, other.position - spacing)

        if target < self.position:
            raise InvariantViolation(
                f"Passenger {self.name} at {self.position:.3f} already overlaps the passenger ahead "
                f"(clamped move {target - self.position:.3f})"
            )

        self.position = target
        self.last_update_time = now

        seat_position = seat_grid.row_position(self.row)
        if self.position >= seat_position:
            self.position = seat_position
            self.state = PassengerState.WAITING
            self.wait_start_time = now

    def poll_seating(self, seat_grid: SeatGrid, now: float) -> bool:
        """
        Sit down once the wait duration has elapsed.

        Returns:
            bool: True if the passenger was seated by this call
        """
        if self.state != PassengerState.WAITING:
            return False
        if now - self.wait_start_time < self.wait_duration:
            return False
        seat_grid.mark_occupied(self.row, self.seat)
        self.state = PassengerState.SEATED
        self.seated_time = now
        self.last_update_time = now
        return True

    # ========================================
    # Passenger Metrics Methods (Self-tracking)
    # ========================================

    def get_aisle_time(self) -> Optional[float]:
        """
        Get time from boarding to reaching the seat row.

        Returns:
            float: Seconds, or None if not applicable
        """
        if self.board_time is not None and self.wait_start_time is not None:
            return self.wait_start_time - self.board_time
        return None

    def get_seating_delay(self) -> Optional[float]:
        """Get time spent blocking the aisle at the seat row"""
        if self.wait_start_time is not None and self.seated_time is not None:
            return self.seated_time - self.wait_start_time
        return None

    def get_total_boarding_time(self) -> Optional[float]:
        """Get time from boarding to seated"""
        if self.board_time is not None and self.seated_time is not None:
            return self.seated_time - self.board_time
        return None

    def __repr__(self) -> str:
        return (f"Passenger({self.name}, state={self.state.value}, position={self.position:.1f}, "
                f"velocity={self.velocity:.1f})")
