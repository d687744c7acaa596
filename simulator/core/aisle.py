"""
Aisle Simulator - Admission control and per-tick orchestration

This module provides:
- AisleSimulator: owns the seat grid and passengers, gates entry to the
  aisle and advances every aisle-resident passenger on each tick
- initialize(): builds a ready-to-run simulator for a cabin

Both the admission gate and the movement clamp apply the same minimum
following distance (2 * radius + 1); the gate treats the entering passenger
as a virtual passenger standing at the origin.
"""

from typing import List, Optional

from .errors import ConfigurationError, InvariantViolation
from .parameters import ModelParameters
from .passenger import Passenger, PassengerState
from .seat import CabinLayout, SeatGrid


class AisleSimulator:
    """
    Single-aisle boarding engine

    The host drives it by repeatedly calling board_next() with the next
    passenger in boarding order and tick() with the elapsed time. Nothing
    here blocks or reads the wall clock.
    """

    def __init__(self, seat_grid: SeatGrid, passengers: List[Passenger], broker=None):
        """
        Args:
            seat_grid: Cabin seats
            passengers: One passenger per seat, in boarding order
            broker: Optional MessageBroker for passenger events
        """
        self.seat_grid = seat_grid
        self.passengers = passengers
        self.broker = broker
        self.now = 0.0

        self._origin_established = False
        self.origin_x = 0.0
        self.origin_y = 0.0
        self._started = False

    # ========================================
    # Setup
    # ========================================

    def establish_origin(self, x: float, y: float):
        """
        Fix the aisle entry point. One-time setup step.

        Raises:
            InvariantViolation: If a different origin was already established
        """
        if self._origin_established:
            if (x, y) != (self.origin_x, self.origin_y):
                raise InvariantViolation(
                    f"Aisle origin already established at ({self.origin_x}, {self.origin_y}), "
                    f"cannot move it to ({x}, {y})"
                )
            return
        self.origin_x = x
        self.origin_y = y
        self._origin_established = True

    @property
    def origin_established(self) -> bool:
        return self._origin_established

    def apply_order_policy(self, policy, rng):
        """
        Reorder the passenger list before the simulation starts.

        Args:
            policy: IBoardingOrderPolicy implementation
            rng: numpy Generator owned by ModelParameters

        Raises:
            RuntimeError: If boarding or ticking has already started
        """
        if self._started:
            raise RuntimeError("Boarding order cannot change after the simulation has started")
        policy.apply(self.passengers, rng)
        print(f"{self.now:.2f} [AisleSimulator] Boarding order set by {policy.get_policy_name()}: "
              f"{' '.join(p.name for p in self.passengers)}")

    # ========================================
    # Admission gate
    # ========================================

    def aisle_residents(self) -> List[Passenger]:
        return [p for p in self.passengers if p.is_in_aisle()]

    def can_board(self) -> bool:
        """True if a passenger entering at the origin keeps a safe gap"""
        if not self._origin_established:
            return False

        residents = self.aisle_residents()
        if not residents:
            return True

        lowest_position = min(p.position for p in residents)
        return lowest_position - self.origin_y >= Passenger.min_following_distance()

    def board_next(self, passenger: Passenger) -> bool:
        """
        Admit a passenger into the aisle if the gate is open.

        Returns:
            bool: True if boarded, False if the gate rejected (retry later)
        """
        self._started = True
        if not self.can_board():
            return False

        passenger.board(self.origin_y, self.now)
        print(f"{self.now:.2f} [AisleSimulator] Passenger {passenger.name} boarded with velocity {passenger.velocity:.1f}")
        self._publish('passenger/boarded', passenger)
        return True

    def next_unboarded(self) -> Optional[Passenger]:
        for passenger in self.passengers:
            if passenger.state == PassengerState.NOT_BOARDED:
                return passenger
        return None

    # ========================================
    # Time stepping
    # ========================================

    def tick(self, elapsed: float):
        """
        Advance the simulation by elapsed seconds.

        Moving passengers are clamped against everyone ahead of them, which
        makes a tick O(n^2) in the number of aisle residents.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed must be non-negative, got {elapsed}")
        self._started = True
        self.now += elapsed

        residents = self.aisle_residents()
        for passenger in residents:
            if passenger.state != PassengerState.IN_AISLE:
                continue
            passenger.advance(elapsed, residents, self.seat_grid, self.now)
            if passenger.state == PassengerState.WAITING:
                print(f"{self.now:.2f} [AisleSimulator] Passenger {passenger.name} reached row {passenger.row}, "
                      f"waiting {passenger.wait_duration:.2f}s")
                self._publish('passenger/waiting', passenger)

        for passenger in self.passengers:
            if passenger.state != PassengerState.WAITING:
                continue
            if passenger.poll_seating(self.seat_grid, self.now):
                print(f"{self.now:.2f} [AisleSimulator] Passenger {passenger.name} seated")
                self._publish('passenger/seated', passenger)

    def all_seated(self) -> bool:
        return all(p.is_seated() for p in self.passengers)

    def seated_count(self) -> int:
        return sum(1 for p in self.passengers if p.is_seated())

    def get_aisle_status(self) -> dict:
        """Snapshot of aisle positions for observers"""
        return {
            'timestamp': self.now,
            'positions': {p.name: p.position for p in self.aisle_residents()},
            'seated_count': self.seated_count(),
            'total_passengers': len(self.passengers),
        }

    def _publish(self, topic: str, passenger: Passenger):
        if self.broker is None:
            return
        self.broker.put(topic, {
            'timestamp': self.now,
            'passenger_name': passenger.name,
            'row': passenger.row,
            'seat': passenger.seat,
            'position': passenger.position,
        })


def initialize(rows: int, seats_per_row: int, parameters: ModelParameters,
               layout: CabinLayout = None, broker=None) -> AisleSimulator:
    """
    Build a simulator with one sampled passenger per seat.

    Passengers are created in row-major order; apply a boarding order
    policy afterwards to reorder them.

    Raises:
        ConfigurationError: If rows or seats_per_row is not positive
    """
    if rows <= 0:
        raise ConfigurationError(f"rows must be positive, got {rows}")
    if seats_per_row <= 0:
        raise ConfigurationError(f"seats_per_row must be positive, got {seats_per_row}")

    seat_grid = SeatGrid(rows, seats_per_row, layout)
    passengers = []
    for row in range(rows):
        for seat in range(seats_per_row):
            passenger = Passenger(row, seat,
                                  velocity=parameters.sample_speed(),
                                  wait_duration=parameters.sample_wait_duration())
            print(f"0.00 [Setup] Created passenger at {row} {seat} with velocity {passenger.velocity:.1f} "
                  f"and wait duration {passenger.wait_duration:.3f}")
            passengers.append(passenger)

    simulator = AisleSimulator(seat_grid, passengers, broker=broker)
    simulator.establish_origin(*seat_grid.aisle_origin())
    return simulator
