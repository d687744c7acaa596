"""
Boarding Process - SimPy host loop for the aisle simulator

Feeds the AisleSimulator fixed time steps, offers the next passenger in
boarding order to the admission gate once per step and publishes aisle
snapshots for observers.
"""

from enum import Enum

import simpy

from .aisle import AisleSimulator
from .entity import Entity


class BoardingState(Enum):
    BOARDING = "boarding"
    ALL_BOARDED = "all_boarded"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


class BoardingProcess(Entity):
    """
    Drives one boarding run.

    States:
        BOARDING -> ALL_BOARDED -> COMPLETED
        (TIMED_OUT if max_simulation_time passes first)

    The process value is the boarding time in modelled seconds
    (simulated time x scale factor), or None on timeout.
    """
    INITIAL_STATE = BoardingState.BOARDING
    TRANSITIONS = {
        BoardingState.BOARDING: (BoardingState.ALL_BOARDED, BoardingState.TIMED_OUT),
        BoardingState.ALL_BOARDED: (BoardingState.COMPLETED, BoardingState.TIMED_OUT),
    }

    def __init__(self, env: simpy.Environment, simulator: AisleSimulator, scale_factor: float,
                 time_step: float = 1 / 60, max_simulation_time: float = None,
                 broker=None, name: str = "BoardingProcess"):
        """
        Args:
            env: SimPy environment
            simulator: Initialized simulator with its boarding order applied
            scale_factor: Simulated-to-modelled time scale for the report
            time_step: Simulated seconds per step
            max_simulation_time: Give up after this many simulated seconds (None = never)
            broker: Optional MessageBroker for status snapshots
        """
        if time_step <= 0:
            raise ValueError("time_step must be positive")
        super().__init__(env, name)
        self.simulator = simulator
        self.scale_factor = scale_factor
        self.time_step = time_step
        self.max_simulation_time = max_simulation_time
        self.broker = broker

        self.next_passenger = 0
        self.boarding_time = None

    def run(self):
        passengers = self.simulator.passengers
        start = self.env.now
        if not passengers:
            self.set_state(BoardingState.ALL_BOARDED)

        while True:
            yield self.env.timeout(self.time_step)
            self.simulator.tick(self.time_step)

            if self.next_passenger < len(passengers) and self.simulator.board_next(passengers[self.next_passenger]):
                self.next_passenger += 1
                if self.next_passenger == len(passengers):
                    self.set_state(BoardingState.ALL_BOARDED)

            if self.broker:
                self.broker.put('aisle/status', self.simulator.get_aisle_status())

            if self.next_passenger == len(passengers) and self.simulator.all_seated():
                self.boarding_time = (self.env.now - start) * self.scale_factor
                self.set_state(BoardingState.COMPLETED)
                print(f"{self.env.now:.2f} [{self.name}] BOARDING COMPLETED. TOOK {self.boarding_time:.1f} SECONDS")
                if self.broker:
                    self.broker.put('boarding/completed', {
                        'timestamp': self.env.now,
                        'boarding_time': self.boarding_time,
                        'passengers': len(passengers),
                    })
                return self.boarding_time

            if self.max_simulation_time is not None and self.env.now - start >= self.max_simulation_time:
                self.set_state(BoardingState.TIMED_OUT)
                print(f"{self.env.now:.2f} [{self.name}] Gave up after {self.env.now - start:.2f}s: "
                      f"{self.simulator.seated_count()}/{len(passengers)} seated")
                return None
