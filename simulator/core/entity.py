import simpy
from abc import ABC, abstractmethod

from .errors import InvariantViolation


class Entity(ABC):
    """
    SimPy process with a declared state machine.

    Subclasses set INITIAL_STATE and TRANSITIONS ({state: allowed next
    states}) and implement run() as a generator. The process starts as soon
    as the entity is constructed; its return value becomes the process value.
    """
    INITIAL_STATE = None
    TRANSITIONS = {}

    def __init__(self, env: simpy.Environment, name: str):
        self.env = env
        self.name = name
        self.state = self.INITIAL_STATE
        self._process = self.env.process(self.run())
        print(f"{self.env.now:.2f} [{self.name}] Created in state {self.state.name}")

    @abstractmethod
    def run(self):
        pass

    def set_state(self, new_state):
        """
        Move to new_state. Re-entering the current state is a no-op; a
        transition not listed in TRANSITIONS raises InvariantViolation.
        """
        if new_state == self.state:
            return
        if new_state not in self.TRANSITIONS.get(self.state, ()):
            raise InvariantViolation(
                f"{self.name}: illegal transition {self.state.name} -> {new_state.name}")
        old_state = self.state
        self.state = new_state
        print(f"{self.env.now:.2f} [{self.name}] State: {old_state.name} -> {new_state.name}")

    @property
    def process(self) -> simpy.Process:
        """The SimPy process; yield it or run until it to await the result"""
        return self._process
