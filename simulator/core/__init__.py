"""Core simulation entities"""

from .errors import ConfigurationError, InvariantViolation
from .parameters import ModelParameters
from .seat import Seat, SeatGrid, CabinLayout
from .passenger import Passenger, PassengerState
from .aisle import AisleSimulator, initialize
from .entity import Entity
from .boarding_process import BoardingProcess, BoardingState

__all__ = [
    'ConfigurationError',
    'InvariantViolation',
    'ModelParameters',
    'Seat',
    'SeatGrid',
    'CabinLayout',
    'Passenger',
    'PassengerState',
    'AisleSimulator',
    'initialize',
    'Entity',
    'BoardingState',
    'BoardingProcess',
]
