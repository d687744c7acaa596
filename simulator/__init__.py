"""
Boarding Simulator - Core simulation engine

This package provides the single-aisle boarding engine (passenger state
machine, admission gate, collision-clamped movement) and the SimPy host
loop that drives it.
"""

__version__ = "0.1.0"

from .core.aisle import AisleSimulator, initialize
from .core.passenger import Passenger, PassengerState
from .core.seat import Seat, SeatGrid, CabinLayout
from .core.parameters import ModelParameters
from .core.errors import ConfigurationError, InvariantViolation
from .core.entity import Entity
from .core.boarding_process import BoardingProcess, BoardingState

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment

__all__ = [
    'AisleSimulator',
    'initialize',
    'Passenger',
    'PassengerState',
    'Seat',
    'SeatGrid',
    'CabinLayout',
    'ModelParameters',
    'ConfigurationError',
    'InvariantViolation',
    'Entity',
    'BoardingState',
    'BoardingProcess',
    'MessageBroker',
    'RealtimeEnvironment',
]
