"""Infrastructure for the SimPy host loop (messaging, wall-clock pacing)"""

from .message_broker import MessageBroker
from .realtime_env import RealtimeEnvironment

__all__ = [
    'MessageBroker',
    'RealtimeEnvironment',
]

