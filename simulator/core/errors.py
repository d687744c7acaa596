"""
Simulation errors

ConfigurationError covers setup parameters that would produce a degenerate
cabin. InvariantViolation covers states the engine must never reach
(double seating, overlapping passengers, illegal state transitions); it is
an AssertionError so nothing upstream tries to recover from it.
"""


class ConfigurationError(ValueError):
    """Invalid cabin or simulation setup parameters"""


class InvariantViolation(AssertionError):
    """Raised when a simulation invariant has been broken"""
