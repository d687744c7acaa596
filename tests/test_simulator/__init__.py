"""
Simulator Tests

Tests for the boarding engine:
- Parameter sampling and seat grid geometry
- Passenger state machine and collision clamp
- Aisle admission gate and tick orchestration
- SimPy host loop
"""
