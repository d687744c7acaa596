"""
Configuration management package

Provides configuration classes for the boarding simulation.
"""

from .simulation import (
    SimulationConfig,
    CabinConfig,
    PassengerConfig,
    BoardingConfig,
    AnalysisConfig,
    BOARDING_POLICIES
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config
)

__all__ = [
    # Simulation
    'SimulationConfig',
    'CabinConfig',
    'PassengerConfig',
    'BoardingConfig',
    'AnalysisConfig',
    'BOARDING_POLICIES',

    # Loader
    'ConfigLoader',
    'load_simulation_config',
]
