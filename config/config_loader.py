"""
Configuration loader utility

Reads boarding scenarios from YAML and applies optional overrides before
validation.
"""

import copy
from pathlib import Path
from typing import Optional, Union

import yaml

from .simulation import SimulationConfig


def _merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into a copy of base"""
    merged = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Builds validated SimulationConfig objects from scenario files"""

    @staticmethod
    def load_simulation(file_path: Union[str, Path], overrides: Optional[dict] = None) -> SimulationConfig:
        """
        Load a scenario file

        Args:
            file_path: Path to YAML file
            overrides: Nested settings applied on top of the file, keyed like
                the 'simulation' section (e.g. {'boarding': {'policy': 'random'}})

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If validation fails
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        return ConfigLoader.from_mapping(data, overrides)

    @staticmethod
    def from_mapping(data, overrides: Optional[dict] = None) -> SimulationConfig:
        """
        Build and validate SimulationConfig from already-parsed YAML data.
        An empty document yields the default configuration.
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a mapping")

        settings = data.get('simulation', data) or {}
        if not isinstance(settings, dict):
            raise ValueError("'simulation' section must be a mapping")
        if overrides:
            settings = _merge(settings, overrides)

        config = SimulationConfig.from_dict({'simulation': settings})
        config.validate()
        return config


def load_simulation_config(file_path: Union[str, Path], overrides: Optional[dict] = None) -> SimulationConfig:
    """Load SimulationConfig from YAML file"""
    return ConfigLoader.load_simulation(file_path, overrides)
