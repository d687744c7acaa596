"""
Model Parameters - Passenger sampling source

Owns the single random stream of a run. Every component that samples or
shuffles receives this object (or its ``rng``) explicitly.
"""

from typing import Optional

import numpy as np


class ModelParameters:
    """
    Source of per-passenger speed and wait-duration samples.

    Speeds are drawn from N(speed_mean, speed_std), floored at min_speed and
    multiplied by the scale factor. Wait durations are drawn from
    N(wait_mean, wait_std), clamped to [min_wait, max_wait] and divided by
    the scale factor, so the whole simulation runs ``scale_factor`` times
    faster than the modelled cabin.

    Not safe for concurrent use: each sample advances the shared generator.
    """

    def __init__(self, seed: Optional[int] = None,
                 speed_mean: float = 10.0, speed_std: float = 3.0, min_speed: float = 5.0,
                 wait_mean: float = 7.0, wait_std: float = 3.0,
                 min_wait: float = 1.0, max_wait: float = 15.0,
                 scale_factor: float = 20.0):
        """
        Args:
            seed: Seed for the random stream (None = fresh OS entropy)
            speed_mean: Mean of the speed distribution
            speed_std: Standard deviation of the speed distribution
            min_speed: Lower bound applied to each speed draw
            wait_mean: Mean of the wait-duration distribution (seconds)
            wait_std: Standard deviation of the wait-duration distribution
            min_wait: Lower clamp for wait-duration draws
            max_wait: Upper clamp for wait-duration draws
            scale_factor: Simulated-to-modelled time scale
        """
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.speed_mean = speed_mean
        self.speed_std = speed_std
        self.min_speed = min_speed
        self.wait_mean = wait_mean
        self.wait_std = wait_std
        self.min_wait = min_wait
        self.max_wait = max_wait
        self._scale_factor = scale_factor

    @classmethod
    def from_config(cls, passenger_config, seed: Optional[int] = None) -> 'ModelParameters':
        """Create ModelParameters from a PassengerConfig"""
        return cls(
            seed=seed,
            speed_mean=passenger_config.speed_mean,
            speed_std=passenger_config.speed_std,
            min_speed=passenger_config.min_speed,
            wait_mean=passenger_config.wait_mean,
            wait_std=passenger_config.wait_std,
            min_wait=passenger_config.min_wait,
            max_wait=passenger_config.max_wait,
            scale_factor=passenger_config.scale_factor,
        )

    @property
    def scale_factor(self) -> float:
        return self._scale_factor

    def sample_speed(self) -> float:
        """Aisle velocity in simulation units per second"""
        draw = self.rng.normal(self.speed_mean, self.speed_std)
        return float(max(self.min_speed, draw) * self._scale_factor)

    def sample_wait_duration(self) -> float:
        """Seconds a passenger blocks the aisle before sitting down"""
        draw = self.rng.normal(self.wait_mean, self.wait_std)
        return float(min(max(self.min_wait, draw), self.max_wait) / self._scale_factor)

    def __repr__(self) -> str:
        return (f"ModelParameters(seed={self.seed}, speed=N({self.speed_mean}, {self.speed_std}), "
                f"wait=N({self.wait_mean}, {self.wait_std}), scale={self._scale_factor})")
