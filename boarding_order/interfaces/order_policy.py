"""
Boarding Order Policy Interface

Defines how the passenger list is permuted before boarding starts.
"""

from abc import ABC, abstractmethod
from typing import List

import numpy as np


class IBoardingOrderPolicy(ABC):
    """
    Interface for boarding order policies

    A policy reorders the passenger list in place exactly once, before the
    first passenger is offered to the admission gate. It never touches
    passenger positions or states.

    Usage Examples:
    - RandomOrderPolicy: uniform shuffle
    - SectionOrderPolicy: rear sections first
    - BatchedSectionOrderPolicy: rear-first waves of fixed size
    """

    @abstractmethod
    def apply(self, passengers: List, rng: np.random.Generator) -> None:
        """
        Reorder passengers in place

        Args:
            passengers: Passenger list owned by the AisleSimulator
            rng: Random stream owned by ModelParameters (policies that do
                 not randomize simply ignore it)
        """
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """
        Get the name of this policy

        Returns:
            str: Policy name (for logging and reports)
        """
        pass
