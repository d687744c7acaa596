"""
Random Boarding Order

Uniform shuffle of the whole passenger list.
"""

from typing import List

import numpy as np

from ..interfaces.order_policy import IBoardingOrderPolicy


def shuffle(passengers: List, rng: np.random.Generator) -> None:
    """Uniformly permute passengers in place, consuming the given stream"""
    order = rng.permutation(len(passengers))
    passengers[:] = [passengers[i] for i in order]


class RandomOrderPolicy(IBoardingOrderPolicy):
    """
    Random boarding

    Every permutation of the passenger list is equally likely.
    """

    def apply(self, passengers: List, rng: np.random.Generator) -> None:
        shuffle(passengers, rng)

    def get_policy_name(self) -> str:
        return "Random"
