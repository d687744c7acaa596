"""
Policy Factory

Creates the boarding order policy named in a BoardingConfig.
"""

from .interfaces.order_policy import IBoardingOrderPolicy
from .algorithms.random_order import RandomOrderPolicy
from .algorithms.section_order import SectionOrderPolicy, BatchedSectionOrderPolicy


def create_order_policy(boarding_config, num_rows: int) -> IBoardingOrderPolicy:
    """
    Create policy instance from configuration

    Args:
        boarding_config: BoardingConfig
        num_rows: Number of cabin rows (section size depends on it)

    Returns:
        IBoardingOrderPolicy instance
    """
    name = boarding_config.policy
    if name == "random":
        return RandomOrderPolicy()
    elif name == "section":
        return SectionOrderPolicy(num_rows, boarding_config.num_sections,
                                  shuffle_first=boarding_config.shuffle_first)
    elif name == "batched_section":
        return BatchedSectionOrderPolicy(num_rows, boarding_config.num_sections,
                                         boarding_config.people_per_section,
                                         shuffle_first=boarding_config.shuffle_first)
    else:
        raise ValueError(f"Unknown boarding policy: {name}")
