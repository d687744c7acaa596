"""
Boarding Order Policies

This package provides the policies that permute the passenger list
before boarding starts.
"""

__version__ = "0.1.0"

from .interfaces.order_policy import IBoardingOrderPolicy
from .algorithms.random_order import shuffle, RandomOrderPolicy
from .algorithms.section_order import (
    sort_by_section,
    batched_sort_by_section,
    SectionOrderPolicy,
    BatchedSectionOrderPolicy,
)
from .policy_factory import create_order_policy

__all__ = [
    'IBoardingOrderPolicy',
    'shuffle',
    'RandomOrderPolicy',
    'sort_by_section',
    'batched_sort_by_section',
    'SectionOrderPolicy',
    'BatchedSectionOrderPolicy',
    'create_order_policy',
]
