"""Boarding order algorithms"""

from .random_order import shuffle, RandomOrderPolicy
from .section_order import (
    sort_by_section,
    batched_sort_by_section,
    SectionOrderPolicy,
    BatchedSectionOrderPolicy,
)

__all__ = [
    'shuffle',
    'RandomOrderPolicy',
    'sort_by_section',
    'batched_sort_by_section',
    'SectionOrderPolicy',
    'BatchedSectionOrderPolicy',
]
