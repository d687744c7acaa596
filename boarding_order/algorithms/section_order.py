"""
Section Boarding Order

Back-to-front boarding by sections of consecutive rows, either as one
global sort or as repeating waves.
"""

from typing import List, Optional

import numpy as np

from ..interfaces.order_policy import IBoardingOrderPolicy
from .random_order import shuffle


def _check_sections(num_rows: int, num_sections: int):
    if num_sections < 1:
        raise ValueError(f"num_sections must be at least 1, got {num_sections}")
    if num_sections > num_rows:
        raise ValueError(f"num_sections ({num_sections}) cannot exceed num_rows ({num_rows})")


def sort_by_section(passengers: List, num_rows: int, num_sections: int,
                    start: int = 0, end: Optional[int] = None) -> None:
    """
    Stable sort of passengers[start:end] by descending section.

    Section index is row // (num_rows // num_sections). When num_rows is not
    a multiple of num_sections, the trailing rows form extra sections that
    board first. Passengers within the same section keep their relative
    order. A single section leaves the range untouched for any row count.
    """
    if num_sections == 1:
        return
    _check_sections(num_rows, num_sections)

    section_size = num_rows // num_sections
    if end is None:
        end = len(passengers)
    # sorted() stays stable with reverse=True
    passengers[start:end] = sorted(passengers[start:end],
                                   key=lambda p: p.row // section_size,
                                   reverse=True)


def batched_sort_by_section(passengers: List, num_rows: int, num_sections: int,
                            people_per_section: int) -> None:
    """
    Apply sort_by_section independently to consecutive windows of
    people_per_section * num_sections passengers (the last window may be
    shorter), producing repeating rear-to-front waves.
    """
    if people_per_section < 1:
        raise ValueError(f"people_per_section must be at least 1, got {people_per_section}")
    if num_sections == 1:
        return
    _check_sections(num_rows, num_sections)

    window = people_per_section * num_sections
    for start in range(0, len(passengers), window):
        end = min(start + window, len(passengers))
        sort_by_section(passengers, num_rows, num_sections, start, end)


class SectionOrderPolicy(IBoardingOrderPolicy):
    """
    Back-to-front section boarding

    Optionally shuffles first so passengers within a section board in
    random order.
    """

    def __init__(self, num_rows: int, num_sections: int, shuffle_first: bool = True):
        _check_sections(num_rows, num_sections)
        self.num_rows = num_rows
        self.num_sections = num_sections
        self.shuffle_first = shuffle_first

    def apply(self, passengers: List, rng: np.random.Generator) -> None:
        if self.shuffle_first:
            shuffle(passengers, rng)
        sort_by_section(passengers, self.num_rows, self.num_sections)

    def get_policy_name(self) -> str:
        return f"Section ({self.num_sections} sections)"


class BatchedSectionOrderPolicy(IBoardingOrderPolicy):
    """
    Back-to-front boarding in waves

    Each wave holds people_per_section * num_sections passengers sorted
    rear section first; waves follow each other in list order.
    """

    def __init__(self, num_rows: int, num_sections: int, people_per_section: int,
                 shuffle_first: bool = True):
        _check_sections(num_rows, num_sections)
        if people_per_section < 1:
            raise ValueError(f"people_per_section must be at least 1, got {people_per_section}")
        self.num_rows = num_rows
        self.num_sections = num_sections
        self.people_per_section = people_per_section
        self.shuffle_first = shuffle_first

    def apply(self, passengers: List, rng: np.random.Generator) -> None:
        if self.shuffle_first:
            shuffle(passengers, rng)
        batched_sort_by_section(passengers, self.num_rows, self.num_sections, self.people_per_section)

    def get_policy_name(self) -> str:
        return f"Batched Section ({self.num_sections} sections x {self.people_per_section} people)"
