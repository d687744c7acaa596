"""
Boarding Order Policy Tests

Shuffle, section sort, batched section sort and the policy factory.
"""

import sys
from collections import Counter
from pathlib import Path
from types import SimpleNamespace

import numpy as np
import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from boarding_order import (
    BatchedSectionOrderPolicy,
    RandomOrderPolicy,
    SectionOrderPolicy,
    batched_sort_by_section,
    create_order_policy,
    shuffle,
    sort_by_section,
)
from config import BoardingConfig
from simulator.core.passenger import Passenger


def one_per_row(num_rows):
    return [Passenger(row, 0, 100.0, 0.5) for row in range(num_rows)]


def cabin(num_rows, seats_per_row):
    return [Passenger(row, seat, 100.0, 0.5)
            for row in range(num_rows) for seat in range(seats_per_row)]


def rows_of(passengers):
    return [p.row for p in passengers]


# ========================================
# shuffle
# ========================================

def test_shuffle_preserves_seat_multiset():
    passengers = cabin(20, 4)
    before = Counter(p.seat_index for p in passengers)
    shuffle(passengers, np.random.default_rng(4))
    assert Counter(p.seat_index for p in passengers) == before
    assert len(passengers) == 80


def test_shuffle_is_in_place_and_reorders():
    passengers = cabin(20, 4)
    original = list(passengers)
    alias = passengers
    shuffle(passengers, np.random.default_rng(4))
    assert alias is passengers
    assert passengers != original


def test_shuffle_is_reproducible_and_consumes_stream():
    a, b = cabin(5, 4), cabin(5, 4)
    shuffle(a, np.random.default_rng(8))
    shuffle(b, np.random.default_rng(8))
    assert [p.seat_index for p in a] == [p.seat_index for p in b]

    rng = np.random.default_rng(8)
    c, d = cabin(5, 4), cabin(5, 4)
    shuffle(c, rng)
    shuffle(d, rng)
    assert [p.seat_index for p in c] != [p.seat_index for p in d]


# ========================================
# sort_by_section
# ========================================

def test_single_section_is_identity():
    passengers = cabin(20, 4)
    shuffle(passengers, np.random.default_rng(1))
    before = list(passengers)
    sort_by_section(passengers, 20, 1)
    assert passengers == before


def test_single_section_is_identity_for_any_row_count():
    passengers = cabin(3, 2)
    before = list(passengers)
    sort_by_section(passengers, 0, 1)
    batched_sort_by_section(passengers, 0, 1, 2)
    assert passengers == before


def test_rear_sections_board_first():
    passengers = one_per_row(20)
    sort_by_section(passengers, 20, 8)
    order = rows_of(passengers)

    rear = [order.index(row) for row in range(14, 20)]
    front = [order.index(row) for row in range(0, 6)]
    assert max(rear) < min(front)

    sections = [row // 2 for row in order]
    assert sections == sorted(sections, reverse=True)


def test_section_sort_is_stable():
    passengers = cabin(4, 2)
    # Reverse seat order inside each row so stability is observable
    passengers = [p for row in range(4) for p in reversed(passengers[row * 2:row * 2 + 2])]
    sort_by_section(passengers, 4, 2)
    assert [p.seat_index for p in passengers] == [
        (2, 1), (2, 0), (3, 1), (3, 0),
        (0, 1), (0, 0), (1, 1), (1, 0),
    ]


def test_section_sort_respects_range():
    passengers = one_per_row(10)
    sort_by_section(passengers, 10, 5, start=2, end=6)
    assert rows_of(passengers) == [0, 1, 4, 5, 2, 3, 6, 7, 8, 9]


@pytest.mark.parametrize("num_sections", [0, 21])
def test_invalid_section_counts(num_sections):
    with pytest.raises(ValueError):
        sort_by_section(one_per_row(20), 20, num_sections)


# ========================================
# batched_sort_by_section
# ========================================

def test_batched_sort_builds_waves():
    passengers = one_per_row(20)
    batched_sort_by_section(passengers, 20, 4, 2)
    assert rows_of(passengers) == [
        5, 6, 7, 0, 1, 2, 3, 4,
        15, 10, 11, 12, 13, 14, 8, 9,
        16, 17, 18, 19,
    ]


def test_batched_sort_with_large_window_equals_global_sort():
    a, b = cabin(8, 2), cabin(8, 2)
    batched_sort_by_section(a, 8, 4, 100)
    sort_by_section(b, 8, 4)
    assert [p.seat_index for p in a] == [p.seat_index for p in b]


def test_batched_sort_rejects_empty_windows():
    with pytest.raises(ValueError):
        batched_sort_by_section(one_per_row(10), 10, 2, 0)


# ========================================
# Policies and factory
# ========================================

def test_section_policy_without_shuffle_matches_sort():
    expected = one_per_row(12)
    sort_by_section(expected, 12, 3)

    passengers = one_per_row(12)
    SectionOrderPolicy(12, 3, shuffle_first=False).apply(passengers, np.random.default_rng(0))
    assert rows_of(passengers) == rows_of(expected)


def test_shuffled_section_policy_keeps_section_order():
    passengers = cabin(12, 4)
    SectionOrderPolicy(12, 3).apply(passengers, np.random.default_rng(6))
    sections = [p.row // 4 for p in passengers]
    assert sections == sorted(sections, reverse=True)
    assert len(set(p.seat_index for p in passengers)) == 48


def test_batched_policy_waves_are_sorted():
    passengers = cabin(20, 4)
    BatchedSectionOrderPolicy(20, 8, 3).apply(passengers, np.random.default_rng(2))
    window = 24
    for start in range(0, len(passengers), window):
        sections = [p.row // 2 for p in passengers[start:start + window]]
        assert sections == sorted(sections, reverse=True)


def test_policy_parameter_validation():
    with pytest.raises(ValueError):
        SectionOrderPolicy(5, 6)
    with pytest.raises(ValueError):
        BatchedSectionOrderPolicy(20, 8, 0)


def test_policy_names():
    assert RandomOrderPolicy().get_policy_name() == "Random"
    assert "8 sections" in SectionOrderPolicy(20, 8).get_policy_name()
    assert "3 people" in BatchedSectionOrderPolicy(20, 8, 3).get_policy_name()


@pytest.mark.parametrize("policy, expected", [
    ("random", RandomOrderPolicy),
    ("section", SectionOrderPolicy),
    ("batched_section", BatchedSectionOrderPolicy),
])
def test_factory_creates_configured_policy(policy, expected):
    config = BoardingConfig(policy=policy, num_sections=4, people_per_section=2)
    assert isinstance(create_order_policy(config, 20), expected)


def test_factory_rejects_unknown_policy():
    with pytest.raises(ValueError):
        create_order_policy(SimpleNamespace(policy="front_to_back"), 20)
