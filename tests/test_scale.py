"""
Tests for the square-root display scale.
"""

from __future__ import annotations

import math

import pytest

from src.relevance import sqrt_scale


def test_endpoints_are_exact():
    sizes = sqrt_scale([0.9, 0.4, 0.1], (14, 60))
    assert sizes[0] == 60.0
    assert sizes[-1] == 14.0


def test_sqrt_interpolation():
    sizes = sqrt_scale([4.0, 1.0, 0.0], (0, 10))
    # sqrt(1) is halfway between sqrt(0) and sqrt(4)
    assert sizes[1] == pytest.approx(5.0)


def test_monotonic_non_increasing_for_sorted_input():
    scores = [math.exp(-i / 3) for i in range(30)]
    sizes = list(sqrt_scale(scores, (14, 60)))
    assert all(a >= b for a, b in zip(sizes, sizes[1:]))
    assert all(14.0 <= s <= 60.0 for s in sizes)


def test_degenerate_domain_maps_to_max():
    assert list(sqrt_scale([0.3], (14, 60))) == [60.0]
    assert list(sqrt_scale([0.2, 0.2, 0.2], (14, 60))) == [60.0, 60.0, 60.0]


def test_zero_scores_are_valid():
    sizes = sqrt_scale([1.0, 0.0], (14, 60))
    assert list(sizes) == [60.0, 14.0]


def test_empty():
    assert len(sqrt_scale([], (14, 60))) == 0
