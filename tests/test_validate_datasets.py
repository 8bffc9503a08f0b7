"""
Tests for validation helpers and dataset generators.
"""

from __future__ import annotations

import operator

import numpy as np
import pytest

from staticsort.datasets import SUPPORTED_DISTS, make_dataset
from staticsort.validate import (
    assert_unchanged,
    equals_oracle,
    first_order_violation_index,
    is_nondecreasing,
    is_permutation,
    oracle_sort,
    permutation_counter_diff,
)


# ------------------------- validate ------------------------- #


def test_oracle_with_comparator() -> None:
    assert oracle_sort([3, 1, 2]) == [1, 2, 3]
    assert oracle_sort([3, 1, 2], operator.gt) == [3, 2, 1]
    assert equals_oracle([2, 1], [1, 2])
    assert not equals_oracle([2, 1], [2, 1])


def test_order_violation_index() -> None:
    assert first_order_violation_index([1, 2, 2, 5]) is None
    assert first_order_violation_index([1, 3, 2]) == 1
    assert first_order_violation_index([3, 2, 1], operator.gt) is None
    assert is_nondecreasing([])


def test_permutation_helpers() -> None:
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 2, 2])
    assert permutation_counter_diff([1, 1, 2], [1, 3]) == {1: 1, 2: 1, 3: -1}
    assert permutation_counter_diff([4, 5], [5, 4]) == {}


def test_assert_unchanged() -> None:
    assert_unchanged([1, 2], [1, 2])
    with pytest.raises(AssertionError, match="index 1"):
        assert_unchanged([1, 2], [1, 3])
    with pytest.raises(AssertionError, match="length"):
        assert_unchanged([1], [1, 2])


# ------------------------- datasets ------------------------- #


@pytest.mark.parametrize("dist", sorted(SUPPORTED_DISTS))
@pytest.mark.parametrize("n", [0, 1, 8, 33])
def test_every_dist_has_requested_length(dist: str, n: int) -> None:
    out = make_dataset(n, {"dist": dist, "params": {}}, np.random.default_rng(0))
    assert isinstance(out, list)
    assert len(out) == n
    assert all(isinstance(x, int) for x in out)


def test_deterministic_for_seed() -> None:
    spec = {"dist": "random", "params": {"range": [0, 1000]}}
    a = make_dataset(8, spec, np.random.default_rng(42))
    b = make_dataset(8, spec, np.random.default_rng(42))
    assert a == b
    assert all(0 <= x <= 1000 for x in a)


def test_shapes_of_ordered_dists() -> None:
    rng = np.random.default_rng(1)
    assert make_dataset(5, {"dist": "sorted"}, rng) == [0, 1, 2, 3, 4]
    assert make_dataset(5, {"dist": "reversed"}, rng) == [4, 3, 2, 1, 0]
    assert set(make_dataset(64, {"dist": "binary"}, rng)) <= {0, 1}
    near = make_dataset(20, {"dist": "nearly_sorted", "params": {"swap_frac": 0.1}}, rng)
    assert sorted(near) == list(range(20))


def test_few_uniques_bounds_distinct_values() -> None:
    out = make_dataset(50, {"dist": "few_uniques", "params": {"k": 3, "range": [10, 20]}}, np.random.default_rng(3))
    assert len(set(out)) <= 3
    assert all(10 <= x <= 20 for x in out)


@pytest.mark.parametrize(
    "n,spec",
    [
        (-1, {"dist": "random"}),
        (3, {"dist": "bogus"}),
        (3, "random"),
        (3, {"dist": "random", "params": {"range": [5, 1]}}),
        (3, {"dist": "random", "params": {"range": [0]}}),
        (3, {"dist": "nearly_sorted", "params": {"swap_frac": 2.0}}),
        (3, {"dist": "few_uniques", "params": {"k": 0}}),
    ],
)
def test_invalid_specs_raise(n, spec) -> None:
    with pytest.raises(ValueError):
        make_dataset(n, spec, np.random.default_rng(0))
