"""
Accessor adapter and range entry point tests.

What we check:
- SequenceView offsets reads/writes into the underlying storage
- Range (iterator-pair) sorting touches only [first, last)
- Length mismatch is a silent no-op by default, an error with strict=True
- Invalid ranges raise ValueError
"""

from __future__ import annotations

import numpy as np
import pytest

from conftest import RecordingList
from staticsort import (
    LengthMismatchError,
    SequenceView,
    StaticSort,
    StaticTimSort,
    adaptive_sort_range,
    sort_range,
    view_of,
    view_range,
)
from staticsort.validate import assert_unchanged


def test_view_reads_and_writes_through() -> None:
    data = [10, 11, 12, 13, 14]
    v = view_range(data, 1, 4)
    assert len(v) == 3
    assert [v[i] for i in range(3)] == [11, 12, 13]
    v[0] = 99
    v.swap(1, 2)
    assert data == [10, 99, 13, 12, 14]


def test_view_reverse_counts_exchanges() -> None:
    data = list(range(9))
    assert view_of(data).reverse() == 4
    assert data == list(range(8, -1, -1))


def test_view_of_is_idempotent() -> None:
    v = view_of([1, 2])
    assert view_of(v) is v
    assert isinstance(v, SequenceView)


@pytest.mark.parametrize("first,last", [(-1, 2), (0, 6), (3, 2), ("0", 2)])
def test_invalid_ranges_raise(first, last) -> None:
    with pytest.raises(ValueError):
        view_range([1, 2, 3, 4, 5], first, last)


def test_numpy_integer_bounds_accepted() -> None:
    data = [3, 2, 1, 0]
    StaticSort(3).sort_range(data, np.int64(0), np.int64(3))
    assert data == [1, 2, 3, 0]


def test_sort_range_only_touches_window() -> None:
    data = [9, 8, 5, 2, 8, 1, 9, 3, 0, 0]
    StaticSort(6).sort_range(data, 2, 8)
    assert data == [9, 8, 1, 2, 3, 5, 8, 9, 0, 0]


def test_adaptive_range_reverses_window() -> None:
    data = [-1] + list(range(10, 0, -1)) + [-2]
    StaticTimSort(10).sort_range(data, 1, 11)
    assert data == [-1] + list(range(1, 11)) + [-2]


def test_module_level_range_helpers() -> None:
    data = [0, 5, 4, 3, 2, 1, 0]
    sort_range(data, 1, 6)
    assert data == [0, 1, 2, 3, 4, 5, 0]
    data = [0] + list(range(12, 0, -1))
    adaptive_sort_range(data, 1, 13)
    assert data == list(range(13))


@pytest.mark.parametrize("first,last", [(0, 5), (0, 7), (3, 8)])
def test_range_length_mismatch_is_noop(first: int, last: int) -> None:
    data = RecordingList([5, 2, 8, 1, 9, 3, 7, 0])
    before = list(data)
    StaticSort(6).sort_range(data, first, last)
    StaticTimSort(6).sort_range(data, first, last)
    sort_range(data, first, last, n=6)
    adaptive_sort_range(data, first, last, n=6)
    assert data.writes == 0
    assert_unchanged(before, data)


def test_container_length_mismatch_is_noop() -> None:
    data = RecordingList([3, 2, 1])
    StaticSort(4)(data)
    StaticTimSort(9)(data)
    assert data.writes == 0
    assert data == [3, 2, 1]


def test_strict_mismatch_raises() -> None:
    data = [3, 2, 1]
    with pytest.raises(LengthMismatchError) as exc:
        StaticSort(4)(data, strict=True)
    assert exc.value.expected == 4 and exc.value.actual == 3
    assert isinstance(exc.value, ValueError)
    with pytest.raises(LengthMismatchError):
        sort_range(data, 0, 2, n=3, strict=True)
    assert data == [3, 2, 1]
