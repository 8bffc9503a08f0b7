"""
Accessor adapters: one indexed view for every call shape.

The network code only needs `view[i]`, `view[i] = x` and a length. Callers,
however, hand us whole containers (lists, `array.array`, numpy arrays, ...)
or a container plus a half-open index range `[first, last)`, the Python
rendition of an iterator pair. `SequenceView` presents both as the same
0-based window so a single network implementation serves every entry point.

Public API (stable):
    SequenceView(seq, start=0, stop=None)
    view_of(seq) -> SequenceView
    view_range(seq, first, last) -> SequenceView
    LengthMismatchError
"""

from __future__ import annotations

import operator
from typing import Any, Optional

from .network.swap import exchange

__all__ = ["LengthMismatchError", "SequenceView", "view_of", "view_range"]


class LengthMismatchError(ValueError):
    """Raised by strict entry points when the actual length differs from N."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"sequence length {actual} does not match sorter size {expected}")
        self.expected = expected
        self.actual = actual


class SequenceView:
    """
    Zero-based, mutate-through window `seq[start:stop]`.

    The view holds a reference to `seq` for as long as the view lives; the
    sorters create one per call and drop it on return.
    """

    __slots__ = ("_seq", "_start", "_len")

    def __init__(self, seq: Any, start: int = 0, stop: Optional[int] = None) -> None:
        total = len(seq)
        if stop is None:
            stop = total
        try:
            start, stop = operator.index(start), operator.index(stop)
        except TypeError as e:
            raise ValueError(f"range bounds must be ints; got first={start!r}, last={stop!r}") from e
        if start < 0 or stop > total:
            raise ValueError(f"range [{start}, {stop}) outside sequence of length {total}")
        if start > stop:
            raise ValueError(f"range invalid: first > last ({start} > {stop})")
        self._seq = seq
        self._start = start
        self._len = stop - start

    def __len__(self) -> int:
        return self._len

    def __getitem__(self, i: int) -> Any:
        return self._seq[self._start + i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._seq[self._start + i] = value

    def swap(self, i: int, j: int) -> None:
        exchange(self._seq, self._start + i, self._start + j)

    def reverse(self) -> int:
        """Reverse the window in place; return the number of exchanges."""
        left, right = 0, self._len - 1
        swaps = 0
        while left < right:
            self.swap(left, right)
            left += 1
            right -= 1
            swaps += 1
        return swaps

    def __repr__(self) -> str:
        return f"SequenceView(start={self._start}, len={self._len}, seq={type(self._seq).__name__})"


def view_of(seq: Any) -> SequenceView:
    """Whole-container view (container and range call shapes)."""
    if isinstance(seq, SequenceView):
        return seq
    return SequenceView(seq)


def view_range(seq: Any, first: int, last: int) -> SequenceView:
    """View over `seq[first:last]` (iterator-pair call shape)."""
    return SequenceView(seq, first, last)
