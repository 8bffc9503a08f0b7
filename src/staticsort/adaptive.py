"""
Adaptive run detection in front of a sorting network.

Before paying for a full network, scan adjacent pairs once:

- never decreasing          -> already sorted, leave it alone
- decreasing, never increasing -> strictly descending, reverse in place
- both                      -> run the network on the untouched input

Thresholds:
- n < 8   : skip the scan; the network is no more expensive than the scan.
- n <= 22 : always scan to the end.
- n > 22  : stop as soon as both directions have been seen.

An all-equal sequence sets neither flag and is classified ascending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .network.swap import Comparator

SCAN_MIN_N = 8
EARLY_EXIT_MIN_N = 23

__all__ = ["SCAN_MIN_N", "EARLY_EXIT_MIN_N", "RunClass", "scan_runs", "presorted"]


@dataclass(frozen=True)
class RunClass:
    has_increasing: bool
    has_decreasing: bool

    @property
    def ascending(self) -> bool:
        return not self.has_decreasing

    @property
    def descending(self) -> bool:
        return self.has_decreasing and not self.has_increasing

    @property
    def monotonic(self) -> bool:
        return not (self.has_increasing and self.has_decreasing)


def scan_runs(view: Any, n: int, lt: Comparator) -> RunClass:
    """Classify view[0:n] by the directions of its adjacent steps."""
    has_increasing = False
    has_decreasing = False
    early_exit = n >= EARLY_EXIT_MIN_N
    if n > 0:
        prev = view[0]
        for i in range(1, n):
            curr = view[i]
            if lt(prev, curr):
                has_increasing = True
            if lt(curr, prev):
                has_decreasing = True
            prev = curr
            if early_exit and has_increasing and has_decreasing:
                break
    return RunClass(has_increasing, has_decreasing)


def presorted(view: Any, n: int, lt: Comparator) -> bool:
    """
    Return True if view[0:n] is now sorted without running a network.

    Descending input is reversed in place (n // 2 exchanges) before
    returning True. Returns False, with no mutation, when the network is
    still needed or when n is below the scan threshold.
    """
    if n < SCAN_MIN_N:
        return False
    runs = scan_runs(view, n, lt)
    if runs.ascending:
        return True
    if runs.descending:
        view.reverse()
        return True
    return False
