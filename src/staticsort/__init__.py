"""
staticsort: fixed-size sorting networks.

    from staticsort import StaticSort, StaticTimSort, sort, adaptive_sort

    data = [5, 2, 8, 1, 9, 3]
    StaticSort(6)(data)          # -> [1, 2, 3, 5, 8, 9]
    sort(data, lambda a, b: a > b)
"""

from .access import LengthMismatchError, SequenceView, view_of, view_range
from .adaptive import RunClass, presorted, scan_runs
from .network import Network, generate, network_for, optimal_network, swap_if
from .sorter import (
    StaticSort,
    StaticTimSort,
    adaptive_sort,
    adaptive_sort_range,
    sort,
    sort_range,
    sort_rows,
)

__version__ = "0.1.0"

__all__ = [
    "StaticSort",
    "StaticTimSort",
    "sort",
    "adaptive_sort",
    "sort_range",
    "adaptive_sort_range",
    "sort_rows",
    "Network",
    "network_for",
    "generate",
    "optimal_network",
    "swap_if",
    "RunClass",
    "scan_runs",
    "presorted",
    "SequenceView",
    "view_of",
    "view_range",
    "LengthMismatchError",
]
