"""
Benchmark harness public API.

    from staticsort.bench import time_sort_call
"""

from .measure import time_sort_call

__all__ = ["time_sort_call"]
