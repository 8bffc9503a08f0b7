"""
Benchmark-facing algorithm modules.

Each module exposes `sort(a, *, config=None) -> list` and never mutates `a`,
so the runner can hand the same input to every algorithm. Resolved by name:
`staticsort.algorithms.<name>`.
"""

from ._config import COMPARATORS, resolve_comparator

__all__ = ["COMPARATORS", "resolve_comparator"]
