"""
Shared fixtures and instrumentation for the staticsort tests.

Inserts the project `src/` onto sys.path so tests run without installing.
"""

from __future__ import annotations

import pathlib
import sys
from typing import Any

import pytest

_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


class CountingLess:
    """`<` that records how many times it was asked."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, a: Any, b: Any) -> bool:
        self.calls += 1
        return a < b


class RecordingList(list):
    """list that counts item assignments (mutations through a view)."""

    def __init__(self, *args: Any) -> None:
        super().__init__(*args)
        self.writes = 0

    def __setitem__(self, i: Any, value: Any) -> None:
        self.writes += 1
        super().__setitem__(i, value)


@pytest.fixture
def counting_less() -> CountingLess:
    return CountingLess()
