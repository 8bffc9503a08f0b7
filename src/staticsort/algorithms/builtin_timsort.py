"""Reference: Python's built-in sorted() (the std::sort baseline)."""

from __future__ import annotations

import operator
from typing import Any, Dict, List, Optional

from ._config import resolve_comparator


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    lt = resolve_comparator(config)
    return sorted(a, reverse=lt is operator.gt)
