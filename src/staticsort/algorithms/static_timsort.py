"""Sorting network behind the ascending/descending pre-scan."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from staticsort.sorter import StaticTimSort

from ._config import resolve_comparator


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    config = config or {}
    out = list(a)
    StaticTimSort(len(out), config.get("kind"))(out, resolve_comparator(config))
    return out
