"""Bose-Nelson / optimal sorting network on a copy of the input."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from staticsort.sorter import StaticSort

from ._config import resolve_comparator


def sort(a: List[Any], *, config: Optional[Dict[str, Any]] = None) -> List[Any]:
    """
    Config keys:
        comparator: "lt" (default) or "gt"
        kind:       None (auto), "optimal" or "bose-nelson"
    """
    config = config or {}
    out = list(a)
    StaticSort(len(out), config.get("kind"))(out, resolve_comparator(config))
    return out
