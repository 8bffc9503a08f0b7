"""Shared parsing of per-algorithm config dicts."""

from __future__ import annotations

import operator
from typing import Any, Callable, Dict, Optional

COMPARATORS: Dict[str, Callable[[Any, Any], bool]] = {
    "lt": operator.lt,
    "gt": operator.gt,
}


def resolve_comparator(config: Optional[Dict[str, Any]]) -> Callable[[Any, Any], bool]:
    name = (config or {}).get("comparator", "lt")
    try:
        return COMPARATORS[name]
    except (KeyError, TypeError):
        raise ValueError(
            f"config.comparator must be one of {sorted(COMPARATORS)}; got {name!r}"
        ) from None
