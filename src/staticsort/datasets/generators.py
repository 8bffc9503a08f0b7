"""
Dataset generators for fixed-size sorting tests and benchmarks.

Sorting networks are exercised at small n (2..8 and a little beyond), so
these generators are tuned for short arrays with controllable order:

- dist == "random":
    Integers drawn uniformly from an inclusive range (default [0, 1000]).

- dist == "sorted":
    [0, 1, ..., n-1]. Hits the ascending shortcut of the adaptive sorter.

- dist == "reversed":
    [n-1, ..., 0]. Hits the reversal shortcut of the adaptive sorter.

- dist == "nearly_sorted":
    [0..n-1] followed by ceil(swap_frac * n) random index swaps.

- dist == "few_uniques":
    Values drawn from k distinct integers; many ties.

- dist == "binary":
    Uniform 0/1 values; the zero-one principle input class.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

The caller owns the RNG. Deterministic dists ("sorted", "reversed") ignore it.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import numpy as np

SUPPORTED_DISTS = {
    "random",
    "sorted",
    "reversed",
    "nearly_sorted",
    "few_uniques",
    "binary",
}
DEFAULT_RANGE: Tuple[int, int] = (0, 1000)

__all__ = ["SUPPORTED_DISTS", "DEFAULT_RANGE", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate an integer dataset of length `n` according to `spec`.

    Parameters
    ----------
    n : int
        Number of elements. Must be >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}

        random:         {"range": [lo, hi]}        # optional, inclusive
        sorted:         {}
        reversed:       {}
        nearly_sorted:  {"swap_frac": 0.1}         # in [0.0, 1.0]
        few_uniques:    {"k": 3, "range": [lo, hi]}
        binary:         {}
    rng : numpy.random.Generator
        Seeded upstream by the caller.

    Returns
    -------
    list[int]

    Raises
    ------
    ValueError
        On invalid `n`, malformed `spec` or an unsupported dist.
    """
    _validate_n(n)
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist", None)
    if dist not in SUPPORTED_DISTS:
        raise ValueError(
            f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}"
        )
    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")

    if dist == "sorted":
        return list(range(n))

    if dist == "reversed":
        return list(range(n - 1, -1, -1))

    if dist == "random":
        lo, hi = _parse_range(params, dist)
        # Generator.integers is half-open; +1 makes hi inclusive.
        return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()

    if dist == "binary":
        return rng.integers(0, 2, size=n, dtype=np.int64).tolist()

    if dist == "nearly_sorted":
        swap_frac = _parse_swap_frac(params)
        arr = list(range(n))
        num_swaps = int(np.ceil(swap_frac * n))
        if n < 2 or num_swaps <= 0:
            return arr
        idxs = rng.integers(0, n, size=(num_swaps, 2))
        for i, j in idxs.tolist():
            arr[i], arr[j] = arr[j], arr[i]
        return arr

    # few_uniques
    k = params.get("k", 3)
    if isinstance(k, bool) or not isinstance(k, int) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params, dist)
    k = min(k, hi - lo + 1)
    values = rng.choice(hi - lo + 1, size=k, replace=False).astype(np.int64) + lo
    return values[rng.integers(0, k, size=n)].tolist()


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _parse_range(params: Dict[str, Any], dist: str) -> Tuple[int, int]:
    """Inclusive [lo, hi] from params["range"], or DEFAULT_RANGE."""
    if "range" not in params:
        return DEFAULT_RANGE
    spec = params["range"]
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_swap_frac(params: Dict[str, Any]) -> float:
    val = params.get("swap_frac", 0.1)
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"nearly_sorted.params.swap_frac must be a float in [0.0, 1.0]; got {val!r}"
        ) from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"nearly_sorted.params.swap_frac must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
