"""
Timing harness for fixed-size sorters.

One sample = one call to `algo_fn(a, config=...)`, timed with
`time.perf_counter_ns`. Copies, GC control, warmup and output validation
all happen outside the timed block.

Networks for small n finish in well under a microsecond of useful work, so
a single call is dominated by interpreter overhead; `batch` times that many
back-to-back calls per sample (each on its own pre-made copy) and reports the
per-call average.

Public API (stable):
    time_sort_call(...) -> dict

Returned dict schema:
    {
        "algo": str,
        "n": int,
        "repeats": int,
        "batch": int,
        "samples_ns": list[int],            # per-call ns, one per sample
        "status": "ok" | "timeout" | "error" | "invalid",
        "error": str | None,
        "timed_out_on_repeat": int | None,
    }
"""

from __future__ import annotations

import gc
import time
from typing import Any, Callable, Dict, List, Optional

from staticsort.validate.oracle import oracle_sort

__all__ = ["time_sort_call"]


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: Callable[..., List[Any]],
    a: List[Any],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    batch: int = 1,
    validate: bool = True,
) -> Dict[str, Any]:
    """
    Time repeated calls to `algo_fn(a, config=config)`.

    Parameters
    ----------
    algo_name : str
        Logical name of the algorithm (for records).
    algo_fn : Callable[..., list]
        sort(a: list, *, config: dict | None) -> list; must not mutate `a`.
    a : list
        Input array, shared by every algorithm at this size.
    config : dict | None
        Passed through unchanged.
    repeats : int
        Number of timed samples.
    warmup : bool
        One untimed call before sampling.
    disable_gc : bool
        Collect, then disable GC for the timed loop; restored afterwards.
    timeout_seconds : float
        Per-sample threshold; exceeding it stops sampling with status "timeout".
    batch : int
        Calls per sample; each sample records the per-call average.
    validate : bool
        Check one output against the oracle before timing; a mismatch sets
        status "invalid" and no samples are taken.

    Returns
    -------
    dict
        See module docstring.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if batch < 1:
        raise ValueError("batch must be >= 1")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result: Dict[str, Any] = {
        "algo": algo_name,
        "n": len(a),
        "repeats": repeats,
        "batch": batch,
        "samples_ns": [],
        "status": "ok",
        "error": None,
        "timed_out_on_repeat": None,
    }

    if validate or (warmup and repeats > 0):
        try:
            out = algo_fn(list(a), config=config)
        except Exception as e:
            result["status"] = "error"
            result["error"] = f"warmup failed: {e!r}"
            return result
        if validate and not _matches_oracle(a, out, config):
            result["status"] = "invalid"
            result["error"] = f"output does not match oracle: {out!r}"
            return result

    prev_gc_enabled = gc.isenabled()
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        threshold_ns = int(timeout_seconds * 1e9)
        for r in range(repeats):
            inputs = [list(a) for _ in range(batch)]
            try:
                t0 = time.perf_counter_ns()
                for arg in inputs:
                    algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result["status"] = "error"
                result["error"] = f"run failed at repeat {r}: {e!r}"
                break

            elapsed = (t1 - t0) // batch
            result["samples_ns"].append(int(elapsed))
            if elapsed > threshold_ns:
                result["status"] = "timeout"
                result["timed_out_on_repeat"] = r
                break
    finally:
        if disable_gc and prev_gc_enabled:
            gc.enable()

    return result


def _matches_oracle(a: List[Any], out: List[Any], config: Optional[Dict[str, Any]]) -> bool:
    descending = (config or {}).get("comparator", "lt") == "gt"
    return list(out) == oracle_sort(a)[:: -1 if descending else 1]
