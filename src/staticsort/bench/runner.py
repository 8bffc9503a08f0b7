"""
Experiment runner: sweeps fixed-size sorters over n from a YAML config.

Usage (from repo root):
    staticsort-bench experiments/configs/small_n_random.yaml
    python -m staticsort.bench.runner experiments/configs/small_n_random.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # python / numpy / cpu / ram / git commit
    - results.jsonl           # one line per timing sample, plus status lines
    - summary.csv             # median + IQR per (algo, n)

Design notes:
- For each n and each of `inputs_per_size` draws, ONE dataset is generated
  and handed to every algorithm.
- An algorithm that errors, times out or returns a wrong answer at some n is
  skipped for the remaining sizes.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import os
import platform
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from staticsort.bench.measure import time_sort_call
from staticsort.datasets import make_dataset

_console = Console()

REQUIRED_KEYS = [
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
]
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]

__all__ = ["AlgoSpec", "ExperimentConfig", "load_config", "run_experiment", "main"]


# ------------------------- data structures ------------------------- #


@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Callable[..., List[Any]]
    config: Dict[str, Any]


@dataclass
class ExperimentConfig:
    experiment_name: str
    output_dir: Path
    seed: int
    repeats: int
    warmup: bool
    disable_gc: bool
    timeout_seconds: float
    dataset: Dict[str, Any]
    sizes: List[int]
    algorithms: List[Dict[str, Any]]
    batch: int = 1
    inputs_per_size: int = 1
    validate: bool = True
    raw: Dict[str, Any] = field(default_factory=dict)


# ------------------------- helpers: IO & meta ------------------------- #


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "implementation": platform.python_implementation(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


# ------------------------- config ------------------------- #


def load_config(path: Path) -> ExperimentConfig:
    """Read and validate an experiment YAML file."""
    cfg = _load_yaml(path)
    if not isinstance(cfg, dict):
        raise ValueError(f"Config {path} must be a YAML mapping")

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    sizes = [int(n) for n in cfg["sizes"]]
    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")
    algorithms = list(cfg["algorithms"])
    if not algorithms:
        raise ValueError("Config 'algorithms' must list at least one algorithm")

    return ExperimentConfig(
        experiment_name=str(cfg["experiment_name"]),
        output_dir=Path(cfg["output_dir"]),
        seed=int(cfg["seed"]),
        repeats=int(cfg["repeats"]),
        warmup=bool(cfg["warmup"]),
        disable_gc=bool(cfg["disable_gc"]),
        timeout_seconds=float(cfg["timeout_seconds"]),
        dataset=dict(cfg["dataset"]),
        sizes=sizes,
        algorithms=algorithms,
        batch=int(cfg.get("batch", 1)),
        inputs_per_size=int(cfg.get("inputs_per_size", 1)),
        validate=bool(cfg.get("validate", True)),
        raw=cfg,
    )


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        module_name = f"staticsort.algorithms.{name}"
        try:
            mod = importlib.import_module(module_name)
        except ImportError as e:
            raise ImportError(f"Could not import algorithm module '{module_name}': {e!r}") from e
        if not callable(getattr(mod, "sort", None)):
            raise AttributeError(f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`")

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=name, sort_fn=mod.sort, config=config))
    return specs


# ------------------------- summary ------------------------- #


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    ).reset_index()
    out["iqr_ns"] = (grouped.quantile(0.75) - grouped.quantile(0.25)).to_numpy()
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[["median_ns", "iqr_ns", "min_ns", "max_ns"]].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ns per call)")
    table.add_column("Algorithm", style="bold")
    sizes = sorted(int(n) for n in summary["n"].unique()) if not summary.empty else []
    for n in sizes:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for n in sizes:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                row.append(f"{int(s['median_ns'].iloc[0])} ± {int(s['iqr_ns'].iloc[0])}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #


def run_experiment(config_path: Path) -> Path:
    cfg = load_config(config_path)
    algos = _resolve_algorithms(cfg.algorithms)

    run_dir = _ensure_run_dir(cfg.output_dir, cfg.experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg.raw, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(cfg.seed)
    skipped = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Experiment:[/bold] {cfg.experiment_name}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n"):
        for draw in range(cfg.inputs_per_size):
            base_a = make_dataset(n, cfg.dataset, rng)

            for a_spec in algos:
                if skipped[a_spec.name]:
                    continue

                res = time_sort_call(
                    algo_name=a_spec.name,
                    algo_fn=a_spec.sort_fn,
                    a=base_a,
                    config=a_spec.config,
                    repeats=cfg.repeats,
                    warmup=cfg.warmup,
                    disable_gc=cfg.disable_gc,
                    timeout_seconds=cfg.timeout_seconds,
                    batch=cfg.batch,
                    validate=cfg.validate,
                )

                for trial_idx, t_ns in enumerate(res["samples_ns"]):
                    _append_jsonl(
                        {
                            "algo": a_spec.name,
                            "n": n,
                            "draw": draw,
                            "dataset": cfg.dataset,
                            "trial": trial_idx,
                            "time_ns": int(t_ns),
                            "batch": cfg.batch,
                            "config": a_spec.config,
                        },
                        results_path,
                    )

                status = res["status"]
                if status != "ok":
                    skipped[a_spec.name] = True
                    _append_jsonl(
                        {
                            "algo": a_spec.name,
                            "n": n,
                            "draw": draw,
                            "status": status,
                            "error": res.get("error"),
                            "timed_out_on_repeat": res.get("timed_out_on_repeat"),
                            "config": a_spec.config,
                        },
                        results_path,
                    )
                    _console.print(f"[yellow]{a_spec.name}[/yellow] {status} at n={n}; skipping larger sizes")

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)
    _print_summary(summary_df)

    _console.print("[bold green]Done.[/bold green] Wrote:")
    for p in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {p}")
    return run_dir


# ------------------------- CLI ------------------------- #


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Benchmark fixed-size sorters from a YAML config.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
