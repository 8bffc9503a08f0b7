"""
Benchmark harness, algorithm wrappers and CLI tests.

What we check:
- Algorithm modules return sorted copies and never mutate their input
- time_sort_call returns the documented schema and flags bad algorithms
- run_experiment writes every output file from a YAML config
- staticsort-network prints and verifies networks
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, List

import pandas as pd
import pytest
import yaml

from staticsort import cli
from staticsort.algorithms import builtin_timsort, static_sort, static_timsort
from staticsort.bench.measure import time_sort_call
from staticsort.bench.runner import load_config, run_experiment
from staticsort.network.select import network_for

ALGOS = [builtin_timsort, static_sort, static_timsort]


# ------------------------- algorithm wrappers ------------------------- #


@pytest.mark.parametrize("mod", ALGOS)
@pytest.mark.parametrize("a", [[], [1], [5, 2, 8, 1, 9, 3], list(range(12))[::-1], [3, 1, 2, 1, 3, 0, 9, 4, 4]])
def test_algorithms_return_sorted_copy(mod: Any, a: List[int]) -> None:
    before = list(a)
    out = mod.sort(a, config=None)
    assert a == before
    assert out == sorted(a)
    assert mod.sort(a, config={"comparator": "gt"}) == sorted(a, reverse=True)


def test_algorithm_kind_and_bad_comparator() -> None:
    assert static_sort.sort([4, 1, 3, 2], config={"kind": "bose-nelson"}) == [1, 2, 3, 4]
    with pytest.raises(ValueError):
        static_sort.sort([2, 1], config={"comparator": "le"})


# ------------------------- measure ------------------------- #


def _common(**overrides: Any) -> dict:
    kwargs = dict(
        algo_name="x",
        a=[3, 1, 2, 9, 0, 4, 4, 7],
        config=None,
        repeats=5,
        warmup=True,
        disable_gc=True,
        timeout_seconds=5.0,
        batch=3,
    )
    kwargs.update(overrides)
    return kwargs


def test_time_sort_call_ok_schema() -> None:
    res = time_sort_call(algo_fn=static_timsort.sort, **_common())
    assert res["status"] == "ok"
    assert res["error"] is None
    assert res["n"] == 8 and res["batch"] == 3
    assert len(res["samples_ns"]) == 5
    assert all(isinstance(t, int) and t >= 0 for t in res["samples_ns"])


def test_time_sort_call_flags_wrong_output() -> None:
    res = time_sort_call(algo_fn=lambda a, config=None: list(a), **_common())
    assert res["status"] == "invalid"
    assert res["samples_ns"] == []


def test_time_sort_call_flags_errors() -> None:
    def broken(a, config=None):
        raise RuntimeError("nope")

    res = time_sort_call(algo_fn=broken, **_common())
    assert res["status"] == "error"
    assert "nope" in res["error"]


def test_time_sort_call_timeout() -> None:
    def slow(a, config=None):
        time.sleep(0.002)
        return sorted(a)

    res = time_sort_call(algo_fn=slow, **_common(timeout_seconds=1e-6, batch=1))
    assert res["status"] == "timeout"
    assert res["timed_out_on_repeat"] == 0
    assert len(res["samples_ns"]) == 1


@pytest.mark.parametrize("bad", [{"repeats": -1}, {"batch": 0}, {"timeout_seconds": 0}])
def test_time_sort_call_validates_arguments(bad: dict) -> None:
    with pytest.raises(ValueError):
        time_sort_call(algo_fn=static_sort.sort, **_common(**bad))


# ------------------------- runner ------------------------- #


def _write_config(tmp_path: Path, **overrides: Any) -> Path:
    cfg = {
        "experiment_name": "unit",
        "output_dir": str(tmp_path / "runs"),
        "seed": 42,
        "repeats": 3,
        "warmup": True,
        "disable_gc": False,
        "timeout_seconds": 5.0,
        "batch": 2,
        "dataset": {"dist": "random", "params": {"range": [0, 1000]}},
        "sizes": [2, 5, 8, 9],
        "algorithms": [
            {"name": "builtin_timsort"},
            {"name": "static_sort"},
            {"name": "static_timsort", "config": {"comparator": "lt"}},
        ],
    }
    cfg.update(overrides)
    path = tmp_path / "exp.yaml"
    path.write_text(yaml.safe_dump(cfg), encoding="utf-8")
    return path


def test_run_experiment_writes_outputs(tmp_path: Path) -> None:
    run_dir = run_experiment(_write_config(tmp_path))
    for name in ("results.jsonl", "summary.csv", "meta.json", "config_resolved.yaml"):
        assert (run_dir / name).exists(), name

    summary = pd.read_csv(run_dir / "summary.csv")
    assert set(summary["algo"]) == {"builtin_timsort", "static_sort", "static_timsort"}
    assert sorted(summary["n"].unique().tolist()) == [2, 5, 8, 9]
    assert (summary["samples_ok"] == 3).all()

    meta = json.loads((run_dir / "meta.json").read_text(encoding="utf-8"))
    assert "python" in meta and "machine" in meta


def test_run_experiment_records_skipped_algorithm(tmp_path: Path) -> None:
    cfg_path = _write_config(tmp_path, timeout_seconds=1e-9, batch=1, sizes=[4, 6])
    run_dir = run_experiment(cfg_path)
    lines = [json.loads(s) for s in (run_dir / "results.jsonl").read_text(encoding="utf-8").splitlines()]
    statuses = [r for r in lines if r.get("status") == "timeout"]
    assert {r["algo"] for r in statuses} == {"builtin_timsort", "static_sort", "static_timsort"}
    assert all(r["n"] == 4 for r in statuses)


def test_load_config_rejects_missing_keys(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text(yaml.safe_dump({"experiment_name": "x"}), encoding="utf-8")
    with pytest.raises(ValueError, match="Missing required config keys"):
        load_config(path)


def test_runner_rejects_unknown_algorithm(tmp_path: Path) -> None:
    with pytest.raises(ImportError):
        run_experiment(_write_config(tmp_path, algorithms=[{"name": "no_such_algo"}]))


def test_runner_rejects_duplicate_algorithm(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        run_experiment(_write_config(tmp_path, algorithms=[{"name": "static_sort"}, {"name": "static_sort"}]))


def test_shipped_configs_load() -> None:
    configs = Path(__file__).resolve().parents[1] / "experiments" / "configs"
    paths = sorted(configs.glob("*.yaml"))
    assert paths
    for path in paths:
        cfg = load_config(path)
        assert cfg.sizes and cfg.algorithms


# ------------------------- CLI ------------------------- #


@pytest.mark.parametrize("argv", [["8"], ["12", "--layers"], ["6", "--kind", "bose-nelson", "--verify"]])
def test_cli_prints_and_verifies(argv: List[str]) -> None:
    assert cli.main(argv) == 0


def test_cli_python_format(capsys: pytest.CaptureFixture) -> None:
    assert cli.main(["4", "--format", "python"]) == 0
    out = capsys.readouterr().out
    assert "NETWORK_4 = (" in out
    assert "5 comparators" in out


@pytest.mark.parametrize("n", [0, 1, 2, 9])
def test_cli_python_format_compiles(n: int, capsys: pytest.CaptureFixture) -> None:
    assert cli.main([str(n), "--format", "python"]) == 0
    namespace: dict = {}
    exec(compile(capsys.readouterr().out, f"net{n}.py", "exec"), namespace)
    stages = namespace[f"NETWORK_{n}"]
    net = network_for(n)
    assert len(stages) == net.depth
    assert sorted(edge for stage in stages for edge in stage) == sorted(net.edges)


def test_cli_rejects_bad_n() -> None:
    assert cli.main(["-3"]) == 2
    assert cli.main(["9", "--kind", "optimal"]) == 2
