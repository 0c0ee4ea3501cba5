"""Benchmark report writers: JSON payload, Markdown summary, CSV table and figure."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

from memoized.bench.runner import BenchError
from memoized.core.versioning import package_versions, utc_now_iso


def build_bench_payload(results: pd.DataFrame, config: dict[str, Any] | None = None) -> dict[str, Any]:
    if results.empty:
        raise BenchError("No benchmark results to report")
    return {
        "timestamp_utc": utc_now_iso(),
        "versions": package_versions(),
        "config": config or {},
        "results": [_coerce_scalars(row) for row in results.to_dict(orient="records")],
        "speedups": _speedups(results),
    }


def write_bench_json(payload: dict[str, Any], out_path: str | Path) -> None:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(payload, indent=2, sort_keys=True) + "\n", encoding="utf-8")


def write_bench_csv(results: pd.DataFrame, out_path: str | Path) -> None:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    results.to_csv(out, index=False)


def write_bench_md(payload: dict[str, Any], out_path: str | Path) -> None:
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    lines = [
        "# Memoization Benchmarks",
        "",
        f"- Timestamp (UTC): `{payload.get('timestamp_utc')}`",
        f"- memoized: `{payload.get('versions', {}).get('memoized')}`",
        f"- Python: `{payload.get('versions', {}).get('python')}`",
        "",
        "| name | group | repeat | min (s) | median (s) | mean (s) |",
        "|---|---|---|---|---|---|",
    ]
    for row in payload.get("results", []):
        lines.append(
            f"| {row['name']} | {row['group']} | {row['repeat']} "
            f"| {_fmt(row['min_s'])} | {_fmt(row['median_s'])} | {_fmt(row['mean_s'])} |"
        )
    speedups = payload.get("speedups", {})
    if speedups:
        lines.extend(["", "## Speedups (plain median / memoized median)", ""])
        for name, value in speedups.items():
            lines.append(f"- {name}: `{_fmt(value)}x`")
    lines.append("")
    out.write_text("\n".join(lines), encoding="utf-8")


def plot_bench(results: pd.DataFrame, out_path: str | Path) -> Path:
    p = Path(out_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.barh(results["name"], results["median_s"], xerr=results["std_s"], alpha=0.8, edgecolor="black")
    ax.set_xscale("log")
    ax.set_xlabel("median time per repeat (s)")
    ax.set_title("Plain vs memoized")
    ax.grid(alpha=0.3, axis="x")
    fig.tight_layout()
    fig.savefig(p, dpi=140)
    plt.close(fig)
    return p


_SPEEDUP_PAIRS = {
    "fib_recursive": "fib_recursive_memo",
    "fib_iter": "fib_iter_memo",
    "next_prime_normal": "next_prime_memo",
}


def _speedups(results: pd.DataFrame) -> dict[str, float]:
    medians = dict(zip(results["name"], results["median_s"]))
    out: dict[str, float] = {}
    for plain, memo in _SPEEDUP_PAIRS.items():
        if plain in medians and memo in medians and medians[memo] > 0:
            out[plain] = float(medians[plain] / medians[memo])
    return out


def _coerce_scalars(row: dict[str, Any]) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for key, value in row.items():
        out[key] = value.item() if hasattr(value, "item") else value
    return out


def _fmt(v: Any) -> str:
    try:
        return f"{float(v):.6g}"
    except (TypeError, ValueError):
        return str(v)
