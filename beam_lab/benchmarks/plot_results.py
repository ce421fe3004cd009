# beam_lab/benchmarks/plot_results.py
from __future__ import annotations
import argparse
import io
import json
import math
from pathlib import Path
from typing import List, Optional

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

METRICS = [
    ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
    ("time_s", "Wall Time (lower is better)", "seconds"),
    ("cost", "Path Cost (lower is better)", "cost"),
]


def load_rows(results_json: Path) -> List[dict]:
    if not results_json.exists():
        raise SystemExit(f"Missing {results_json}. Run: python -m beam_lab.benchmarks.run_all")
    data = json.loads(results_json.read_text())
    rows = [r for r in data.get("results", []) if r.get("success")]
    if not rows:
        raise SystemExit("No successful rows to plot.")
    return rows


def _label(r: dict) -> str:
    extra = r.get("extra") or {}
    return f"{r['algo']}\n{extra.get('source')}->{extra.get('target')}"


def _bar(ax, rows, metric, title, ylabel):
    labels = [_label(r) for r in rows]
    vals = [r.get(metric) for r in rows]
    clean = [0 if (v is None or not math.isfinite(v)) else v for v in vals]

    x = list(range(len(labels)))
    ax.bar(x, clean)
    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=20, ha="right", fontsize=7)

    top = max(clean) or 1
    for xi, v in zip(x, clean):
        label = f"{v:.4f}" if isinstance(v, float) and v < 0.01 else (f"{v:.3f}" if isinstance(v, float) else f"{v}")
        ax.text(xi, v + 0.01 * top, label, ha="center", va="bottom", fontsize=8)


def fmt_table(rows: List[dict]) -> str:
    lines = [
        "| Algorithm | Beam | Cost | Nodes Expanded | Time (s) | Peak KB |",
        "|---|---:|---:|---:|---:|---:|",
    ]

    def fnum(x):
        if isinstance(x, float):
            return f"{x:.6f}"
        if isinstance(x, int):
            return f"{x}"
        return "n/a"

    for r in rows:
        beam = r.get("beam_width")
        lines.append(
            f"| {r['algo']} | {beam if beam is not None else 'inf'} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('time_s'))} | {fnum(r.get('peak_kb'))} |"
        )
    return "\n".join(lines)


def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Bar charts + markdown table for a run_all results file.")
    ap.add_argument("results", type=Path, nargs="?", default=Path("results.json"))
    ap.add_argument("--out-dir", type=Path, default=None)
    args = ap.parse_args(argv)

    rows = load_rows(args.results)
    out_dir = args.out_dir or args.results.parent
    out_dir.mkdir(parents=True, exist_ok=True)

    md_path = out_dir / "results.md"
    md_path.write_text(fmt_table(rows))
    print(f"Wrote {md_path}")

    for metric, title, ylabel in METRICS:
        fig, ax = plt.subplots(figsize=(6, 4))
        _bar(ax, rows, metric, title, ylabel)
        fig.tight_layout()
        png = out_dir / f"{metric}.png"
        png.write_bytes(fig_to_png_bytes(fig))
        plt.close(fig)
        print(f"Wrote {png}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
