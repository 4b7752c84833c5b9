#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import pathlib
from typing import List, Sequence

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.axes import Axes

DEFAULT_RESULTS_PATH = pathlib.Path("data/results.jsonl")
DEFAULT_FIGURE_PATH = pathlib.Path("data/plots/solver_comparison.png")
FAMILIES_TO_PLOT = ["approximation", "exact", "heuristic", "local_search"]


def parse_args(raw_args: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot runtime and MST ratio of TSP solvers against point count.")
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=DEFAULT_RESULTS_PATH,
        help="Input JSONL file with algorithm runs.",
    )
    parser.add_argument(
        "--figure",
        type=pathlib.Path,
        default=DEFAULT_FIGURE_PATH,
        help="Base path for rendered plots (one file per algorithm family).",
    )
    return parser.parse_args(raw_args)


def load_records(path: pathlib.Path) -> List[dict]:
    records: List[dict] = []
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    return records


def build_dataframe(records: List[dict]) -> pd.DataFrame:
    df = pd.DataFrame(records)
    for col in ["num_points", "elapsed", "cost", "mst_ratio"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def print_summary(df: pd.DataFrame) -> None:
    completed = df[df["status"] == "complete"]
    if completed.empty:
        print("No completed runs available for summary.")
        return
    summary = (
        completed.groupby("algorithm")
        .agg(
            avg_elapsed=("elapsed", "mean"),
            avg_mst_ratio=("mst_ratio", "mean"),
            runs=("elapsed", "count"),
        )
        .reset_index()
    )
    for _, row in summary.iterrows():
        print(
            f"{row['algorithm']}: runs={int(row['runs'])} avg_elapsed={row['avg_elapsed']:.4f}s "
            f"avg_mst_ratio={row['avg_mst_ratio']:.4f}"
        )


def aggregate(data: pd.DataFrame, value_col: str, hue: str) -> pd.DataFrame:
    subset = data[[hue, "num_points", value_col]].dropna()
    if subset.empty:
        return pd.DataFrame(columns=[hue, "num_points", "mean", "std"])
    return (
        subset.groupby([hue, "num_points"], as_index=False)
        .agg(mean=(value_col, "mean"), std=(value_col, "std"))
        .fillna({"std": 0.0})
        .sort_values([hue, "num_points"])
        .reset_index(drop=True)
    )


def plot_metric_with_band(ax: Axes, aggregated: pd.DataFrame, hue: str, palette_map: dict) -> None:
    if aggregated.empty:
        ax.text(0.5, 0.5, "No data to display", ha="center", va="center", transform=ax.transAxes)
        return
    sns.lineplot(data=aggregated, x="num_points", y="mean", hue=hue, estimator=None, palette=palette_map, ax=ax)
    for label, group in aggregated.groupby(hue):
        ax.fill_between(
            group["num_points"],
            group["mean"] - group["std"],
            group["mean"] + group["std"],
            color=palette_map.get(label),
            alpha=0.15,
        )


def lineplot_with_sd(data: pd.DataFrame, hue: str, title_prefix: str, path: pathlib.Path) -> None:
    sns.set_theme(style="whitegrid")
    fig, axes = plt.subplots(1, 2, figsize=(16, 7))

    unique_hues = data[hue].dropna().unique().tolist()
    palette = sns.color_palette("tab10", n_colors=max(len(unique_hues), 1))
    palette_map = {label: palette[idx] for idx, label in enumerate(unique_hues)}

    plot_metric_with_band(axes[0], aggregate(data, "elapsed", hue), hue, palette_map)
    axes[0].set_title(f"{title_prefix} Runtime (mean ± 1σ)")
    axes[0].set_xlabel("Number of Points")
    axes[0].set_ylabel("Elapsed Time (s)")
    axes[0].set_yscale("log")

    plot_metric_with_band(axes[1], aggregate(data, "mst_ratio", hue), hue, palette_map)
    axes[1].set_title(f"{title_prefix} Tour / MST Ratio (mean ± 1σ)")
    axes[1].set_xlabel("Number of Points")
    axes[1].set_ylabel("Tour Cost / MST Weight")

    fig.tight_layout()
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=200)
    plt.close(fig)
    print(f"Saved figure to {path}")


def render(df: pd.DataFrame, output: pathlib.Path) -> None:
    completed = df[df["status"] == "complete"].copy()
    if completed.empty:
        raise SystemExit("No completed runs to plot.")
    if not output.suffix:
        output = output.with_suffix(".png")

    lineplot_with_sd(completed, hue="algorithm", title_prefix="Overall", path=output)
    for family in FAMILIES_TO_PLOT:
        subset = completed[completed["algorithm_category"] == family]
        if subset.empty:
            continue
        pretty_name = family.replace("_", " ").title()
        family_path = output.with_name(f"{output.stem}_{family}{output.suffix}")
        lineplot_with_sd(subset, hue="algorithm", title_prefix=f"{pretty_name} Algorithms", path=family_path)


def main(raw_args: Sequence[str] | None = None) -> None:
    args = parse_args(raw_args)
    if not args.results.exists():
        raise SystemExit(f"No results file found at {args.results}")
    records = load_records(args.results)
    if not records:
        raise SystemExit("Results file is empty.")
    df = build_dataframe(records)
    print_summary(df)
    render(df, args.figure)


if __name__ == "__main__":
    main()
