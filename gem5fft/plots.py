#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
plots.py — FFT/garnet sweep plots

Reads the CSV written by gem5-fft-collect, keeps successful runs and saves:
  - sim ticks vs core count, one line per topology
  - average packet latency per topology, grouped by core count

Usage:
  gem5-fft-plot --input results/fft_summary.csv --outdir analysis/fft_plots
"""

import argparse
import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns

NUMERIC_COLS = ["cpus", "rows", "cols", "concentration", "problem_size",
                "sim_ticks", "sim_seconds", "avg_packet_latency", "avg_flit_latency"]


def setup_style():
    sns.set_theme(style="whitegrid", context="notebook", palette="tab10")
    plt.rcParams.update({
        "figure.figsize": (10, 6),
        "axes.titlesize": 14,
        "axes.labelsize": 12,
        "legend.fontsize": 10,
    })


def load(path):
    if not os.path.exists(path):
        raise SystemExit(f"Missing input file: {path}")
    df = pd.read_csv(path)
    if "status" in df.columns:
        df = df[df["status"].astype(str).str.lower() == "ok"].copy()
    for c in NUMERIC_COLS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    print(f"Loaded {len(df)} successful runs from {path}")
    return df


def save(fig, outdir, name):
    path = os.path.join(outdir, name)
    fig.tight_layout()
    fig.savefig(path, dpi=200, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")
    return path


def plot_ticks_vs_cores(df, outdir):
    if df["sim_ticks"].dropna().empty:
        print("WARNING: no sim_ticks values, skipping scaling plot.")
        return None
    fig, ax = plt.subplots()
    sns.lineplot(data=df, x="cpus", y="sim_ticks", hue="topology", marker="o",
                 ax=ax, estimator="mean", errorbar=None)
    ax.set_title("FFT runtime vs core count")
    ax.set_xlabel("Cores")
    ax.set_ylabel("Simulated ticks")
    ax.legend(title="Topology", loc="best", frameon=True)
    return save(fig, outdir, "sim_ticks_vs_cores.png")


def plot_latency_by_topology(df, outdir):
    """Grouped bars: mean packet latency per topology, one bar per core count."""
    data = df.dropna(subset=["avg_packet_latency"])
    if data.empty:
        print("WARNING: no packet latency values, skipping latency plot.")
        return None
    agg = data.groupby(["topology", "cpus"])["avg_packet_latency"].mean().unstack("cpus")
    topologies = list(agg.index)
    core_counts = list(agg.columns)

    x = np.arange(len(topologies))
    width = 0.8 / len(core_counts)
    fig, ax = plt.subplots()
    for i, n in enumerate(core_counts):
        ax.bar(x + i * width - 0.4 + width / 2, agg[n].values, width, label=f"{int(n)} cores")
    ax.set_xticks(x)
    ax.set_xticklabels(topologies)
    ax.set_title("Average packet latency by topology")
    ax.set_ylabel("Latency (cycles)")
    ax.legend(loc="best", frameon=True)
    return save(fig, outdir, "packet_latency_by_topology.png")


def plot_all(csv_path, outdir):
    os.makedirs(outdir, exist_ok=True)
    setup_style()
    df = load(csv_path)
    if df.empty:
        print("No successful runs to plot.")
        return []
    saved = [plot_ticks_vs_cores(df, outdir), plot_latency_by_topology(df, outdir)]
    return [p for p in saved if p]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Plot gem5 FFT sweep results")
    parser.add_argument("--input", default="results/fft_summary.csv")
    parser.add_argument("--outdir", default="analysis/fft_plots")
    args = parser.parse_args(argv)
    plot_all(args.input, args.outdir)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
