#!/usr/bin/env python3
"""
stats.py

Extract key metrics from a single FFT run folder (stats.txt) and write them to
stats_summary.csv next to it. This is the default post-processing step run by
the launcher after a successful simulation.

Usage:
  gem5-fft-stats results/fft/FFT_m18_Mesh_XY_16c_4x1_c4_1GHz
"""
import csv
import re
import sys
from pathlib import Path

SUMMARY_NAME = "stats_summary.csv"

# Candidate stat keys (we try these in order; old and new gem5 stat names)
METRIC_KEYS = {
    "sim_ticks": ["simTicks", "sim_ticks"],
    "sim_seconds": ["simSeconds", "sim_seconds"],
    "sim_insts": ["simInsts", "sim_insts", "simInsts::total"],
    "avg_packet_latency": [
        "system.ruby.network.average_packet_latency",
        "system.ruby.network.packet_latency",
    ],
    "avg_flit_latency": [
        "system.ruby.network.average_flit_latency",
        "system.ruby.network.flit_latency",
    ],
    "avg_packet_network_latency": ["system.ruby.network.average_packet_network_latency"],
    "avg_packet_queueing_latency": ["system.ruby.network.average_packet_queueing_latency"],
    "avg_hops": ["system.ruby.network.average_hops"],
    "packets_injected": [
        "system.ruby.network.packets_injected::total",
        "system.ruby.network.packets_injected",
    ],
    "packets_received": [
        "system.ruby.network.packets_received::total",
        "system.ruby.network.packets_received",
    ],
    "flits_injected": [
        "system.ruby.network.flits_injected::total",
        "system.ruby.network.flits_injected",
    ],
    "flits_received": [
        "system.ruby.network.flits_received::total",
        "system.ruby.network.flits_received",
    ],
}
METRICS = list(METRIC_KEYS)

KV_RE = re.compile(r'^\s*([^\s]+)\s+([+-]?[0-9]*\.?[0-9]+([eE][+-]?[0-9]+)?)')


def parse_stats_file(path):
    """Return dict of {stat_name: float} parsed from stats.txt (later dumps win)."""
    stats = {}
    with open(path, 'r', errors='ignore') as f:
        for line in f:
            m = KV_RE.match(line)
            if not m:
                continue
            try:
                stats[m.group(1)] = float(m.group(2))
            except ValueError:
                continue
    return stats


def pick_first(stats, keys):
    for k in keys:
        if k in stats:
            return stats[k]
    return None


def extract_metrics(stats):
    return {name: pick_first(stats, keys) for name, keys in METRIC_KEYS.items()}


def read_run(run_dir):
    """Return (metrics, status) for one run folder."""
    stats_path = Path(run_dir) / "stats.txt"
    if not stats_path.exists() or stats_path.stat().st_size == 0:
        return extract_metrics({}), "empty-or-missing"
    try:
        stats = parse_stats_file(stats_path)
    except OSError as e:
        return extract_metrics({}), f"parse-error:{e}"
    return extract_metrics(stats), "ok"


def summarize(run_dir):
    """Write stats_summary.csv into run_dir; return the status string."""
    run_dir = Path(run_dir)
    if not run_dir.is_dir():
        raise SystemExit(f"Run directory not found: {run_dir}")

    metrics, status = read_run(run_dir)
    row = {"dir": str(run_dir), **metrics, "status": status}
    out_csv = run_dir / SUMMARY_NAME
    with open(out_csv, "w", newline='') as csvf:
        writer = csv.DictWriter(csvf, fieldnames=["dir", *METRICS, "status"])
        writer.writeheader()
        writer.writerow(row)

    print(f"\nResults from: {run_dir / 'stats.txt'}")
    print(f"  Status: {status}")
    print(f"  Sim ticks: {metrics['sim_ticks']}")
    print(f"  Instructions: {metrics['sim_insts']}")
    print(f"  Avg packet latency: {metrics['avg_packet_latency']}")
    print(f"  Avg flit latency: {metrics['avg_flit_latency']}")
    print(f"Summary written to: {out_csv}")
    return status


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) != 1:
        print("Usage: gem5-fft-stats RUN_DIR")
        return 1
    return 0 if summarize(argv[0]) == "ok" else 1


if __name__ == "__main__":
    sys.exit(main())
