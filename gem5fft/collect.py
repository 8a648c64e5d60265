#!/usr/bin/env python3
"""
collect.py

Scan an FFT results directory (default: results/fft), parse stats.txt in each
run folder, recover the run parameters from the folder name and write a CSV
summary.

Usage:
  gem5-fft-collect --experiments-dir results/fft --output results/fft_summary.csv
"""
import argparse
import csv
from pathlib import Path

from .outdir import parse_name
from .stats import METRICS, read_run

PARAMS = ["problem_size", "topology", "cpus", "rows", "cols", "concentration", "clock", "suffix"]
FIELDNAMES = ["dir", "experiment", *PARAMS, *METRICS, "status"]


def collect(experiments_dir, out_csv, verbose=False):
    experiments_dir = Path(experiments_dir)
    if not experiments_dir.exists():
        raise SystemExit(f"Experiments directory not found: {experiments_dir}")

    rows = []
    total = succeeded = failed = skipped = 0

    for entry in sorted(experiments_dir.iterdir()):
        if not entry.is_dir():
            continue
        params = parse_name(entry.name)
        if params is None:
            skipped += 1
            if verbose:
                print(f"NOTE: skipping {entry.name} (not an FFT run folder)")
            continue
        total += 1

        metrics, status = read_run(entry)
        if status == "ok":
            succeeded += 1
        else:
            failed += 1
            if verbose:
                print(f"[ERR] {entry}: {status}")

        rows.append({
            "dir": str(entry),
            "experiment": entry.name,
            **{k: params[k] for k in PARAMS},
            **metrics,
            "status": status,
        })

    Path(out_csv).parent.mkdir(parents=True, exist_ok=True)
    with open(out_csv, "w", newline='') as csvf:
        writer = csv.DictWriter(csvf, fieldnames=FIELDNAMES)
        writer.writeheader()
        for r in rows:
            writer.writerow(r)

    print(f"Scanned {total} run folders ({skipped} skipped). "
          f"Successful stats files: {succeeded}. Failed/missing: {failed}.")
    print(f"Summary written to: {out_csv}")

    done = [r for r in rows if r["status"] == "ok" and r["sim_ticks"] is not None]
    if done:
        print("\nFastest 5 runs by simulated ticks:")
        for r in sorted(done, key=lambda x: x["sim_ticks"])[:5]:
            print(f" {r['experiment']}: simTicks={r['sim_ticks']:.0f}  "
                  f"avg_packet_latency={r['avg_packet_latency']}")
    else:
        print("No successful runs found.")
    return rows


def main(argv=None):
    parser = argparse.ArgumentParser(description="Collect gem5 FFT run stats into CSV")
    parser.add_argument("--experiments-dir", default="results/fft",
                        help="Directory containing run folders")
    parser.add_argument("--output", default="results/fft_summary.csv",
                        help="CSV output file")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)
    collect(args.experiments_dir, args.output, verbose=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
