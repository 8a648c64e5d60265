"""
Usage: gem5-fft CPUS [ROWS] [CONC] [TOPOLOGY] [PROBLEM_SIZE] [CLOCK]

Run the SPLASH-2 FFT benchmark on gem5 (Ruby + garnet2.0) and post-process
the output directory.

  CPUS          number of simulated cores (required, non-negative integer)
  ROWS          mesh rows                                  (default: 4)
  CONC          cores per router (concentration factor)    (default: 4)
  TOPOLOGY      garnet topology, e.g. Mesh_XY, Ring,
                HierarchicalRing                           (default: Mesh_XY)
  PROBLEM_SIZE  FFT size exponent, passed as -m<N>         (default: 18)
  CLOCK         CPU clock                                  (default: 1GHz)

Derived settings:
  directories   CPUS / CONC, at most 256 (HierarchicalRing with ROWS > 4
                uses ROWS directories; HierarchicalRing allows <= 128 cores)
  columns       CPUS / ROWS / CONC (CPUS / ROWS when CONC <= 1)
  escape VC     enabled for Ring only

Results go to $OUT_ROOT/FFT_m<N>_<TOPOLOGY>_<CPUS>c_<ROWS>x<COLS>[_c<CONC>]_<CLOCK>;
if that folder exists, -2 ... -99 is appended. On success the stats
extraction ($STATS_CMD) and diagram rendering ($DIAGRAM_CMD) steps run on the
folder; power/area modelling ($DSENT_CMD) runs only with RUN_DSENT=1. On
failure the folder is removed. Arguments after CLOCK are ignored.

Environment:
  GEM5_BIN, GEM5_SE_CONFIG, FFT_BIN, OUT_ROOT        tool paths / results root
  GEM5_QUIET_STDOUT=1, GEM5_QUIET_STDERR=1           hide gem5 output
  SIM_TYPE_VAR, SIM_TYPE                             marker exported to gem5 (M5_SIM_TYPE=FFT)

Example:
  gem5-fft 64 8 4 Ring 16 2GHz
"""

import argparse
import re
import sys

from .config import (
    DEFAULT_CLOCK,
    DEFAULT_CONCENTRATION,
    DEFAULT_PROBLEM_SIZE,
    DEFAULT_ROWS,
    DEFAULT_TOPOLOGY,
    RunConfig,
    load_settings,
)
from .errors import LauncherError
from .launcher import launch

CPUS_RE = re.compile(r"[0-9]+")


def print_usage():
    print(__doc__.strip("\n"))


def build_parser():
    parser = argparse.ArgumentParser(prog="gem5-fft", add_help=False, usage=argparse.SUPPRESS)
    parser.add_argument("cpus", type=int)
    parser.add_argument("rows", type=int, nargs="?", default=DEFAULT_ROWS)
    parser.add_argument("concentration", type=int, nargs="?", default=DEFAULT_CONCENTRATION)
    parser.add_argument("topology", nargs="?", default=DEFAULT_TOPOLOGY)
    parser.add_argument("problem_size", type=int, nargs="?", default=DEFAULT_PROBLEM_SIZE)
    parser.add_argument("clock", nargs="?", default=DEFAULT_CLOCK)
    return parser


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv or not CPUS_RE.fullmatch(argv[0]):
        print_usage()
        return 1

    # extra positionals beyond CLOCK are ignored
    args = build_parser().parse_args(argv[:6])
    config = RunConfig(
        cpus=args.cpus,
        rows=args.rows,
        concentration=args.concentration,
        topology=args.topology,
        problem_size=args.problem_size,
        clock=args.clock,
    )
    try:
        return launch(config, load_settings())
    except LauncherError as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
