"""
Run configuration for a single gem5 FFT run.

Holds the knobs handed to gem5 (cores, mesh shape, topology, garnet network
parameters, cache sizing) and the values derived from them. Paths and toggles
for the external tools come from the environment, with sensible defaults:

  GEM5_BIN          gem5 binary            (~/gem5/build/X86/gem5.opt)
  GEM5_SE_CONFIG    SE-mode config script  (~/gem5/configs/example/se.py)
  FFT_BIN           SPLASH-2 FFT binary    (~/gem5/benchmarks/splash2/FFT)
  OUT_ROOT          results root           (results/fft)
  STATS_CMD         stats extraction step  (python -m gem5fft.stats)
  DIAGRAM_CMD       TeX -> PNG step        (python -m gem5fft.diagram)
  DSENT_CMD         power/area step        (python ~/dsent/run_dsent.py)
  RUN_DSENT         enable power/area step (0)
  GEM5_QUIET_STDOUT hide gem5 stdout       (0)
  GEM5_QUIET_STDERR hide gem5 stderr       (0)
"""

import os
import re
import shlex
import sys
from dataclasses import dataclass, field
from os.path import expanduser

from .errors import ConfigError

MAX_DIRS = 256
HRING_MAX_CPUS = 128
HRING_ROW_THRESHOLD = 4

DEFAULT_ROWS = 4
DEFAULT_CONCENTRATION = 4
DEFAULT_TOPOLOGY = "Mesh_XY"
DEFAULT_PROBLEM_SIZE = 18
DEFAULT_CLOCK = "1GHz"

# both end up in the output folder name
TOPOLOGY_RE = re.compile(r"[A-Za-z0-9_]+")
CLOCK_RE = re.compile(r"[A-Za-z0-9.]+")


@dataclass(frozen=True)
class RunConfig:
    cpus: int
    rows: int = DEFAULT_ROWS
    concentration: int = DEFAULT_CONCENTRATION
    topology: str = DEFAULT_TOPOLOGY
    problem_size: int = DEFAULT_PROBLEM_SIZE
    clock: str = DEFAULT_CLOCK

    # Garnet network
    routing_algorithm: int = 0
    vcs_per_vnet: int = 4
    buffers_per_data_vc: int = 4
    buffers_per_ctrl_vc: int = 1
    link_width_bits: int = 128
    deadlock_threshold: int = 50000

    # CPU / memory / caches (fixed for the FFT study)
    cpu_type: str = "TimingSimpleCPU"
    mem_size: str = "4GB"
    l1i_size: str = "32kB"
    l1d_size: str = "32kB"
    l2_size: str = "256kB"
    l1i_assoc: int = 2
    l1d_assoc: int = 2
    l2_assoc: int = 8
    cacheline_size: int = 64


@dataclass(frozen=True)
class Derived:
    num_dirs: int
    cols: int
    escape_vc: bool
    conc_flags: str


def derive(config):
    """Compute directory count, mesh columns and topology-specific flags.

    Raises ConfigError for shapes gem5 cannot build; nothing has been
    created on disk at that point.
    """
    if not TOPOLOGY_RE.fullmatch(config.topology):
        raise ConfigError(f"invalid topology name: {config.topology!r}")
    if not CLOCK_RE.fullmatch(config.clock):
        raise ConfigError(f"invalid clock: {config.clock!r}")
    if config.rows < 1:
        raise ConfigError(f"row count must be >= 1, got {config.rows}")
    if config.concentration < 1:
        raise ConfigError(f"concentration factor must be >= 1, got {config.concentration}")

    num_dirs = min(config.cpus // config.concentration, MAX_DIRS)

    if config.topology == "HierarchicalRing":
        if config.cpus > HRING_MAX_CPUS:
            raise ConfigError(
                f"HierarchicalRing supports at most {HRING_MAX_CPUS} cores, got {config.cpus}"
            )
        if config.rows > HRING_ROW_THRESHOLD:
            num_dirs = config.rows

    num_dirs = min(num_dirs, config.cpus, MAX_DIRS)

    if config.concentration > 1:
        cols = config.cpus // config.rows // config.concentration
        conc_flags = f"--concentration-factor={config.concentration}"
    else:
        cols = config.cpus // config.rows
        conc_flags = ""

    return Derived(
        num_dirs=num_dirs,
        cols=cols,
        escape_vc=config.topology == "Ring",
        conc_flags=conc_flags,
    )


def _flag(environ, name, default=False):
    val = environ.get(name)
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    gem5_bin: str
    se_config: str
    fft_bin: str
    out_root: str
    stats_cmd: list = field(default_factory=list)
    diagram_cmd: list = field(default_factory=list)
    dsent_cmd: list = field(default_factory=list)
    run_dsent: bool = False
    quiet_stdout: bool = False
    quiet_stderr: bool = False
    sim_type_var: str = "M5_SIM_TYPE"
    sim_type: str = "FFT"


def load_settings(environ=None):
    """Build Settings from the environment (os.environ by default)."""
    if environ is None:
        environ = os.environ
    # helpers default to this package's own entry points, run with the current interpreter
    stats_default = f"{shlex.quote(sys.executable)} -m gem5fft.stats"
    diagram_default = f"{shlex.quote(sys.executable)} -m gem5fft.diagram"
    dsent_default = f"{shlex.quote(sys.executable)} {shlex.quote(expanduser('~/dsent/run_dsent.py'))}"
    return Settings(
        gem5_bin=environ.get("GEM5_BIN", expanduser("~/gem5/build/X86/gem5.opt")),
        se_config=environ.get("GEM5_SE_CONFIG", expanduser("~/gem5/configs/example/se.py")),
        fft_bin=environ.get("FFT_BIN", expanduser("~/gem5/benchmarks/splash2/FFT")),
        out_root=environ.get("OUT_ROOT", "results/fft"),
        stats_cmd=shlex.split(environ.get("STATS_CMD", stats_default)),
        diagram_cmd=shlex.split(environ.get("DIAGRAM_CMD", diagram_default)),
        dsent_cmd=shlex.split(environ.get("DSENT_CMD", dsent_default)),
        run_dsent=_flag(environ, "RUN_DSENT"),
        quiet_stdout=_flag(environ, "GEM5_QUIET_STDOUT"),
        quiet_stderr=_flag(environ, "GEM5_QUIET_STDERR"),
        sim_type_var=environ.get("SIM_TYPE_VAR", "M5_SIM_TYPE"),
        sim_type=environ.get("SIM_TYPE", "FFT"),
    )
