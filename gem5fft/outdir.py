import os
import re

from .errors import OutputDirExhausted

MAX_SUFFIX = 99

# inverse of base_name(); used by collect to recover parameters from folder names
NAME_RE = re.compile(
    r"^FFT_m(?P<problem_size>\d+)_(?P<topology>.+)_(?P<cpus>\d+)c_"
    r"(?P<rows>\d+)x(?P<cols>\d+)(?:_c(?P<concentration>\d+))?_(?P<clock>[^_]+?)"
    r"(?:-(?P<suffix>\d+))?$"
)


def base_name(config, derived):
    """Folder name encoding problem size, topology, core count, grid shape, concentration and clock."""
    conc = f"_c{config.concentration}" if config.concentration > 1 else ""
    return (
        f"FFT_m{config.problem_size}_{config.topology}_{config.cpus}c"
        f"_{config.rows}x{derived.cols}{conc}_{config.clock}"
    )


def unique_outdir(root, name):
    """Return root/name, or the first free root/name-N for N in 2..99."""
    candidate = os.path.join(root, name)
    if not os.path.exists(candidate):
        return candidate
    for n in range(2, MAX_SUFFIX + 1):
        candidate = os.path.join(root, f"{name}-{n}")
        if not os.path.exists(candidate):
            return candidate
    raise OutputDirExhausted(
        f"all output directories {name}, {name}-2 .. {name}-{MAX_SUFFIX} already exist under {root}"
    )


def reserve(path):
    os.makedirs(path, exist_ok=False)
    return path


def parse_name(name):
    """Parse a run folder name back into its parameters (None if it does not match)."""
    m = NAME_RE.match(name)
    if not m:
        return None
    res = m.groupdict()
    for k in ("problem_size", "cpus", "rows", "cols", "suffix"):
        if res[k] is not None:
            res[k] = int(res[k])
    res["concentration"] = int(res["concentration"]) if res["concentration"] else 1
    return res
