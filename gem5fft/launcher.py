"""
Run one gem5 FFT simulation and post-process its output directory.

The output folder is reserved before gem5 starts so that back-to-back runs of
the same configuration land in FFT_..., FFT_...-2, FFT_...-3 and so on. On a
clean exit the stats extraction and diagram rendering helpers are run against
the folder (power/area modelling only when RUN_DSENT is set); on failure the
folder is removed.
"""

import os
import shutil
import subprocess

from .command import build_command, format_command
from .config import derive
from .errors import Gem5StartError, OutputDirError
from .outdir import base_name, reserve, unique_outdir


def prepare(config, settings):
    """Derive parameters and pick (but do not create) the output directory."""
    derived = derive(config)
    outdir = unique_outdir(settings.out_root, base_name(config, derived))
    return derived, outdir


def run_helper(label, cmd, outdir):
    """Run a post-processing step; its exit status is not checked."""
    full = list(cmd) + [outdir]
    print(f"[{label}] {format_command(full)}")
    try:
        subprocess.run(full)
    except OSError as e:
        print(f"WARNING: could not start {label} step: {e}")


def post_process(outdir, settings):
    run_helper("stats", settings.stats_cmd, outdir)
    run_helper("diagram", settings.diagram_cmd, outdir)
    if settings.run_dsent:
        run_helper("dsent", settings.dsent_cmd, outdir)


def launch(config, settings):
    """Run gem5 for `config`; return its exit status."""
    derived, outdir = prepare(config, settings)
    try:
        os.makedirs(settings.out_root, exist_ok=True)
        reserve(outdir)
    except OSError as e:
        raise OutputDirError(f"cannot create output directory {outdir}: {e}") from e

    cmd = build_command(config, derived, outdir, settings)
    env = dict(os.environ)
    env[settings.sim_type_var] = settings.sim_type

    print(f"Output directory: {outdir}")
    print("Running:", format_command(cmd))
    try:
        proc = subprocess.run(
            cmd,
            env=env,
            stdout=subprocess.DEVNULL if settings.quiet_stdout else None,
            stderr=subprocess.DEVNULL if settings.quiet_stderr else None,
        )
    except OSError as e:
        shutil.rmtree(outdir, ignore_errors=True)
        raise Gem5StartError(f"could not start gem5: {e}") from e
    rc = proc.returncode

    if rc == 0:
        post_process(outdir, settings)
    else:
        print(f"gem5 exited with status {rc}; removing {outdir}")
        shutil.rmtree(outdir, ignore_errors=True)
    return rc
