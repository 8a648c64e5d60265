import subprocess
from types import SimpleNamespace

import pytest

from gem5fft.config import load_settings


class FakeRun:
    """Stand-in for subprocess.run that records argv/kwargs and returns fixed statuses."""

    def __init__(self, returncodes=None, default=0):
        self.calls = []
        self.returncodes = list(returncodes or [])
        self.default = default

    def __call__(self, cmd, **kwargs):
        self.calls.append((list(cmd), kwargs))
        rc = self.returncodes.pop(0) if self.returncodes else self.default
        return SimpleNamespace(returncode=rc)

    @property
    def argvs(self):
        return [c for c, _ in self.calls]


@pytest.fixture
def fake_run(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


@pytest.fixture
def out_root(tmp_path):
    return tmp_path / "results"


@pytest.fixture
def settings(out_root):
    return load_settings({
        "GEM5_BIN": "/opt/gem5/gem5.opt",
        "GEM5_SE_CONFIG": "/opt/gem5/configs/example/se.py",
        "FFT_BIN": "/opt/splash2/FFT",
        "OUT_ROOT": str(out_root),
        "STATS_CMD": "extract-stats",
        "DIAGRAM_CMD": "tex2png",
        "DSENT_CMD": "run-dsent",
    })


@pytest.fixture
def env_settings(monkeypatch, out_root):
    """Same settings, exported through the environment for the CLI."""
    for k, v in {
        "GEM5_BIN": "/opt/gem5/gem5.opt",
        "OUT_ROOT": str(out_root),
        "STATS_CMD": "extract-stats",
        "DIAGRAM_CMD": "tex2png",
    }.items():
        monkeypatch.setenv(k, v)
    monkeypatch.delenv("RUN_DSENT", raising=False)
    return out_root
