import pandas as pd
import pytest

from gem5fft import plots


@pytest.fixture
def summary_csv(tmp_path):
    rows = []
    for topo, base in [("Mesh_XY", 1.0e9), ("Ring", 1.4e9)]:
        for cpus in (16, 64):
            rows.append({"experiment": f"FFT_m18_{topo}_{cpus}c", "topology": topo, "cpus": cpus,
                         "sim_ticks": base / cpus, "avg_packet_latency": 10 + cpus / 8,
                         "status": "ok"})
    rows.append({"experiment": "broken", "topology": "Ring", "cpus": 16,
                 "sim_ticks": None, "avg_packet_latency": None, "status": "empty-or-missing"})
    path = tmp_path / "summary.csv"
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def test_load_keeps_successful_runs(summary_csv):
    df = plots.load(str(summary_csv))
    assert len(df) == 4
    assert df["sim_ticks"].dtype.kind == "f"


def test_plot_all(summary_csv, tmp_path):
    outdir = tmp_path / "plots"
    saved = plots.plot_all(str(summary_csv), str(outdir))
    assert sorted(p.split("/")[-1] for p in saved) == [
        "packet_latency_by_topology.png", "sim_ticks_vs_cores.png"]
    for p in saved:
        assert (outdir / p.split("/")[-1]).stat().st_size > 0


def test_missing_input(tmp_path):
    with pytest.raises(SystemExit):
        plots.load(str(tmp_path / "nope.csv"))
