import csv

import pytest

from gem5fft import stats

STATS_TXT = """
---------- Begin Simulation Statistics ----------
simSeconds                                   0.001234                       # Number of seconds simulated (Second)
simTicks                                   1234000000                       # Number of ticks simulated (Tick)
simInsts                                     5000000                       # Number of instructions simulated (Count)
system.ruby.network.packets_injected::total       42000                     # (Unspecified)
system.ruby.network.average_packet_latency    23.500000                     # (Unspecified)
system.ruby.network.average_flit_latency      21.250000                     # (Unspecified)
system.ruby.network.average_hops               2.100000                     # (Unspecified)
system.cpu0.numCycles                        nan                            # nan is skipped
---------- End Simulation Statistics   ----------
"""


def write_stats(run_dir, text=STATS_TXT):
    run_dir.mkdir(parents=True, exist_ok=True)
    (run_dir / "stats.txt").write_text(text)
    return run_dir


def test_parse_stats_file(tmp_path):
    run = write_stats(tmp_path / "run")
    parsed = stats.parse_stats_file(run / "stats.txt")
    assert parsed["simTicks"] == 1234000000
    assert parsed["system.ruby.network.average_packet_latency"] == pytest.approx(23.5)
    assert "system.cpu0.numCycles" not in parsed


def test_later_dump_wins(tmp_path):
    run = write_stats(tmp_path / "run", STATS_TXT + "simTicks 99\n")
    assert stats.parse_stats_file(run / "stats.txt")["simTicks"] == 99


def test_extract_metrics_prefers_first_key():
    m = stats.extract_metrics({"sim_ticks": 5.0, "simTicks": 10.0})
    assert m["sim_ticks"] == 10.0
    assert m["avg_packet_latency"] is None


def test_summarize_writes_csv(tmp_path):
    run = write_stats(tmp_path / "run")
    assert stats.summarize(run) == "ok"
    with open(run / stats.SUMMARY_NAME) as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    assert rows[0]["status"] == "ok"
    assert float(rows[0]["packets_injected"]) == 42000
    assert float(rows[0]["avg_flit_latency"]) == pytest.approx(21.25)


def test_summarize_missing_stats(tmp_path):
    run = tmp_path / "run"
    run.mkdir()
    assert stats.main([str(run)]) == 1
    assert (run / stats.SUMMARY_NAME).exists()


def test_summarize_missing_dir(tmp_path):
    with pytest.raises(SystemExit):
        stats.summarize(tmp_path / "nope")


def test_main_usage(capsys):
    assert stats.main([]) == 1
    assert "Usage" in capsys.readouterr().out
