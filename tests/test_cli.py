import csv
from pathlib import Path

from rr_scheduler.cli import main


def test_run_default_preset(capsys):
    assert main(["run"]) == 0
    out = capsys.readouterr().out
    assert "Round Robin" in out
    assert "9.25" in out
    assert "14.75" in out


def test_run_fcfs_from_file(tmp_path: Path, capsys):
    p = tmp_path / "w.json"
    p.write_text('[{"id":1,"arrival_time":0,"burst_time":3},{"id":2,"arrival_time":1,"burst_time":2}]')
    assert main(["run", "-a", "fcfs", "-w", str(p)]) == 0
    assert "FCFS" in capsys.readouterr().out


def test_compare_rr_vs_fcfs(capsys):
    assert main(["compare", "-p", "default", "-q", "4"]) == 0
    out = capsys.readouterr().out
    assert "Round Robin vs FCFS" in out
    assert "5.75" in out


def test_compare_two_quanta(capsys):
    assert main(["compare", "--quanta", "2", "6"]) == 0
    assert "quantum 2 vs 6" in capsys.readouterr().out


def test_analyze_with_csv_export(tmp_path: Path, capsys):
    out_csv = tmp_path / "sweep.csv"
    assert main(["analyze", "-p", "default", "--max", "9", "--sort", "avg_waiting_time", "--csv", str(out_csv)]) == 0
    out = capsys.readouterr().out
    assert "Optimal quantum:" in out
    assert "Adaptive quantum" in out

    with out_csv.open(newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Quantum", "Avg WT", "Avg TAT", "Context Switches"]
    assert len(rows) == 10
    assert rows[1][0] == "8"


def test_analyze_random_workload(capsys):
    assert main(["analyze", "--random", "4", "--seed", "7", "--show-min", "2", "--show-max", "3"]) == 0
    assert "Quantum analysis" in capsys.readouterr().out


def test_invalid_quantum_reports_error(capsys):
    assert main(["run", "-q", "0"]) == 2
    assert "Error" in capsys.readouterr().out


def test_missing_workload_reports_error(tmp_path: Path, capsys):
    assert main(["run", "-w", str(tmp_path / "absent.json")]) == 2
    assert "Error" in capsys.readouterr().out


def test_bad_sweep_range_reports_error(capsys):
    assert main(["analyze", "--min", "5", "--max", "2"]) == 2
    assert "Error" in capsys.readouterr().out


def test_verbose_flag_runs(capsys):
    assert main(["-v", "run", "-a", "fcfs", "-p", "io-bound"]) == 0
    assert "FCFS" in capsys.readouterr().out


def test_run_plain_gantt(capsys):
    assert main(["run", "--plain"]) == 0
    out = capsys.readouterr().out
    assert "Gantt Chart:" in out
    assert "|" + "=" * 22 + "|" in out


def test_compare_plain_gantt(capsys):
    assert main(["compare", "-p", "small-mix", "--plain"]) == 0
    assert capsys.readouterr().out.count("Gantt Chart:") == 2
