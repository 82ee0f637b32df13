import csv
from pathlib import Path

import pytest

from rr_scheduler.errors import InvalidProcess
from rr_scheduler.models import Process, SweepPoint
from rr_scheduler.presets import PRESETS, get_preset, make_processes, random_workload
from rr_scheduler.workload_io import load_workload, parse_number, write_sweep_csv


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"id":1,"arrival_time":0,"burst_time":3},'
                 '{"id":2,"arrival_time":1.5,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0] == Process(1, 0, 3)
    assert procs[1].arrival_time == 1.5


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("id,arrival_time,burst_time\n1,0,3\n2,1,2.0\n")
    procs = load_workload(p)
    assert [pr.id for pr in procs] == [1, 2]
    assert procs[1].burst_time == 2
    assert isinstance(procs[1].burst_time, int)


def test_load_rejects_bad_entries(tmp_path: Path):
    missing = tmp_path / "missing.csv"
    missing.write_text("id,arrival_time\n1,0\n")
    with pytest.raises(InvalidProcess):
        load_workload(missing)

    bad_number = tmp_path / "bad.json"
    bad_number.write_text('[{"id":1,"arrival_time":"soon","burst_time":3}]')
    with pytest.raises(InvalidProcess):
        load_workload(bad_number)

    negative = tmp_path / "neg.json"
    negative.write_text('[{"id":1,"arrival_time":0,"burst_time":-3}]')
    with pytest.raises(InvalidProcess):
        load_workload(negative)


def test_load_rejects_non_list_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('{"id":1,"arrival_time":0,"burst_time":3}')
    with pytest.raises(ValueError):
        load_workload(p)


def test_load_rejects_unknown_suffix(tmp_path: Path):
    p = tmp_path / "w.txt"
    p.write_text("")
    with pytest.raises(ValueError):
        load_workload(p)


def test_parse_number():
    assert parse_number("4") == 4 and isinstance(parse_number("4"), int)
    assert parse_number(" 2.5 ") == 2.5
    assert parse_number(3.0) == 3.0
    with pytest.raises(ValueError):
        parse_number("")


def test_write_sweep_csv(tmp_path: Path):
    points = [SweepPoint(1, 10.0, 15.5, 20), SweepPoint(2, 9.75, 15.25, 12)]
    out = write_sweep_csv(points, tmp_path / "sweep.csv")
    with out.open(newline="") as f:
        rows = list(csv.reader(f))
    assert rows == [
        ["Quantum", "Avg WT", "Avg TAT", "Context Switches"],
        ["1", "10.00", "15.50", "20"],
        ["2", "9.75", "15.25", "12"],
    ]


def test_presets():
    procs = get_preset("default")
    assert [(p.id, p.arrival_time, p.burst_time) for p in procs] == [(1, 0, 5), (2, 1, 3), (3, 2, 8), (4, 3, 6)]
    assert get_preset("IO-Bound") == make_processes(PRESETS["io-bound"])
    with pytest.raises(ValueError):
        get_preset("nope")


def test_random_workload_seeded():
    a = random_workload(6, seed=42)
    assert a == random_workload(6, seed=42)
    assert [p.id for p in a] == list(range(1, 7))
    assert all(0 <= p.arrival_time <= 5 and 1 <= p.burst_time <= 9 for p in a)
