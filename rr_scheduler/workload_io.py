from __future__ import annotations

import csv
import json
import numbers
from pathlib import Path
from typing import Iterable, List, Sequence

from .errors import InvalidProcess
from .models import Number, Process, SweepPoint


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise ValueError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        raw = json.load(f)

    if isinstance(raw, (str, dict)) or not isinstance(raw, Iterable):
        raise ValueError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def parse_number(value) -> Number:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return value
    number = float(str(value).strip())
    return int(number) if number.is_integer() else number


def _process_from_mapping(mapping) -> Process:
    try:
        pid = int(mapping["id"])
        arrival_time = parse_number(mapping["arrival_time"])
        burst_time = parse_number(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidProcess(f"Invalid process entry: {mapping!r}") from exc

    return Process(id=pid, arrival_time=arrival_time, burst_time=burst_time)


def write_sweep_csv(points: Sequence[SweepPoint], path: str | Path) -> Path:
    """
    Export a quantum sweep table as CSV.
    """
    path = Path(path)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["Quantum", "Avg WT", "Avg TAT", "Context Switches"])
        for p in points:
            writer.writerow(
                [
                    p.quantum,
                    f"{float(p.avg_waiting_time):.2f}",
                    f"{float(p.avg_turnaround_time):.2f}",
                    p.context_switches,
                ]
            )
    return path
