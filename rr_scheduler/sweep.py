from __future__ import annotations

import math
import numbers
import statistics
from typing import List, Optional, Sequence, Tuple

from .algorithms import simulate_round_robin
from .errors import EmptyInput, InvalidRange
from .models import Process, QuantumAnalysis, SweepPoint

SORT_KEYS = ("quantum", "avg_waiting_time", "avg_turnaround_time", "context_switches")


def default_quantum_range(processes: Sequence[Process]) -> Tuple[int, int]:
    """
    Range swept when the caller gives no bounds: 1 up to a little past the
    longest burst, where every quantum already behaves like FCFS.
    """
    if not processes:
        raise EmptyInput("At least one process is required")
    max_burst = math.ceil(max(p.burst_time for p in processes))
    return 1, max(2, max_burst + 3)


def _check_bound(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidRange(f"{name} must be an integer, got {value!r}")


def analyze_quantum_range(
    processes: Sequence[Process],
    q_min: Optional[int] = None,
    q_max: Optional[int] = None,
) -> List[SweepPoint]:
    """
    Run round-robin once per integer quantum in ``[q_min, q_max]``.

    Missing bounds are taken from :func:`default_quantum_range`. Points are
    returned in ascending quantum order.
    """
    default_min, default_max = default_quantum_range(processes)
    q_min = default_min if q_min is None else q_min
    q_max = default_max if q_max is None else q_max

    _check_bound("q_min", q_min)
    _check_bound("q_max", q_max)
    if q_min < 1:
        raise InvalidRange(f"q_min must be >= 1, got {q_min}")
    if q_max < q_min:
        raise InvalidRange(f"q_max ({q_max}) must not be below q_min ({q_min})")

    points: List[SweepPoint] = []
    for quantum in range(int(q_min), int(q_max) + 1):
        result = simulate_round_robin(processes, quantum)
        points.append(
            SweepPoint(
                quantum=quantum,
                avg_waiting_time=result.avg_waiting_time,
                avg_turnaround_time=result.avg_turnaround_time,
                context_switches=result.context_switches,
            )
        )
    return points


def optimal_quantum(points: Sequence[SweepPoint]) -> SweepPoint:
    """
    Point with the lowest average waiting time; the smallest quantum wins ties.

    Waiting time is not convex in the quantum, so every point is inspected.
    """
    if not points:
        raise EmptyInput("No sweep points to choose from")

    best = None
    for point in sorted(points, key=lambda p: p.quantum):
        if best is None or point.avg_waiting_time < best.avg_waiting_time:
            best = point
    return best


def adaptive_quantum(processes: Sequence[Process]) -> int:
    """
    Heuristic quantum of 80% of the median burst time, at least 1.
    """
    if not processes:
        raise EmptyInput("At least one process is required")
    median = statistics.median(p.burst_time for p in processes)
    return max(1, math.floor(median * 0.8))


def analyze_quanta(
    processes: Sequence[Process],
    q_min: Optional[int] = None,
    q_max: Optional[int] = None,
) -> QuantumAnalysis:
    points = analyze_quantum_range(processes, q_min, q_max)
    return QuantumAnalysis(
        points=tuple(points),
        optimal=optimal_quantum(points),
        adaptive_quantum=adaptive_quantum(processes),
    )


def filter_sweep_points(
    points: Sequence[SweepPoint],
    q_min: Optional[int] = None,
    q_max: Optional[int] = None,
) -> List[SweepPoint]:
    """
    Keep points whose quantum falls in the inclusive window; either bound may be omitted.
    """
    return [
        p
        for p in points
        if (q_min is None or p.quantum >= q_min) and (q_max is None or p.quantum <= q_max)
    ]


def sort_sweep_points(points: Sequence[SweepPoint], key: str = "quantum", descending: bool = False) -> List[SweepPoint]:
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key '{key}' (use {', '.join(SORT_KEYS)})")
    return sorted(points, key=lambda p: getattr(p, key), reverse=descending)
