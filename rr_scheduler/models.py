from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .errors import InvalidProcess

Number = Union[int, float]


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class Process:
    """
    One process of a workload. Never mutated by the simulators.
    """

    id: int
    arrival_time: Number
    burst_time: Number

    def __post_init__(self) -> None:
        if not isinstance(self.id, numbers.Integral) or isinstance(self.id, bool) or self.id < 1:
            raise InvalidProcess(f"Process id must be a positive integer, got {self.id!r}")
        if not _is_number(self.arrival_time) or self.arrival_time < 0:
            raise InvalidProcess(f"P{self.id}: arrival time must be >= 0, got {self.arrival_time!r}")
        if not _is_number(self.burst_time) or self.burst_time <= 0:
            raise InvalidProcess(f"P{self.id}: burst time must be > 0, got {self.burst_time!r}")

    @property
    def label(self) -> str:
        return f"P{self.id}"


@dataclass(frozen=True)
class TimelineSegment:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    process_id: int
    start: Number
    end: Number

    @property
    def duration(self) -> Number:
        return self.end - self.start

    @property
    def label(self) -> str:
        return f"P{self.process_id}"


@dataclass(frozen=True)
class ProcessResult:
    id: int
    arrival_time: Number
    burst_time: Number
    completion_time: Number
    turnaround_time: Number
    waiting_time: Number
    response_time: Number


@dataclass(frozen=True)
class RunResult:
    algorithm: str
    quantum: Optional[Number]
    processes: Tuple[ProcessResult, ...]
    timeline: Tuple[TimelineSegment, ...]
    context_switches: int
    avg_turnaround_time: float
    avg_waiting_time: float
    avg_response_time: float
    cpu_utilization_percent: str
    throughput: str
    total_time: Number
    cpu_busy_time: Number


@dataclass(frozen=True)
class SweepPoint:
    quantum: int
    avg_waiting_time: float
    avg_turnaround_time: float
    context_switches: int


@dataclass(frozen=True)
class QuantumAnalysis:
    """
    Sweep table together with the best quantum found by the sweep and the
    cheap median-based estimate, for side-by-side comparison.
    """

    points: Tuple[SweepPoint, ...]
    optimal: SweepPoint
    adaptive_quantum: int
