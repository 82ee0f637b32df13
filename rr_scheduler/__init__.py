"""
Round-robin scheduling simulator package.

Simulates preemptive round-robin and first-come first-served CPU
scheduling, derives per-process and system metrics, and sweeps the
round-robin time quantum to find the one minimizing average waiting time.
"""

from .algorithms import simulate_fcfs, simulate_round_robin
from .errors import EmptyInput, InvalidProcess, InvalidQuantum, InvalidRange, SchedulerError
from .models import Process, ProcessResult, RunResult, SweepPoint, TimelineSegment
from .sweep import adaptive_quantum, analyze_quantum_range

__all__ = [
    "cli",
    "simulate_round_robin",
    "simulate_fcfs",
    "analyze_quantum_range",
    "adaptive_quantum",
    "Process",
    "ProcessResult",
    "RunResult",
    "SweepPoint",
    "TimelineSegment",
    "SchedulerError",
    "EmptyInput",
    "InvalidQuantum",
    "InvalidRange",
    "InvalidProcess",
]
