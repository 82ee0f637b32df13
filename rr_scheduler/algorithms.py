from __future__ import annotations

import numbers
from collections import deque
from typing import Deque, List, Optional, Sequence

from .errors import EmptyInput, InvalidProcess, InvalidQuantum
from .metrics import derive_run_result
from .models import Number, Process, RunResult, TimelineSegment


def _prepare(processes: Sequence[Process]) -> List[Process]:
    """
    Validate the workload and return it sorted by arrival time.

    ``sorted`` is stable, so processes arriving together keep input order.
    """
    if not processes:
        raise EmptyInput("At least one process is required")

    seen: set[int] = set()
    for p in processes:
        if p.id in seen:
            raise InvalidProcess(f"Duplicate process id {p.id}")
        seen.add(p.id)

    return sorted(processes, key=lambda p: p.arrival_time)


def simulate_fcfs(processes: Sequence[Process]) -> RunResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.
    """
    processes_sorted = _prepare(processes)

    time: Number = 0
    timeline: List[TimelineSegment] = []
    completion_times: List[Number] = []
    response_times: List[Number] = []

    for p in processes_sorted:
        if time < p.arrival_time:
            time = p.arrival_time

        start_time = time
        time = start_time + p.burst_time

        timeline.append(TimelineSegment(process_id=p.id, start=start_time, end=time))
        completion_times.append(time)
        response_times.append(start_time - p.arrival_time)  # equals waiting in FCFS

    return derive_run_result("FCFS", None, processes_sorted, completion_times, response_times, timeline)


def simulate_round_robin(processes: Sequence[Process], quantum: Number) -> RunResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Processes that arrive during a slice are queued ahead of the process
    preempted at the end of that slice. When the ready queue drains while
    processes are still to arrive, the clock jumps to the next arrival
    without producing an idle segment.
    """
    if isinstance(quantum, bool) or not isinstance(quantum, numbers.Real) or not quantum >= 1:
        raise InvalidQuantum(f"Round Robin requires a quantum >= 1, got {quantum!r}")

    procs = _prepare(processes)
    n = len(procs)

    remaining: List[Number] = [p.burst_time for p in procs]
    completion: List[Optional[Number]] = [None] * n
    first_response: List[Optional[Number]] = [None] * n
    visited: List[bool] = [False] * n
    ready: Deque[int] = deque(maxlen=n)
    timeline: List[TimelineSegment] = []

    time: Number = procs[0].arrival_time

    def enqueue_new_arrivals(current_time: Number) -> None:
        for j, p in enumerate(procs):
            if not visited[j] and p.arrival_time <= current_time:
                ready.append(j)
                visited[j] = True

    enqueue_new_arrivals(time)

    while ready:
        i = ready.popleft()
        p = procs[i]

        if first_response[i] is None:
            first_response[i] = time - p.arrival_time

        run_time = min(remaining[i], quantum)
        slice_start = time
        time = slice_start + run_time
        timeline.append(TimelineSegment(process_id=p.id, start=slice_start, end=time))
        remaining[i] -= run_time

        enqueue_new_arrivals(time)

        if remaining[i] > 0:
            ready.append(i)
        else:
            completion[i] = time

        if not ready:
            # Idle gap: jump to the earliest process that has not arrived yet.
            for k in range(n):
                if not visited[k]:
                    time = max(time, procs[k].arrival_time)
                    ready.append(k)
                    visited[k] = True
                    break

    return derive_run_result("Round Robin", quantum, procs, completion, first_response, timeline)


ALGORITHMS = {
    "rr": simulate_round_robin,
    "fcfs": simulate_fcfs,
}


def run_algorithm(name: str, processes: Sequence[Process], quantum: Optional[Number] = None) -> RunResult:
    """
    Dispatch to the requested algorithm. Quantum is only used by round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{name}' (use {', '.join(ALGORITHMS)})")

    if name == "rr":
        return simulate_round_robin(processes, quantum)
    return simulate_fcfs(processes)
