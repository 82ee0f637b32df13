from __future__ import annotations

from typing import List, Optional, Sequence

from .models import Number, Process, ProcessResult, RunResult, TimelineSegment


def count_context_switches(timeline: Sequence[TimelineSegment]) -> int:
    """
    Count adjacent timeline segments that belong to different processes.

    Segments are never merged, so every id change between neighbours counts.
    """
    return sum(
        1
        for prev, curr in zip(timeline, timeline[1:])
        if prev.process_id != curr.process_id
    )


def format_utilization(total_burst: Number, total_time: Number) -> str:
    if not total_time:
        return "0.00"
    return f"{float(100 * total_burst / total_time):.2f}"


def format_throughput(count: int, total_time: Number) -> str:
    if not total_time:
        return "0.000"
    return f"{float(count / total_time):.3f}"


def _mean(values: Sequence[Number]) -> float:
    return sum(values) / len(values) if values else 0


def derive_run_result(
    algorithm: str,
    quantum: Optional[Number],
    processes: Sequence[Process],
    completion_times: Sequence[Number],
    response_times: Sequence[Number],
    timeline: Sequence[TimelineSegment],
) -> RunResult:
    """
    Build the full result record for one simulation.

    ``processes``, ``completion_times`` and ``response_times`` are parallel
    sequences in the simulator's working (arrival-sorted) order.
    """
    results: List[ProcessResult] = []
    for p, completion_time, response_time in zip(processes, completion_times, response_times):
        turnaround_time = completion_time - p.arrival_time
        results.append(
            ProcessResult(
                id=p.id,
                arrival_time=p.arrival_time,
                burst_time=p.burst_time,
                completion_time=completion_time,
                turnaround_time=turnaround_time,
                waiting_time=turnaround_time - p.burst_time,
                response_time=response_time,
            )
        )

    n = len(results)
    total_time = timeline[-1].end if timeline else 0
    total_burst = sum(p.burst_time for p in processes)

    return RunResult(
        algorithm=algorithm,
        quantum=quantum,
        processes=tuple(sorted(results, key=lambda r: r.id)),
        timeline=tuple(timeline),
        context_switches=count_context_switches(timeline),
        avg_turnaround_time=_mean([r.turnaround_time for r in results]),
        avg_waiting_time=_mean([r.waiting_time for r in results]),
        avg_response_time=_mean([r.response_time for r in results]),
        cpu_utilization_percent=format_utilization(total_burst, total_time),
        throughput=format_throughput(n, total_time),
        total_time=total_time,
        cpu_busy_time=sum(s.duration for s in timeline),
    )

