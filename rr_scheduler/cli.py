from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .algorithms import ALGORITHMS, run_algorithm, simulate_fcfs, simulate_round_robin
from .gantt import build_rich_gantt, render_gantt
from .models import Process, RunResult, SweepPoint
from .presets import PRESETS, get_preset, random_workload
from .sweep import SORT_KEYS, analyze_quanta, filter_sweep_points, sort_sweep_points
from .workload_io import load_workload, parse_number, write_sweep_csv

logger = logging.getLogger(__name__)

DEFAULT_QUANTUM = 4


def _add_workload_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--workload",
        "-w",
        help="Path to JSON or CSV workload file.",
    )
    source.add_argument(
        "--preset",
        "-p",
        choices=sorted(PRESETS),
        help="Built-in workload to use (default: default).",
    )
    source.add_argument(
        "--random",
        type=int,
        metavar="N",
        help="Generate a random workload of N processes.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --random.",
    )


def _add_plain_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--plain",
        action="store_true",
        help="Draw the Gantt chart as plain text instead of colored blocks.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rr-scheduler",
        description="Round Robin / FCFS scheduling simulator with time quantum analysis.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run one scheduling algorithm on a workload.")
    run_parser.add_argument(
        "--algorithm",
        "-a",
        default="rr",
        choices=sorted(ALGORITHMS),
        help="Algorithm to use (default: rr).",
    )
    run_parser.add_argument(
        "--quantum",
        "-q",
        type=parse_number,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    _add_workload_args(run_parser)
    _add_plain_arg(run_parser)

    compare_parser = subparsers.add_parser(
        "compare",
        help="Compare round-robin against FCFS, or two round-robin quanta.",
    )
    compare_parser.add_argument(
        "--quantum",
        "-q",
        type=parse_number,
        default=DEFAULT_QUANTUM,
        help=f"Time quantum for round-robin (default: {DEFAULT_QUANTUM}).",
    )
    compare_parser.add_argument(
        "--quanta",
        nargs=2,
        type=parse_number,
        metavar=("Q1", "Q2"),
        default=None,
        help="Compare two round-robin quanta instead of RR vs FCFS.",
    )
    _add_workload_args(compare_parser)
    _add_plain_arg(compare_parser)

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Sweep the round-robin quantum and report the best one.",
    )
    analyze_parser.add_argument("--min", dest="q_min", type=int, default=None, help="Smallest quantum to try.")
    analyze_parser.add_argument("--max", dest="q_max", type=int, default=None, help="Largest quantum to try.")
    analyze_parser.add_argument(
        "--sort",
        choices=SORT_KEYS,
        default="quantum",
        help="Column to sort the table by (default: quantum).",
    )
    analyze_parser.add_argument("--desc", action="store_true", help="Sort in descending order.")
    analyze_parser.add_argument(
        "--show-min",
        type=int,
        default=None,
        help="Only display quanta >= this value.",
    )
    analyze_parser.add_argument(
        "--show-max",
        type=int,
        default=None,
        help="Only display quanta <= this value.",
    )
    analyze_parser.add_argument("--csv", type=Path, default=None, help="Export the displayed table to CSV.")
    _add_workload_args(analyze_parser)

    return parser


def _resolve_workload(args: argparse.Namespace) -> List[Process]:
    if args.workload:
        logger.debug("Loading workload from %s", args.workload)
        return load_workload(Path(args.workload))
    if args.random is not None:
        logger.debug("Generating random workload of %d processes (seed=%s)", args.random, args.seed)
        return random_workload(args.random, seed=args.seed)
    name = args.preset or "default"
    logger.debug("Using preset workload '%s'", name)
    return get_preset(name)


def _fmt(value) -> str:
    return f"{value:g}" if isinstance(value, float) else str(value)


def _print_gantt(result: RunResult, console: Console, plain: bool = False) -> None:
    if plain:
        console.print(render_gantt(result.timeline), markup=False, highlight=False)
        return

    panel, time_marks = build_rich_gantt(result.timeline)
    console.print(panel)
    if time_marks:
        console.print(time_marks)


def _print_result(result: RunResult, console: Console, plain: bool = False) -> None:
    console.print(f"[bold]Algorithm:[/bold] {result.algorithm}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {_fmt(result.quantum)}")

    console.print()

    _print_gantt(result, console, plain)

    console.print()

    headers = ["PID", "Arrive", "Burst", "Complete", "Turnaround", "Wait", "Response"]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        proc_table.add_column(h, justify="center" if h == "PID" else "right")

    for p in result.processes:
        proc_table.add_row(
            f"P{p.id}",
            _fmt(p.arrival_time),
            _fmt(p.burst_time),
            _fmt(p.completion_time),
            _fmt(p.turnaround_time),
            _fmt(p.waiting_time),
            _fmt(p.response_time),
        )

    console.print(proc_table)
    console.print()

    sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
    sys_table.add_column("Metric")
    sys_table.add_column("Value", justify="right")

    sys_table.add_row("Avg waiting", f"{result.avg_waiting_time:.2f}")
    sys_table.add_row("Avg turnaround", f"{result.avg_turnaround_time:.2f}")
    sys_table.add_row("Avg response", f"{result.avg_response_time:.2f}")
    sys_table.add_row("Context switches", str(result.context_switches))
    sys_table.add_row("CPU utilization", f"{result.cpu_utilization_percent}%")
    sys_table.add_row("Throughput (proc/time)", result.throughput)
    sys_table.add_row("Total time", _fmt(result.total_time))

    console.print(sys_table)


def _print_comparison(results: Sequence[RunResult], title: str, console: Console, plain: bool = False) -> None:
    summary_table = Table(title=title, box=box.SIMPLE_HEAVY)
    summary_table.add_column("Algorithm")
    summary_table.add_column("Quantum", justify="right")
    summary_table.add_column("Avg waiting", justify="right")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Context switches", justify="right")
    summary_table.add_column("CPU util", justify="right")

    for result in results:
        summary_table.add_row(
            result.algorithm,
            "" if result.quantum is None else _fmt(result.quantum),
            f"{result.avg_waiting_time:.2f}",
            f"{result.avg_turnaround_time:.2f}",
            str(result.context_switches),
            f"{result.cpu_utilization_percent}%",
        )

    console.print(summary_table)
    for result in results:
        _print_gantt(result, console, plain)


def _print_sweep(points: Sequence[SweepPoint], optimal: SweepPoint, adaptive: int, console: Console) -> None:
    table = Table(title="Quantum analysis", box=box.SIMPLE_HEAVY)
    table.add_column("Quantum", justify="right")
    table.add_column("Avg waiting", justify="right")
    table.add_column("Avg turnaround", justify="right")
    table.add_column("Context switches", justify="right")

    for p in points:
        style = "bold green" if p.quantum == optimal.quantum else None
        table.add_row(
            str(p.quantum),
            f"{p.avg_waiting_time:.2f}",
            f"{p.avg_turnaround_time:.2f}",
            str(p.context_switches),
            style=style,
        )

    console.print(table)
    console.print(
        f"[bold]Optimal quantum:[/bold] {optimal.quantum} "
        f"(avg waiting {optimal.avg_waiting_time:.2f})"
    )
    console.print(f"[bold]Adaptive quantum (0.8 x median burst):[/bold] {adaptive}")


def _run(args: argparse.Namespace, console: Console) -> int:
    processes = _resolve_workload(args)

    if args.command == "run":
        result = run_algorithm(args.algorithm, processes, quantum=args.quantum)
        _print_result(result, console, plain=args.plain)
        return 0

    if args.command == "compare":
        if args.quanta:
            q1, q2 = args.quanta
            results = [simulate_round_robin(processes, q1), simulate_round_robin(processes, q2)]
            title = f"Round Robin: quantum {_fmt(q1)} vs {_fmt(q2)}"
        else:
            results = [simulate_round_robin(processes, args.quantum), simulate_fcfs(processes)]
            title = "Round Robin vs FCFS"
        _print_comparison(results, title, console, plain=args.plain)
        return 0

    if args.command == "analyze":
        analysis = analyze_quanta(processes, args.q_min, args.q_max)
        points = filter_sweep_points(analysis.points, args.show_min, args.show_max)
        points = sort_sweep_points(points, args.sort, descending=args.desc)
        _print_sweep(points, analysis.optimal, analysis.adaptive_quantum, console)
        if args.csv is not None:
            write_sweep_csv(points, args.csv)
            console.print(f"[dim]Wrote {len(points)} rows to {args.csv}[/dim]")
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )

    console = Console()

    try:
        return _run(args, console)
    except (ValueError, OSError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        console.print(f"Error: {exc}", style="red", markup=False)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
