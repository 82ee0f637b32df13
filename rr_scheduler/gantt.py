from __future__ import annotations

from typing import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Number, TimelineSegment

PALETTE = ["red", "green", "yellow", "blue", "magenta", "cyan", "bright_red", "bright_green"]


def _cells(value: Number) -> int:
    # Fractional times are drawn at the nearest whole character.
    return int(round(value))


def _mark(value: Number) -> str:
    return f"{float(value):g}"


def process_color(process_id: int) -> str:
    return PALETTE[process_id % len(PALETTE)]


def render_gantt(segments: Sequence[TimelineSegment]) -> str:
    """
    Plain-text Gantt chart; idle gaps are drawn as dots.
    """
    if not segments:
        return "(no execution)"

    line = "|"
    labels = ""
    time_marks = "0"
    last_time: Number = 0

    for seg in segments:
        idle_gap = _cells(seg.start) - _cells(last_time)
        if idle_gap > 0:
            line += "." * idle_gap
            labels += " " * idle_gap
            time_marks += f"{_mark(seg.start):>4}"

        width = max(1, _cells(seg.end) - _cells(seg.start))
        line += "=" * width
        labels += seg.label[:width].ljust(width)
        last_time = seg.end
        time_marks += f"{_mark(last_time):>4}"

    line += "|"

    return "\n".join(["Gantt Chart:", line, labels, time_marks])


def build_rich_gantt(segments: Sequence[TimelineSegment]) -> tuple[Panel, str]:
    """
    Build a Rich Panel containing a colored Gantt chart and a string with time marks.
    """
    if not segments:
        return Panel("No execution", title="Gantt Chart"), ""

    timeline = Text()
    labels = Text()
    time_marks = "0"
    last_time: Number = 0

    for seg in segments:
        idle_gap = _cells(seg.start) - _cells(last_time)
        if idle_gap > 0:
            timeline.append(" " * idle_gap)
            labels.append(" " * idle_gap)
            time_marks += f"{_mark(seg.start):>4}"

        width = max(1, _cells(seg.end) - _cells(seg.start))
        color = process_color(seg.process_id)

        timeline.append(" " * width, style=f"on {color}")
        labels.append(seg.label[:width].ljust(width), style="bold")

        last_time = seg.end
        time_marks += f"{_mark(last_time):>4}"

    table = Table.grid(padding=(0, 0))
    table.add_row(timeline)
    table.add_row(labels)

    return Panel.fit(table, title="Gantt Chart"), time_marks
