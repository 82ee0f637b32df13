from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence, Tuple

from .models import Process

# (arrival_time, burst_time) pairs; ids are assigned 1..n in order.
PRESETS: Dict[str, List[Tuple[int, int]]] = {
    "default": [(0, 5), (1, 3), (2, 8), (3, 6)],
    "small-mix": [(0, 3), (1, 5), (2, 2), (3, 4)],
    "cpu-bound": [(0, 9), (1, 7), (2, 8), (4, 10)],
    "io-bound": [(0, 2), (1, 1), (2, 3), (3, 2), (5, 1)],
}


def make_processes(pairs: Sequence[Tuple[int, int]]) -> List[Process]:
    return [
        Process(id=idx, arrival_time=arrival, burst_time=burst)
        for idx, (arrival, burst) in enumerate(pairs, start=1)
    ]


def get_preset(name: str) -> List[Process]:
    try:
        pairs = PRESETS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{name}' (use {', '.join(PRESETS)})") from None
    return make_processes(pairs)


def random_workload(count: int = 5, seed: Optional[int] = None) -> List[Process]:
    """
    Random workload with arrivals in 0..5 and bursts in 1..9.
    """
    rng = random.Random(seed)
    return make_processes([(rng.randint(0, 5), rng.randint(1, 9)) for _ in range(count)])
