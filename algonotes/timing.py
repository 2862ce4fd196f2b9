"""Wall-clock timing of small callables."""

from __future__ import annotations

import time
from collections.abc import Callable


def measure_ns(func: Callable[[], object], repeat: int = 1) -> int:
    """Call *func* *repeat* times and return the mean nanoseconds per call."""
    if repeat < 1:
        raise ValueError("repeat must be at least 1")
    start = time.perf_counter_ns()
    for _ in range(repeat):
        func()
    elapsed = time.perf_counter_ns() - start
    return elapsed // repeat