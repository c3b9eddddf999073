from __future__ import annotations

from typing import Iterable, List, Optional

from .clock import Clock, Sink
from .config import ClockConfig, MINUTES_PER_DAY
from .models import (
    BallClockError,
    BatchEntry,
    NoCycleFoundError,
    SimulationResult,
)


def run(size: int, config: Optional[ClockConfig] = None, sink: Optional[Sink] = None) -> SimulationResult:
    """Tick a fresh clock until the queue is back in its starting order.

    Raises InvalidSizeError for a size outside the configured range and
    NoCycleFoundError when max_steps minutes pass without a repeat.
    """
    config = config or ClockConfig()
    clock = Clock(size, config=config, sink=sink)
    if sink is not None:
        sink(f"Running clock of size {size}")

    while clock.ticks < config.max_steps:
        clock.tick()
        if clock.is_cycle_complete():
            minutes = clock.ticks
            if sink is not None:
                clock.print_state()
            # valid sizes always cycle on a whole number of days
            return SimulationResult(size=size, minutes=minutes, days=minutes // MINUTES_PER_DAY)

    raise NoCycleFoundError(size, config.max_steps)


def run_many(
    sizes: Iterable[int],
    config: Optional[ClockConfig] = None,
    sink: Optional[Sink] = None,
) -> List[BatchEntry]:
    entries: List[BatchEntry] = []
    for size in sizes:
        try:
            entries.append(BatchEntry(size=size, result=run(size, config=config, sink=sink)))
        except BallClockError as e:
            entries.append(BatchEntry(size=size, error=e))
    return entries


def read_sizes(lines: Iterable[str]) -> List[int]:
    """One ball count per line; a 0 ends the input."""
    sizes: List[int] = []
    for raw in lines:
        raw = raw.strip()
        if not raw:
            continue
        try:
            n = int(raw)
        except ValueError:
            raise ValueError(f"Expected a ball count, got {raw!r}.") from None
        if n == 0:
            break
        sizes.append(n)
    return sizes


def format_result(result: SimulationResult) -> str:
    return f"{result.size} balls cycle after {result.days} days."


def format_entry(entry: BatchEntry) -> str:
    if entry.result is not None:
        return format_result(entry.result)
    return f"{entry.size} balls: {entry.error}"
