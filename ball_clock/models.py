from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional, Tuple

Ball = int

# =========================
# Errors
# =========================


class BallClockError(Exception):
    """Base class for errors a caller can act on."""


class InvalidSizeError(BallClockError):
    def __init__(self, size: int, min_size: int, max_size: int) -> None:
        super().__init__(f"Clock size {size} out of range [{min_size}, {max_size}].")
        self.size = size
        self.min_size = min_size
        self.max_size = max_size


class NoCycleFoundError(BallClockError):
    def __init__(self, size: int, max_steps: int) -> None:
        super().__init__(f"No cycle found for {size} balls within {max_steps} minutes.")
        self.size = size
        self.max_steps = max_steps


class EmptyTrayError(RuntimeError):
    """Pop from an empty tray. Only a broken tick algorithm can raise this."""


# =========================
# Holding areas
# =========================

@dataclass
class Tray:
    name: str
    capacity: int
    items: Deque[Ball] = field(default_factory=deque)

    def __len__(self) -> int:
        return len(self.items)

    def is_empty(self) -> bool:
        return not self.items

    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    def push(self, ball: Ball) -> bool:
        """Append to the back. Returns False (tray untouched) on overflow."""
        if self.is_full():
            return False
        self.items.append(ball)
        return True

    def pop_front(self) -> Ball:
        if not self.items:
            raise EmptyTrayError(f"{self.name} is empty; cannot pop front.")
        return self.items.popleft()

    def pop_back(self) -> Ball:
        if not self.items:
            raise EmptyTrayError(f"{self.name} is empty; cannot pop back.")
        return self.items.pop()

    def balls(self) -> List[Ball]:
        return list(self.items)

    def describe(self) -> str:
        return f"{self.name}:" + ",".join(str(b) for b in self.items)


class BallQueue:
    """The reservoir at the bottom of the clock.

    Wraps a Tray sized to the whole pool and adds the seeded initial contents
    and the canonical-order check that ends a simulation.
    """

    def __init__(self, size: int) -> None:
        self.size = size
        self.tray = Tray(name="Bottom Tray", capacity=size)
        self.initialize(size)

    def initialize(self, n: int) -> None:
        # [0]=1, [1]=2, ..., [n-1]=n
        self.size = n
        self.tray = Tray(name="Bottom Tray", capacity=n, items=deque(range(1, n + 1)))

    def is_canonical_order(self) -> bool:
        items = self.tray.items
        if len(items) != self.size:
            return False
        for expected, ball in enumerate(items, start=1):
            if ball != expected:
                return False
        return True

    def __len__(self) -> int:
        return len(self.tray)

    def push(self, ball: Ball) -> bool:
        return self.tray.push(ball)

    def pop_front(self) -> Ball:
        return self.tray.pop_front()

    def balls(self) -> List[Ball]:
        return self.tray.balls()

    def describe(self) -> str:
        return self.tray.describe()


# =========================
# Snapshot views
# =========================

@dataclass(frozen=True)
class TrayView:
    name: str
    capacity: int
    balls: Tuple[Ball, ...]


@dataclass(frozen=True)
class ClockSnapshot:
    tick: int
    queue: Tuple[Ball, ...]
    trays: Tuple[TrayView, ...]  # minute, five-minute, hour


@dataclass(frozen=True)
class TickFrame:
    tick: int
    ball: Ball
    rested_on: str  # tray name, or "queue" after an hour overflow
    drains: Dict[str, List[Ball]]  # tray name -> balls in the order they rejoined the queue

    @property
    def overflowed(self) -> bool:
        return bool(self.drains)


@dataclass(frozen=True)
class SimulationResult:
    size: int
    minutes: int
    days: int


@dataclass(frozen=True)
class BatchEntry:
    size: int
    result: Optional[SimulationResult] = None
    error: Optional[BallClockError] = None

    @property
    def ok(self) -> bool:
        return self.result is not None
