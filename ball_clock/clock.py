from __future__ import annotations

from typing import Callable, Dict, List, Optional, Tuple

from .config import (
    ClockConfig,
    FIVE_MINUTE_CAPACITY,
    HOUR_CAPACITY,
    MINUTE_CAPACITY,
)
from .models import (
    Ball,
    BallQueue,
    ClockSnapshot,
    InvalidSizeError,
    TickFrame,
    Tray,
    TrayView,
)

Sink = Callable[[str], None]


class Clock:
    """Tick-based ball clock.

    Core rules implemented:
    - Every tick the front ball of the queue is elevated and offered to the
      minute tray, then the five-minute tray, then the hour tray.
    - A tray with room keeps the ball and the tick ends.
    - A full tray tilts: its balls run back to the queue tail last-in first,
      and the ball that caused the tilt cascades to the next tray.
    - When the hour tray tilts as well, the cascading ball follows the drained
      balls back into the queue.
    """

    def __init__(self, size: int, config: Optional[ClockConfig] = None, sink: Optional[Sink] = None) -> None:
        self.config = config or ClockConfig()
        if not self.config.accepts(size):
            raise InvalidSizeError(size, self.config.min_size, self.config.max_size)

        self.size = size
        self.sink = sink
        self.ticks: int = 0

        self.queue = BallQueue(size)
        self.minute_tray = Tray(name="One Minute Tray", capacity=MINUTE_CAPACITY)
        self.five_minute_tray = Tray(name="Five Minute Tray", capacity=FIVE_MINUTE_CAPACITY)
        self.hour_tray = Tray(name="Hour Tray", capacity=HOUR_CAPACITY)

    @property
    def trays(self) -> Tuple[Tray, Tray, Tray]:
        return (self.minute_tray, self.five_minute_tray, self.hour_tray)

    # ---------------------------
    # Public API
    # ---------------------------

    def tick(self) -> TickFrame:
        ball = self.queue.pop_front()
        drains: Dict[str, List[Ball]] = {}
        rested_on = "queue"

        for tray in self.trays:
            if tray.push(ball):
                rested_on = tray.name
                break
            drains[tray.name] = self._drain(tray)
        else:
            # hour tray tilted: the carried ball returns after the free balls
            self._return_to_queue(ball)
            self._log(f"[minute {self.ticks + 1}] ball {ball} tilted every tray; 12 hours elapsed")

        self.ticks += 1
        return TickFrame(tick=self.ticks, ball=ball, rested_on=rested_on, drains=drains)

    def is_cycle_complete(self) -> bool:
        return self.queue.is_canonical_order()

    def displayed_time(self) -> Tuple[int, int]:
        """Time read off the indicators as (hour 1..12, minute 0..59)."""
        hour = len(self.hour_tray) + 1  # fixed ball
        minute = 5 * len(self.five_minute_tray) + len(self.minute_tray)
        return hour, minute

    def total_balls(self) -> int:
        return len(self.queue) + sum(len(t) for t in self.trays)

    def snapshot(self) -> ClockSnapshot:
        return ClockSnapshot(
            tick=self.ticks,
            queue=tuple(self.queue.balls()),
            trays=tuple(
                TrayView(name=t.name, capacity=t.capacity, balls=tuple(t.balls()))
                for t in self.trays
            ),
        )

    def dump(self) -> str:
        lines = ["-----"]
        lines.extend(t.describe() for t in self.trays)
        lines.append(self.queue.describe())
        lines.append("------")
        return "\n".join(lines)

    def print_state(self) -> None:
        self._log(self.dump())

    # ---------------------------
    # Internals
    # ---------------------------

    def _drain(self, tray: Tray) -> List[Ball]:
        # back to front, so the queue receives the balls in reverse arrival order
        returned: List[Ball] = []
        while not tray.is_empty():
            ball = tray.pop_back()
            self._return_to_queue(ball)
            returned.append(ball)
        return returned

    def _return_to_queue(self, ball: Ball) -> None:
        if not self.queue.push(ball):
            raise RuntimeError(f"{self.queue.tray.name} full; ball {ball} would be lost.")

    def _log(self, msg: str) -> None:
        if self.sink is not None:
            self.sink(msg)
