from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List
import yaml

# Tray capacities. The hour indicator also carries one fixed ball that never moves,
# so it is not modelled.
MINUTE_CAPACITY = 4
FIVE_MINUTE_CAPACITY = 11
HOUR_CAPACITY = 11

MINUTES_PER_DAY = 24 * 60

# Smallest pool that keeps the queue from running dry: every tray full plus one.
SMALLEST_WORKABLE_SIZE = MINUTE_CAPACITY + FIVE_MINUTE_CAPACITY + HOUR_CAPACITY + 1

DEFAULT_MIN_SIZE = 27
DEFAULT_MAX_SIZE = 127
DEFAULT_MAX_STEPS = 600000


@dataclass
class ClockConfig:
    min_size: int = DEFAULT_MIN_SIZE  # inclusive
    max_size: int = DEFAULT_MAX_SIZE  # inclusive
    max_steps: int = DEFAULT_MAX_STEPS

    def __post_init__(self) -> None:
        if self.min_size < SMALLEST_WORKABLE_SIZE:
            raise ValueError(
                f"min_size={self.min_size} is below {SMALLEST_WORKABLE_SIZE}; the queue would run dry."
            )
        if self.max_size < self.min_size:
            raise ValueError(f"max_size={self.max_size} is smaller than min_size={self.min_size}.")
        if self.max_steps <= 0:
            raise ValueError(f"max_steps must be positive, got {self.max_steps}.")

    def accepts(self, size: int) -> bool:
        return self.min_size <= size <= self.max_size


@dataclass
class Config:
    clock: ClockConfig = field(default_factory=ClockConfig)
    sizes: List[int] = field(default_factory=list)

    @staticmethod
    def default() -> "Config":
        return Config()

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Config":
        clock_data = data.get("clock") or {}
        clock = ClockConfig(
            min_size=int(clock_data.get("min_size", DEFAULT_MIN_SIZE)),
            max_size=int(clock_data.get("max_size", DEFAULT_MAX_SIZE)),
            max_steps=int(clock_data.get("max_steps", DEFAULT_MAX_STEPS)),
        )
        sizes = [int(s) for s in data.get("sizes") or []]
        return Config(clock=clock, sizes=sizes)

    @staticmethod
    def from_yaml(path: str) -> "Config":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return Config.from_dict(data or {})
