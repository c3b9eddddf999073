"""Ball clock tick-based simulator.

Public entrypoints:
- Clock (from ball_clock.clock)
- run / run_many (from ball_clock.simulator)
"""
from .clock import Clock
from .config import ClockConfig, Config
from .models import (
    BallClockError,
    EmptyTrayError,
    InvalidSizeError,
    NoCycleFoundError,
    SimulationResult,
)
from .simulator import run, run_many
