"""
Utilities package for Parse Bench.

Exports shared helpers for logging, timing and profiling.
Keep this package lightweight and free of benchmark-specific logic.
"""

from parsebench.utils.logging import configure_logging, get_logger
from parsebench.utils.profiler import Clock, ProfileStats, Stopwatch, profile_block

__all__ = [
    "configure_logging",
    "get_logger",
    "Clock",
    "ProfileStats",
    "Stopwatch",
    "profile_block",
]
