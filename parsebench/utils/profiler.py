"""
Profiling utilities for Parse Bench.

This module provides:
- `Stopwatch`: the monotonic clock used by the timing harness. The clock
  callable is injectable so tests can drive it deterministically.
- `profile_block`: a context manager capturing wall-clock time, CPU usage
  (psutil) and memory (RSS sampling thread + tracemalloc) around a sweep point.

Usage examples:
    from parsebench.utils.profiler import Stopwatch, profile_block

    watch = Stopwatch()
    with watch:
        convert_everything()
    print(watch.elapsed)  # 0:00:00.012345

    with profile_block("try_catch@0.3") as stats:
        run_point()
    print(stats.peak_rss_bytes, stats.cpu_percent)
"""

from __future__ import annotations

import contextlib
import threading
import time
import tracemalloc
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Generator, Optional

import psutil

Clock = Callable[[], float]


class Stopwatch:
    """
    Start/stop elapsed-time measurement over a monotonic clock.

    Parameters
    ----------
    clock : Callable[[], float]
        Monotonic seconds source. Defaults to `time.perf_counter`.
    """

    def __init__(self, clock: Clock = time.perf_counter) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._elapsed = 0.0

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self) -> "Stopwatch":
        if self._started_at is None:
            self._started_at = self._clock()
        return self

    def stop(self) -> float:
        """Stop the watch and return the accumulated seconds."""
        if self._started_at is None:
            raise RuntimeError("Stopwatch.stop() called before start()")
        self._elapsed += self._clock() - self._started_at
        self._started_at = None
        return self._elapsed

    def reset(self) -> None:
        self._started_at = None
        self._elapsed = 0.0

    @property
    def elapsed_seconds(self) -> float:
        if self._started_at is not None:
            return self._elapsed + (self._clock() - self._started_at)
        return self._elapsed

    @property
    def elapsed(self) -> timedelta:
        return timedelta(seconds=self.elapsed_seconds)

    def __enter__(self) -> "Stopwatch":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()


@dataclass
class ProfileStats:
    """Measurements captured around one profiled block."""

    label: str
    duration_seconds: float = 0.0
    peak_rss_bytes: Optional[int] = None
    peak_traced_bytes: Optional[int] = None
    cpu_percent: Optional[float] = None


class _RssSampler(threading.Thread):
    """Daemon thread tracking the peak resident set size of a process."""

    def __init__(self, process: psutil.Process, interval_seconds: float) -> None:
        super().__init__(name="rss-sampler", daemon=True)
        self._process = process
        self._interval = interval_seconds
        self._halt = threading.Event()
        self.peak = process.memory_info().rss

    def run(self) -> None:
        while not self._halt.is_set():
            try:
                self.peak = max(self.peak, self._process.memory_info().rss)
            except psutil.Error:
                return
            self._halt.wait(self._interval)

    def finish(self) -> Optional[int]:
        self._halt.set()
        self.join(timeout=1.0)
        return self.peak or None


@contextlib.contextmanager
def profile_block(
    label: str, sample_interval_ms: int = 50, enable_tracemalloc: bool = False
) -> Generator[ProfileStats, None, None]:
    """
    Profile a block of code.

    Measures:
    - Wall-clock duration (Stopwatch over perf_counter)
    - Peak RSS via background sampling thread (psutil)
    - Peak Python allocations (tracemalloc, opt-in)
    - CPU percent of the process over the block (psutil)

    Parameters
    ----------
    label : str
        Human-friendly label for the profiled block.
    sample_interval_ms : int
        Interval in milliseconds for RSS sampling.
    enable_tracemalloc : bool
        Trace Python allocations. Off by default since tracing slows every
        allocation inside the block.
    """
    stats = ProfileStats(label=label)
    process = psutil.Process()
    started_tracing = enable_tracemalloc and not tracemalloc.is_tracing()
    if started_tracing:
        tracemalloc.start()

    # First call only primes the counter
    process.cpu_percent(interval=None)
    sampler = _RssSampler(process, sample_interval_ms / 1000.0)
    sampler.start()
    watch = Stopwatch().start()
    try:
        yield stats
    finally:
        stats.duration_seconds = watch.stop()
        stats.peak_rss_bytes = sampler.finish()
        stats.cpu_percent = process.cpu_percent(interval=None)
        if enable_tracemalloc and tracemalloc.is_tracing():
            stats.peak_traced_bytes = tracemalloc.get_traced_memory()[1]
            if started_tracing:
                tracemalloc.stop()


__all__ = ["Clock", "ProfileStats", "Stopwatch", "profile_block"]
