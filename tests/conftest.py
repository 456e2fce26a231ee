"""
Pytest configuration for Parse Bench.

Provides fixtures for:
- Settings isolation (the cached settings are rebuilt for every test)
- Deterministic clocks for the timing harness
- Small generated input sets and result builders
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List

import pytest

from parsebench.config import Settings, get_settings
from parsebench.domain.models import (
    BenchmarkResult,
    GeneratedRecord,
    Scenario,
    SweepRow,
    TimingMode,
)
from parsebench.generator import generate


class StepClock:
    """Monotonic fake clock advancing by a fixed step on every reading."""

    def __init__(self, step: float = 0.25, start: float = 100.0) -> None:
        self.step = step
        self.now = start
        self.readings = 0

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        self.readings += 1
        return value


class ScriptedClock:
    """Fake clock replaying a fixed sequence of readings."""

    def __init__(self, readings: Iterable[float]) -> None:
        self._readings: Iterator[float] = iter(readings)

    def __call__(self) -> float:
        return next(self._readings)


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    """
    Drop the cached Settings before and after each test so env overrides apply.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """
    Settings with test-sized defaults; other values stay at their defaults.
    """
    return Settings(log_level="DEBUG", benchmark_count=200)


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()


@pytest.fixture
def scripted_clock() -> Callable[[Iterable[float]], ScriptedClock]:
    """Factory for clocks replaying the given readings."""
    return ScriptedClock


@pytest.fixture
def mixed_records() -> List[GeneratedRecord]:
    """
    2 000 records at a 50% error rate.
    """
    return generate(seed=3, count=2_000, error_rate=0.5)


@pytest.fixture
def make_result() -> Callable[..., BenchmarkResult]:
    def _make(
        strategy: str,
        error_rate: float,
        seconds: float,
        scenario: Scenario = Scenario.PRIMITIVE,
        mode: TimingMode = TimingMode.PARSE_ONLY,
        count: int = 1_000,
    ) -> BenchmarkResult:
        return BenchmarkResult(
            strategy=strategy,
            scenario=scenario,
            mode=mode,
            error_rate=error_rate,
            count=count,
            duration_seconds=seconds,
        )

    return _make


@pytest.fixture
def make_row(make_result: Callable[..., BenchmarkResult]) -> Callable[[float, float, float], SweepRow]:
    def _make(error_rate: float, try_catch: float, try_parse: float) -> SweepRow:
        return SweepRow(
            error_rate=error_rate,
            try_catch=make_result("try_catch", error_rate, try_catch),
            try_parse=make_result("try_parse", error_rate, try_parse),
        )

    return _make
