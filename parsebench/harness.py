"""
Timing harness: one strategy, one full input set, one elapsed duration.

Window boundaries per scenario and mode:

    primitive / parse-only     generate first; time conversion only
    primitive / full-pipeline  time generation + conversion
    records   / parse-only     generate + XML round trip first; time entity
                               mapping + conversion
    records   / full-pipeline  time generation, XML round trip, entity
                               mapping + conversion

Every call reseeds its own random stream, so two strategies timed with the
same seed, count and error rate see identical input.
"""

from __future__ import annotations

import random
import time
from typing import Iterable, List, Union

from parsebench.domain.materialization import materialize, to_record
from parsebench.domain.models import (
    BenchmarkResult,
    GeneratedRecord,
    ItemEntity,
    PropertyBag,
    Scenario,
    TimingMode,
)
from parsebench.generator import DEFAULT_BAD_PREFIX, generate, iter_records
from parsebench.infrastructure.xml_codec import round_trip
from parsebench.strategies.abstract import ConversionStrategy
from parsebench.utils.profiler import Clock, Stopwatch


def convert_all(strategy: ConversionStrategy, records: Iterable[GeneratedRecord]) -> List[int]:
    """Convert every payload with `strategy`."""
    convert = strategy.convert
    return [convert(record.payload) for record in records]


def build_bags(records: Iterable[GeneratedRecord]) -> List[PropertyBag]:
    """Materialize records as items and push them through the XML intermediate."""
    return round_trip(to_record(record) for record in records)


def _time_primitive(
    strategy: ConversionStrategy,
    watch: Stopwatch,
    seed: int,
    count: int,
    error_rate: float,
    mode: TimingMode,
    bad_prefix: str,
) -> List[int]:
    if mode is TimingMode.PARSE_ONLY:
        records = generate(seed, count, error_rate, bad_prefix)
        with watch:
            return convert_all(strategy, records)
    with watch:
        return convert_all(strategy, iter_records(random.Random(seed), count, error_rate, bad_prefix))


def _time_records(
    strategy: ConversionStrategy,
    watch: Stopwatch,
    seed: int,
    count: int,
    error_rate: float,
    mode: TimingMode,
    bad_prefix: str,
) -> List[ItemEntity]:
    if mode is TimingMode.PARSE_ONLY:
        bags = build_bags(generate(seed, count, error_rate, bad_prefix))
        with watch:
            return materialize(bags, strategy)
    with watch:
        bags = build_bags(iter_records(random.Random(seed), count, error_rate, bad_prefix))
        return materialize(bags, strategy)


def time_strategy(
    strategy: ConversionStrategy,
    seed: int,
    count: int,
    error_rate: float,
    scenario: Union[Scenario, str] = Scenario.PRIMITIVE,
    mode: Union[TimingMode, str] = TimingMode.PARSE_ONLY,
    clock: Clock = time.perf_counter,
    bad_prefix: str = DEFAULT_BAD_PREFIX,
) -> BenchmarkResult:
    """
    Time one full pass of `strategy` over freshly generated input.

    Parameters
    ----------
    strategy : ConversionStrategy
        Converter under measurement.
    seed, count, error_rate : int, int, float
        Generator parameters; see `parsebench.generator.generate`.
    scenario : Scenario | str
        "primitive" (bare strings) or "records" (XML item pipeline).
    mode : TimingMode | str
        "parse-only" or "full-pipeline" window.
    clock : Callable[[], float]
        Monotonic seconds source.
    bad_prefix : str
        Marker used for malformed payloads.

    Raises
    ------
    ValueError
        For an unknown scenario/mode or invalid generator parameters.
    """
    scenario = Scenario(scenario)
    mode = TimingMode(mode)
    watch = Stopwatch(clock)

    if scenario is Scenario.PRIMITIVE:
        _time_primitive(strategy, watch, seed, count, error_rate, mode, bad_prefix)
    else:
        _time_records(strategy, watch, seed, count, error_rate, mode, bad_prefix)

    return BenchmarkResult(
        strategy=strategy.name,
        scenario=scenario,
        mode=mode,
        error_rate=error_rate,
        count=count,
        duration_seconds=max(watch.elapsed_seconds, 0.0),
    )


def sweep_error_rates(points: int = 10, step: float = 0.1) -> List[float]:
    """
    Error rates 0, step, 2*step, ... (`points` values).

    Computed by multiplication and rounding so 0.3 is 0.3, not
    0.30000000000000004.
    """
    if points < 1:
        raise ValueError(f"points must be >= 1, got {points}")
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}")
    rates = [round(i * step, 10) for i in range(points)]
    if rates[-1] > 1.0:
        raise ValueError(f"{points} points of step {step} exceed an error rate of 1.0")
    return rates


__all__ = ["build_bags", "convert_all", "sweep_error_rates", "time_strategy"]
