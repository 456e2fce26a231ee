"""
Orchestrator for sweeping error rates and pairing conversion strategies.

Usage (example from CLI):
    from parsebench.orchestrator import RunConfig, run_sweep

    rows = run_sweep(RunConfig(scenario="records", count=10_000))
    for row in rows:
        print(row.error_rate, row.try_catch.duration_seconds, row.try_parse.duration_seconds)

Nothing is persisted; callers hand the rows to `parsebench.reporter`.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from parsebench.config import Settings, get_settings
from parsebench.domain.materialization import materialize
from parsebench.domain.models import BenchmarkResult, Scenario, SweepRow, TimingMode
from parsebench.generator import generate, is_malformed
from parsebench.harness import build_bags, convert_all, sweep_error_rates, time_strategy
from parsebench.strategies.abstract import ConversionStrategy
from parsebench.strategies.exception_guarded import ExceptionGuardedStrategy
from parsebench.strategies.status_return import StatusReturnStrategy
from parsebench.utils.logging import get_logger
from parsebench.utils.profiler import Clock, profile_block

log = get_logger(__name__)

# Order in which each sweep point times the pair.
STRATEGY_PAIR = ("try_catch", "try_parse")


class ParityError(RuntimeError):
    """The two strategies disagreed on at least one converted value."""


def _strategy_factories(fallback: int) -> Dict[str, Callable[[], ConversionStrategy]]:
    """Registry of available strategies."""
    return {
        "try_catch": lambda: ExceptionGuardedStrategy(fallback),
        "try_parse": lambda: StatusReturnStrategy(fallback),
    }


def available_strategies() -> List[str]:
    """List available strategy names."""
    return sorted(_strategy_factories(0).keys())


def resolve_strategy(name: str, fallback: int) -> ConversionStrategy:
    factories = _strategy_factories(fallback)
    if name not in factories:
        raise ValueError(f"Unknown strategy '{name}'. Available: {', '.join(factories)}")
    return factories[name]()


class RunConfig(BaseModel):
    """
    Parameters of one sweep. Unset fields fall back to settings, per scenario.
    """

    scenario: Scenario = Scenario.PRIMITIVE
    count: Optional[int] = Field(None, ge=0)
    seed: Optional[int] = None
    mode: Optional[TimingMode] = None
    fallback: Optional[int] = None
    error_rates: Optional[List[float]] = None
    bad_prefix: Optional[str] = Field(None, min_length=1)
    profile: bool = False

    @field_validator("error_rates")
    @classmethod
    def _rates_in_range(cls, value: Optional[List[float]]) -> Optional[List[float]]:
        if value is None:
            return value
        for rate in value:
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"error rate {rate} is outside [0, 1]")
        return value

    def with_defaults(self, settings: Optional[Settings] = None) -> "RunConfig":
        """Return a copy with every unset field resolved from settings."""
        settings = settings or get_settings()
        is_primitive = self.scenario is Scenario.PRIMITIVE
        default_mode = (
            settings.primitive_timing_mode if is_primitive else settings.record_timing_mode
        )
        default_fallback = settings.primitive_fallback if is_primitive else settings.record_fallback
        return self.model_copy(
            update={
                "count": self.count if self.count is not None else settings.benchmark_count,
                "seed": self.seed if self.seed is not None else settings.benchmark_seed,
                "mode": self.mode or TimingMode(default_mode),
                "fallback": self.fallback if self.fallback is not None else default_fallback,
                "error_rates": (
                    list(self.error_rates)
                    if self.error_rates is not None
                    else sweep_error_rates(
                        settings.benchmark_sweep_points, settings.benchmark_sweep_step
                    )
                ),
                "bad_prefix": self.bad_prefix or settings.benchmark_bad_prefix,
            }
        )


@dataclass(frozen=True)
class ParityReport:
    scenario: Scenario
    error_rate: float
    checked: int
    malformed: int
    fallback: int


def _timed_point(name: str, cfg: RunConfig, error_rate: float, clock: Clock) -> BenchmarkResult:
    strategy = resolve_strategy(name, cfg.fallback)
    kwargs = dict(
        seed=cfg.seed,
        count=cfg.count,
        error_rate=error_rate,
        scenario=cfg.scenario,
        mode=cfg.mode,
        clock=clock,
        bad_prefix=cfg.bad_prefix,
    )
    if not cfg.profile:
        return time_strategy(strategy, **kwargs)

    with profile_block(f"{name}@{error_rate:.2f}") as stats:
        result = time_strategy(strategy, **kwargs)
    return result.model_copy(
        update={
            "peak_rss_bytes": stats.peak_rss_bytes,
            "cpu_percent": round(stats.cpu_percent, 1) if stats.cpu_percent is not None else None,
        }
    )


def run_sweep(config: Optional[RunConfig] = None, clock: Clock = time.perf_counter) -> List[SweepRow]:
    """
    Time both strategies at every error rate of the sweep.

    Parameters
    ----------
    config : RunConfig | None
        Sweep parameters; None uses settings for the primitive scenario.
    clock : Callable[[], float]
        Monotonic seconds source handed to the harness.

    Returns
    -------
    List[SweepRow]
        One row per error rate, in sweep order.
    """
    cfg = (config or RunConfig()).with_defaults()
    total = len(cfg.error_rates)

    log.info(
        f"[SWEEP START] scenario={cfg.scenario.value} mode={cfg.mode.value}",
        extra={
            "scenario": cfg.scenario.value,
            "mode": cfg.mode.value,
            "count": cfg.count,
            "seed": cfg.seed,
            "fallback": cfg.fallback,
            "points": total,
        },
    )

    rows: List[SweepRow] = []
    for point, error_rate in enumerate(cfg.error_rates, start=1):
        results = {name: _timed_point(name, cfg, error_rate, clock) for name in STRATEGY_PAIR}
        row = SweepRow(
            error_rate=error_rate,
            try_catch=results["try_catch"],
            try_parse=results["try_parse"],
        )
        rows.append(row)
        log.info(
            f"[POINT {point}/{total}] error_rate={error_rate:.0%}",
            extra={
                "error_rate": error_rate,
                "try_catch_seconds": row.try_catch.duration_seconds,
                "try_parse_seconds": row.try_parse.duration_seconds,
                "difference_seconds": row.difference_seconds,
            },
        )

    log.info(
        f"[SWEEP COMPLETE] {total} point(s) for scenario={cfg.scenario.value}",
        extra={"scenario": cfg.scenario.value, "points": total},
    )
    return rows


def run_strategy_sweep(
    strategy_name: str,
    config: Optional[RunConfig] = None,
    clock: Clock = time.perf_counter,
) -> List[BenchmarkResult]:
    """
    Time a single strategy at every error rate of the sweep.
    """
    cfg = (config or RunConfig()).with_defaults()
    resolve_strategy(strategy_name, cfg.fallback)

    results: List[BenchmarkResult] = []
    for error_rate in cfg.error_rates:
        result = _timed_point(strategy_name, cfg, error_rate, clock)
        results.append(result)
        log.info(
            f"[POINT] {strategy_name} error_rate={error_rate:.0%}",
            extra={
                "strategy": strategy_name,
                "error_rate": error_rate,
                "duration_seconds": result.duration_seconds,
            },
        )
    return results


def verify_parity(config: Optional[RunConfig] = None, error_rate: float = 0.5) -> ParityReport:
    """
    Convert one generated input set with both strategies and compare outputs.

    Raises
    ------
    ParityError
        If any converted value differs between the two strategies.
    """
    cfg = (config or RunConfig()).with_defaults()
    records = generate(cfg.seed, cfg.count, error_rate, cfg.bad_prefix)
    guarded = resolve_strategy("try_catch", cfg.fallback)
    status = resolve_strategy("try_parse", cfg.fallback)

    if cfg.scenario is Scenario.PRIMITIVE:
        left = convert_all(guarded, records)
        right = convert_all(status, records)
    else:
        bags = build_bags(records)
        left = [entity.item_cost for entity in materialize(bags, guarded)]
        right = [entity.item_cost for entity in materialize(bags, status)]

    mismatches = [i for i, (a, b) in enumerate(zip(left, right)) if a != b]
    if mismatches:
        first = mismatches[0]
        raise ParityError(
            f"{len(mismatches)} value(s) differ between strategies; first at index {first}: "
            f"{records[first].payload!r} -> {left[first]} vs {right[first]}"
        )

    report = ParityReport(
        scenario=cfg.scenario,
        error_rate=error_rate,
        checked=len(records),
        malformed=sum(1 for record in records if is_malformed(record, cfg.bad_prefix)),
        fallback=cfg.fallback,
    )
    log.info(
        "[PARITY OK]",
        extra={
            "scenario": cfg.scenario.value,
            "checked": report.checked,
            "malformed": report.malformed,
        },
    )
    return report


__all__ = [
    "ParityError",
    "ParityReport",
    "RunConfig",
    "STRATEGY_PAIR",
    "available_strategies",
    "resolve_strategy",
    "run_strategy_sweep",
    "run_sweep",
    "verify_parity",
]
