"""
Parse Bench - micro-benchmarks of exception-guarded vs status-return parsing.

Measures what it costs to turn strings into integers when some of them are
malformed, comparing:

- A strict parse wrapped in try/except that substitutes a fallback
- A non-raising "try-parse" that reports success through its return value

Two scenarios are swept over error rates 0%..90%: bare strings, and synthetic
items pushed through an in-memory XML round trip before domain conversion.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from parsebench.config import Settings, get_settings
from parsebench.domain.models import (
    BenchmarkResult,
    GeneratedRecord,
    ItemEntity,
    PropertyBag,
    Scenario,
    SweepRow,
    TimingMode,
)
from parsebench.generator import generate, iter_records
from parsebench.harness import sweep_error_rates, time_strategy
from parsebench.orchestrator import (
    RunConfig,
    available_strategies,
    resolve_strategy,
    run_strategy_sweep,
    run_sweep,
    verify_parity,
)
from parsebench.strategies import (
    ConversionStrategy,
    ExceptionGuardedStrategy,
    MalformedNumberError,
    StatusReturnStrategy,
)
from parsebench.utils.logging import configure_logging, get_logger
from parsebench.utils.profiler import Stopwatch

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Data model
    "BenchmarkResult",
    "GeneratedRecord",
    "ItemEntity",
    "PropertyBag",
    "Scenario",
    "SweepRow",
    "TimingMode",
    # Generation and timing
    "generate",
    "iter_records",
    "sweep_error_rates",
    "time_strategy",
    "Stopwatch",
    # Orchestration
    "RunConfig",
    "available_strategies",
    "resolve_strategy",
    "run_strategy_sweep",
    "run_sweep",
    "verify_parity",
    # Strategies
    "ConversionStrategy",
    "ExceptionGuardedStrategy",
    "MalformedNumberError",
    "StatusReturnStrategy",
    # Logging
    "configure_logging",
    "get_logger",
]
