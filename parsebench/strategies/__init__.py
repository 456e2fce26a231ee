"""
Strategies package for Parse Bench.

This module re-exports the abstract interfaces, the parsing primitives and the
concrete strategy classes so downstream code can import from
`parsebench.strategies` directly.
"""

from parsebench.strategies.abstract import (
    AbstractConversionStrategy,
    ConversionStrategy,
)
from parsebench.strategies.exception_guarded import ExceptionGuardedStrategy
from parsebench.strategies.parsing import MalformedNumberError, parse_int, try_parse_int
from parsebench.strategies.status_return import StatusReturnStrategy

__all__ = [
    # Abstracts
    "AbstractConversionStrategy",
    "ConversionStrategy",
    # Parsing primitives
    "MalformedNumberError",
    "parse_int",
    "try_parse_int",
    # Concrete strategies
    "ExceptionGuardedStrategy",
    "StatusReturnStrategy",
]
