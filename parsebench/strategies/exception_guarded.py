"""
Exception-guarded conversion: parse strictly, catch the failure.
"""

from __future__ import annotations

from typing import Optional

from parsebench.strategies.abstract import AbstractConversionStrategy
from parsebench.strategies.parsing import MalformedNumberError, parse_int


class ExceptionGuardedStrategy(AbstractConversionStrategy):
    """
    Call `parse_int` and substitute the fallback when it raises.

    Every malformed value costs one raise + catch; this is the path whose
    price grows with the error rate.
    """

    name: str = "try_catch"
    description: str = "Strict parse inside try/except MalformedNumberError."

    def convert(self, text: Optional[str]) -> int:
        try:
            return parse_int(text)
        except MalformedNumberError:
            return self.fallback


__all__ = ["ExceptionGuardedStrategy"]
