from __future__ import annotations

from typing import Optional

from parsebench.strategies.abstract import AbstractConversionStrategy
from parsebench.strategies.parsing import try_parse_int


class StatusReturnStrategy(AbstractConversionStrategy):
    """
    Call `try_parse_int` and branch on its success flag.

    No exception is raised on malformed input.
    """

    name: str = "try_parse"
    description: str = "Non-raising parse returning (ok, value); branch on ok."

    def convert(self, text: Optional[str]) -> int:
        ok, value = try_parse_int(text)
        if not ok:
            return self.fallback
        return value


__all__ = ["StatusReturnStrategy"]
