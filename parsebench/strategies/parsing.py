"""
Strict base-10 integer parsing in two flavours.

Accepted text: optional surrounding ASCII whitespace, an optional `+`/`-` sign
and one or more ASCII digits. Python's own `int()` is looser (underscores,
non-ASCII digits), so both flavours check the same pattern first; the only
difference left between them is how a failure reaches the caller.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

_INTEGER = re.compile(r"[ \t\n\r\f\v]*[+-]?[0-9]+[ \t\n\r\f\v]*", re.ASCII)


class MalformedNumberError(ValueError):
    """Raised by `parse_int` when text is not a base-10 integer."""

    def __init__(self, text: Optional[str]) -> None:
        super().__init__(f"Not a base-10 integer: {text!r}")
        self.text = text


def parse_int(text: Optional[str]) -> int:
    """
    Parse `text` as a base-10 integer or raise MalformedNumberError.
    """
    if text is None or _INTEGER.fullmatch(text) is None:
        raise MalformedNumberError(text)
    return int(text)


def try_parse_int(text: Optional[str]) -> Tuple[bool, int]:
    """
    Parse `text` without raising.

    Returns (True, value) on success and (False, 0) otherwise.
    """
    if text is None or _INTEGER.fullmatch(text) is None:
        return False, 0
    return True, int(text)


__all__ = ["MalformedNumberError", "parse_int", "try_parse_int"]
