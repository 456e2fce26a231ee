"""
Deterministic corrupted-input generation for Parse Bench.

Each entry is a random non-negative integer rendered in base 10; with
probability `error_rate` it is prefixed with a non-numeric marker so it no
longer parses. The random stream is an explicit `random.Random` handle, never
the module-level one, so the same seed always reproduces the same sequence.
"""

from __future__ import annotations

import random
from typing import Iterator, List

from parsebench.domain.models import GeneratedRecord

# Upper bound (exclusive) of the drawn integers: the 32-bit signed maximum.
MAX_DRAW = 2**31 - 1
DEFAULT_BAD_PREFIX = "X"


def _validate(count: int, error_rate: float, bad_prefix: str) -> None:
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if not 0.0 <= error_rate <= 1.0:
        raise ValueError(f"error_rate must be within [0, 1], got {error_rate}")
    if not bad_prefix or bad_prefix[0].isdigit() or bad_prefix[0] in "+-" or bad_prefix[0].isspace():
        raise ValueError(f"bad_prefix must start with a non-numeric character, got {bad_prefix!r}")


def iter_records(
    rng: random.Random,
    count: int,
    error_rate: float,
    bad_prefix: str = DEFAULT_BAD_PREFIX,
) -> Iterator[GeneratedRecord]:
    """
    Yield `count` records drawn from `rng`.

    Two draws per record, always in the same order: the integer, then the
    corruption roll.
    """
    _validate(count, error_rate, bad_prefix)
    for i in range(count):
        text = str(rng.randrange(MAX_DRAW))
        if rng.random() < error_rate:
            text = bad_prefix + text
        yield GeneratedRecord(i, text)


def generate(
    seed: int,
    count: int,
    error_rate: float,
    bad_prefix: str = DEFAULT_BAD_PREFIX,
) -> List[GeneratedRecord]:
    """
    Generate a reproducible list of records from a fresh `random.Random(seed)`.

    Parameters
    ----------
    seed : int
        Seed of the private random stream.
    count : int
        Number of records (0 yields an empty list).
    error_rate : float
        Probability in [0, 1] that a record is malformed.
    bad_prefix : str
        Marker prepended to malformed payloads.
    """
    _validate(count, error_rate, bad_prefix)
    return list(iter_records(random.Random(seed), count, error_rate, bad_prefix))


def is_malformed(record: GeneratedRecord, bad_prefix: str = DEFAULT_BAD_PREFIX) -> bool:
    return record.payload.startswith(bad_prefix)


__all__ = ["DEFAULT_BAD_PREFIX", "MAX_DRAW", "generate", "is_malformed", "iter_records"]
