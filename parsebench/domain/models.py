"""
Domain models for Parse Bench.

Hot-path records (generated input, property bags, item entities) are frozen
dataclasses: they are built hundreds of thousands of times per sweep inside the
timed window, so construction must stay cheap and identical for both
strategies. Reporting models (benchmark results, sweep rows) are pydantic so
they validate and serialize cleanly for the CLI.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, Field, computed_field

ITEM_ID = "ItemId"
ITEM_DESCRIPTION = "ItemDescription"
ITEM_CODE = "ItemCode"
ITEM_COST = "ItemCost"

ITEM_FIELDS: Tuple[str, ...] = (ITEM_ID, ITEM_DESCRIPTION, ITEM_CODE, ITEM_COST)


class Scenario(str, Enum):
    """Which benchmark variant is being timed."""

    PRIMITIVE = "primitive"
    RECORDS = "records"


class TimingMode(str, Enum):
    """Boundaries of the measured window."""

    PARSE_ONLY = "parse-only"
    FULL_PIPELINE = "full-pipeline"


@dataclass(frozen=True)
class GeneratedRecord:
    """
    One generated input: its sequence index and the raw numeric payload.

    The payload is either a base-10 integer or the same digits behind a
    non-numeric marker.
    """

    index: int
    payload: str


@dataclass(frozen=True)
class PropertyBag:
    """
    Ordered name/value pairs describing one synthetic item.
    """

    properties: Tuple[Tuple[str, str], ...] = ()

    def get(self, name: str) -> Optional[str]:
        """
        Return the first value stored under `name`.

        An absent name yields None. That is a different condition from a
        present-but-malformed value and is never reported as an error.
        """
        for key, value in self.properties:
            if key == name:
                return value
        return None

    def names(self) -> Tuple[str, ...]:
        return tuple(key for key, _ in self.properties)

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self.properties)

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)


@dataclass(frozen=True)
class ItemEntity:
    """Typed item rebuilt from a property bag."""

    item_id: Optional[str]
    item_description: Optional[str]
    item_code: Optional[str]
    item_cost: int


class BenchmarkResult(BaseModel):
    """
    Elapsed time of one strategy over one full input set.
    """

    strategy: str = Field(..., description="Strategy label (try_catch / try_parse).")
    scenario: Scenario = Field(..., description="Benchmark variant.")
    mode: TimingMode = Field(..., description="Timing window boundaries.")
    error_rate: float = Field(..., ge=0.0, le=1.0, description="Malformed input probability.")
    count: int = Field(..., ge=0, description="Number of generated entries.")
    duration_seconds: float = Field(..., ge=0.0, description="Elapsed time of the window.")
    peak_rss_bytes: Optional[int] = Field(None, description="Peak RSS while timing.")
    cpu_percent: Optional[float] = Field(None, description="CPU usage while timing.")

    model_config = {"frozen": True}

    @property
    def elapsed(self) -> timedelta:
        return timedelta(seconds=self.duration_seconds)


class SweepRow(BaseModel):
    """
    Both strategies timed at one error rate, over identical input.
    """

    error_rate: float = Field(..., ge=0.0, le=1.0)
    try_catch: BenchmarkResult
    try_parse: BenchmarkResult

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def difference_seconds(self) -> float:
        """Signed cost of the exception path over the status-return path."""
        return self.try_catch.duration_seconds - self.try_parse.duration_seconds


__all__ = [
    "BenchmarkResult",
    "GeneratedRecord",
    "ITEM_CODE",
    "ITEM_COST",
    "ITEM_DESCRIPTION",
    "ITEM_FIELDS",
    "ITEM_ID",
    "ItemEntity",
    "PropertyBag",
    "Scenario",
    "SweepRow",
    "TimingMode",
]
