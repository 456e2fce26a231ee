"""
Domain package for Parse Bench.

Exports the data model shared by the generator, strategies, harness and
reporter, plus the record/entity mapping of the XML benchmark.
"""

from parsebench.domain.materialization import from_record, materialize, to_record
from parsebench.domain.models import (
    BenchmarkResult,
    GeneratedRecord,
    ItemEntity,
    PropertyBag,
    Scenario,
    SweepRow,
    TimingMode,
)

__all__ = [
    "BenchmarkResult",
    "GeneratedRecord",
    "ItemEntity",
    "PropertyBag",
    "Scenario",
    "SweepRow",
    "TimingMode",
    "from_record",
    "materialize",
    "to_record",
]
