"""
Infrastructure package for Parse Bench.

Holds the in-memory XML intermediate used by the record benchmark. Keep this
layer focused on representation concerns, decoupled from strategy and
orchestrator logic.
"""

from parsebench.infrastructure.xml_codec import (
    build_document,
    deserialize_items,
    parse_document,
    round_trip,
    serialize_document,
)

__all__ = [
    "build_document",
    "deserialize_items",
    "parse_document",
    "round_trip",
    "serialize_document",
]
