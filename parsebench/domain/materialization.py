"""
Mapping between generated records, property bags and item entities.
"""
from __future__ import annotations

from typing import Iterable, List

from parsebench.domain.models import (
    ITEM_CODE,
    ITEM_COST,
    ITEM_DESCRIPTION,
    ITEM_ID,
    GeneratedRecord,
    ItemEntity,
    PropertyBag,
)
from parsebench.strategies.abstract import ConversionStrategy


def to_record(record: GeneratedRecord) -> PropertyBag:
    """
    Describe `record` as an item. Only ItemCost carries the generated payload;
    the other fields derive from the index.
    """
    i = record.index
    return PropertyBag(
        (
            (ITEM_ID, str(i)),
            (ITEM_DESCRIPTION, f"ItemId: {i} Desc"),
            (ITEM_CODE, f"P123-456-{i}"),
            (ITEM_COST, record.payload),
        )
    )


def from_record(bag: PropertyBag, strategy: ConversionStrategy) -> ItemEntity:
    """
    Build an ItemEntity from `bag`, converting ItemCost with `strategy`.

    Missing string fields stay None. A missing ItemCost is handed to the
    strategy as None and comes back as its fallback.
    """
    return ItemEntity(
        item_id=bag.get(ITEM_ID),
        item_description=bag.get(ITEM_DESCRIPTION),
        item_code=bag.get(ITEM_CODE),
        item_cost=strategy.convert(bag.get(ITEM_COST)),
    )


def materialize(bags: Iterable[PropertyBag], strategy: ConversionStrategy) -> List[ItemEntity]:
    return [from_record(bag, strategy) for bag in bags]


__all__ = ["from_record", "materialize", "to_record"]
