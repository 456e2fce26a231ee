"""
In-memory XML representation of synthetic items.

Document shape:

    <?xml version='1.0' encoding='utf-8' standalone='yes'?>
    <!--Sample Data from Somewhere-->
    <SampleData>
      <Item>
        <property name="ItemId" value="0"/>
        <property name="ItemDescription" value="ItemId: 0 Desc"/>
        <property name="ItemCode" value="P123-456-0"/>
        <property name="ItemCost" value="X534011718"/>
      </Item>
      ...
    </SampleData>

The XML never leaves the process: it exists so the record benchmark pays a
realistic serialize/parse step before domain conversion. Mapping back to
property bags is explicit element walking, no reflection.
"""

from __future__ import annotations

from typing import Iterable, List

from lxml import etree

from parsebench.domain.models import PropertyBag

ROOT_TAG = "SampleData"
ITEM_TAG = "Item"
PROPERTY_TAG = "property"
SAMPLE_COMMENT = "Sample Data from Somewhere"


def _parser() -> etree.XMLParser:
    """Parser that never expands entities or touches the network."""
    return etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        remove_blank_text=True,
        huge_tree=True,
    )


def build_document(bags: Iterable[PropertyBag]) -> etree._ElementTree:
    """
    Build a SampleData document holding one Item per property bag.
    """
    root = etree.Element(ROOT_TAG)
    tree = etree.ElementTree(root)
    root.addprevious(etree.Comment(SAMPLE_COMMENT))
    for bag in bags:
        item = etree.SubElement(root, ITEM_TAG)
        for name, value in bag:
            etree.SubElement(item, PROPERTY_TAG, attrib={"name": name, "value": value})
    return tree


def serialize_document(tree: etree._ElementTree, pretty: bool = False) -> bytes:
    return etree.tostring(
        tree,
        xml_declaration=True,
        encoding="utf-8",
        standalone=True,
        pretty_print=pretty,
    )


def parse_document(data: bytes) -> etree._ElementTree:
    root = etree.fromstring(data, _parser())
    return root.getroottree()


def deserialize_items(tree: etree._ElementTree) -> List[PropertyBag]:
    """
    Map every Item element back to a PropertyBag.

    Property elements missing `name` or `value` are skipped, so lookups on
    them behave as absent fields. Children other than Item are ignored.

    Raises
    ------
    ValueError
        If the document root is not SampleData.
    """
    root = tree.getroot()
    if root.tag != ROOT_TAG:
        raise ValueError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")

    bags: List[PropertyBag] = []
    for item in root.iterchildren(ITEM_TAG):
        pairs = []
        for prop in item.iterchildren(PROPERTY_TAG):
            name = prop.get("name")
            value = prop.get("value")
            if name is None or value is None:
                continue
            pairs.append((name, value))
        bags.append(PropertyBag(tuple(pairs)))
    return bags


def round_trip(bags: Iterable[PropertyBag]) -> List[PropertyBag]:
    """Build, serialize, re-parse and deserialize `bags`."""
    return deserialize_items(parse_document(serialize_document(build_document(bags))))


__all__ = [
    "ITEM_TAG",
    "PROPERTY_TAG",
    "ROOT_TAG",
    "SAMPLE_COMMENT",
    "build_document",
    "deserialize_items",
    "parse_document",
    "round_trip",
    "serialize_document",
]
