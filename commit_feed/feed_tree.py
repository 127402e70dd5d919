# commit_feed/feed_tree.py
"""
Generic XML -> nested dict/list conversion.

Downstream code never sees ElementTree objects, only plain Python values:
- element with child elements -> dict keyed by child tag
- tag repeated under one parent -> list, document order
- leaf with text -> str
- empty leaf -> "" (or a dict of its attributes, if it has any)
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any

from commit_feed.schemas import FeedTree


class FeedParseError(ValueError):
    """Raised when a feed body is not well-formed XML (maps to PARSE_ERROR)."""


def local_name(tag: str) -> str:
    """Strip the `{namespace}` prefix ElementTree puts on qualified tags."""
    return tag.rsplit("}", 1)[-1]


def element_to_tree(elem: ET.Element) -> FeedTree:
    children = list(elem)
    text = (elem.text or "").strip()

    if not children:
        if text:
            return elem.text or ""
        if elem.attrib:
            return {local_name(k): v for k, v in elem.attrib.items()}
        return ""

    out: dict[str, Any] = {}
    for child in children:
        key = local_name(child.tag)
        value = element_to_tree(child)
        if key not in out:
            out[key] = value
        elif isinstance(out[key], list):
            out[key].append(value)
        else:
            out[key] = [out[key], value]

    for k, v in elem.attrib.items():
        out.setdefault(local_name(k), v)

    return out


def parse_feed_xml(xml: str | bytes) -> FeedTree:
    """Parse a feed body and convert the root element. Malformed XML -> FeedParseError."""
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as exc:
        raise FeedParseError(f"PARSE_ERROR: malformed XML: {exc}") from exc

    try:
        return element_to_tree(root)
    except RecursionError as exc:
        raise FeedParseError("PARSE_ERROR: document nested too deeply") from exc
