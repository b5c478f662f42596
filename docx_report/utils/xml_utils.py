"""
XML utilities for WordprocessingML output.

Thin helpers over ``xml.etree.ElementTree`` for building namespaced
elements, coercing attribute values and serializing fragments.
"""

import copy
import math
import xml.etree.ElementTree as ET
from typing import Any, Dict, Mapping, Optional
import logging

logger = logging.getLogger(__name__)

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
XML_NS = "http://www.w3.org/XML/1998/namespace"

NAMESPACES: Dict[str, str] = {
    "w": W_NS,
    "r": R_NS,
    "xml": XML_NS,
}

# Preserve the conventional prefixes in ET.tostring output
ET.register_namespace("w", W_NS)
ET.register_namespace("r", R_NS)


def qn(name: str) -> str:
    """
    Expand a prefixed name into Clark notation.

    Args:
        name: Name such as ``"w:p"`` or ``"xml:space"``; names without a
            prefix are returned unchanged

    Returns:
        ``"{namespace}local"`` string usable as an ElementTree tag or attribute
    """
    if name.startswith("{") or ":" not in name:
        return name
    prefix, local = name.split(":", 1)
    try:
        return f"{{{NAMESPACES[prefix]}}}{local}"
    except KeyError:
        raise ValueError(f"Unknown namespace prefix: {prefix}") from None


def coerce_attr_value(value: Any) -> Optional[str]:
    """Convert attribute value to a safe string for XML serialization."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        if value.is_integer():
            return str(int(value))
        return format(value, ".10g")
    return str(value)


def set_attr(element: ET.Element, key: str, value: Any) -> None:
    """Set a (prefixed) attribute, skipping values that cannot be serialized."""
    coerced = coerce_attr_value(value)
    if coerced is None:
        return
    element.set(qn(key), coerced)


def make_element(tag: str, attrs: Optional[Mapping[str, Any]] = None) -> ET.Element:
    """Create a detached element with prefixed tag and attributes."""
    element = ET.Element(qn(tag))
    for key, value in (attrs or {}).items():
        set_attr(element, key, value)
    return element


def append_element(parent: ET.Element, tag: str,
                   attrs: Optional[Mapping[str, Any]] = None) -> ET.Element:
    """Create an element and append it to ``parent``."""
    element = make_element(tag, attrs)
    parent.append(element)
    return element


def append_text(parent: ET.Element, text: str) -> ET.Element:
    """Append a space-preserving ``w:t`` node holding ``text``."""
    t = append_element(parent, "w:t", {"xml:space": "preserve"})
    t.text = text
    return t


def find_all(element: ET.Element, path: str) -> list:
    """``findall`` with ``w:``-prefixed paths."""
    return element.findall(path, NAMESPACES)


def find(element: ET.Element, path: str) -> Optional[ET.Element]:
    """``find`` with ``w:``-prefixed paths."""
    return element.find(path, NAMESPACES)


def get_attr(element: ET.Element, key: str) -> Optional[str]:
    """Read a prefixed attribute."""
    return element.get(qn(key))


def local_name(element: ET.Element) -> str:
    """Return the tag of ``element`` without its namespace."""
    tag = element.tag
    return tag.split("}", 1)[1] if tag.startswith("{") else tag


def indent_xml(elem: ET.Element, level: int = 0, indent: int = 2) -> None:
    """Add indentation to an XML element tree in place."""
    pad = "\n" + " " * (level * indent)

    if len(elem):
        if not elem.text or not elem.text.strip():
            elem.text = pad + " " * indent

        for child in elem:
            indent_xml(child, level + 1, indent)
            if not child.tail or not child.tail.strip():
                child.tail = pad + " " * indent

        # The last child closes the parent at the parent's level
        elem[-1].tail = pad
    if level and (not elem.tail or not elem.tail.strip()):
        elem.tail = pad


def to_xml(element: ET.Element, pretty: bool = False,
           declaration: bool = False, encoding: str = "UTF-8") -> str:
    """
    Serialize an element to a string.

    Args:
        element: Root of the fragment to serialize
        pretty: Indent the output for human inspection; compact otherwise
        declaration: Prefix an ``<?xml ...?>`` declaration
        encoding: Encoding named in the declaration

    Returns:
        XML string
    """
    if pretty:
        # Work on a copy so the caller's tree keeps its exact text nodes
        element = copy.deepcopy(element)
        indent_xml(element)

    # Space-only w:t content is significant, so no whitespace stripping here
    xml = ET.tostring(element, encoding="unicode", method="xml").rstrip()
    if declaration:
        return f'<?xml version="1.0" encoding="{encoding}" standalone="yes"?>\n{xml}'
    return xml
