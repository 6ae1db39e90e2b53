"""Utility for serializing the content of an ElementTree element."""

import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape


def inner_xml(element: ET.Element) -> str:
    """Return the markup between the start and end tags of `element`."""
    # tostring() writes each child's tail after it
    parts = [escape(element.text or "")]
    parts.extend(ET.tostring(child, encoding="unicode") for child in element)
    return "".join(parts)
