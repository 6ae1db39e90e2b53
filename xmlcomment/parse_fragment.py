"""Logic for parsing raw documentation markup into a fragment tree."""

import xml.etree.ElementTree as ET

from xmlcomment.errors import MalformedCommentError
from xmlcomment.fragment_tree import ElementNode, FragmentNode, TextNode

ROOT_TAG = "tag"


def local_name(name: str) -> str:
    """Drop the `{namespace}` qualifier ElementTree puts in front of names."""
    if name.startswith("{"):
        return name.rsplit("}", 1)[-1]
    return name


def _convert(element: ET.Element) -> ElementNode:
    children: list[FragmentNode] = []
    if element.text:
        children.append(TextNode(element.text))
    for child in element:
        children.append(_convert(child))
        if child.tail:
            children.append(TextNode(child.tail))
    attributes = {local_name(k): v for k, v in element.attrib.items()}
    return ElementNode(local_name(element.tag), attributes, tuple(children))


def parse_fragment(raw_xml: str) -> ElementNode:
    """Parse markup wrapped in one synthetic root element.

    Whitespace is preserved; comments and processing instructions are dropped.
    """
    try:
        root = ET.fromstring(f"<{ROOT_TAG}>{raw_xml}</{ROOT_TAG}>")
    except ET.ParseError as exc:
        raise MalformedCommentError(raw_xml, str(exc)) from exc
    return _convert(root)
