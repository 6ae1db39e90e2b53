"""Logic for reading a compiler-generated XML documentation file."""

import xml.etree.ElementTree as ET
from pathlib import Path

from xmlcomment.errors import MalformedCommentError
from xmlcomment.inner_xml import inner_xml


def load_member_docs(path: Path) -> dict[str, str]:
    """Map each `<member name="...">` to its inner markup, in file order."""
    # Bytes, so the parser honours the encoding in the XML declaration
    raw = path.read_bytes()
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as exc:
        text = raw.decode("utf-8", errors="replace")
        raise MalformedCommentError(text, f"{path}: {exc}") from exc

    members: dict[str, str] = {}
    for member in root.iter("member"):
        name = member.get("name")
        if name:
            members.setdefault(name, inner_xml(member))
    return members
