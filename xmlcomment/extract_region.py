"""Logic for extracting a named region from an example source file."""

import logging
import re
from collections.abc import Callable

from xmlcomment.region_markers import markers_for_source
from xmlcomment.trim_each_line import trim_each_line

logger = logging.getLogger(__name__)

CodeLoader = Callable[[str], str | None]

# Only CR, LF and CRLF end a line; other Unicode separators stay in the text
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def extract_region(source_id: str, region: str | None, load: CodeLoader) -> str | None:
    """Return the dedented lines of `region` from the source, or the whole text.

    Returns None when the loader has nothing for `source_id`. A region that is
    never opened yields an empty string.
    """
    code = load(source_id)
    if code is None:
        return None
    if not region:
        return code

    markers = markers_for_source(source_id)
    lines: list[str] = []
    depth = 0
    found = False
    source_lines = LINE_BREAK_RE.split(code)
    if source_lines[-1] == "":
        source_lines.pop()
    for line in source_lines:
        name = markers.start_name(line)
        if name is not None:
            if depth == 0:
                if name == region:
                    found = True
                    depth = 1
                continue
            # Nested regions count by depth only; names are not matched
            depth += 1
        elif depth > 0 and markers.is_end(line):
            depth -= 1
            if depth == 0:
                break
            continue

        if depth > 0:
            lines.append(line)

    if not found:
        logger.warning("Region %r not found in %s", region, source_id)
    return trim_each_line(lines)
