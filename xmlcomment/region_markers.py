"""Start/end marker syntax for named regions in example source files."""

import re
from dataclasses import dataclass
from pathlib import PurePath

HTML_COMMENT_EXTENSIONS = {".xml", ".xaml", ".html", ".cshtml", ".vbhtml"}


@dataclass(frozen=True)
class RegionMarkers:
    """A start pattern capturing the region name, and an end pattern."""

    start: re.Pattern[str]
    end: re.Pattern[str]

    def start_name(self, line: str) -> str | None:
        """Return the trimmed region name if `line` opens a region."""
        m = self.start.match(line)
        return m.group(1).strip() if m else None

    def is_end(self, line: str) -> bool:
        """Check if `line` closes a region."""
        return self.end.match(line) is not None


PREPROCESSOR_MARKERS = RegionMarkers(
    start=re.compile(r"^\s*#region\s*(.*)$"),
    end=re.compile(r"^\s*#endregion\s*.*$"),
)

# <!-- <Example> --> ... <!-- </Example> -->
HTML_COMMENT_MARKERS = RegionMarkers(
    start=re.compile(r"^\s*<!--\s*<([^/\s].*)>\s*-->$"),
    end=re.compile(r"^\s*<!--\s*</(.*)>\s*-->$"),
)


def markers_for_source(source_id: str) -> RegionMarkers:
    """Pick the marker syntax from the source file extension."""
    if PurePath(source_id).suffix.lower() in HTML_COMMENT_EXTENSIONS:
        return HTML_COMMENT_MARKERS
    return PREPROCESSOR_MARKERS
