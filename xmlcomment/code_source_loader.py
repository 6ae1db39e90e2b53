"""File-system loader for the `source` attribute of `<code>` elements."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class FileCodeSourceLoader:
    """Loads example source files relative to a root directory."""

    def __init__(self, root: str | Path, encoding: str = "utf-8-sig") -> None:
        """Initialize the loader with the directory sources are relative to."""
        self.root = Path(root).resolve()
        self.encoding = encoding

    def __call__(self, source_id: str) -> str | None:
        """Return the file text, or None if it is missing, unreadable or outside the root."""
        target = (self.root / source_id.replace("\\", "/")).resolve()
        try:
            target.relative_to(self.root)
        except ValueError:
            logger.warning("Code source outside %s: %s", self.root, source_id)
            return None

        if not target.is_file():
            logger.warning("Code source not found: %s", source_id)
            return None
        try:
            return target.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read code source %s: %s", source_id, exc)
            return None
