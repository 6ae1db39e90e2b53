"""Logic for loading a DocFX xrefmap.yml into cross-reference targets."""

import logging
from pathlib import Path
from typing import Any
from urllib.parse import urljoin

import yaml

from xmlcomment.errors import ConfigError
from xmlcomment.link_target import LinkTarget
from xmlcomment.split_yaml_mime_header import split_yaml_mime_header

logger = logging.getLogger(__name__)

XREF_MAP_MIME = "XRefMap"


def load_xref_map(path: Path) -> dict[str, LinkTarget]:
    """Load `uid -> LinkTarget` from an xrefmap file.

    Relative hrefs are resolved against the map's `baseUrl` when it has one.
    """
    mime, raw = split_yaml_mime_header(path.read_text(encoding="utf-8"))
    if mime is not None and mime != XREF_MAP_MIME:
        logger.warning("%s declares YamlMime:%s, expected %s", path, mime, XREF_MAP_MIME)

    doc: Any = yaml.safe_load(raw) or {}
    if not isinstance(doc, dict):
        msg = f"xrefmap is not a mapping: {path}"
        raise ConfigError(msg)

    base_url = doc.get("baseUrl")
    targets: dict[str, LinkTarget] = {}
    for ref in doc.get("references") or []:
        if not isinstance(ref, dict) or not ref.get("uid"):
            continue
        uid = str(ref["uid"])
        title = ref.get("name") or ref.get("fullName") or uid
        href = ref.get("href")
        if href and base_url:
            href = urljoin(str(base_url), str(href))
        targets[uid] = LinkTarget(title=str(title), href=str(href) if href else None)
    return targets
