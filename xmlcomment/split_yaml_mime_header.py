"""Utility for separating the DocFX YAML MIME header from a document."""

YAML_MIME_PREFIX = "### YamlMime:"


def split_yaml_mime_header(text: str) -> tuple[str | None, str]:
    """Return the declared MIME type (or None) and the remaining YAML text."""
    lines = text.splitlines()
    if lines and lines[0].startswith(YAML_MIME_PREFIX):
        mime = lines[0][len(YAML_MIME_PREFIX) :].strip()
        return mime, "\n".join(lines[1:]).lstrip("\n")
    return None, text
