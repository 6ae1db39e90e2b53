"""Utility for turning a documentation id into a uid."""

import re

# T:Ns.Type, M:Ns.Type.Method(System.Int32), ...
DOC_ID_PREFIX_RE = re.compile(r"^[A-Z]:")


def uid_of(doc_id: str) -> str:
    """Strip the kind prefix from a documentation id."""
    return DOC_ID_PREFIX_RE.sub("", doc_id, count=1)
