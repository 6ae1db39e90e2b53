"""The closed set of documentation elements the formatter knows how to render."""

from enum import Enum


class ElementKind(Enum):
    """Recognized documentation element kinds; UNKNOWN covers every other tag."""

    PARA = "para"
    CODE = "code"
    TERM = "term"
    DESCRIPTION = "description"
    LIST = "list"
    PARAM_REF = "paramref"
    SEE = "see"
    SEE_ALSO = "seealso"
    NOTE = "note"
    UNKNOWN = ""


_KIND_BY_TAG = {
    "para": ElementKind.PARA,
    "code": ElementKind.CODE,
    "term": ElementKind.TERM,
    "description": ElementKind.DESCRIPTION,
    "list": ElementKind.LIST,
    "paramref": ElementKind.PARAM_REF,
    "typeparamref": ElementKind.PARAM_REF,
    "see": ElementKind.SEE,
    "seealso": ElementKind.SEE_ALSO,
    "note": ElementKind.NOTE,
}


def element_kind_of(tag: str) -> ElementKind:
    """Classify an element by its local tag name (case-sensitive)."""
    return _KIND_BY_TAG.get(tag, ElementKind.UNKNOWN)
