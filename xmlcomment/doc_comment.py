"""Data models for a formatted documentation comment."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType


class LinkType(Enum):
    """How a see-also target is identified."""

    CREF = "cref"
    HREF = "href"


@dataclass(frozen=True)
class LinkInfo:
    """A `seealso` entry: link target plus optional formatted link text."""

    link_id: str
    alt_text: str | None
    link_type: LinkType


@dataclass(frozen=True)
class ExceptionInfo:
    """An exception type with the formatted description of every occurrence."""

    type: str
    description: str | None


@dataclass(frozen=True)
class DocumentationComment:
    """The formatted HTML of every field of one documentation comment.

    Scalar fields are None when the source field is absent or empty.
    Parameter maps keep declaration order and hold one entry per declared name.
    Collections are read-only views and tuples.
    """

    summary: str | None = None
    remarks: str | None = None
    returns: str | None = None
    parameters: Mapping[str, str | None] = field(default_factory=lambda: MappingProxyType({}))
    type_parameters: Mapping[str, str | None] = field(
        default_factory=lambda: MappingProxyType({})
    )
    exceptions: tuple[ExceptionInfo, ...] = ()
    see_alsos: tuple[LinkInfo, ...] = ()
    examples: tuple[str, ...] = ()

    def get_parameter(self, name: str) -> str | None:
        """Return the formatted description of a parameter, if any."""
        return self.parameters.get(name)

    def get_type_parameter(self, name: str) -> str | None:
        """Return the formatted description of a type parameter, if any."""
        return self.type_parameters.get(name)
