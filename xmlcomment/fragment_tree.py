"""Data models for the parsed tree of one documentation fragment."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TextNode:
    """A run of character data (CDATA included)."""

    text: str


@dataclass(frozen=True)
class ElementNode:
    """An element with its local tag name, attributes and ordered children."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple["TextNode | ElementNode", ...] = ()

    def get(self, name: str) -> str | None:
        """Return an attribute value, or None when it is not set."""
        return self.attributes.get(name)

    def elements(self) -> list["ElementNode"]:
        """Return the direct element children, skipping text."""
        return [c for c in self.children if isinstance(c, ElementNode)]


FragmentNode = TextNode | ElementNode
