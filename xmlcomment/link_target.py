"""Data models for representing cross-reference targets."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkTarget:
    """Display name and url of a symbol a cref can point at."""

    title: str
    href: str | None = None  # None when the symbol has no page
