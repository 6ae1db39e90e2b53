"""Interface for the source of raw documentation of one symbol."""

from typing import Protocol


class DocumentationProvider(Protocol):
    """Raw, macro-expanded documentation markup of one symbol, per field.

    Implementations are backed by a compiler or an XML documentation file.
    `lookup_symbol` maps a documentation id to (display name, url) and returns
    None when the id cannot be bound; it may be called from many threads.
    """

    @property
    def summary_text(self) -> str | None: ...

    @property
    def remarks_text(self) -> str | None: ...

    @property
    def returns_text(self) -> str | None: ...

    @property
    def example_texts(self) -> list[str]: ...

    @property
    def parameter_names(self) -> list[str]: ...

    @property
    def type_parameter_names(self) -> list[str]: ...

    @property
    def exception_types(self) -> list[str]: ...

    @property
    def full_xml_fragment(self) -> str: ...

    def get_parameter_text(self, name: str) -> str | None: ...

    def get_type_parameter_text(self, name: str) -> str | None: ...

    def get_exception_texts(self, exception_type: str) -> list[str]: ...

    def lookup_symbol(self, doc_id: str) -> tuple[str, str | None] | None: ...
