"""Documentation provider over one `<member>` of an XML documentation file."""

import xml.etree.ElementTree as ET
from collections.abc import Mapping

from xmlcomment.errors import MalformedCommentError
from xmlcomment.inner_xml import inner_xml
from xmlcomment.link_target import LinkTarget
from xmlcomment.uid_of import uid_of


class MemberXmlProvider:
    """Serve the raw fields of one member's documentation markup.

    Field text is the inner markup of the first top-level element of that
    name, unchanged. When declared parameter names are not supplied, the
    documented names are used in document order.
    """

    def __init__(
        self,
        member_xml: str,
        link_targets: Mapping[str, LinkTarget] | None = None,
        parameter_names: list[str] | None = None,
        type_parameter_names: list[str] | None = None,
    ) -> None:
        """Parse the member markup and index its top-level elements."""
        try:
            root = ET.fromstring(f"<member>{member_xml}</member>")
        except ET.ParseError as exc:
            raise MalformedCommentError(member_xml, str(exc)) from exc

        self.full_xml_fragment = member_xml
        self.link_targets = link_targets or {}
        self._fields: dict[str, str] = {}
        self._params: dict[str, str] = {}
        self._type_params: dict[str, str] = {}
        self._exceptions: dict[str, list[str]] = {}
        self.example_texts: list[str] = []

        for child in root:
            text = inner_xml(child)
            name = child.get("name")
            cref = child.get("cref")
            if child.tag == "example":
                self.example_texts.append(text)
            elif child.tag == "param":
                # First description wins for a repeated name
                if name:
                    self._params.setdefault(name, text)
            elif child.tag == "typeparam":
                if name:
                    self._type_params.setdefault(name, text)
            elif child.tag == "exception":
                if cref:
                    self._exceptions.setdefault(uid_of(cref), []).append(text)
            else:
                self._fields.setdefault(child.tag, text)

        self.parameter_names = (
            list(parameter_names) if parameter_names is not None else list(self._params)
        )
        self.type_parameter_names = (
            list(type_parameter_names)
            if type_parameter_names is not None
            else list(self._type_params)
        )
        self.exception_types = list(self._exceptions)

    @property
    def summary_text(self) -> str | None:
        return self._fields.get("summary")

    @property
    def remarks_text(self) -> str | None:
        return self._fields.get("remarks")

    @property
    def returns_text(self) -> str | None:
        return self._fields.get("returns")

    def get_parameter_text(self, name: str) -> str | None:
        return self._params.get(name)

    def get_type_parameter_text(self, name: str) -> str | None:
        return self._type_params.get(name)

    def get_exception_texts(self, exception_type: str) -> list[str]:
        return list(self._exceptions.get(exception_type, []))

    def lookup_symbol(self, doc_id: str) -> tuple[str, str | None] | None:
        """Resolve a documentation id against the known link targets."""
        target = self.link_targets.get(uid_of(doc_id))
        if target is None:
            return None
        return target.title, target.href
