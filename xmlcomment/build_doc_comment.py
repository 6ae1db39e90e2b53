"""Logic for building a formatted DocumentationComment from raw symbol docs."""

from types import MappingProxyType

from xmlcomment.collect_see_alsos import collect_see_alsos
from xmlcomment.doc_comment import DocumentationComment, ExceptionInfo
from xmlcomment.documentation_provider import DocumentationProvider
from xmlcomment.format_comment import CodeResolver, LangwordResolver, format_comment


def build_doc_comment(
    docs: DocumentationProvider,
    resolve_code: CodeResolver | None = None,
    resolve_langword: LangwordResolver | None = None,
) -> DocumentationComment:
    """Format every field of one symbol's documentation.

    Raises MalformedCommentError if any field is not well-formed markup.
    """

    def resolve_cref(cref: str) -> tuple[str, str | None]:
        return docs.lookup_symbol(cref) or (cref, None)

    def fmt(raw_xml: str | None) -> str | None:
        if not raw_xml:
            return None
        return format_comment(raw_xml, resolve_cref, resolve_code, resolve_langword)

    exceptions = tuple(
        ExceptionInfo(type=t, description=fmt("\n".join(docs.get_exception_texts(t))))
        for t in dict.fromkeys(docs.exception_types)
    )
    examples = tuple(text for text in map(fmt, docs.example_texts) if text is not None)

    return DocumentationComment(
        summary=fmt(docs.summary_text),
        remarks=fmt(docs.remarks_text),
        returns=fmt(docs.returns_text),
        parameters=MappingProxyType(
            {n: fmt(docs.get_parameter_text(n)) for n in docs.parameter_names}
        ),
        type_parameters=MappingProxyType(
            {n: fmt(docs.get_type_parameter_text(n)) for n in docs.type_parameter_names}
        ),
        exceptions=exceptions,
        see_alsos=tuple(
            collect_see_alsos(docs.full_xml_fragment, resolve_cref, resolve_code, resolve_langword)
        ),
        examples=examples,
    )
