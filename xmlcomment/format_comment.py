"""Render documentation comment markup into an HTML fragment.

The markup is the XML vocabulary of C# documentation comments (`para`,
`code`, `list`, `see`, ...). Every element is classified into an
`ElementKind` and rendered by the one handler registered for that kind;
tags outside the recognized set pass through with their children.

Rendering never fails on content: unresolved references and unknown tags
degrade to neutral markup. Only markup that is not well-formed XML raises
`MalformedCommentError`.
"""

import html
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import PurePath

from xmlcomment.element_kind import ElementKind, element_kind_of
from xmlcomment.extract_region import extract_region
from xmlcomment.fragment_tree import ElementNode, FragmentNode, TextNode
from xmlcomment.langword_urls import get_langword_url
from xmlcomment.parse_fragment import parse_fragment

CrefResolver = Callable[[str], tuple[str, str | None]]
CodeResolver = Callable[[str], str | None]
LangwordResolver = Callable[[str], str | None]

# cref values the compiler could not bind are written as "!:<text>"
EXTERNAL_REFERENCE_PREFIX = "!:"
DEFAULT_CODE_LANGUAGE = "csharp"


def escape_text(text: str) -> str:
    """Escape character data for use as element content."""
    return html.escape(text, quote=False)


def escape_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return html.escape(value, quote=True)


@dataclass(frozen=True)
class _Resolvers:
    cref: CrefResolver | None
    code: CodeResolver | None
    langword: LangwordResolver


Handler = Callable[[ElementNode, _Resolvers, list[str]], None]


def format_comment(
    raw_xml: str,
    resolve_cref: CrefResolver | None = None,
    resolve_code: CodeResolver | None = None,
    resolve_langword: LangwordResolver | None = None,
) -> str:
    """Format the raw markup of one documentation field as HTML."""
    root = parse_fragment(raw_xml)
    return format_nodes(root.children, resolve_cref, resolve_code, resolve_langword)


def format_nodes(
    nodes: Iterable[FragmentNode],
    resolve_cref: CrefResolver | None = None,
    resolve_code: CodeResolver | None = None,
    resolve_langword: LangwordResolver | None = None,
) -> str:
    """Format already parsed nodes as HTML."""
    resolvers = _Resolvers(resolve_cref, resolve_code, resolve_langword or get_langword_url)
    out: list[str] = []
    for node in nodes:
        _format_node(node, resolvers, out)
    return "".join(out)


def _format_node(node: FragmentNode, resolvers: _Resolvers, out: list[str]) -> None:
    if isinstance(node, TextNode):
        out.append(escape_text(node.text))
        return
    HANDLERS[element_kind_of(node.tag)](node, resolvers, out)


def _format_children(
    e: ElementNode,
    resolvers: _Resolvers,
    out: list[str],
    open_tag: str | None = None,
    close_tag: str | None = None,
    fallback: str | None = None,
) -> None:
    """Wrap the children of `e`; an element without children shows `fallback`."""
    if open_tag is not None:
        out.append(open_tag)
    if fallback is None or e.children:
        for child in e.children:
            _format_node(child, resolvers, out)
    else:
        out.append(escape_text(fallback))
    if close_tag is not None:
        out.append(close_tag)


def _format_para(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    _format_children(e, resolvers, out, "<p>", "</p>")


def _format_term(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    _format_children(e, resolvers, out, '<span class="term">', "</span>")


def _format_description(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    _format_children(e, resolvers, out)


def _format_param_ref(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    _format_children(e, resolvers, out, "<c>", "</c>", e.get("name"))


def _format_unknown(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    _format_children(e, resolvers, out, f"<{e.tag}>", f"</{e.tag}>")


def _format_code(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    source = e.get("source")
    if source is None:
        _format_children(
            e, resolvers, out, f'<pre><code class="lang-{DEFAULT_CODE_LANGUAGE}">', "</code></pre>"
        )
        return

    lang = PurePath(source).suffix.lstrip(".")
    code = None
    if resolvers.code is not None:
        code = extract_region(source, e.get("region"), resolvers.code)
    out.append(f'<pre><code class="lang-{escape_attribute(lang)}">')
    out.append(html.escape(code or ""))
    out.append("</code></pre>")


def _format_list(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    list_type = e.get("type")
    if list_type == "table":
        _format_table(e, resolvers, out)
    elif list_type == "number":
        _format_items(e, resolvers, out, "<ol>", "</ol>")
    else:
        _format_items(e, resolvers, out, "<ul>", "</ul>")


def _format_items(
    e: ElementNode, resolvers: _Resolvers, out: list[str], open_tag: str, close_tag: str
) -> None:
    out.append(open_tag)
    for child in e.elements():
        if child.tag == "item":
            out.append("<li>")
            _format_node(child, resolvers, out)
            out.append("</li>")
    out.append(close_tag)


def _format_table(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    out.append("<table>")
    header = next((c for c in e.elements() if c.tag == "listheader"), None)
    if header is not None:
        out.append("<thead><tr>")
        for child in header.children:
            out.append("<td>")
            _format_node(child, resolvers, out)
            out.append("</td>")
        out.append("</tr></thead>")

    # Each item is one cell; items are not grouped into rows
    out.append("<tbody>")
    for child in e.elements():
        if child.tag == "item":
            _format_children(child, resolvers, out, "<td>", "</td>")
    out.append("</tbody></table>")


def _format_see(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    href = e.get("href")
    if href:
        _format_children(e, resolvers, out, f'<a href="{escape_attribute(href)}">', "</a>", href)
        return

    langword = e.get("langword")
    if e.tag == "see" and langword is not None:
        url = resolvers.langword(langword)
        if url:
            open_tag = f'<a href="{escape_attribute(url)}">'
            _format_children(e, resolvers, out, open_tag, "</a>", langword)
        else:
            _format_children(e, resolvers, out, "<c>", "</c>", langword)
        return

    cref = e.get("cref")
    if cref is None:
        return
    if cref.startswith(EXTERNAL_REFERENCE_PREFIX):
        remainder = cref[len(EXTERNAL_REFERENCE_PREFIX) :]
        _format_children(e, resolvers, out, '<c class="xref">', "</c>", remainder)
        return
    if resolvers.cref is None:
        return

    name, url = resolvers.cref(cref)
    if url:
        open_tag = f'<a class="xref" href="{escape_attribute(url)}">'
        _format_children(e, resolvers, out, open_tag, "</a>", name)
    else:
        _format_children(e, resolvers, out, '<c class="xref">', "</c>", name)


def _format_note(e: ElementNode, resolvers: _Resolvers, out: list[str]) -> None:
    note_type = e.get("type")
    if note_type is None:
        note_type = "note"
    open_tag = f'<div class="{escape_attribute(note_type)}"><h5>{escape_text(note_type)}</h5>'
    _format_children(e, resolvers, out, open_tag, "</div>")


# One handler per element kind
HANDLERS: dict[ElementKind, Handler] = {
    ElementKind.PARA: _format_para,
    ElementKind.CODE: _format_code,
    ElementKind.TERM: _format_term,
    ElementKind.DESCRIPTION: _format_description,
    ElementKind.LIST: _format_list,
    ElementKind.PARAM_REF: _format_param_ref,
    ElementKind.SEE: _format_see,
    ElementKind.SEE_ALSO: _format_see,
    ElementKind.NOTE: _format_note,
    ElementKind.UNKNOWN: _format_unknown,
}
