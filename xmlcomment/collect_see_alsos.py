"""Logic for collecting every `seealso` reference of a documentation comment."""

from xmlcomment.doc_comment import LinkInfo, LinkType
from xmlcomment.format_comment import (
    CodeResolver,
    CrefResolver,
    LangwordResolver,
    format_nodes,
)
from xmlcomment.fragment_tree import ElementNode
from xmlcomment.parse_fragment import parse_fragment
from xmlcomment.uid_of import uid_of


def _iter_see_alsos(node: ElementNode):
    for child in node.elements():
        if child.tag == "seealso":
            # The inner markup belongs to this link; it is not searched again
            yield child
        else:
            yield from _iter_see_alsos(child)


def collect_see_alsos(
    full_xml: str,
    resolve_cref: CrefResolver | None = None,
    resolve_code: CodeResolver | None = None,
    resolve_langword: LangwordResolver | None = None,
) -> list[LinkInfo]:
    """Return one LinkInfo per `seealso` element, in document order.

    A `cref` link id loses its kind prefix (`T:`, `M:`, ...). Elements with
    neither `href` nor `cref` are skipped. Duplicates are kept.
    """
    links: list[LinkInfo] = []
    for e in _iter_see_alsos(parse_fragment(full_xml)):
        href = e.get("href")
        cref = e.get("cref")
        if href:
            link_id, link_type = href, LinkType.HREF
        elif cref:
            link_id, link_type = uid_of(cref), LinkType.CREF
        else:
            continue
        alt_text = format_nodes(e.children, resolve_cref, resolve_code, resolve_langword)
        links.append(LinkInfo(link_id=link_id, alt_text=alt_text or None, link_type=link_type))
    return links
