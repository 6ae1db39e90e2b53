"""Logic for formatting the documentation of many symbols concurrently."""

import logging
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor

from xmlcomment.comment_context import CommentContext
from xmlcomment.doc_comment import DocumentationComment
from xmlcomment.documentation_provider import DocumentationProvider
from xmlcomment.errors import MalformedCommentError
from xmlcomment.member_xml_provider import MemberXmlProvider

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[], DocumentationProvider]


def _build_one(
    key: str, make_provider: ProviderFactory, context: CommentContext
) -> DocumentationComment | None:
    try:
        return context.build(make_provider())
    except MalformedCommentError as exc:
        logger.warning("Skipping documentation of %s: %s", key, exc.reason)
        return None


def build_doc_comments(
    providers: Mapping[str, ProviderFactory],
    context: CommentContext,
    max_workers: int | None = None,
) -> dict[str, DocumentationComment]:
    """Build one comment per key; malformed comments are logged and left out.

    Results keep the order of `providers`.
    """
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            key: pool.submit(_build_one, key, make_provider, context)
            for key, make_provider in providers.items()
        }
        results = {key: f.result() for key, f in futures.items()}
    return {key: comment for key, comment in results.items() if comment is not None}


def build_member_comments(
    members: Mapping[str, str],
    context: CommentContext,
    max_workers: int | None = None,
) -> dict[str, DocumentationComment]:
    """Build comments for the members of an XML documentation file."""

    def factory(member_xml: str) -> ProviderFactory:
        return lambda: MemberXmlProvider(member_xml, context.link_targets)

    providers = {name: factory(xml) for name, xml in members.items()}
    return build_doc_comments(providers, context, max_workers)
