"""Resolvers shared by every comment of one documentation build."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from xmlcomment.build_doc_comment import build_doc_comment
from xmlcomment.code_source_loader import FileCodeSourceLoader
from xmlcomment.doc_comment import DocumentationComment
from xmlcomment.documentation_provider import DocumentationProvider
from xmlcomment.format_comment import CodeResolver, LangwordResolver
from xmlcomment.langword_urls import KeywordLinkTable
from xmlcomment.link_target import LinkTarget
from xmlcomment.load_xref_map import load_xref_map


@dataclass(frozen=True)
class CommentContext:
    """Code-source and keyword resolvers plus the known cross-reference targets."""

    resolve_code: CodeResolver | None = None
    resolve_langword: LangwordResolver | None = None
    link_targets: dict[str, LinkTarget] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: dict[str, Any], base_dir: Path | None = None) -> "CommentContext":
        """Build the resolvers described by a loaded configuration.

        Relative paths in the configuration are taken from `base_dir`
        (the working directory by default).
        """
        base = base_dir or Path.cwd()
        code_source = config.get("code_source") or {}
        loader = FileCodeSourceLoader(
            base / str(code_source.get("root") or "."),
            encoding=str(code_source.get("encoding") or "utf-8-sig"),
        )
        xref_map = config.get("xref_map")
        targets = load_xref_map(base / str(xref_map)) if xref_map else {}
        return cls(
            resolve_code=loader,
            resolve_langword=KeywordLinkTable(config.get("langword_urls")),
            link_targets=targets,
        )

    def build(self, docs: DocumentationProvider) -> DocumentationComment:
        """Format one symbol's documentation with this context's resolvers."""
        return build_doc_comment(docs, self.resolve_code, self.resolve_langword)
