"""Resolve symbol references inside plain markdown descriptions.

Comment records normally carry descriptions as markdown trees, but plain
string descriptions are accepted too. For those, ``{@link Widget}`` and
``{@link Widget|the widget}`` tags are first rewritten into markdown links and
then :class:`SymbolLinkExtension` points every link whose target names a
documented symbol at that symbol's anchor.
"""

from __future__ import annotations

import re
import typing as typ

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from .linker import LinkResolver
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any
    LinkResolver = typ.Any

INLINE_LINK_PATTERN = re.compile(r"\{@link(?:code|plain)?\s+([^}|\s]+)(?:[|\s]\s*([^}]+))?\}")


def rewrite_inline_links(text: str) -> str:
    """Turn ``{@link Target|label}`` tags into ``[label](Target)`` links."""

    def _repl(match: re.Match[str]) -> str:
        target, label = match.groups()
        return f"[{(label or target).strip()}]({target})"

    return INLINE_LINK_PATTERN.sub(_repl, text)


class SymbolLinkExtension(Extension):
    """Rewrite links that name documented symbols into in-page anchors."""

    def __init__(self, resolver: LinkResolver) -> None:
        self.resolver = resolver

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the symbol-link treeprocessor on the Markdown instance."""
        processor = SymbolLinkTreeprocessor(md, self.resolver)
        md.treeprocessors.register(processor, "docs_theme_symbol_links", 15)


class SymbolLinkTreeprocessor(Treeprocessor):
    """Point anchors at the symbols they name."""

    def __init__(self, md: Markdown, resolver: LinkResolver) -> None:
        super().__init__(md)
        self.resolver = resolver

    def run(self, root: Element) -> Element:
        """Rewrite symbol-named anchors in the parsed markdown tree."""
        for element in root.iter("a"):
            rewritten = self._rewrite(element.get("href"))
            if rewritten:
                element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        if not target or target.startswith("#") or "://" in target:
            return None
        return self.resolver.link(target)


__all__ = [
    "INLINE_LINK_PATTERN",
    "SymbolLinkExtension",
    "SymbolLinkTreeprocessor",
    "rewrite_inline_links",
]
