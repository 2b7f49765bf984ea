"""Utilities for highlighting code examples and rendering markdown strings."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from markupsafe import Markup
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

from docs_theme.config import HighlightConfig

from .link_rewriter import rewrite_inline_links

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any


class HtmlContentRenderer:
    """Highlight code and render markdown text with consistent styling."""

    def __init__(
        self,
        highlight_config: HighlightConfig | None = None,
        link_extension: Extension | None = None,
    ) -> None:
        """Initialize a renderer with highlighter options and a link extension.

        Parameters
        ----------
        highlight_config : HighlightConfig, optional
            Highlighting behaviour; auto-detects the language when
            ``highlight_auto`` is set, otherwise uses ``language``.
        link_extension : Extension, optional
            Markdown extension used to resolve symbol links; pass ``None`` to
            leave links untouched.
        """
        self.config = highlight_config or HighlightConfig()
        self._formatter = HtmlFormatter(style=self.config.style, nowrap=True)
        self._link_extension = link_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".highlight")

    def highlight(self, code: str, language: str | None = None) -> Markup:
        """Return ``code`` as highlighted HTML spans (no wrapping ``<pre>``).

        An explicit ``language`` wins; otherwise the language is guessed when
        auto-detection is configured, else the configured default is used.
        Unknown lexer names fall back to plain text.
        """
        if language:
            lexer = self._lexer(language)
        elif self.config.highlight_auto:
            try:
                lexer = guess_lexer(code)
            except ClassNotFound:
                lexer = self._lexer("text")
        else:
            lexer = self._lexer(self.config.language)
        return Markup(highlight(code, lexer, self._formatter))

    @staticmethod
    def _lexer(name: str) -> typ.Any:
        try:
            return get_lexer_by_name(name)
        except ClassNotFound:
            return get_lexer_by_name("text")

    def markdown(self, text: str, *, inline: bool = False) -> Markup:
        """Render a markdown string, optionally without its paragraph wrapper."""
        if not text.strip():
            return Markup("")
        extensions: list[Extension | str] = ["fenced_code", "tables", "sane_lists"]
        if self._link_extension:
            extensions.append(self._link_extension)
        md = Markdown(extensions=extensions)
        html = md.convert(rewrite_inline_links(text))
        if inline and html.startswith("<p>"):
            end = html.index("</p>")
            html = html[len("<p>") : end] + html[end + len("</p>") :]
        return Markup(html)


__all__ = ["HtmlContentRenderer"]
