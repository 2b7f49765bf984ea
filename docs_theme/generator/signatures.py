"""Call signatures for documented symbols."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup, escape

if typ.TYPE_CHECKING:
    from docs_theme.records import DocumentationSection

    from .formatters import Formatters


def is_function(section: DocumentationSection) -> bool:
    """Return ``True`` for functions and typedefs declared as ``Function``."""
    if section.kind == "function":
        return True
    declared = section.type
    return (
        section.kind == "typedef"
        and bool(declared)
        and declared.get("type") == "NameExpression"
        and declared.get("name") == "Function"
    )


class SignatureFormatter:
    """Render ``new Widget(a, b)`` style signatures.

    Classes get a ``new`` prefix; anything that is neither function-like nor a
    class renders as its bare name.
    """

    def __init__(self, formatters: Formatters) -> None:
        self.formatters = formatters

    def _prefix(self, section: DocumentationSection) -> str | None:
        if section.kind == "class":
            return "new "
        if is_function(section):
            return ""
        return None

    def short_signature(self, section: DocumentationSection) -> Markup:
        prefix = self._prefix(section)
        if prefix is None:
            return escape(section.name)
        return Markup(prefix) + escape(section.name) + self.formatters.parameters(
            section, short=True
        )

    def signature(self, section: DocumentationSection) -> Markup:
        prefix = self._prefix(section)
        if prefix is None:
            return escape(section.name)
        returns = Markup("")
        if section.returns:
            returns = Markup(": ") + self.formatters.type(section.returns[0].type)
        return (
            Markup(prefix)
            + escape(section.name)
            + self.formatters.parameters(section)
            + returns
        )


__all__ = ["SignatureFormatter", "is_function"]
