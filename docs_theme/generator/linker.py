"""Resolve symbol names to anchors or external URLs."""

from __future__ import annotations

import typing as typ

from docs_theme.records import walk_sections

if typ.TYPE_CHECKING:
    from docs_theme.records import DocumentationSection

    from .slugs import SlugRegistry

MDN_GLOBALS_URL = (
    "https://developer.mozilla.org/en-US/docs/Web/JavaScript/Reference/Global_Objects/"
)
JAVASCRIPT_GLOBALS = frozenset(
    {
        "Array",
        "ArrayBuffer",
        "Boolean",
        "DataView",
        "Date",
        "Error",
        "EvalError",
        "Float32Array",
        "Float64Array",
        "Function",
        "Generator",
        "Int16Array",
        "Int32Array",
        "Int8Array",
        "JSON",
        "Map",
        "Math",
        "Number",
        "Object",
        "Promise",
        "Proxy",
        "RangeError",
        "ReferenceError",
        "Reflect",
        "RegExp",
        "Set",
        "String",
        "Symbol",
        "SyntaxError",
        "TypeError",
        "URIError",
        "Uint16Array",
        "Uint32Array",
        "Uint8Array",
        "Uint8ClampedArray",
        "WeakMap",
        "WeakSet",
    }
)


class LinkResolver:
    """Map namespaces to ``#slug`` anchors for symbols documented in a render.

    Parameters
    ----------
    sections : iterable of DocumentationSection
        Every top-level section in the render; nested members are collected
        so ``Widget#render`` resolves as well as ``Widget``.
    slugs : SlugRegistry
        Registry shared with the templates so links and anchors agree.
    paths : mapping, optional
        Explicit namespace to URL overrides, consulted first.
    """

    def __init__(
        self,
        sections: typ.Iterable[DocumentationSection],
        slugs: SlugRegistry,
        paths: typ.Mapping[str, str] | None = None,
    ) -> None:
        self.slugs = slugs
        self.paths = dict(paths or {})
        self.namespaces = {section.anchor_key for section in walk_sections(sections)}

    def anchor(self, namespace: str) -> str:
        """Return the in-page anchor reference for ``namespace``."""
        return f"#{self.slugs.get_slug(namespace)}"

    def link(self, namespace: str) -> str | None:
        """Return a URL for ``namespace`` or ``None`` when it is unknown."""
        if namespace in self.paths:
            return self.paths[namespace]
        if namespace in self.namespaces:
            return self.anchor(namespace)
        if namespace in JAVASCRIPT_GLOBALS:
            return f"{MDN_GLOBALS_URL}{namespace}"
        return None


__all__ = ["JAVASCRIPT_GLOBALS", "LinkResolver"]
