"""HTML formatters for type expressions, parameter lists, and markdown trees.

``Formatters`` bundles the four services templates and signatures depend on:

``type(node)``
    Render a doctrine type-expression tree with resolvable names linked.
``parameters(section, short=False)``
    Render a parenthesised parameter list, either names only (``short``) or
    ``name: Type`` pairs.
``markdown(ast)``
    Render a markdown abstract syntax tree (mdast) into HTML, resolving
    ``{@link}`` references through the linker.
``autolink(text)``
    Link ``text`` when it names a known symbol, otherwise escape it.

All results are :class:`markupsafe.Markup` so Jinja autoescaping leaves them
untouched.
"""

from __future__ import annotations

import json
import logging
import typing as typ

from markupsafe import Markup, escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docs_theme.records import DocumentationSection, Param, TypeNode

logger = logging.getLogger(__name__)

LinkFn = typ.Callable[[str], str | None]
HighlightFn = typ.Callable[[str, str | None], str]


def _anchor(href: str, text: str) -> str:
    return f'<a href="{escape(href)}">{escape(text)}</a>'


class TypeFormatter:
    """Render doctrine type-expression trees into HTML fragments."""

    def __init__(self, link: LinkFn) -> None:
        self._link = link

    def __call__(self, node: TypeNode | None) -> Markup:
        return Markup(self._format(node))

    def _name(self, name: str) -> str:
        href = self._link(name)
        return _anchor(href, name) if href else str(escape(name))

    def _join(
        self,
        nodes: cabc.Iterable[TypeNode],
        open_: str,
        close: str,
        separator: str = ", ",
    ) -> str:
        inner = separator.join(self._format(node) for node in nodes)
        return f"{escape(open_)}{inner}{escape(close)}"

    @staticmethod
    def _decorate(formatted: str, marker: str, *, prefix: bool) -> str:
        return f"{marker}{formatted}" if prefix else f"{formatted}{marker}"

    def _format(self, node: TypeNode | None) -> str:  # noqa: C901, PLR0911, PLR0912
        if not node:
            return "any"
        kind = node.get("type")
        match kind:
            case "NullableLiteral":
                return "?"
            case "AllLiteral":
                return "any"
            case "NullLiteral":
                return "null"
            case "VoidLiteral":
                return "void"
            case "UndefinedLiteral":
                return self._name("undefined")
            case "NameExpression":
                return self._name(str(node.get("name", "")))
            case "ParameterType":
                label = f"{escape(node['name'])}: " if node.get("name") else ""
                return label + self._format(node.get("expression"))
            case "TypeApplication":
                return self._format(node.get("expression")) + self._join(
                    node.get("applications", []), "<", ">"
                )
            case "UnionType":
                return self._join(node.get("elements", []), "(", ")", " | ")
            case "ArrayType":
                return self._join(node.get("elements", []), "[", "]")
            case "RecordType":
                return self._join(node.get("fields", []), "{", "}")
            case "FieldType":
                key = str(escape(node.get("key", "")))
                if node.get("value"):
                    return f"{key}: {self._format(node['value'])}"
                return key
            case "FunctionType":
                return self._format_function(node)
            case "RestType":
                return "..." + self._format(node.get("expression"))
            case "OptionalType":
                formatted = self._decorate(
                    self._format(node.get("expression")), "?", prefix=False
                )
                if node.get("default"):
                    formatted += f"= {escape(node['default'])}"
                return formatted
            case "NonNullableType":
                return self._decorate(
                    self._format(node.get("expression")),
                    "!",
                    prefix=bool(node.get("prefix")),
                )
            case "NullableType":
                return self._decorate(
                    self._format(node.get("expression")),
                    "?",
                    prefix=bool(node.get("prefix")),
                )
            case "StringLiteralType":
                return f"<code>{escape(json.dumps(node.get('value')))}</code>"
            case "NumericLiteralType":
                return f"<code>{escape(str(node.get('value')))}</code>"
            case "BooleanLiteralType":
                value = "true" if node.get("value") else "false"
                return f"<code>{value}</code>"
            case _:
                logger.warning("unknown type expression %r rendered as 'any'", kind)
                return "any"

    def _format_function(self, node: TypeNode) -> str:
        parts = ["function ("]
        this_type = node.get("this")
        params = node.get("params", [])
        if this_type:
            parts.append("new: " if node.get("new") else "this: ")
            parts.append(self._format(this_type))
            if params:
                parts.append(", ")
        parts.append(self._join(params, "", ")"))
        if node.get("result"):
            parts.append(": " + self._format(node["result"]))
        return "".join(parts)


class MarkdownAstRenderer:
    """Render mdast nodes (as produced by remark) into HTML."""

    def __init__(self, link: LinkFn, highlight: HighlightFn | None = None) -> None:
        self._link = link
        self._highlight = highlight

    def __call__(self, ast: typ.Mapping[str, typ.Any] | None) -> Markup:
        if not ast:
            return Markup("")
        return Markup(self._node(ast))

    def _children(self, node: typ.Mapping[str, typ.Any], *, tight: bool = False) -> str:
        rendered = []
        for child in node.get("children", []):
            if tight and child.get("type") == "paragraph":
                rendered.append(self._children(child))
            else:
                rendered.append(self._node(child))
        return "".join(rendered)

    def _node(self, node: typ.Mapping[str, typ.Any]) -> str:  # noqa: C901, PLR0911, PLR0912
        kind = node.get("type")
        match kind:
            case "root":
                return self._children(node)
            case "paragraph":
                return f"<p>{self._children(node)}</p>\n"
            case "text":
                return str(escape(node.get("value", "")))
            case "emphasis":
                return f"<em>{self._children(node)}</em>"
            case "strong":
                return f"<strong>{self._children(node)}</strong>"
            case "delete":
                return f"<del>{self._children(node)}</del>"
            case "inlineCode":
                return f"<code>{escape(node.get('value', ''))}</code>"
            case "break":
                return "<br>\n"
            case "thematicBreak":
                return "<hr>\n"
            case "html":
                return str(node.get("value", ""))
            case "heading":
                depth = min(max(int(node.get("depth", 1)), 1), 6)
                return f"<h{depth}>{self._children(node)}</h{depth}>\n"
            case "blockquote":
                return f"<blockquote>\n{self._children(node)}</blockquote>\n"
            case "list":
                return self._list(node)
            case "listItem":
                tight = not node.get("spread", False)
                return f"<li>{self._children(node, tight=tight)}</li>\n"
            case "code":
                return self._code(node)
            case "link":
                return self._link_node(node)
            case "image":
                title = node.get("title")
                title_attr = f' title="{escape(title)}"' if title else ""
                return (
                    f'<img src="{escape(node.get("url", ""))}" '
                    f'alt="{escape(node.get("alt") or "")}"{title_attr}>'
                )
            case "table":
                return self._table(node)
            case _:
                logger.debug("rendering children of unknown markdown node %r", kind)
                return self._children(node)

    def _list(self, node: typ.Mapping[str, typ.Any]) -> str:
        if node.get("ordered"):
            start = node.get("start")
            start_attr = f' start="{int(start)}"' if start not in (None, 1) else ""
            return f"<ol{start_attr}>\n{self._children(node)}</ol>\n"
        return f"<ul>\n{self._children(node)}</ul>\n"

    def _code(self, node: typ.Mapping[str, typ.Any]) -> str:
        value = node.get("value", "")
        lang = node.get("lang")
        if self._highlight is not None:
            body = self._highlight(value, lang)
        else:
            body = str(escape(value))
        class_attr = f' class="language-{escape(lang)}"' if lang else ""
        return f"<pre><code{class_attr}>{body}</code></pre>\n"

    def _link_node(self, node: typ.Mapping[str, typ.Any]) -> str:
        url = node.get("url", "")
        if node.get("jsdoc"):
            href = self._link(url)
            if href is None:
                return self._children(node) or str(escape(url))
            url = href
        title = node.get("title")
        title_attr = f' title="{escape(title)}"' if title else ""
        return f'<a href="{escape(url)}"{title_attr}>{self._children(node)}</a>'

    def _table(self, node: typ.Mapping[str, typ.Any]) -> str:
        rows = node.get("children", [])
        align = node.get("align") or []
        if not rows:
            return "<table></table>\n"

        def _row(row: typ.Mapping[str, typ.Any], cell_tag: str) -> str:
            cells = []
            for idx, cell in enumerate(row.get("children", [])):
                alignment = align[idx] if idx < len(align) else None
                style = f' align="{escape(alignment)}"' if alignment else ""
                cells.append(f"<{cell_tag}{style}>{self._children(cell)}</{cell_tag}>")
            return "<tr>" + "".join(cells) + "</tr>\n"

        head = _row(rows[0], "th")
        body = "".join(_row(row, "td") for row in rows[1:])
        return (
            f"<table>\n<thead>\n{head}</thead>\n"
            f"<tbody>\n{body}</tbody>\n</table>\n"
        )


class Formatters:
    """Shared formatting services bound to one render's link resolver."""

    def __init__(self, link: LinkFn, highlight: HighlightFn | None = None) -> None:
        self._link = link
        self.type = TypeFormatter(link)
        self.markdown = MarkdownAstRenderer(link, highlight)

    def parameters(self, section: DocumentationSection, short: bool = False) -> Markup:  # noqa: FBT001, FBT002
        """Return the parenthesised parameter list for ``section``."""
        if not section.params:
            return Markup("()")
        formatted = ", ".join(self._parameter(param, short=short) for param in section.params)
        return Markup(f"({formatted})")

    def _parameter(self, param: Param, *, short: bool) -> str:
        name = str(escape(param.name))
        if short:
            if param.is_optional:
                if param.default:
                    return f"{name} = {escape(param.default)}"
                return f"{name}?"
            return name
        return f"{name}: {self.type(param.type)}".replace("\n", "")

    def autolink(self, text: str) -> Markup:
        """Return ``text`` linked to its documentation when resolvable."""
        href = self._link(text)
        if href:
            return Markup(_anchor(href, text))
        return escape(text)


__all__ = ["Formatters", "MarkdownAstRenderer", "TypeFormatter"]
