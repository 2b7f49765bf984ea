"""Compose the page from mutually recursive template fragments.

A page contains a section list, which contains sections, which in turn contain
section lists for their members, notes, and parameter-property rows that nest
their own sub-properties. Each fragment is a Jinja template; this module binds
them into one namespace so every fragment can call the others by name:

``render_section_list(sections, nested=False)``
``render_section(section, nested=False)``
``render_note(note, nested=False)``
``render_param_property(property)``

together with the helpers carried by :class:`RenderContext`. The namespace is
built per render invocation and passed to every template render, so helpers
from one build never leak into another.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from jinja2 import Template

    from docs_theme.config import ThemeConfig
    from docs_theme.records import DocumentationSection, Markdown

    from .formatters import Formatters
    from .renderer import HtmlContentRenderer
    from .signatures import SignatureFormatter
    from .slugs import SlugRegistry

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = "index.jinja"
FRAGMENT_TEMPLATES = {
    "render_section_list": "section_list.jinja",
    "render_section": "section.jinja",
    "render_note": "note.jinja",
    "render_param_property": "param_property.jinja",
}


def flatten_inline(ast: dict[str, typ.Any]) -> dict[str, typ.Any]:
    """Splice a leading paragraph's children into the root of ``ast``.

    Inline contexts such as table cells must not receive a block-level
    ``<p>`` wrapper, so ``root(paragraph(A, B), C)`` becomes ``root(A, B, C)``.
    Trees that do not start with a paragraph are returned unchanged.
    """
    children = ast.get("children") or []
    if children and children[0].get("type") == "paragraph":
        return {
            "type": "root",
            "children": list(children[0].get("children", [])) + list(children[1:]),
        }
    return ast


@dc.dataclass(frozen=True, slots=True)
class RenderContext:
    """Helpers shared by every fragment of one render invocation."""

    slug: cabc.Callable[[str], str]
    short_signature: cabc.Callable[[DocumentationSection], Markup]
    signature: cabc.Callable[[DocumentationSection], Markup]
    md: cabc.Callable[..., Markup]
    format_type: cabc.Callable[[typ.Any], Markup]
    autolink: cabc.Callable[[str], Markup]
    highlight: cabc.Callable[[str], Markup]
    stylesheet: str = ""

    def helpers(self) -> dict[str, typ.Any]:
        """Return the helpers keyed by the names templates use."""
        return {field.name: getattr(self, field.name) for field in dc.fields(self)}


def build_render_context(
    *,
    slugs: SlugRegistry,
    signatures: SignatureFormatter,
    formatters: Formatters,
    renderer: HtmlContentRenderer,
) -> RenderContext:
    """Assemble the helper bundle for one render invocation."""

    def md(description: Markdown, inline: bool = False) -> Markup:  # noqa: FBT001, FBT002
        if not description:
            return Markup("")
        if isinstance(description, str):
            return renderer.markdown(description, inline=inline)
        if inline:
            description = flatten_inline(description)
        return formatters.markdown(description)

    def highlight_example(example: str) -> Markup:
        return renderer.highlight(example)

    return RenderContext(
        slug=slugs.get_slug,
        short_signature=signatures.short_signature,
        signature=signatures.signature,
        md=md,
        format_type=formatters.type,
        autolink=formatters.autolink,
        highlight=highlight_example,
        stylesheet=renderer.stylesheet,
    )


class TemplateComposer:
    """Load the fragment templates and render complete pages from them."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        """Initialize the Jinja environment.

        Parameters
        ----------
        templates_dir : Path, optional
            Directory containing ``index.jinja`` and the fragment templates;
            defaults to the package templates.
        """
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def load(self) -> dict[str, Template]:
        """Compile every fragment template, raising on malformed syntax.

        Raises
        ------
        jinja2.TemplateSyntaxError
            If a template has unbalanced or malformed delimiters.
        jinja2.TemplateNotFound
            If a template file is missing.
        """
        templates = {
            name: self.env.get_template(filename)
            for name, filename in FRAGMENT_TEMPLATES.items()
        }
        templates["page"] = self.env.get_template(PAGE_TEMPLATE)
        logger.debug("loaded templates from %s", self.templates_dir)
        return templates

    def render(
        self,
        sections: cabc.Sequence[DocumentationSection],
        config: ThemeConfig,
        context: RenderContext,
    ) -> str:
        """Render ``sections`` into a complete HTML page.

        The fragment renderers are bound into the shared namespace before the
        page template runs, so any fragment may call any other.

        Raises
        ------
        jinja2.UndefinedError
            If a template references a helper that is not in the namespace.
        """
        templates = self.load()
        page = templates.pop("page")
        namespace: dict[str, typ.Any] = context.helpers()
        namespace["config"] = config
        for name, template in templates.items():
            namespace[name] = _bind_fragment(template, namespace)
        html = page.render(docs=list(sections), **namespace)
        if not html.endswith("\n"):
            html += "\n"
        return html


def _bind_fragment(
    template: Template, namespace: dict[str, typ.Any]
) -> cabc.Callable[..., Markup]:
    """Return a callable rendering ``template`` against the shared namespace."""
    parameter_names = _FRAGMENT_PARAMETERS[template.name or ""]

    def _render(*args: typ.Any, **kwargs: typ.Any) -> Markup:
        values = dict(zip(parameter_names, args, strict=False))
        values.update(kwargs)
        values.setdefault("nested", False)
        return Markup(template.render(**namespace, **values))

    return _render


_FRAGMENT_PARAMETERS: dict[str, tuple[str, ...]] = {
    "section_list.jinja": ("sections", "nested"),
    "section.jinja": ("section", "nested"),
    "note.jinja": ("note", "nested"),
    "param_property.jinja": ("property",),
}


__all__ = [
    "FRAGMENT_TEMPLATES",
    "PAGE_TEMPLATE",
    "RenderContext",
    "TemplateComposer",
    "build_render_context",
    "flatten_inline",
]
