"""Tests for template composition and the shared render helpers.

The rendered page is parsed with BeautifulSoup to check that fragments nest
correctly: sections contain section lists for members, parameter tables hold
property rows, and every anchor the table of contents links to exists.
"""

from __future__ import annotations

import shutil
import typing as typ
from pathlib import Path
from types import SimpleNamespace

import jinja2
import pytest
from bs4 import BeautifulSoup

from docs_theme.config import ThemeConfig
from docs_theme.generator import DocsSiteBuilder, TemplateComposer
from docs_theme.generator.composer import build_render_context, flatten_inline
from docs_theme.generator.renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from docs_theme.records import DocumentationSection

A = {"type": "text", "value": "A"}
B = {"type": "emphasis", "children": [{"type": "text", "value": "B"}]}
C = {"type": "paragraph", "children": [{"type": "text", "value": "C"}]}


def _context(captured: list[dict[str, typ.Any]]) -> typ.Any:
    """Return a render context whose markdown formatter records its input."""

    def _markdown(ast: dict[str, typ.Any]) -> str:
        captured.append(ast)
        return "rendered"

    formatters = SimpleNamespace(markdown=_markdown, type=str, autolink=str)
    signatures = SimpleNamespace(short_signature=str, signature=str)
    return build_render_context(
        slugs=SimpleNamespace(get_slug=str),
        signatures=signatures,
        formatters=formatters,
        renderer=HtmlContentRenderer(),
    )


def test_flatten_inline_splices_leading_paragraph() -> None:
    ast = {"type": "root", "children": [{"type": "paragraph", "children": [A, B]}, C]}
    assert flatten_inline(ast)["children"] == [A, B, C]


def test_flatten_inline_leaves_other_trees_alone() -> None:
    ast = {"type": "root", "children": [C["children"][0], C]}
    assert flatten_inline(ast) is ast


def test_md_helper_flattens_only_inline_trees() -> None:
    captured: list[dict[str, typ.Any]] = []
    context = _context(captured)
    ast = {"type": "root", "children": [{"type": "paragraph", "children": [A, B]}, C]}

    context.md(ast, True)
    context.md(ast)

    assert captured[0]["children"] == [A, B, C]
    assert captured[1] is ast


def test_md_helper_renders_plain_strings_inline() -> None:
    context = _context([])
    assert context.md("Hello *there*", True) == "Hello <em>there</em>"
    assert context.md("Hello *there*") == "<p>Hello <em>there</em></p>"
    assert context.md(None) == ""


def _render(sections: list[DocumentationSection]) -> BeautifulSoup:
    config = ThemeConfig(version="1.2.3", runtime_scripts=None)
    result = DocsSiteBuilder(sections, config).build()
    return BeautifulSoup(result.html, "html.parser")


def test_page_nests_sections_and_members(sample_sections: list[DocumentationSection]) -> None:
    soup = _render(sample_sections)

    assert soup.find("h2", id="getting-started") is not None
    widget = soup.find("h3", id="widget")
    assert widget is not None
    assert widget.get_text(strip=True) == "Widget"

    member = soup.find(id="widgetrender")
    assert member is not None
    assert "section-list__item" in member["class"]
    summary = member.select_one(".section-list__summary").get_text(strip=True)
    assert summary == "render(target)"


def test_page_anchor_ids_are_unique_and_linked(
    sample_sections: list[DocumentationSection],
) -> None:
    soup = _render(sample_sections)
    ids = [tag["id"] for tag in soup.find_all(id=True)]
    assert len(ids) == len(set(ids))

    toc_targets = [link["href"][1:] for link in soup.select("#toc a")]
    assert toc_targets == ["getting-started", "widget", "widgetrender", "createwidget"]
    assert set(toc_targets) <= set(ids)


def test_page_renders_signatures_with_links(
    sample_sections: list[DocumentationSection],
) -> None:
    soup = _render(sample_sections)
    signatures = [node.get_text() for node in soup.select(".doc-signature")]
    assert "new Widget(options: Object)" in signatures
    assert "render(target: Element): Widget" in signatures
    assert "createWidget(): Widget" in signatures

    create = soup.find("h3", id="createwidget").find_parent("section")
    link = create.select_one(".doc-signature a")
    assert link["href"] == "#widget"


def test_page_resolves_inline_links_and_property_rows(
    sample_sections: list[DocumentationSection],
) -> None:
    soup = _render(sample_sections)
    widget = soup.find("h3", id="widget").find_parent("section")

    description_link = widget.find("a", string="createWidget")
    assert description_link["href"] == "#createwidget"

    row = widget.select_one(".doc-table tbody tr")
    assert row.select_one(".code").get_text() == "options.label"
    assert row.select_one(".doc-table__description em").get_text() == "label"


def test_page_highlights_examples(sample_sections: list[DocumentationSection]) -> None:
    soup = _render(sample_sections)
    example = soup.select_one("pre.highlight code")
    assert "new Widget" in example.get_text()
    assert example.find("span") is not None


def test_page_lists_versions(sample_sections: list[DocumentationSection]) -> None:
    soup = _render(sample_sections)
    versions = [link["href"] for link in soup.select("#rctf-versions a")]
    assert versions == ["v1.2.3.html"]
    assert soup.find("script", src="assets/rctf_versions.js") is not None


def _copy_templates(tmp_path: Path) -> Path:
    target = tmp_path / "templates"
    shutil.copytree(TemplateComposer().templates_dir, target)
    return target


def test_malformed_template_aborts_before_writing(
    tmp_path: Path, sample_sections: list[DocumentationSection]
) -> None:
    templates = _copy_templates(tmp_path)
    (templates / "section.jinja").write_text("{% if section %}unbalanced", encoding="utf-8")
    output = tmp_path / "site"
    output.mkdir()
    config = ThemeConfig(output=output, version="1.0.0", runtime_scripts=None)
    builder = DocsSiteBuilder(
        sample_sections, config, composer=TemplateComposer(templates_dir=templates)
    )

    with pytest.raises(jinja2.TemplateSyntaxError):
        builder.build()
    assert list(output.iterdir()) == []


def test_unknown_helper_is_fatal(
    tmp_path: Path, sample_sections: list[DocumentationSection]
) -> None:
    templates = _copy_templates(tmp_path)
    (templates / "note.jinja").write_text("{{ missing_helper(note) }}", encoding="utf-8")
    config = ThemeConfig(version="1.0.0", runtime_scripts=None)
    builder = DocsSiteBuilder(
        sample_sections, config, composer=TemplateComposer(templates_dir=templates)
    )

    with pytest.raises(jinja2.UndefinedError):
        builder.build()
