"""Shared fixtures for docs theme tests.

``sample_comments`` mirrors a trimmed ``documentation build --format json``
payload: a note, a class with an instance member and a nested parameter
property, and a free function whose return type links back to the class.
"""

from __future__ import annotations

import typing as typ

import msgspec
import pytest

from docs_theme.config import ThemeConfig
from docs_theme.records import DocumentationSection, decode_sections

if typ.TYPE_CHECKING:
    from pathlib import Path


def _paragraph(*children: dict[str, typ.Any]) -> dict[str, typ.Any]:
    return {"type": "paragraph", "children": list(children)}


def _text(value: str) -> dict[str, typ.Any]:
    return {"type": "text", "value": value}


def _root(*children: dict[str, typ.Any]) -> dict[str, typ.Any]:
    return {"type": "root", "children": list(children)}


def _name(name: str) -> dict[str, str]:
    return {"type": "NameExpression", "name": name}


SAMPLE_COMMENTS: list[dict[str, typ.Any]] = [
    {
        "kind": "note",
        "name": "Getting started",
        "description": _root(_paragraph(_text("Read this first."))),
    },
    {
        "kind": "class",
        "name": "Widget",
        "namespace": "Widget",
        "description": _root(
            _paragraph(
                _text("A widget. Create one with "),
                {
                    "type": "link",
                    "url": "createWidget",
                    "jsdoc": True,
                    "children": [_text("createWidget")],
                },
                _text("."),
            )
        ),
        "params": [
            {
                "title": "param",
                "name": "options",
                "type": _name("Object"),
                "description": _root(_paragraph(_text("Widget options"))),
                "properties": [
                    {
                        "title": "param",
                        "name": "options.label",
                        "type": _name("string"),
                        "description": "The visible *label*",
                    }
                ],
            }
        ],
        "examples": [{"description": "const widget = new Widget({ label: 'x' });"}],
        "members": {
            "static": [],
            "instance": [
                {
                    "kind": "function",
                    "name": "render",
                    "namespace": "Widget#render",
                    "params": [{"title": "param", "name": "target", "type": _name("Element")}],
                    "returns": [{"title": "returns", "type": _name("Widget")}],
                }
            ],
            "inner": [],
            "events": [],
            "global": [],
        },
    },
    {
        "kind": "function",
        "name": "createWidget",
        "namespace": "createWidget",
        "returns": [
            {
                "title": "returns",
                "type": _name("Widget"),
                "description": _root(_paragraph(_text("a new widget"))),
            }
        ],
    },
]


@pytest.fixture
def sample_comments() -> list[dict[str, typ.Any]]:
    """Return the raw comment payload used across rendering tests."""
    return SAMPLE_COMMENTS


@pytest.fixture
def sample_sections() -> list[DocumentationSection]:
    """Return ``SAMPLE_COMMENTS`` decoded into sections."""
    return decode_sections(msgspec.json.encode(SAMPLE_COMMENTS))


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Return a not-yet-created output directory."""
    return tmp_path / "site"


@pytest.fixture
def theme_config(site_dir: Path) -> ThemeConfig:
    """Build a config writing into ``site_dir`` without runtime scripts."""
    return ThemeConfig(output=site_dir, version="1.2.3", runtime_scripts=None)
