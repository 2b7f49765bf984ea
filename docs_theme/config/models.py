"""Typed dataclasses describing docs theme configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docs_theme._constants import (
    DEFAULT_RUNTIME_PACKAGE_ROOT,
    DEFAULT_RUNTIME_SCRIPTS,
    DEFAULT_VERSION_FILE,
)


class ThemeConfigError(ValueError):
    """Raised when the theme configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class HighlightConfig:
    """Syntax highlighting options for code examples."""

    highlight_auto: bool = False
    language: str = "javascript"
    style: str = "default"


@dc.dataclass(slots=True)
class RuntimeScriptsConfig:
    """Location of the helper scripts copied from an installed package."""

    package_root: Path = Path(DEFAULT_RUNTIME_PACKAGE_ROOT)
    scripts: list[str] = dc.field(default_factory=lambda: list(DEFAULT_RUNTIME_SCRIPTS))


@dc.dataclass(slots=True)
class ThemeConfig:
    """Options recognised by a docs theme build.

    Attributes
    ----------
    output : Path | None
        Target directory; ``None`` renders to a string without writing files.
    name : str
        Project name shown in the page header.
    version : str | None
        Explicit version string; when unset it is read from ``version_file``.
    version_file : Path
        Package manifest JSON whose ``version`` field names the build version.
    hljs : HighlightConfig
        Highlighter options.
    paths : dict[str, str]
        Explicit namespace to URL mapping consulted before local anchors.
    runtime_scripts : RuntimeScriptsConfig | None
        Helper scripts fetched into ``assets``; ``None`` disables the fetch.
    versions : list[str]
        Reconciled version filenames, filled in during a build.
    """

    output: Path | None = None
    name: str = "RCTF"
    version: str | None = None
    version_file: Path = Path(DEFAULT_VERSION_FILE)
    hljs: HighlightConfig = dc.field(default_factory=HighlightConfig)
    paths: dict[str, str] = dc.field(default_factory=dict)
    runtime_scripts: RuntimeScriptsConfig | None = dc.field(
        default_factory=RuntimeScriptsConfig
    )
    versions: list[str] = dc.field(default_factory=list)


__all__ = [
    "HighlightConfig",
    "RuntimeScriptsConfig",
    "ThemeConfig",
    "ThemeConfigError",
]
