"""Cyclopts CLI entrypoint for building versioned documentation sites.

The ``docs-theme`` console script reads the JSON emitted by
``documentation build --format json``, renders it with the theme templates,
and writes ``index.html``, ``v<version>.html`` and the version switcher into
the output directory. Without an output directory the page is printed to
stdout instead.

Examples
--------
Build into ``docs/`` using ``theme.yaml`` from the working directory:

>>> from docs_theme.cli import app
>>> app(["build", "api.json", "--output", "docs"])  # doctest: +SKIP

Render to stdout with an explicit version:

>>> app(["build", "api.json", "--version", "1.2.3"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import ThemeConfig, load_theme_config
from .generator import DocsSiteBuilder
from .records import load_sections

DEFAULT_CONFIG = Path("theme.yaml")

app = App(name="docs-theme", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(path: Path | None) -> ThemeConfig:
    """Load ``path``, or ``theme.yaml`` when present, or fall back to defaults."""
    if path is not None:
        return load_theme_config(path)
    if DEFAULT_CONFIG.exists():
        return load_theme_config(DEFAULT_CONFIG)
    return ThemeConfig()


@app.command(help="Render documentation JSON into a versioned HTML site.")
def build(
    source: typ.Annotated[
        Path, Parameter(help="Documentation JSON file", env_var="INPUT_SOURCE")
    ],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to theme config", env_var="INPUT_CONFIG")
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT"),
    ] = None,
    version: typ.Annotated[
        str | None,
        Parameter(help="Override the version being built", env_var="INPUT_VERSION"),
    ] = None,
    highlight_auto: typ.Annotated[
        bool, Parameter(help="Guess the language of code examples")
    ] = False,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Build the documentation site for ``source``.

    Parameters
    ----------
    source : Path
        JSON array of documentation comments.
    config : Path or None, optional
        Theme configuration YAML; ``theme.yaml`` is used when present.
    output : Path or None, optional
        Output directory overriding the config; when neither is set the HTML
        is written to stdout.
    version : str or None, optional
        Version overriding the config and the package manifest.
    highlight_auto : bool, optional
        Auto-detect the language of code examples.
    verbose : bool, optional
        Emit debug logging on stderr.

    Raises
    ------
    FileNotFoundError
        If the source, config, version manifest, or a runtime script is
        missing.
    """
    _configure_logging(verbose=verbose)
    theme_config = _load_config(config)
    if output is not None:
        theme_config.output = output
    if version is not None:
        theme_config.version = version
    if highlight_auto:
        theme_config.hljs.highlight_auto = True

    sections = load_sections(source)
    result = DocsSiteBuilder(sections, theme_config).build()
    if theme_config.output is None:
        sys.stdout.write(result.html)
        return
    for path in result.written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `docs-theme` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
