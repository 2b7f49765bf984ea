"""Render parsed API documentation into a versioned static HTML site.

This package exposes the ``docs-theme`` CLI used to turn the JSON output of
``documentation build --format json`` into ``index.html`` plus one permanent
``v<version>.html`` snapshot per release, with a version switcher on every
page.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``build_site``: Library entry point returning a ``BuildResult``.

Examples
--------
>>> from docs_theme import main
>>> main()  # doctest: +SKIP
>>> from docs_theme import app
>>> isinstance(app.name[0], str)
True
"""

from __future__ import annotations

from .cli import app, main
from .generator import build_site

__all__ = ["app", "build_site", "main"]
