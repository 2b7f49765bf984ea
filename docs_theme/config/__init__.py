"""Load and validate docs theme configuration.

This subpackage parses an optional ``theme.yaml`` file into a
:class:`ThemeConfig`, resolves the version being built from either an explicit
value or a package manifest, and exposes the error raised for invalid values.
The primary entry point is :func:`load_theme_config`.

Examples
--------
>>> from docs_theme.config import ThemeConfig, resolve_version
>>> resolve_version(ThemeConfig(version="1.2.3"))
'1.2.3'
"""

from .helpers import read_package_version
from .loader import build_theme_config, load_theme_config, resolve_version
from .models import (
    HighlightConfig,
    RuntimeScriptsConfig,
    ThemeConfig,
    ThemeConfigError,
)

__all__ = [
    "HighlightConfig",
    "RuntimeScriptsConfig",
    "ThemeConfig",
    "ThemeConfigError",
    "build_theme_config",
    "load_theme_config",
    "read_package_version",
    "resolve_version",
]
