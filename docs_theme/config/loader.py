"""Load theme configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docs_theme._constants import DEFAULT_VERSION_FILE

from .helpers import (
    _build_highlight_config,
    _build_runtime_scripts,
    _normalize_paths,
    _optional_path,
    _optional_str,
    read_package_version,
)
from .models import ThemeConfig


def load_theme_config(path: Path) -> ThemeConfig:
    """Load the YAML configuration describing a docs theme build.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``theme.yaml``).

    Returns
    -------
    ThemeConfig
        Parsed configuration with defaults applied for absent keys.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ThemeConfigError
        If a recognised key carries an invalid value.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_theme.config import load_theme_config
    >>> config = load_theme_config(Path("theme.yaml"))  # doctest: +SKIP
    >>> config.hljs.highlight_auto  # doctest: +SKIP
    False
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_theme_config(raw)


def build_theme_config(raw: typ.Mapping[str, typ.Any]) -> ThemeConfig:
    """Build a ThemeConfig from an already parsed mapping."""
    base = ThemeConfig()
    return ThemeConfig(
        output=_optional_path(raw.get("output")),
        name=_optional_str(raw.get("name")) or base.name,
        version=_optional_str(raw.get("version")),
        version_file=Path(raw.get("version_file") or DEFAULT_VERSION_FILE),
        hljs=_build_highlight_config(raw.get("hljs")),
        paths=_normalize_paths(raw.get("paths")),
        runtime_scripts=_build_runtime_scripts(raw.get("runtime_scripts")),
    )


def resolve_version(config: ThemeConfig) -> str:
    """Return the configured version, reading the package manifest if needed."""
    if config.version:
        return config.version
    return read_package_version(config.version_file)


__all__ = ["build_theme_config", "load_theme_config", "resolve_version"]
