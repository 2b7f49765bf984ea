"""Utility helpers shared by the docs theme configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec

from docs_theme._constants import DEFAULT_RUNTIME_PACKAGE_ROOT, DEFAULT_RUNTIME_SCRIPTS

from .models import HighlightConfig, RuntimeScriptsConfig, ThemeConfigError


class PackageManifest(msgspec.Struct):
    """The subset of a ``package.json`` manifest the theme reads."""

    version: str


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_path(value: object | None) -> Path | None:
    text = _optional_str(value)
    return Path(text) if text else None


def _build_highlight_config(payload: typ.Mapping[str, typ.Any] | None) -> HighlightConfig:
    """Build a HighlightConfig from the ``hljs`` mapping."""
    if not payload:
        return HighlightConfig()
    if not isinstance(payload, dict):
        msg = "'hljs' must be a mapping."
        raise ThemeConfigError(msg)
    base = HighlightConfig()
    return HighlightConfig(
        highlight_auto=bool(payload.get("highlightAuto", base.highlight_auto)),
        language=payload.get("language", base.language),
        style=payload.get("style", base.style),
    )


def _build_runtime_scripts(value: object) -> RuntimeScriptsConfig | None:
    """Return runtime script settings; ``False`` disables the fetch."""
    match value:
        case None | True:
            return RuntimeScriptsConfig()
        case False:
            return None
        case dict():
            scripts = value.get("scripts", list(DEFAULT_RUNTIME_SCRIPTS))
            if not isinstance(scripts, list) or not all(
                isinstance(item, str) for item in scripts
            ):
                msg = "'runtime_scripts.scripts' must be a list of paths."
                raise ThemeConfigError(msg)
            return RuntimeScriptsConfig(
                package_root=Path(
                    value.get("package_root", DEFAULT_RUNTIME_PACKAGE_ROOT)
                ),
                scripts=list(scripts),
            )
        case _:
            msg = "'runtime_scripts' must be a mapping or a boolean."
            raise ThemeConfigError(msg)


def _normalize_paths(value: object | None) -> dict[str, str]:
    """Return the namespace to URL mapping with stringified entries."""
    if not value:
        return {}
    if not isinstance(value, dict):
        msg = "'paths' must map namespaces to URLs."
        raise ThemeConfigError(msg)
    return {str(key): str(url) for key, url in value.items()}


def read_package_version(path: Path) -> str:
    """Return the ``version`` field of the package manifest at ``path``.

    Raises
    ------
    FileNotFoundError
        If the manifest does not exist.
    ThemeConfigError
        If the manifest is not JSON or has no string ``version`` field.
    """
    if not path.exists():
        msg = f"Version manifest '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        manifest = msgspec.json.decode(path.read_bytes(), type=PackageManifest)
    except (msgspec.ValidationError, msgspec.DecodeError) as exc:
        msg = f"Version manifest '{path}' is invalid: {exc}"
        raise ThemeConfigError(msg) from exc
    return manifest.version


__all__ = [
    "PackageManifest",
    "_build_highlight_config",
    "_build_runtime_scripts",
    "_normalize_paths",
    "_optional_path",
    "_optional_str",
    "read_package_version",
]
