"""Persist a rendered site: assets, version switcher, and HTML snapshots."""

from __future__ import annotations

import logging
import shutil
import typing as typ
from pathlib import Path

from docs_theme._constants import (
    ASSETS_DIRNAME,
    INDEX_FILENAME,
    VERSIONS_SCRIPT_FILENAME,
)

from .versions import version_filename

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = Path(__file__).resolve().parents[1] / ASSETS_DIRNAME

VERSIONS_SCRIPT_BOILERPLATE = (
    "  window.versions = ''\n"
    "rctf_versions.forEach(function(v) {\n"
    "  window.versions += `<li><a href=\"${v}\">${v}</a></li>`\n"
    "})\n"
)


class RuntimeScriptProvider(typ.Protocol):
    """Supplies helper scripts the page needs at runtime."""

    def fetch_runtime_scripts(self, destination: Path) -> list[Path]:
        """Copy the runtime scripts into ``destination`` and return their paths."""
        ...


class PackageRuntimeScripts:
    """Fetch runtime scripts from an installed package's directory.

    Parameters
    ----------
    package_root : Path
        Installed package directory (for example ``node_modules/rctf``).
    scripts : sequence of str
        Paths of the required scripts relative to ``package_root``; each is
        copied into the destination under its base name.
    """

    def __init__(self, package_root: Path, scripts: cabc.Sequence[str]) -> None:
        self.package_root = package_root
        self.scripts = list(scripts)

    def fetch_runtime_scripts(self, destination: Path) -> list[Path]:
        """Copy every script into ``destination``.

        Raises
        ------
        FileNotFoundError
            If any required script is missing from the package.
        """
        sources = [self.package_root / script for script in self.scripts]
        for source in sources:
            if not source.is_file():
                msg = f"Runtime script '{source}' not found."
                raise FileNotFoundError(msg)
        destination.mkdir(parents=True, exist_ok=True)
        copied: list[Path] = []
        for source in sources:
            target = destination / source.name
            shutil.copyfile(source, target)
            copied.append(target)
        return copied


def render_versions_script(versions: cabc.Sequence[str]) -> str:
    """Return the client-side script listing ``versions`` for the switcher."""
    entries = "".join(f"'{version}'," for version in versions)
    return f"const rctf_versions = [{entries[:-1]}]\n{VERSIONS_SCRIPT_BOILERPLATE}"


def copy_assets(source: Path, destination: Path) -> list[Path]:
    """Recursively copy ``source`` into ``destination``, overwriting files.

    Files already present in ``destination`` but absent from ``source`` are
    left in place.
    """
    destination.mkdir(parents=True, exist_ok=True)
    copied: list[Path] = []
    for entry in sorted(source.iterdir()):
        target = destination / entry.name
        if entry.is_dir():
            copied.extend(copy_assets(entry, target))
        else:
            shutil.copyfile(entry, target)
            copied.append(target)
    return copied


class SiteWriter:
    """Write one build's artifacts into an output directory."""

    def __init__(
        self,
        output_dir: Path,
        *,
        assets_dir: Path | None = None,
        script_provider: RuntimeScriptProvider | None = None,
    ) -> None:
        self.output_dir = output_dir
        self.assets_dir = assets_dir or DEFAULT_ASSETS_DIR
        self.script_provider = script_provider

    @property
    def assets_output(self) -> Path:
        return self.output_dir / ASSETS_DIRNAME

    def write_assets(self) -> list[Path]:
        """Copy theme assets and runtime scripts into ``<output>/assets``."""
        written = copy_assets(self.assets_dir, self.assets_output)
        if self.script_provider is not None:
            written.extend(self.script_provider.fetch_runtime_scripts(self.assets_output))
        logger.debug("copied %d asset files into %s", len(written), self.assets_output)
        return written

    def write(self, html: str, version: str, versions: cabc.Sequence[str]) -> list[Path]:
        """Write the version switcher, the version snapshot, and the index.

        The switcher script is written first because both pages load it.

        Returns
        -------
        list[Path]
            The script, snapshot, and index paths in write order.
        """
        self.assets_output.mkdir(parents=True, exist_ok=True)
        script_path = self.assets_output / VERSIONS_SCRIPT_FILENAME
        script_path.write_text(render_versions_script(versions), encoding="utf-8")

        snapshot_path = self.output_dir / version_filename(version)
        snapshot_path.write_text(html, encoding="utf-8")

        index_path = self.output_dir / INDEX_FILENAME
        index_path.write_text(html, encoding="utf-8")

        written = [script_path, snapshot_path, index_path]
        for path in written:
            logger.info("wrote %s", path)
        return written


__all__ = [
    "DEFAULT_ASSETS_DIR",
    "PackageRuntimeScripts",
    "RuntimeScriptProvider",
    "SiteWriter",
    "copy_assets",
    "render_versions_script",
]
