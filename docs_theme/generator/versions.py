"""Reconcile the set of versions already published in an output directory."""

from __future__ import annotations

import logging
import typing as typ

from docs_theme._constants import NON_VERSION_ENTRIES, VERSION_FILENAME_TEMPLATE

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def version_filename(version: str) -> str:
    """Return the snapshot filename for ``version`` (``v1.2.3.html``)."""
    return VERSION_FILENAME_TEMPLATE.format(version=version)


class VersionManifest:
    """Derive the version list rendered into every page's version switcher.

    The manifest is never cached: each build scans the output directory, so
    the list only grows as new versions are written next to old ones.
    """

    @staticmethod
    def existing_versions(output_dir: Path | None) -> list[str]:
        """Return the names of previously written version files, sorted."""
        if output_dir is None or not output_dir.is_dir():
            return []
        return sorted(
            entry.name
            for entry in output_dir.iterdir()
            if entry.name not in NON_VERSION_ENTRIES
        )

    def reconcile(self, output_dir: Path | None, current_version: str) -> list[str]:
        """Merge the current version into the versions found on disk.

        Parameters
        ----------
        output_dir : Path | None
            Site directory to scan; a missing directory has no versions.
        current_version : str
            Version being built, without the ``v`` prefix.

        Returns
        -------
        list[str]
            Deduplicated version filenames in first-seen order, always ending
            with or containing ``v<current_version>.html``.
        """
        versions = self.existing_versions(output_dir)
        versions.append(version_filename(current_version))
        reconciled = list(dict.fromkeys(versions))
        logger.debug("reconciled versions in %s: %s", output_dir, reconciled)
        return reconciled


__all__ = ["VersionManifest", "version_filename"]
