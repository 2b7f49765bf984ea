"""Anchor slugs for documented symbols.

``GithubSlugger`` reproduces the heading-anchor algorithm GitHub uses: it is
stateful, so asking it twice for the same text yields ``foo`` and then
``foo-1``. ``SlugRegistry`` memoizes one slug per name on top of it, which is
what templates and links need: the same symbol always maps to the same anchor
while distinct symbols that normalise alike still get distinct anchors.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

_STRIP_PATTERN = re.compile(r"[^\w\- ]")


def _slugify(value: str) -> str:
    """Lowercase ``value``, drop punctuation, and turn spaces into hyphens."""
    return _STRIP_PATTERN.sub("", value.lower()).replace(" ", "-")


class GithubSlugger:
    """Generate GitHub-style slugs, suffixing repeats with ``-1``, ``-2``, ..."""

    def __init__(self) -> None:
        self._occurrences: dict[str, int] = {}

    def slug(self, value: str) -> str:
        """Return a slug for ``value`` unique among those issued so far."""
        original = _slugify(value)
        result = original
        while result in self._occurrences:
            self._occurrences[original] += 1
            result = f"{original}-{self._occurrences[original]}"
        self._occurrences[result] = 0
        return result

    def reset(self) -> None:
        """Forget every slug issued so far."""
        self._occurrences.clear()


class SlugRegistry:
    """Assign one stable anchor slug per name for the lifetime of a render."""

    def __init__(self, slugger: GithubSlugger | None = None) -> None:
        self._slugger = slugger or GithubSlugger()
        self._slugs: dict[str, str] = {}

    def get_slug(self, name: str) -> str:
        """Return the slug for ``name``, computing it on first request only."""
        slug = self._slugs.get(name)
        if slug is None:
            slug = self._slugger.slug(name)
            self._slugs[name] = slug
            logger.debug("assigned slug %r to %r", slug, name)
        return slug

    def __contains__(self, name: object) -> bool:
        return name in self._slugs

    def __len__(self) -> int:
        return len(self._slugs)


__all__ = ["GithubSlugger", "SlugRegistry"]
