"""High-level orchestration for a versioned documentation build.

This module ties the pipeline together. :class:`DocsSiteBuilder` takes decoded
documentation sections and a :class:`~docs_theme.config.ThemeConfig`, then:

1. resolves the version being built (explicit value or package manifest),
2. reconciles it with the versions already present in the output directory,
3. renders the page with a fresh slug registry and helper context,
4. hands the HTML to :class:`~docs_theme.generator.writer.SiteWriter`, which
   copies assets and writes ``assets/rctf_versions.js``, ``v<version>.html``
   and ``index.html``.

Rendering finishes before anything is written, so template errors abort the
build with the output directory untouched. Without an output directory the
build only returns the HTML.

Example
-------
>>> from pathlib import Path
>>> from docs_theme.config import ThemeConfig
>>> from docs_theme.generator import DocsSiteBuilder
>>> from docs_theme.records import load_sections
>>> sections = load_sections(Path("docs.json"))  # doctest: +SKIP
>>> config = ThemeConfig(output=Path("site"), version="1.2.3")  # doctest: +SKIP
>>> DocsSiteBuilder(sections, config).build().written  # doctest: +SKIP
[PosixPath('site/assets/style.css'), ..., PosixPath('site/index.html')]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from docs_theme.config import resolve_version

from .composer import TemplateComposer, build_render_context
from .formatters import Formatters
from .link_rewriter import SymbolLinkExtension
from .linker import LinkResolver
from .renderer import HtmlContentRenderer
from .signatures import SignatureFormatter
from .slugs import SlugRegistry
from .versions import VersionManifest
from .writer import PackageRuntimeScripts, RuntimeScriptProvider, SiteWriter

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docs_theme.config import ThemeConfig
    from docs_theme.records import DocumentationSection

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildResult:
    """Outcome of one build.

    Attributes
    ----------
    html : str
        The rendered page.
    version : str
        Version the page was built for.
    written : list[Path]
        Files written, in write order; empty when no output was configured.
    """

    html: str
    version: str
    written: list[Path] = dc.field(default_factory=list)


class DocsSiteBuilder:
    """Render documentation sections into a versioned static site."""

    def __init__(
        self,
        sections: cabc.Sequence[DocumentationSection],
        config: ThemeConfig,
        *,
        composer: TemplateComposer | None = None,
        manifest: VersionManifest | None = None,
        script_provider: RuntimeScriptProvider | None = None,
        assets_dir: Path | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        sections : sequence of DocumentationSection
            Top-level documentation records to render.
        config : ThemeConfig
            Build options; ``versions`` and ``version`` are filled in by
            :meth:`build`.
        composer : TemplateComposer, optional
            Template composer; defaults to the package templates.
        manifest : VersionManifest, optional
            Version reconciliation strategy.
        script_provider : RuntimeScriptProvider, optional
            Source of runtime scripts; defaults to the package configured in
            ``config.runtime_scripts`` (none when that is disabled).
        assets_dir : Path, optional
            Static asset directory copied into the output.
        """
        self.sections = list(sections)
        self.config = config
        self.composer = composer or TemplateComposer()
        self.manifest = manifest or VersionManifest()
        self.script_provider = script_provider or self._default_script_provider()
        self.assets_dir = assets_dir

    def _default_script_provider(self) -> RuntimeScriptProvider | None:
        runtime = self.config.runtime_scripts
        if runtime is None:
            return None
        return PackageRuntimeScripts(runtime.package_root, runtime.scripts)

    def render(self) -> str:
        """Render the page for the configured version without writing files."""
        slugs = SlugRegistry()
        resolver = LinkResolver(self.sections, slugs, self.config.paths)
        renderer = HtmlContentRenderer(
            self.config.hljs, link_extension=SymbolLinkExtension(resolver)
        )
        formatters = Formatters(resolver.link, renderer.highlight)
        context = build_render_context(
            slugs=slugs,
            signatures=SignatureFormatter(formatters),
            formatters=formatters,
            renderer=renderer,
        )
        html = self.composer.render(self.sections, self.config, context)
        logger.debug("rendered %d sections with %d anchors", len(self.sections), len(slugs))
        return html

    def build(self) -> BuildResult:
        """Render the site and, when an output directory is set, write it.

        Returns
        -------
        BuildResult
            Rendered HTML, the version, and the written paths.

        Raises
        ------
        FileNotFoundError
            If the version manifest or a runtime script is missing.
        jinja2.TemplateError
            If a template is malformed or references an unknown helper.
        """
        version = resolve_version(self.config)
        self.config.version = version
        output_dir = self.config.output
        self.config.versions = self.manifest.reconcile(output_dir, version)
        html = self.render()
        if output_dir is None:
            return BuildResult(html=html, version=version)

        output_dir.mkdir(parents=True, exist_ok=True)
        writer = SiteWriter(
            output_dir, assets_dir=self.assets_dir, script_provider=self.script_provider
        )
        written = writer.write_assets()
        written.extend(writer.write(html, version, self.config.versions))
        return BuildResult(html=html, version=version, written=written)


def build_site(
    sections: cabc.Sequence[DocumentationSection], config: ThemeConfig
) -> BuildResult:
    """Build ``sections`` with the default composer, manifest, and assets."""
    return DocsSiteBuilder(sections, config).build()


__all__ = ["BuildResult", "DocsSiteBuilder", "build_site"]
