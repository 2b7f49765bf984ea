"""Utilities for slugging, formatting, composing, and writing docs sites."""

from .composer import RenderContext, TemplateComposer, build_render_context, flatten_inline
from .formatters import Formatters
from .link_rewriter import SymbolLinkExtension
from .linker import LinkResolver
from .renderer import HtmlContentRenderer
from .signatures import SignatureFormatter, is_function
from .site_builder import BuildResult, DocsSiteBuilder, build_site
from .slugs import GithubSlugger, SlugRegistry
from .versions import VersionManifest, version_filename
from .writer import PackageRuntimeScripts, RuntimeScriptProvider, SiteWriter

__all__ = [
    "BuildResult",
    "DocsSiteBuilder",
    "Formatters",
    "GithubSlugger",
    "HtmlContentRenderer",
    "LinkResolver",
    "PackageRuntimeScripts",
    "RenderContext",
    "RuntimeScriptProvider",
    "SignatureFormatter",
    "SiteWriter",
    "SlugRegistry",
    "SymbolLinkExtension",
    "TemplateComposer",
    "VersionManifest",
    "build_render_context",
    "build_site",
    "flatten_inline",
    "is_function",
    "version_filename",
]
