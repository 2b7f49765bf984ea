"""End-to-end tests for writing versioned documentation sites.

Each test builds the sample documentation into a temporary output directory
and inspects the files on disk: the version snapshot and ``index.html`` must
match byte for byte, the version switcher must list every known version, and
static assets are copied without removing stale files.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

from docs_theme._constants import VERSIONS_SCRIPT_FILENAME
from docs_theme.config import RuntimeScriptsConfig, ThemeConfig
from docs_theme.generator import DocsSiteBuilder, build_site
from docs_theme.generator.writer import render_versions_script

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docs_theme.records import DocumentationSection


def _script(site_dir: Path) -> str:
    return (site_dir / "assets" / VERSIONS_SCRIPT_FILENAME).read_text(encoding="utf-8")


def test_build_writes_identical_snapshot_and_index(
    sample_sections: list[DocumentationSection],
    theme_config: ThemeConfig,
    site_dir: Path,
) -> None:
    result = build_site(sample_sections, theme_config)

    snapshot = site_dir / "v1.2.3.html"
    index = site_dir / "index.html"
    assert snapshot.read_bytes() == index.read_bytes()
    assert snapshot.read_text(encoding="utf-8") == result.html
    assert "'v1.2.3.html'" in _script(site_dir)
    assert result.written[-3:] == [
        site_dir / "assets" / VERSIONS_SCRIPT_FILENAME,
        snapshot,
        index,
    ]


def test_versions_script_format() -> None:
    assert render_versions_script(["v1.0.0.html", "v1.1.0.html"]) == (
        "const rctf_versions = ['v1.0.0.html','v1.1.0.html']\n"
        "  window.versions = ''\n"
        "rctf_versions.forEach(function(v) {\n"
        "  window.versions += `<li><a href=\"${v}\">${v}</a></li>`\n"
        "})\n"
    )


def test_newer_build_keeps_previous_snapshot(
    sample_sections: list[DocumentationSection],
    theme_config: ThemeConfig,
    site_dir: Path,
) -> None:
    build_site(sample_sections, theme_config)
    old_snapshot = (site_dir / "v1.2.3.html").read_bytes()

    newer = ThemeConfig(output=site_dir, version="1.3.0", runtime_scripts=None)
    build_site(sample_sections, newer)

    assert (site_dir / "v1.2.3.html").read_bytes() == old_snapshot
    assert (site_dir / "index.html").read_bytes() == (site_dir / "v1.3.0.html").read_bytes()
    assert _script(site_dir).startswith(
        "const rctf_versions = ['v1.2.3.html','v1.3.0.html']\n"
    )
    assert newer.versions == ["v1.2.3.html", "v1.3.0.html"]


def test_rebuilding_same_version_does_not_duplicate(
    sample_sections: list[DocumentationSection],
    site_dir: Path,
) -> None:
    for _ in range(2):
        config = ThemeConfig(output=site_dir, version="1.2.3", runtime_scripts=None)
        build_site(sample_sections, config)

    assert _script(site_dir).startswith("const rctf_versions = ['v1.2.3.html']\n")
    assert sorted(path.name for path in site_dir.iterdir()) == [
        "assets",
        "index.html",
        "v1.2.3.html",
    ]


def test_assets_are_copied_without_removing_stale_files(
    sample_sections: list[DocumentationSection],
    theme_config: ThemeConfig,
    site_dir: Path,
) -> None:
    stale = site_dir / "assets" / "stale.js"
    stale.parent.mkdir(parents=True)
    stale.write_text("// stale", encoding="utf-8")
    (site_dir / "assets" / "style.css").write_text("old", encoding="utf-8")

    build_site(sample_sections, theme_config)

    assert stale.read_text(encoding="utf-8") == "// stale"
    assert (site_dir / "assets" / "style.css").read_text(encoding="utf-8") != "old"
    assert (site_dir / "assets" / "site.js").is_file()


def test_no_output_performs_no_writes(
    sample_sections: list[DocumentationSection],
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.chdir(tmp_path)
    config = ThemeConfig(version="1.2.3")

    result = build_site(sample_sections, config)

    assert result.html.startswith("<!doctype html>")
    assert result.written == []
    assert list(tmp_path.iterdir()) == []


def test_runtime_scripts_are_copied_into_assets(
    sample_sections: list[DocumentationSection],
    tmp_path: Path,
    site_dir: Path,
) -> None:
    package_root = tmp_path / "node_modules" / "rctf"
    support = package_root / "step_definitions" / "support"
    support.mkdir(parents=True)
    (support / "mappings.js").write_text("// mappings", encoding="utf-8")
    (support / "all_mappings.js").write_text("// all", encoding="utf-8")
    config = ThemeConfig(
        output=site_dir,
        version="1.2.3",
        runtime_scripts=RuntimeScriptsConfig(package_root=package_root),
    )

    build_site(sample_sections, config)

    assert (site_dir / "assets" / "mappings.js").read_text(encoding="utf-8") == "// mappings"
    assert (site_dir / "assets" / "all_mappings.js").read_text(encoding="utf-8") == "// all"


def test_missing_runtime_script_is_fatal(
    sample_sections: list[DocumentationSection],
    tmp_path: Path,
    site_dir: Path,
) -> None:
    config = ThemeConfig(
        output=site_dir,
        version="1.2.3",
        runtime_scripts=RuntimeScriptsConfig(package_root=tmp_path / "missing"),
    )

    with pytest.raises(FileNotFoundError, match="mappings.js"):
        build_site(sample_sections, config)
    assert not (site_dir / "index.html").exists()


def test_version_is_read_from_package_manifest(
    sample_sections: list[DocumentationSection],
    tmp_path: Path,
    site_dir: Path,
) -> None:
    manifest = tmp_path / "package.json"
    manifest.write_text(json.dumps({"name": "rctf", "version": "4.5.6"}), encoding="utf-8")
    config = ThemeConfig(output=site_dir, version_file=manifest, runtime_scripts=None)

    result = DocsSiteBuilder(sample_sections, config).build()

    assert result.version == "4.5.6"
    assert (site_dir / "v4.5.6.html").is_file()


def test_missing_version_manifest_is_fatal(
    sample_sections: list[DocumentationSection], tmp_path: Path
) -> None:
    config = ThemeConfig(version_file=tmp_path / "package.json", runtime_scripts=None)

    with pytest.raises(FileNotFoundError, match="package.json"):
        build_site(sample_sections, config)
