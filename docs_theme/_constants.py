"""Common literal values used across docs_theme.

These constants keep output filenames and the version-switcher script layout
centralized so the writer, the manifest, and tests import the same values
without drifting.

Examples
--------
>>> from docs_theme import _constants
>>> _constants.VERSION_FILENAME_TEMPLATE.format(version="1.2.3")
'v1.2.3.html'
>>> _constants.ASSETS_DIRNAME in _constants.NON_VERSION_ENTRIES
True
"""

ASSETS_DIRNAME = "assets"
INDEX_FILENAME = "index.html"
VERSIONS_SCRIPT_FILENAME = "rctf_versions.js"
VERSION_FILENAME_TEMPLATE = "v{version}.html"
NON_VERSION_ENTRIES = frozenset({ASSETS_DIRNAME, INDEX_FILENAME})

DEFAULT_VERSION_FILE = "node_modules/rctf/package.json"
DEFAULT_RUNTIME_PACKAGE_ROOT = "node_modules/rctf"
DEFAULT_RUNTIME_SCRIPTS = (
    "step_definitions/support/mappings.js",
    "step_definitions/support/all_mappings.js",
)
