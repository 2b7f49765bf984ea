r"""Decode parsed documentation comments into typed sections.

The theme consumes the JSON emitted by ``documentation build --format json``:
a list of comment records, each describing one documented symbol along with
its parameters, return values, examples, and nested members. This module maps
that payload onto ``msgspec`` structs so templates and formatters work with
attributes instead of loose dictionaries.

Descriptions are either a markdown abstract syntax tree (``{"type": "root",
"children": [...]}``) or, for hand-written inputs, a plain markdown string.
Type expressions are kept as the raw doctrine trees
(``{"type": "NameExpression", "name": "string"}``) and interpreted by
:mod:`docs_theme.generator.formatters`.

Example
-------
>>> from docs_theme.records import decode_sections
>>> sections = decode_sections(b'[{"kind": "function", "name": "visit"}]')
>>> sections[0].anchor_key
'visit'
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec

Markdown = typ.Union[dict[str, typ.Any], str, None]
TypeNode = dict[str, typ.Any]


class DocumentationError(ValueError):
    """Raised when documentation records cannot be decoded."""


class Param(msgspec.Struct, kw_only=True):
    """Parameter or property descriptor, optionally nesting sub-properties."""

    name: str
    title: str = "param"
    description: Markdown = None
    type: TypeNode | None = None
    default: str | None = None
    properties: list[Param] = []

    @property
    def is_optional(self) -> bool:
        """Return ``True`` when the declared type is an ``OptionalType``."""
        return bool(self.type) and self.type.get("type") == "OptionalType"


class Returns(msgspec.Struct, kw_only=True):
    """Return value descriptor."""

    title: str = "returns"
    description: Markdown = None
    type: TypeNode | None = None


class Throws(msgspec.Struct, kw_only=True):
    """Thrown error descriptor."""

    title: str = "throws"
    description: Markdown = None
    type: TypeNode | None = None


class Example(msgspec.Struct, kw_only=True):
    """Code example attached to a section."""

    description: str
    caption: Markdown = None


class Augment(msgspec.Struct, kw_only=True):
    """Parent class or interface named by ``@augments``."""

    name: str
    title: str = "augments"


class Members(msgspec.Struct, kw_only=True):
    """Nested sections grouped by membership scope."""

    static: list[DocumentationSection] = []
    instance: list[DocumentationSection] = []
    inner: list[DocumentationSection] = []
    events: list[DocumentationSection] = []
    global_: list[DocumentationSection] = msgspec.field(default=[], name="global")

    def groups(self) -> list[tuple[str, list[DocumentationSection]]]:
        """Return non-empty member groups with their display labels."""
        labelled = [
            ("Static Members", self.static),
            ("Instance Members", self.instance),
            ("Inner Members", self.inner),
            ("Events", self.events),
            ("Global Members", self.global_),
        ]
        return [(label, members) for label, members in labelled if members]


class DocumentationSection(msgspec.Struct, kw_only=True):
    """One documented entity and everything nested beneath it.

    Attributes
    ----------
    kind : str
        Symbol kind such as ``"function"``, ``"class"``, ``"typedef"``,
        ``"member"`` or ``"note"``.
    name : str
        Display name of the symbol.
    namespace : str, optional
        Fully qualified path (``Widget#render``); used as the anchor key.
    type : dict, optional
        Declared type-expression tree.
    params, properties, returns, throws, examples
        Ordered descriptors rendered in the section body.
    members : Members
        Nested sections for namespaces and classes.
    """

    kind: str
    name: str
    namespace: str | None = None
    description: Markdown = None
    type: TypeNode | None = None
    params: list[Param] = []
    properties: list[Param] = []
    returns: list[Returns] = []
    throws: list[Throws] = []
    examples: list[Example] = []
    augments: list[Augment] = []
    sees: list[Markdown] = []
    deprecated: Markdown = None
    since: str | None = None
    version: str | None = None
    license: str | None = None
    author: str | None = None
    copyright: Markdown = None
    access: str | None = None
    members: Members = msgspec.field(default_factory=Members)

    @property
    def anchor_key(self) -> str:
        """Return the identifier anchors and links are keyed on."""
        return self.namespace or self.name

    @property
    def children(self) -> list[DocumentationSection]:
        """Return every nested member as one ordered sequence."""
        return [member for _, group in self.members.groups() for member in group]


_DECODER = msgspec.json.Decoder(list[DocumentationSection])


def decode_sections(payload: bytes | str) -> list[DocumentationSection]:
    """Decode a JSON array of documentation comments.

    Raises
    ------
    DocumentationError
        If the payload is not valid JSON or a record lacks a required identity
        field (``kind`` or ``name``) or carries a wrongly typed field.
    """
    try:
        return _DECODER.decode(payload)
    except (msgspec.ValidationError, msgspec.DecodeError) as exc:
        msg = f"Invalid documentation records: {exc}"
        raise DocumentationError(msg) from exc


def load_sections(path: Path) -> list[DocumentationSection]:
    """Read and decode documentation comments from ``path``."""
    if not path.exists():
        msg = f"Documentation file '{path}' not found."
        raise FileNotFoundError(msg)
    return decode_sections(path.read_bytes())


def walk_sections(
    sections: typ.Iterable[DocumentationSection],
) -> typ.Iterator[DocumentationSection]:
    """Yield every section in ``sections`` depth first, members included."""
    for section in sections:
        yield section
        yield from walk_sections(section.children)


__all__ = [
    "Augment",
    "DocumentationError",
    "DocumentationSection",
    "Example",
    "Markdown",
    "Members",
    "Param",
    "Returns",
    "Throws",
    "TypeNode",
    "decode_sections",
    "load_sections",
    "walk_sections",
]
