"""Parse Jsonnet source with the tree-sitter Jsonnet grammar."""

from __future__ import annotations

import re
from dataclasses import dataclass

from tree_sitter_language_pack import get_parser

from jsonnet_deps.errors import JsonnetParseError

_parser_cache: dict[str, object] = {}

# The grammar has no importbin keyword. importbin and importstr are both
# nine bytes long, so rewriting one into the other keeps every offset valid.
_SKIPPED = (
    rb"//[^\n]*",
    rb"#[^\n]*",
    rb"/\*.*?\*/",
    rb"\|\|\|.*?\n[ \t]*\|\|\|",
    rb'@"(?:[^"]|"")*"',
    rb"@'(?:[^']|'')*'",
    rb'"(?:\\.|[^"\\])*"',
    rb"'(?:\\.|[^'\\])*'",
)
_IMPORTBIN_RE = re.compile(
    rb"(?P<skip>" + rb"|".join(_SKIPPED) + rb")|(?P<keyword>\bimportbin\b)",
    re.DOTALL,
)


@dataclass(frozen=True)
class Document:
    """A parsed Jsonnet file.

    ``source`` holds the bytes the tree was built from. ``importbin_offsets``
    lists the start offsets of ``importstr`` nodes that were written as
    ``importbin``.
    """
    filename: str
    source: bytes
    tree: object
    importbin_offsets: frozenset[int] = frozenset()

    @property
    def root_node(self):
        return self.tree.root_node

    def text(self, start: int, end: int) -> str:
        return self.source[start:end].decode("utf-8")


def _get_parser():
    if "jsonnet" not in _parser_cache:
        _parser_cache["jsonnet"] = get_parser("jsonnet")
    return _parser_cache["jsonnet"]


def _mask_importbin(data: bytes) -> tuple[bytes, frozenset[int]]:
    offsets = [m.start() for m in _IMPORTBIN_RE.finditer(data) if m.group("keyword")]
    if not offsets:
        return data, frozenset()
    buf = bytearray(data)
    for start in offsets:
        buf[start:start + len(b"importstr")] = b"importstr"
    return bytes(buf), frozenset(offsets)


def _first_error(root):
    """Return the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_missing or node.type == "ERROR":
            return node
        stack.extend(
            child for child in reversed(node.children)
            if child.has_error or child.is_missing
        )
    return root


def _describe(node, data: bytes) -> str:
    if node.is_missing:
        return f"expected {node.type!r}"
    snippet = data[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
    snippet = snippet.strip().split("\n", 1)[0][:30]
    if not snippet:
        return "syntax error"
    return f"unexpected {snippet!r}"


def parse(source: str, filename: str = "<string>") -> Document:
    """Parse Jsonnet source text.

    Raises:
        JsonnetParseError: at the first syntax error in the file.
    """
    data, importbin_offsets = _mask_importbin(source.encode("utf-8"))
    tree = _get_parser().parse(data)
    if tree.root_node.has_error:
        node = _first_error(tree.root_node)
        row, column = node.start_point
        raise JsonnetParseError(filename, row + 1, column + 1, _describe(node, data))
    return Document(filename, data, tree, importbin_offsets)
