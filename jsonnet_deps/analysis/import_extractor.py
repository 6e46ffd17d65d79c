"""Walk a Jsonnet syntax tree and collect the files it imports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from jsonnet_deps.errors import JsonnetParseError
from jsonnet_deps.models import Analysis, AnalysisBuilder, ImportKind
from jsonnet_deps.resolver import ExistsCheck, resolve_import
from jsonnet_deps.syntax import Document, parse, string_value

logger = logging.getLogger(__name__)


class ImportExtractor:
    """Visitor over tree-sitter nodes with one ``visit_<type>`` method per import node.

    Every other node type is only descended into. The walk keeps its own
    stack, so deeply nested expressions do not hit the recursion limit.
    """

    def __init__(
        self,
        base_dir: Path,
        search_roots: Sequence[Path],
        exists: ExistsCheck | None = None,
    ):
        self.base_dir = base_dir
        self.search_roots = search_roots
        self.exists = exists
        self.builder = AnalysisBuilder()
        self.document: Document | None = None

    def extract(self, document: Document) -> Analysis:
        self.document = document
        # Children are pushed in reverse so they pop in source order
        stack = [document.root_node]
        while stack:
            node = stack.pop()
            method = getattr(self, f"visit_{node.type}", None) if node.is_named else None
            if method is not None:
                method(node)
            else:
                stack.extend(reversed(node.children))
        return self.builder.build()

    def _literal(self, node) -> str:
        # Everything after the keyword, so an ``@`` prefix is kept whichever
        # node the grammar attaches it to
        parts = [child for child in node.children[1:] if child.type != "comment"]
        literal = self.document.text(parts[0].start_byte, node.end_byte)
        if literal.startswith("|||"):
            raise self._error(node, "text blocks cannot be used as import paths")
        try:
            return string_value(literal)
        except ValueError as e:
            raise self._error(node, str(e)) from e

    def _error(self, node, message: str) -> JsonnetParseError:
        row, column = node.start_point
        return JsonnetParseError(self.document.filename, row + 1, column + 1, message)

    def _record(self, node, kind: ImportKind) -> None:
        raw_path = self._literal(node)
        path = resolve_import(self.base_dir, self.search_roots, raw_path, self.exists)
        self.builder.add(path, kind)

    def visit_import(self, node) -> None:
        self._record(node, ImportKind.IMPORT)

    def visit_importstr(self, node) -> None:
        if node.start_byte in self.document.importbin_offsets:
            self._record(node, ImportKind.IMPORTBIN)
        else:
            self._record(node, ImportKind.IMPORTSTR)


def extract_imports(
    base_dir: Path,
    search_roots: Sequence[Path],
    document: Document,
    exists: ExistsCheck | None = None,
) -> Analysis:
    """Collect the resolved leaf and deep dependencies of a parsed file."""
    return ImportExtractor(base_dir, search_roots, exists).extract(document)


def analyze_file(path: Path, search_roots: Sequence[Path], storage) -> Analysis:
    """Read, parse and scan one Jsonnet file.

    Args:
        path: File to analyze; imports are resolved relative to its directory.
        search_roots: Fallback directories for relative imports.
        storage: Object providing ``read_file`` and ``path_exists``.
    """
    raw = storage.read_file(path)
    try:
        source = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise JsonnetParseError(str(path), 1, 1, f"file is not valid UTF-8: {e.reason}") from e

    document = parse(source, filename=str(path))
    analysis = extract_imports(path.parent, search_roots, document, storage.path_exists)
    logger.debug(
        "analyzed %s: %d leaf, %d deep",
        path, len(analysis.leaf_deps), len(analysis.deep_deps),
    )
    return analysis
