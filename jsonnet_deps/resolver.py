"""Resolve the path written in an import against the importing file's directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Sequence

from jsonnet_deps.storage import FileStorage

logger = logging.getLogger(__name__)

ExistsCheck = Callable[[Path], bool]

_default_storage = FileStorage()


def normalize(path: str | Path) -> Path:
    """Collapse ``.``/``..`` and repeated separators without touching the filesystem.

    The collapse is lexical: ``dir/link/..`` becomes ``dir`` even when
    ``link`` is a symlink whose parent is elsewhere.
    """
    return Path(os.path.normpath(path))


def resolve_import(
    base_dir: Path,
    search_roots: Sequence[Path],
    raw_path: str,
    exists: ExistsCheck | None = None,
) -> Path:
    """Resolve an import path.

    The importing file's directory is tried first, then each search root in
    order; the first candidate that exists wins. If none exist, the
    base-relative candidate is returned anyway so that imports of files that
    have not been generated yet still show up as dependencies.

    Raises:
        DependencyIOError: if an existence check cannot be performed.
    """
    if os.path.isabs(raw_path):
        return Path(raw_path)

    local = normalize(Path(base_dir) / raw_path)
    if not search_roots:
        return local

    exists = exists or _default_storage.path_exists
    for candidate in [local, *(normalize(Path(root) / raw_path) for root in search_roots)]:
        if exists(candidate):
            logger.debug("resolved %r from %s to %s", raw_path, base_dir, candidate)
            return candidate

    logger.debug("%r not found from %s, falling back to %s", raw_path, base_dir, local)
    return local
