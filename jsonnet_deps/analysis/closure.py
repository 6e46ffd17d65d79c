"""Transitive dependency closure of a root Jsonnet file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from jsonnet_deps.analysis.cache import AnalysisCache
from jsonnet_deps.analysis.import_extractor import analyze_file
from jsonnet_deps.errors import JsonnetDepsError, ResolutionAbort
from jsonnet_deps.models import Analysis
from jsonnet_deps.resolver import normalize
from jsonnet_deps.storage import FileStorage

logger = logging.getLogger(__name__)


class DependencyResolver:
    """Expand root files into the full set of files they depend on.

    Deep dependencies are followed; leaf dependencies are added to the
    result but never read. The cache is shared by every root resolved
    through the same resolver, so each file is parsed at most once.
    """

    def __init__(
        self,
        cache: AnalysisCache,
        search_roots: Sequence[Path] = (),
        storage=None,
    ):
        self.cache = cache
        self.search_roots = tuple(search_roots)
        self.storage = storage if storage is not None else FileStorage()

    def resolve(self, root_file: Path) -> set[Path]:
        """Return the root, its deep dependencies and all their leaf dependencies.

        Raises:
            ResolutionAbort: if any file reached from the root cannot be read,
                parsed or resolved. No partial result is returned.
        """
        root = normalize(root_file)
        try:
            deps = self._expand(root)
        except JsonnetDepsError as e:
            raise ResolutionAbort(root, e) from e
        logger.debug(
            "%s: %d dependencies (cache: %d entries, %d hits, %d misses)",
            root, len(deps), len(self.cache), self.cache.hits, self.cache.misses,
        )
        return deps

    def _expand(self, root: Path) -> set[Path]:
        visited: set[Path] = set()
        stack = [root]

        while stack:
            current = stack.pop()
            if current in visited:
                continue
            visited.add(current)

            analysis = self._analysis(current)
            visited.update(analysis.leaf_deps)
            stack.extend(analysis.deep_deps)

        return visited

    def _analysis(self, path: Path) -> Analysis:
        analysis = self.cache.get(path)
        if analysis is None:
            analysis = analyze_file(path, self.search_roots, self.storage)
            self.cache.put(path, analysis)
        return analysis


def resolve_deps(
    cache: AnalysisCache,
    search_roots: Sequence[Path],
    root_file: Path,
    storage=None,
) -> set[Path]:
    """Compute the dependency set of one root file using a caller-owned cache."""
    return DependencyResolver(cache, search_roots, storage).resolve(root_file)
