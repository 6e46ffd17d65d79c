"""Run dependency resolution over every root file of a configuration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from jsonnet_deps.analysis import AnalysisCache, DependencyResolver, analyze_file
from jsonnet_deps.errors import ResolutionAbort
from jsonnet_deps.models import Analysis, ResolveConfig, RootResult
from jsonnet_deps.resolver import normalize
from jsonnet_deps.storage import FileStorage

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]


def run_deps(
    config: ResolveConfig,
    progress: ProgressCallback | None = None,
    storage=None,
    cache: AnalysisCache | None = None,
) -> list[RootResult]:
    """Resolve every root in ``config`` through one shared cache.

    By default the first failing root aborts the run by re-raising its
    ResolutionAbort. With ``config.keep_going`` the failure is recorded on
    that root's result and the remaining roots are still attempted.
    """
    if cache is None:
        cache = AnalysisCache()
    resolver = DependencyResolver(cache, config.search_roots, storage)

    results: list[RootResult] = []
    total = len(config.roots)
    for i, root in enumerate(config.roots):
        if progress:
            progress("Resolving", i, total)
        try:
            deps = resolver.resolve(root)
        except ResolutionAbort as e:
            if not config.keep_going:
                raise
            logger.warning("%s", e)
            results.append(RootResult(root=normalize(root), error=e))
            continue
        results.append(RootResult(root=normalize(root), deps=frozenset(deps)))

    if progress:
        progress("Resolving", total, total)
    logger.info("resolved %d root(s), %d file(s) analyzed", total, len(cache))
    return results


def run_analyze(config: ResolveConfig, storage=None) -> list[tuple[Path, Analysis]]:
    """Direct (non-transitive) analysis of each root file."""
    storage = storage if storage is not None else FileStorage()
    return [
        (normalize(root), analyze_file(normalize(root), config.search_roots, storage))
        for root in config.roots
    ]
