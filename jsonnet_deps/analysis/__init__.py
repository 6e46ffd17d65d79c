"""Import extraction, per-run caching and dependency closure."""

from __future__ import annotations

from jsonnet_deps.analysis.cache import AnalysisCache
from jsonnet_deps.analysis.closure import DependencyResolver, resolve_deps
from jsonnet_deps.analysis.import_extractor import (
    ImportExtractor,
    analyze_file,
    extract_imports,
)

__all__ = [
    "AnalysisCache",
    "DependencyResolver",
    "ImportExtractor",
    "analyze_file",
    "extract_imports",
    "resolve_deps",
]
