"""Data models for the dependency resolver."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from jsonnet_deps.errors import JsonnetDepsError


class ImportKind(enum.Enum):
    IMPORT = "import"
    IMPORTSTR = "importstr"
    IMPORTBIN = "importbin"

    @property
    def is_leaf(self) -> bool:
        """Leaf imports only depend on the raw file content."""
        return self is not ImportKind.IMPORT


class OutputFormat(enum.Enum):
    TEXT = "text"
    JSON = "json"
    MAKE = "make"


@dataclass(frozen=True)
class Analysis:
    """Direct dependencies of one Jsonnet file."""
    leaf_deps: tuple[Path, ...] = ()
    deep_deps: tuple[Path, ...] = ()


@dataclass
class AnalysisBuilder:
    """Mutable accumulator used while walking a syntax tree."""
    leaf_deps: list[Path] = field(default_factory=list)
    deep_deps: list[Path] = field(default_factory=list)

    def add(self, path: Path, kind: ImportKind) -> None:
        # A path keeps the classification of its first import site
        if path in self.leaf_deps or path in self.deep_deps:
            return
        if kind.is_leaf:
            self.leaf_deps.append(path)
        else:
            self.deep_deps.append(path)

    def build(self) -> Analysis:
        return Analysis(leaf_deps=tuple(self.leaf_deps), deep_deps=tuple(self.deep_deps))


@dataclass
class RootResult:
    """Outcome of resolving one root file."""
    root: Path
    deps: frozenset[Path] = frozenset()
    error: JsonnetDepsError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ResolveConfig:
    """Configuration for a dependency resolution run."""
    roots: list[Path] = field(default_factory=list)
    search_roots: tuple[Path, ...] = ()
    output_format: OutputFormat = OutputFormat.TEXT
    keep_going: bool = False
