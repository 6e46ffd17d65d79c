"""Per-run memo of file analyses."""

from __future__ import annotations

import logging
from pathlib import Path

from jsonnet_deps.models import Analysis

logger = logging.getLogger(__name__)


class AnalysisCache:
    """Maps a canonical file path to its Analysis for the lifetime of a run.

    Lookups and inserts are separate steps: a failed analysis must not leave
    an entry behind, so there is no get-or-compute helper.
    """

    def __init__(self):
        self._entries: dict[Path, Analysis] = {}
        self.hits = 0
        self.misses = 0

    def get(self, path: Path) -> Analysis | None:
        analysis = self._entries.get(path)
        if analysis is None:
            self.misses += 1
            logger.debug("cache miss: %s", path)
        else:
            self.hits += 1
        return analysis

    def put(self, path: Path, analysis: Analysis) -> None:
        if path in self._entries:
            raise ValueError(f"analysis for {path} is already cached")
        self._entries[path] = analysis

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
