"""Shared fixtures for the jsonnet-deps tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonnet_deps.errors import DependencyIOError

FIXTURES = Path(__file__).parent / "fixtures"


class MemoryStorage:
    """In-memory stand-in for FileStorage that records every read."""

    def __init__(self, files: dict[str, str | bytes]):
        self.files = {
            Path(name): data if isinstance(data, bytes) else data.encode("utf-8")
            for name, data in files.items()
        }
        self.reads: list[Path] = []

    def read_file(self, path: Path) -> bytes:
        self.reads.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise DependencyIOError(path, "failed to read: No such file or directory") from None

    def path_exists(self, path: Path) -> bool:
        return path in self.files


@pytest.fixture
def memory_storage():
    return MemoryStorage


@pytest.fixture
def project_dir() -> Path:
    return FIXTURES / "project"
