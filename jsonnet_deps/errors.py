"""Exception hierarchy for jsonnet-deps."""

from __future__ import annotations

from pathlib import Path


class JsonnetDepsError(Exception):
    """Base class for all errors raised by jsonnet-deps."""


class DependencyIOError(JsonnetDepsError):
    """A file could not be read, or its existence could not be determined."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class JsonnetParseError(JsonnetDepsError):
    """Source text is not valid Jsonnet."""

    def __init__(self, filename: str, line: int, column: int, message: str):
        self.filename = filename
        self.line = line
        self.column = column
        self.message = message
        super().__init__(f"{filename}:{line}:{column}: {message}")


class ResolutionAbort(JsonnetDepsError):
    """Closure expansion for a root file failed."""

    def __init__(self, root: Path, cause: JsonnetDepsError):
        self.root = root
        self.cause = cause
        super().__init__(f"failed to resolve dependencies of {root}: {cause}")
