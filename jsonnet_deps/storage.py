"""Local filesystem access used by the resolver and the analyzer."""

from __future__ import annotations

import errno
import os
from pathlib import Path

from jsonnet_deps.errors import DependencyIOError

# stat() failures that mean "no such file" rather than "cannot tell"
_MISSING_ERRNOS = {errno.ENOENT, errno.ENOTDIR, errno.ENAMETOOLONG, errno.ELOOP}


class FileStorage:
    """Reads files and probes for their existence on the local filesystem."""

    def read_file(self, path: Path) -> bytes:
        try:
            return Path(path).read_bytes()
        except OSError as e:
            raise DependencyIOError(path, f"failed to read: {e.strerror or e}") from e

    def path_exists(self, path: Path) -> bool:
        try:
            os.stat(path)
        except OSError as e:
            if e.errno in _MISSING_ERRNOS:
                return False
            raise DependencyIOError(
                path, f"cannot determine whether file exists: {e.strerror or e}"
            ) from e
        return True
