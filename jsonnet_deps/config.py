"""Build a ResolveConfig from command-line values and the environment."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping

from jsonnet_deps.models import OutputFormat, ResolveConfig

JSONNET_PATH_ENV = "JSONNET_PATH"


def search_roots_from_env(environ: Mapping[str, str] | None = None) -> tuple[Path, ...]:
    """Directories listed in ``JSONNET_PATH``, separated by ``os.pathsep``."""
    environ = os.environ if environ is None else environ
    value = environ.get(JSONNET_PATH_ENV, "")
    return tuple(Path(entry) for entry in value.split(os.pathsep) if entry)


def build_search_roots(
    jpaths: Iterable[Path] = (),
    environ: Mapping[str, str] | None = None,
) -> tuple[Path, ...]:
    """Explicit ``-J`` directories first, then ``JSONNET_PATH``, without duplicates."""
    roots: list[Path] = []
    for root in [*(Path(p) for p in jpaths), *search_roots_from_env(environ)]:
        if root not in roots:
            roots.append(root)
    return tuple(roots)


def build_config(
    roots: Iterable[Path],
    jpaths: Iterable[Path] = (),
    output_format: OutputFormat | str = OutputFormat.TEXT,
    keep_going: bool = False,
    environ: Mapping[str, str] | None = None,
) -> ResolveConfig:
    return ResolveConfig(
        roots=[Path(r) for r in roots],
        search_roots=build_search_roots(jpaths, environ),
        output_format=OutputFormat(output_format),
        keep_going=keep_going,
    )
