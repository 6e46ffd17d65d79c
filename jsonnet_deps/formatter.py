"""Serialize dependency sets for build systems."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from jsonnet_deps.models import Analysis, OutputFormat, RootResult


def _sorted(paths: Iterable[Path]) -> list[str]:
    return sorted(str(p) for p in paths)


def make_escape(path: str) -> str:
    """Escape a path for use in a Makefile rule."""
    return path.replace("$", "$$").replace("#", "\\#").replace(" ", "\\ ")


def _succeeded(results: list[RootResult]) -> list[RootResult]:
    return [r for r in results if r.ok]


def format_text(results: list[RootResult]) -> str:
    # Headers depend on how many roots were requested, not how many succeeded
    if len(results) == 1:
        return "".join(f"{p}\n" for r in _succeeded(results) for p in _sorted(r.deps))
    blocks = []
    for result in _succeeded(results):
        lines = [f"{result.root}:"] + [f"  {p}" for p in _sorted(result.deps)]
        blocks.append("\n".join(lines) + "\n")
    return "\n".join(blocks)


def format_json(results: list[RootResult]) -> str:
    data = {str(r.root): _sorted(r.deps) for r in _succeeded(results)}
    return json.dumps(data, indent=2) + "\n"


def format_make(results: list[RootResult]) -> str:
    rules = []
    for result in _succeeded(results):
        prereqs = [make_escape(p) for p in _sorted(result.deps - {result.root})]
        rules.append(" ".join([f"{make_escape(str(result.root))}:", *prereqs]).rstrip() + "\n")
    return "".join(rules)


_FORMATTERS = {
    OutputFormat.TEXT: format_text,
    OutputFormat.JSON: format_json,
    OutputFormat.MAKE: format_make,
}


def format_results(results: list[RootResult], output_format: OutputFormat) -> str:
    """Render the successful results; failed roots are reported separately."""
    return _FORMATTERS[output_format](results)


def format_analysis(path: Path, analysis: Analysis) -> str:
    lines = [f"{path}:"]
    lines.append("  leaf: " + ", ".join(str(p) for p in analysis.leaf_deps))
    lines.append("  deep: " + ", ".join(str(p) for p in analysis.deep_deps))
    return "\n".join(line.rstrip() for line in lines) + "\n"
