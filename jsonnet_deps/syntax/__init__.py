"""Jsonnet parsing on top of tree-sitter."""

from __future__ import annotations

from jsonnet_deps.syntax.literals import string_value
from jsonnet_deps.syntax.parser import Document, parse

__all__ = [
    "Document",
    "parse",
    "string_value",
]
