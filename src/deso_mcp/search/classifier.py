"""Searchable file detection by extension.

Only files on the allow-list are read during a search; there is no
content-based binary detection.
"""
from __future__ import annotations
from pathlib import PurePath

# Text, markup, code and config formats
SEARCHABLE_EXTENSIONS = frozenset({
    ".md", ".txt",
    ".js", ".ts", ".tsx", ".jsx", ".vue",
    ".go", ".py", ".sh",
    ".json", ".yaml", ".yml", ".toml", ".ini", ".conf", ".config", ".env", ".lock",
    ".graphql", ".gql",
    ".css", ".scss", ".html",
})

# Extensionless names that are always searched (matched case-sensitively)
SEARCHABLE_NAMES = frozenset({"README", "LICENSE"})


def is_searchable_file(filename: str) -> bool:
    """Check whether a file should be scanned.

    Args:
        filename: Bare file name (no directory component needed)

    Returns:
        True if the extension is allow-listed or the name is README/LICENSE
    """
    if filename in SEARCHABLE_NAMES:
        return True
    return PurePath(filename).suffix.lower() in SEARCHABLE_EXTENSIONS
