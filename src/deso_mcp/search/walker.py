"""Recursive directory search.

Walks a repository depth-first, skipping hidden, dependency and build output
directories, and matches every searchable file it finds.
"""
from __future__ import annotations
import asyncio
import logging
import os
from pathlib import Path
from typing import Iterable, Sequence
import pathspec

from .classifier import is_searchable_file
from .matcher import SearchResult, match_file

logger = logging.getLogger(__name__)

# Directories never descended into (hidden directories are always skipped too)
EXCLUDED_DIR_PATTERNS = [
    "node_modules/",
    "dist/",
    "build/",
    "storybook-static/",
    "__pycache__/",
    "venv/",
]


def build_exclude_spec(extra_patterns: Iterable[str] = ()) -> pathspec.PathSpec:
    """Compile the fixed exclusion patterns plus any configured extras."""
    return pathspec.GitIgnoreSpec.from_lines([*EXCLUDED_DIR_PATTERNS, *extra_patterns])


DEFAULT_EXCLUDE_SPEC = build_exclude_spec()


def is_excluded_dir(name: str, spec: pathspec.PathSpec = DEFAULT_EXCLUDE_SPEC) -> bool:
    """Check whether a directory name should be skipped."""
    if name.startswith("."):
        return True
    return spec.match_file(f"{name}/")


def _list_directory(directory: Path) -> list[os.DirEntry]:
    with os.scandir(directory) as it:
        return sorted(it, key=lambda entry: entry.name)


async def search_directory(
    directory: Path,
    repository: str,
    terms: Sequence[str],
    base_path: Path,
    exclude_spec: pathspec.PathSpec = DEFAULT_EXCLUDE_SPEC,
) -> list[SearchResult]:
    """Search a directory tree for documents matching the terms.

    Args:
        directory: Directory to walk
        repository: Repository label attached to every result
        terms: Lowercase search terms
        base_path: Root that result paths are made relative to
        exclude_spec: Directory exclusion patterns

    Returns:
        Results in traversal order. A directory that cannot be listed
        contributes nothing; its siblings are still searched.
    """
    results: list[SearchResult] = []

    try:
        entries = await asyncio.to_thread(_list_directory, directory)
    except OSError as e:
        logger.warning(f"Error reading directory {directory}: {e}")
        return results

    for entry in entries:
        entry_path = Path(entry.path)

        # Symlinks are neither followed nor read
        if entry.is_dir(follow_symlinks=False):
            if is_excluded_dir(entry.name, exclude_spec):
                continue
            results.extend(
                await search_directory(entry_path, repository, terms, base_path, exclude_spec)
            )
        elif entry.is_file(follow_symlinks=False) and is_searchable_file(entry.name):
            result = await match_file(entry_path, repository, terms, base_path)
            if result is not None:
                results.append(result)

    return results
