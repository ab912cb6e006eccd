"""Per-document relevance scoring.

A document's score is the total number of occurrences of every search term
in its lowercased content. Documents scoring zero produce no result.
"""
from __future__ import annotations
import asyncio
import logging
import re
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Sequence

from .excerpt import extract_excerpt

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """A single matching document."""
    title: str
    path: str  # POSIX path relative to the repositories base directory
    repository: str
    score: int
    excerpt: str
    match_count: int  # distinct lines containing any term

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def count_occurrences(content_lower: str, term: str) -> int:
    """Count non-overlapping occurrences of a term, matched literally."""
    return len(re.findall(re.escape(term), content_lower))


def score_content(content: str, terms: Sequence[str]) -> int:
    """Sum the occurrence counts of every term in the content."""
    content_lower = content.lower()
    return sum(count_occurrences(content_lower, term) for term in terms)


def match_document(
    content: str,
    terms: Sequence[str],
    path: str,
    repository: str,
    filename: str | None = None,
) -> SearchResult | None:
    """Score one document and build its result.

    Args:
        content: Full document text
        terms: Lowercase search terms
        path: Path reported in the result
        repository: Repository label
        filename: File name for the fallback title (defaults to the last path component)

    Returns:
        SearchResult, or None when no term occurs in the document
    """
    score = score_content(content, terms)
    if score == 0:
        return None

    excerpt = extract_excerpt(content, terms, filename or Path(path).name)
    return SearchResult(
        title=excerpt.title,
        path=path,
        repository=repository,
        score=score,
        excerpt=excerpt.text,
        match_count=len(excerpt.matches),
    )


async def match_file(
    file_path: Path,
    repository: str,
    terms: Sequence[str],
    base_path: Path,
) -> SearchResult | None:
    """Read a file and match it, skipping files that cannot be read."""
    try:
        content = await asyncio.to_thread(file_path.read_text, encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug(f"Skipping unreadable file {file_path}: {e}")
        return None

    try:
        rel_path = file_path.relative_to(base_path).as_posix()
    except ValueError:
        rel_path = file_path.as_posix()

    return match_document(content, terms, rel_path, repository, file_path.name)
