"""Title extraction and highlighted excerpts for matched documents."""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Sequence

TITLE_SCAN_LINES = 10
CONTEXT_LINES = 2
MAX_EXCERPT_LENGTH = 500
TRUNCATION_MARKER = "..."


@dataclass
class MatchContext:
    """A matching line together with the lines around it."""
    line_number: int  # 1-based
    context: str
    matched_line: str


@dataclass
class Excerpt:
    """Title and preview built for one document."""
    title: str
    text: str
    matches: list[MatchContext] = field(default_factory=list)


def get_document_title(content: str, filename: str) -> str:
    """Return the first level-1 markdown heading, or a title made from the filename.

    Only the first 10 lines are examined. The fallback strips the extension
    and turns '-' and '_' into spaces, so 'my-doc.md' becomes 'my doc'.
    """
    for line in content.split("\n")[:TITLE_SCAN_LINES]:
        if line.startswith("# "):
            return line[2:].strip()

    suffix = PurePath(filename).suffix
    stem = filename[: -len(suffix)] if suffix else filename
    return re.sub(r"[-_]", " ", stem)


def locate_matches(lines: Sequence[str], terms: Sequence[str]) -> list[MatchContext]:
    """Find every line containing any term, with two lines of context each side."""
    matches: list[MatchContext] = []
    for i, line in enumerate(lines):
        line_lower = line.lower()
        if any(term in line_lower for term in terms):
            start = max(0, i - CONTEXT_LINES)
            end = min(len(lines), i + CONTEXT_LINES + 1)
            matches.append(MatchContext(
                line_number=i + 1,
                context="\n".join(lines[start:end]),
                matched_line=line,
            ))
    return matches


def highlight_terms(text: str, terms: Sequence[str]) -> str:
    """Wrap case-insensitive occurrences of each term in bold markers.

    Terms are applied one after another, so a term that occurs inside an
    earlier term's marker gets wrapped again.
    """
    for term in terms:
        text = re.sub(f"({re.escape(term)})", r"**\1**", text, flags=re.IGNORECASE)
    return text


def build_excerpt(matches: Sequence[MatchContext], terms: Sequence[str]) -> str:
    """Highlight the first match's context block and cap it at 500 characters."""
    if not matches:
        return ""

    excerpt = highlight_terms(matches[0].context, terms)
    if len(excerpt) > MAX_EXCERPT_LENGTH:
        excerpt = excerpt[:MAX_EXCERPT_LENGTH] + TRUNCATION_MARKER
    return excerpt


def extract_excerpt(content: str, terms: Sequence[str], filename: str) -> Excerpt:
    """Build the title and excerpt for a document that matched.

    Args:
        content: Full document text
        terms: Lowercase search terms
        filename: Bare file name, used for the fallback title

    Returns:
        Excerpt with title, highlighted text and every located match
    """
    matches = locate_matches(content.split("\n"), terms)
    return Excerpt(
        title=get_document_title(content, filename),
        text=build_excerpt(matches, terms),
        matches=matches,
    )
