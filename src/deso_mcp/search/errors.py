"""Errors surfaced by repository search and document reads."""
from __future__ import annotations
from pathlib import Path


class RepositorySearchError(Exception):
    """Base class for repository search failures."""


class DocumentNotFoundError(RepositorySearchError):
    """A requested document does not exist or cannot be read."""

    def __init__(self, path: str, repository: str | None = None, reason: str = "not found"):
        self.path = path
        self.repository = repository
        self.reason = reason
        super().__init__(f"Document {path!r} could not be read: {reason}")


class RootAccessError(RepositorySearchError):
    """The repositories base directory itself is unusable."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot access repositories directory {self.path}: {reason}")
