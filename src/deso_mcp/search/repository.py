"""Search and read documents across the configured repository checkouts.

Every search walks the repositories from scratch; nothing is cached between
calls. Repositories are searched one after another in configured order.
"""
from __future__ import annotations
import asyncio
import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence
import pathspec

from deso_mcp.config import ServerConfig
from .errors import DocumentNotFoundError, RootAccessError
from .excerpt import get_document_title
from .matcher import SearchResult
from .walker import DEFAULT_EXCLUDE_SPEC, build_exclude_spec, search_directory

logger = logging.getLogger(__name__)


@dataclass
class Document:
    """A document loaded by path."""
    title: str
    content: str
    path: str
    repository: str | None
    file_name: str


def parse_query(query: str) -> list[str]:
    """Split a query into unique lowercase terms, keeping first-seen order."""
    return list(dict.fromkeys(query.lower().split()))


class RepositoryDocuments:
    """Full-text search and document reads over a set of repository roots."""

    def __init__(
        self,
        base_path: Path | str,
        repositories: Sequence[str],
        exclude_spec: pathspec.PathSpec = DEFAULT_EXCLUDE_SPEC,
    ) -> None:
        self.base_path = Path(base_path)
        self.repositories = list(repositories)
        self.exclude_spec = exclude_spec

    @classmethod
    def from_config(cls, config: ServerConfig) -> RepositoryDocuments:
        repos = config.repositories
        spec = (
            build_exclude_spec(repos.extra_ignore_patterns)
            if repos.extra_ignore_patterns
            else DEFAULT_EXCLUDE_SPEC
        )
        return cls(repos.base_path, repos.names, spec)

    async def _check_base_path(self) -> None:
        try:
            await asyncio.to_thread(os.listdir, self.base_path)
        except FileNotFoundError:
            raise RootAccessError(self.base_path, "directory does not exist")
        except NotADirectoryError:
            raise RootAccessError(self.base_path, "not a directory")
        except OSError as e:
            raise RootAccessError(self.base_path, e.strerror or str(e)) from e

    async def _repository_root(self, name: str) -> Path | None:
        repo_path = self.base_path / name
        try:
            st = await asyncio.to_thread(os.stat, repo_path)
        except FileNotFoundError:
            logger.debug(f"Repository {name} not present at {repo_path}")
            return None
        except OSError as e:
            logger.warning(f"Error accessing {name}: {e}")
            return None

        if not stat.S_ISDIR(st.st_mode):
            logger.debug(f"Repository {name} at {repo_path} is not a directory")
            return None
        return repo_path

    async def search(self, query: str) -> list[SearchResult]:
        """Search every configured repository for documents matching a query.

        Args:
            query: Free-text query, split on whitespace into terms

        Returns:
            All matching documents sorted by score, highest first. Equal
            scores keep traversal order.

        Raises:
            RootAccessError: If the repositories base directory is unusable
        """
        terms = parse_query(query)
        if not terms:
            return []

        await self._check_base_path()

        results: list[SearchResult] = []
        for name in self.repositories:
            repo_path = await self._repository_root(name)
            if repo_path is None:
                continue
            repo_results = await search_directory(
                repo_path, name, terms, self.base_path, self.exclude_spec
            )
            logger.debug(f"Repository {name}: {len(repo_results)} matching documents")
            results.extend(repo_results)

        results.sort(key=lambda r: r.score, reverse=True)
        return results

    def resolve_document_path(self, path: str, repository: str | None = None) -> Path:
        """Map a repository label and relative path to a file under the base directory.

        Raises:
            DocumentNotFoundError: For an unknown repository or a path that
                leaves the repositories directory
        """
        if repository is not None and repository not in self.repositories:
            raise DocumentNotFoundError(path, repository, f"unknown repository {repository!r}")

        root = self.base_path / repository if repository else self.base_path
        full_path = Path(os.path.normpath(root / path))
        base = Path(os.path.normpath(self.base_path))
        if full_path != base and base not in full_path.parents:
            raise DocumentNotFoundError(path, repository, "path is outside the repositories directory")
        return full_path

    async def read(self, path: str, repository: str | None = None) -> Document:
        """Load one document and derive its title.

        Args:
            path: Path relative to the repository (or to the base directory
                when no repository is given)
            repository: Optional repository label

        Raises:
            DocumentNotFoundError: If the document cannot be read
        """
        full_path = self.resolve_document_path(path, repository)

        try:
            content = await asyncio.to_thread(full_path.read_text, encoding="utf-8", errors="replace")
        except FileNotFoundError:
            raise DocumentNotFoundError(path, repository, f"no such file: {full_path}")
        except IsADirectoryError:
            raise DocumentNotFoundError(path, repository, f"is a directory: {full_path}")
        except PermissionError:
            raise DocumentNotFoundError(path, repository, f"permission denied: {full_path}")
        except OSError as e:
            raise DocumentNotFoundError(path, repository, f"{e.strerror or e}: {full_path}") from e

        return Document(
            title=get_document_title(content, full_path.name),
            content=content,
            path=path,
            repository=repository,
            file_name=full_path.name,
        )


async def search_repository_documents(query: str, config: ServerConfig) -> list[SearchResult]:
    """Search the repositories described by a server config."""
    return await RepositoryDocuments.from_config(config).search(query)


async def read_repository_document(
    path: str,
    config: ServerConfig,
    repository: str | None = None,
) -> Document:
    """Read a document from the repositories described by a server config."""
    return await RepositoryDocuments.from_config(config).read(path, repository)
