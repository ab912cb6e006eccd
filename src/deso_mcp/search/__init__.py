"""Full-text search over local repository checkouts."""
from .classifier import is_searchable_file
from .errors import DocumentNotFoundError, RepositorySearchError, RootAccessError
from .excerpt import Excerpt, MatchContext, extract_excerpt, get_document_title
from .matcher import SearchResult, match_document
from .repository import (
    Document,
    RepositoryDocuments,
    parse_query,
    read_repository_document,
    search_repository_documents,
)
from .walker import search_directory

__all__ = [
    "Document",
    "DocumentNotFoundError",
    "Excerpt",
    "MatchContext",
    "RepositoryDocuments",
    "RepositorySearchError",
    "RootAccessError",
    "SearchResult",
    "extract_excerpt",
    "get_document_title",
    "is_searchable_file",
    "match_document",
    "parse_query",
    "read_repository_document",
    "search_directory",
    "search_repository_documents",
]
