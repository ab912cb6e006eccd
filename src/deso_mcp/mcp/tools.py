# Tool registry for MCP server
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable

from deso_mcp.config import ServerConfig, load_server_config
from deso_mcp.knowledge import (
    debugging_guide,
    explain_architecture,
    explore_api,
    generate_code,
    graphql_helper,
    implementation_patterns,
    sdk_guide,
    ui_components,
)
from deso_mcp.search import (
    Document,
    DocumentNotFoundError,
    RootAccessError,
    SearchResult,
    read_repository_document as _read_repository_document,
    search_repository_documents,
)

logger = logging.getLogger(__name__)

TOOL_REGISTRY: dict[str, Callable[..., Awaitable[Any]]] = {}

_server_config: ServerConfig | None = None


def tool(name: str):
    def deco(fn):
        TOOL_REGISTRY[name] = fn
        return fn
    return deco


def get_server_config() -> ServerConfig:
    """Return the active config, loading it from the environment on first use."""
    global _server_config
    if _server_config is None:
        _server_config = load_server_config()
    return _server_config


def set_server_config(config: ServerConfig | None) -> None:
    """Install the config used by the repository tools (None reloads lazily)."""
    global _server_config
    _server_config = config


# Rendering

def render_search_results(query: str, results: list[SearchResult], repositories: list[str], limit: int) -> str:
    """Format ranked search results as markdown, showing at most ``limit`` of them."""
    if not results:
        return (
            "# Repository Search Results\n\n"
            f'**Query:** "{query}"\n\n'
            "No matching documents found in the DeSo repositories.\n\n"
            f"**Available repositories:** {', '.join(repositories)}"
        )

    response = (
        "# Repository Search Results\n\n"
        f'**Query:** "{query}"\n'
        f"**Found:** {len(results)} matches\n\n"
    )
    for result in results[:limit]:
        response += f"## {result.title}\n"
        response += f"**Path:** `{result.path}`\n"
        response += f"**Repository:** {result.repository}\n"
        response += f"**Score:** {result.score}\n\n"
        response += f"{result.excerpt}\n\n---\n\n"

    if len(results) > limit:
        response += f"*Showing top {limit} of {len(results)} results*\n"
    return response


def render_search_error(query: str, error: RootAccessError) -> str:
    return (
        "# Repository Search Error\n\n"
        f'**Query:** "{query}"\n\n'
        f"Error searching repositories: {error}\n\n"
        "This might be due to repository access permissions or path issues."
    )


def render_document(doc: Document) -> str:
    return (
        f"# {doc.title}\n\n"
        f"**Path:** `{doc.path}`\n"
        f"**Repository:** {doc.repository or 'auto-detected'}\n"
        f"**File:** {doc.file_name}\n\n"
        "---\n\n"
        f"{doc.content}"
    )


def render_read_error(path: str, repository: str | None, error: DocumentNotFoundError, repositories: list[str]) -> str:
    return (
        "# Document Read Error\n\n"
        f'**Path:** "{path}"\n'
        f"**Repository:** {repository or 'auto-detect'}\n\n"
        f"Error reading document: {error}\n\n"
        f"**Available repositories:** {', '.join(repositories)}\n\n"
        "Try using the `repository_search` tool first to find the correct document path."
    )


# Tools

@tool("ping")
async def ping() -> dict[str, str]:
    return {"ok": "true"}


@tool("repository_search")
async def repository_search(query: str, limit: int | None = None) -> str:
    """Search the local DeSo repository checkouts.

    Args:
        query: Free-text query; every whitespace-separated term is counted
        limit: Number of results to display (defaults to the configured
            ``search.max_display_results``)

    Returns:
        Markdown listing of the top results

    Raises:
        ValueError: If limit is below 1
    """
    if limit is not None and limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    config = get_server_config()
    logger.info(f"repository_search query={query!r}")
    try:
        results = await search_repository_documents(query, config)
    except RootAccessError as e:
        logger.warning(f"Repository search failed: {e}")
        return render_search_error(query, e)
    return render_search_results(
        query,
        results,
        config.repositories.names,
        limit if limit is not None else config.search.max_display_results,
    )


@tool("read_repository_document")
async def read_repository_document(path: str, repository: str | None = None) -> str:
    """Read one document from the repository checkouts.

    Args:
        path: Path relative to the repository, or to the repositories
            directory when no repository is given
        repository: Optional repository name
    """
    config = get_server_config()
    logger.info(f"read_repository_document path={path!r} repository={repository!r}")
    try:
        doc = await _read_repository_document(path, config, repository)
    except DocumentNotFoundError as e:
        logger.warning(str(e))
        return render_read_error(path, repository, e, config.repositories.names)
    return render_document(doc)


@tool("deso_api_explorer")
async def deso_api_explorer(
    category: str = "all",
    endpoint: str | None = None,
    includeCode: bool = False,
) -> str:
    return explore_api(category, endpoint, include_code=includeCode)


@tool("deso_js_guide")
async def deso_js_guide(topic: str, framework: str = "vanilla") -> str:
    return sdk_guide(topic, framework)


@tool("generate_deso_code")
async def generate_deso_code(
    operation: str,
    language: str,
    includeAuth: bool = False,
    fullExample: bool = False,
) -> str:
    return generate_code(operation, language, include_auth=includeAuth, full_example=fullExample)


@tool("explain_deso_architecture")
async def explain_deso_architecture(topic: str, includeCode: bool = False) -> str:
    return explain_architecture(topic, include_code=includeCode)


@tool("deso_debugging_guide")
async def deso_debugging_guide(issue: str, includeCode: bool = False) -> str:
    return debugging_guide(issue, include_code=includeCode)


@tool("deso_implementation_patterns")
async def deso_implementation_patterns(pattern: str, framework: str = "react") -> str:
    return implementation_patterns(pattern, framework)


@tool("deso_ui_components")
async def deso_ui_components(
    action: str,
    component: str | None = None,
    category: str | None = None,
    framework: str = "react",
    query: str | None = None,
) -> str:
    return ui_components(action, component, category, framework, query)


@tool("deso_graphql_helper")
async def deso_graphql_helper(
    action: str,
    queryType: str | None = None,
    username: str | None = None,
    publicKey: str | None = None,
    question: str | None = None,
    customQuery: str | None = None,
) -> str:
    return graphql_helper(
        action,
        query_type=queryType,
        username=username,
        public_key=publicKey,
        question=question,
        custom_query=customQuery,
    )
