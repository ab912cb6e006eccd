"""Configuration management for the DeSo MCP server."""
from .server import (
    DEFAULT_REPOSITORIES,
    LoggingConfig,
    RepositoriesConfig,
    SearchConfig,
    ServerConfig,
    load_server_config,
)

__all__ = [
    "DEFAULT_REPOSITORIES",
    "LoggingConfig",
    "RepositoriesConfig",
    "SearchConfig",
    "ServerConfig",
    "load_server_config",
]
