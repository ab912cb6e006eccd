"""DeSo MCP - documentation search and developer knowledge over MCP stdio."""

__version__ = "3.0.0"
