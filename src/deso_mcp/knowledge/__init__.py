"""Static DeSo knowledge: API reference, guides, code templates, UI and GraphQL helpers."""
from deso_mcp.knowledge.api import explore_api
from deso_mcp.knowledge.code import generate_code
from deso_mcp.knowledge.graphql import graphql_helper
from deso_mcp.knowledge.guides import (
    debugging_guide,
    explain_architecture,
    implementation_patterns,
    sdk_guide,
)
from deso_mcp.knowledge.ui_components import ui_components

__all__ = [
    "debugging_guide",
    "explain_architecture",
    "explore_api",
    "generate_code",
    "graphql_helper",
    "implementation_patterns",
    "sdk_guide",
    "ui_components",
]
