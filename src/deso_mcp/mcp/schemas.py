"""Tool schemas for MCP server.

Defines JSON Schema for each tool's input parameters.
"""
from deso_mcp.config import DEFAULT_REPOSITORIES

TOOL_SCHEMAS = {
    "ping": {
        "description": "Health check - verify server is running",
        "inputSchema": {
            "type": "object",
            "properties": {},
            "required": []
        }
    },

    "repository_search": {
        "description": """Search the local DeSo repository checkouts (docs, core, identity, frontend, backend, deso-js, deso-chat, deso-ui, graphql) for documents and source files.

The query is split on whitespace; each document is scored by the total number of case-insensitive occurrences of every term. Results are ranked by score and show the document title, its path (prefixed with the repository name), and a highlighted excerpt around the first matching line.

USE THIS WHEN: You need to find where something is documented or implemented in the DeSo codebase. Follow up with read_repository_document to read a result in full.""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query"
                },
                "limit": {
                    "type": "integer",
                    "description": "Number of results to display (default from server config, normally 10)",
                    "minimum": 1
                }
            },
            "required": ["query"]
        }
    },

    "read_repository_document": {
        "description": "Read a specific document from the DeSo repositories. Use the path returned by repository_search, or a path inside a named repository.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Relative path to the document (e.g., 'docs/deso-tutorial-build-apps.md')"
                },
                "repository": {
                    "type": "string",
                    "enum": list(DEFAULT_REPOSITORIES),
                    "description": "Repository name; when omitted the path must start with the repository name"
                }
            },
            "required": ["path"]
        }
    },

    "deso_api_explorer": {
        "description": "DeSo API explorer with backend implementation details and deso-js SDK integration",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "enum": ["social", "messages", "financial", "nft", "dao", "access", "all"],
                    "description": "API category to explore",
                    "default": "all"
                },
                "endpoint": {
                    "type": "string",
                    "description": "Specific endpoint name (optional)"
                },
                "includeCode": {
                    "type": "boolean",
                    "description": "Include code examples",
                    "default": False
                }
            },
            "required": []
        }
    },

    "deso_js_guide": {
        "description": "Guide to using the deso-js SDK with setup, authentication, transactions and data fetching",
        "inputSchema": {
            "type": "object",
            "properties": {
                "topic": {
                    "type": "string",
                    "enum": ["setup", "identity", "transactions", "data"],
                    "description": "Topic to get guidance on"
                },
                "framework": {
                    "type": "string",
                    "enum": ["vanilla", "react", "nextjs", "node"],
                    "description": "Framework context (optional)"
                }
            },
            "required": ["topic"]
        }
    },

    "generate_deso_code": {
        "description": "Generate code examples for DeSo operations using the deso-js SDK",
        "inputSchema": {
            "type": "object",
            "properties": {
                "operation": {
                    "type": "string",
                    "description": "DeSo operation (e.g., 'follow', 'post', 'buy-creator-coin', 'send-diamonds')"
                },
                "language": {
                    "type": "string",
                    "enum": ["javascript", "typescript", "react", "curl"],
                    "description": "Programming language/framework"
                },
                "includeAuth": {
                    "type": "boolean",
                    "description": "Include authentication setup"
                },
                "fullExample": {
                    "type": "boolean",
                    "description": "Prepend SDK configuration for a complete working example"
                }
            },
            "required": ["operation", "language"]
        }
    },

    "explain_deso_architecture": {
        "description": "Explain DeSo architecture, flows, and integration patterns",
        "inputSchema": {
            "type": "object",
            "properties": {
                "topic": {
                    "type": "string",
                    "description": "Architecture topic to explain (transaction-flow, identity-system, backend-implementation, frontend-patterns, messaging-architecture, or any other topic for an overview)"
                },
                "includeCode": {
                    "type": "boolean",
                    "description": "Include code examples"
                }
            },
            "required": ["topic"]
        }
    },

    "deso_debugging_guide": {
        "description": "Debugging guide for common DeSo integration issues with solutions",
        "inputSchema": {
            "type": "object",
            "properties": {
                "issue": {
                    "type": "string",
                    "enum": ["message-decryption", "access-groups", "infinite-loops", "api-responses", "authentication", "react-errors", "all"],
                    "description": "Specific issue to debug or 'all' for complete guide"
                },
                "includeCode": {
                    "type": "boolean",
                    "description": "Include code examples and fixes"
                }
            },
            "required": ["issue"]
        }
    },

    "deso_implementation_patterns": {
        "description": "Best practices and implementation patterns learned from deso-chat and real debugging",
        "inputSchema": {
            "type": "object",
            "properties": {
                "pattern": {
                    "type": "string",
                    "enum": ["messaging-flow", "error-handling", "state-management", "api-integration", "user-switching", "real-time-updates", "all"],
                    "description": "Implementation pattern to explore"
                },
                "framework": {
                    "type": "string",
                    "enum": ["react", "vanilla", "nextjs"],
                    "description": "Framework context"
                }
            },
            "required": ["pattern"]
        }
    },

    "deso_ui_components": {
        "description": "DeSo UI component library explorer with installation commands, usage examples, and component relationships",
        "inputSchema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["explore", "install", "usage", "dependencies", "examples", "layouts", "categories", "search"],
                    "description": "Action to perform with the UI component library"
                },
                "component": {
                    "type": "string",
                    "description": "Specific component name (e.g., 'post-card', 'editor', 'profile-picture')"
                },
                "category": {
                    "type": "string",
                    "enum": ["social", "user", "messaging", "media", "interactive", "navigation", "utility", "all"],
                    "description": "Component category to explore"
                },
                "framework": {
                    "type": "string",
                    "enum": ["react", "nextjs", "vanilla"],
                    "description": "Target framework for examples"
                },
                "query": {
                    "type": "string",
                    "description": "Search query for components"
                }
            },
            "required": ["action"]
        }
    },

    "deso_graphql_helper": {
        "description": "GraphQL query builder and schema explorer for DeSo blockchain data. Helps write GraphQL queries to get user data, posts, followers, and more from the DeSo GraphQL API.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "action": {
                    "type": "string",
                    "enum": ["query", "schema", "examples", "build", "explain"],
                    "description": "Action to perform with GraphQL"
                },
                "queryType": {
                    "type": "string",
                    "enum": ["user", "posts", "followers", "following", "likes", "diamonds", "nfts"],
                    "description": "Type of query to build or explain"
                },
                "username": {
                    "type": "string",
                    "description": "Username to query for (e.g., 'nader')"
                },
                "publicKey": {
                    "type": "string",
                    "description": "Public key to query for"
                },
                "question": {
                    "type": "string",
                    "description": "Natural language question to convert to GraphQL (e.g., 'how many followers does nader have?')"
                },
                "customQuery": {
                    "type": "string",
                    "description": "Custom GraphQL query to explain"
                }
            },
            "required": ["action"]
        }
    },
}
