from __future__ import annotations
import argparse
import asyncio
import logging
import sys
from dotenv import load_dotenv

from deso_mcp.config import ServerConfig, load_server_config
from deso_mcp.mcp import tools
from deso_mcp.mcp.server import run_stdio_server


def configure_logging(config: ServerConfig) -> None:
    """Send log records to stderr; stdout belongs to the JSON-RPC stream."""
    logging.basicConfig(
        level=getattr(logging, config.logging.level),
        format=config.logging.format,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deso-mcp",
        description="DeSo MCP - repository search and developer guides over MCP"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to configuration YAML file (default: $DESO_MCP_CONFIG or config/deso-mcp.yaml)"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    sub.add_parser("serve", help="Run the MCP server on stdio")

    search = sub.add_parser("search", help="Search the repository checkouts")
    search.add_argument("query", help="Search query")
    search.add_argument("--limit", type=int, default=None,
                        help="Number of results to show (default: search.max_display_results)")

    read = sub.add_parser("read", help="Print a document from the repository checkouts")
    read.add_argument("path", help="Document path (relative to the repository, or starting with its name)")
    read.add_argument("--repository", default=None, help="Repository name")

    sub.add_parser("tools", help="List the tools exposed by the server")

    return parser


def run(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    # Load environment variables first
    load_dotenv()

    args = build_parser().parse_args(argv)

    try:
        config = load_server_config(args.config)
        configure_logging(config)

        tools.set_server_config(config)

        if args.cmd == "serve":
            asyncio.run(run_stdio_server())
        elif args.cmd == "search":
            print(asyncio.run(tools.repository_search(args.query, limit=args.limit)))
        elif args.cmd == "read":
            print(asyncio.run(tools.read_repository_document(args.path, repository=args.repository)))
        elif args.cmd == "tools":
            for name in tools.TOOL_REGISTRY:
                print(name)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
