"""MCP stdio server with JSON-RPC framing.

Implements Model Context Protocol (MCP) for DeSo repository search and
developer guides. Supports tool listing, schemas, and robust error handling.
Logs go to stderr; stdout carries only JSON-RPC responses.
"""
import asyncio
import json
import logging
import sys
from typing import Any

from deso_mcp import __version__
from deso_mcp.mcp.schemas import TOOL_SCHEMAS
from deso_mcp.mcp.tools import TOOL_REGISTRY

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"


# MCP Protocol Implementation


async def handle_initialize(params: dict[str, Any]) -> dict[str, Any]:
    """Handle MCP initialize request."""
    return {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {
            "tools": {}
        },
        "serverInfo": {
            "name": "deso-mcp",
            "version": __version__
        }
    }


async def handle_tools_list(params: dict[str, Any]) -> dict[str, Any]:
    """List all available tools with their schemas."""
    tools = []

    for tool_name in TOOL_REGISTRY.keys():
        schema = TOOL_SCHEMAS.get(tool_name, {})
        tools.append({
            "name": tool_name,
            "description": schema.get("description", ""),
            "inputSchema": schema.get("inputSchema", {
                "type": "object",
                "properties": {},
                "required": []
            })
        })

    return {"tools": tools}


def to_content(result: Any) -> list[dict[str, str]]:
    """Wrap a tool result as MCP content: text as-is, anything else as JSON."""
    if isinstance(result, str):
        text = result
    else:
        text = json.dumps(result, indent=2)
    return [{"type": "text", "text": text}]


async def handle_tools_call(params: dict[str, Any]) -> dict[str, Any]:
    """Call a tool with given parameters."""
    tool_name = params.get("name")
    tool_params = params.get("arguments") or {}

    if tool_name not in TOOL_REGISTRY:
        raise ValueError(f"Unknown tool: {tool_name}")
    if not isinstance(tool_params, dict):
        raise TypeError("Tool arguments must be an object")

    logger.info(f"Tool called: {tool_name}")
    handler = TOOL_REGISTRY[tool_name]
    result = await handler(**tool_params)

    return {"content": to_content(result)}


# JSON-RPC Handler


MCP_METHODS = {
    "initialize": handle_initialize,
    "tools/list": handle_tools_list,
    "tools/call": handle_tools_call,
}


def _error(req_id: Any, code: int, message: str, data: dict[str, Any] | None = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if data is not None:
        error["data"] = data
    return {"jsonrpc": "2.0", "id": req_id, "error": error}


async def handle_request(request: dict[str, Any]) -> dict[str, Any] | None:
    """Handle a single JSON-RPC request.

    Returns:
        JSON-RPC response dictionary, or None for notifications
    """
    if "id" not in request:
        logger.debug(f"Notification received: {request.get('method')}")
        return None

    req_id = request.get("id")
    method = request.get("method")
    params = request.get("params") or {}

    try:
        if method in MCP_METHODS:
            handler = MCP_METHODS[method]
            result = await handler(params)
            return {
                "jsonrpc": "2.0",
                "id": req_id,
                "result": result
            }

        return _error(
            req_id,
            -32601,
            f"Method not found: {method}",
            {"available_methods": list(MCP_METHODS.keys())},
        )

    except TypeError as e:
        # Parameter validation errors
        logger.warning(f"Invalid params for {method}: {e}")
        return _error(req_id, -32602, "Invalid params", {"error": str(e), "error_type": "TypeError"})

    except ValueError as e:
        # Tool-specific errors
        logger.warning(f"{method} failed: {e}")
        return _error(req_id, -32000, str(e), {"error_type": "ValueError"})

    except Exception as e:
        logger.exception(f"Unexpected error handling {method}")
        return _error(req_id, -32603, "Internal error", {"error": str(e), "error_type": type(e).__name__})


def _write(response: dict[str, Any]) -> None:
    sys.stdout.write(json.dumps(response) + "\n")
    sys.stdout.flush()


async def run_stdio_server() -> None:
    """Run MCP server over stdio with robust JSON-RPC framing.

    Reads JSON-RPC requests from stdin (one per line).
    Writes JSON-RPC responses to stdout (one per line).
    """
    logger.info("DeSo MCP server starting on stdio...")
    logger.info(f"Available tools: {', '.join(TOOL_REGISTRY.keys())}")

    try:
        while True:
            line = await asyncio.to_thread(sys.stdin.readline)
            if not line:
                # EOF - client disconnected
                break

            line = line.strip()
            if not line:
                continue

            try:
                request = json.loads(line)
            except json.JSONDecodeError as e:
                _write(_error(None, -32700, "Parse error", {"error": str(e)}))
                continue

            if not isinstance(request, dict):
                _write(_error(None, -32600, "Invalid Request"))
                continue

            response = await handle_request(request)
            if response is not None:
                _write(response)

    except KeyboardInterrupt:
        logger.info("Server shutting down...")

    except Exception:
        logger.exception("Fatal server error")
        raise


def main() -> None:
    """Entry point for MCP server."""
    asyncio.run(run_stdio_server())


if __name__ == "__main__":
    main()
