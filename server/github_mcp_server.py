#!/usr/bin/env python3
"""
GitHub MCP server.

Serves the GitHub tool catalog to an MCP host over stdio. Stdout carries
the protocol, so all logging goes to stderr.
"""
import asyncio
import logging
import sys
from typing import Iterable

import httpx
import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from github_mcp import (
    GitHubAPI, GitHubOperations, Settings, ToolDescriptor,
    TOOL_CATALOG, handle, UnknownToolError, ToolExecutionError,
)

SERVER_NAME = "github-mcp-server"
SERVER_VERSION = "0.1.0"

logger = logging.getLogger(__name__)

def create_server(adapter: GitHubOperations,
                  catalog: Iterable[ToolDescriptor] = TOOL_CATALOG) -> Server:
    """Bind the tool catalog and dispatcher to an MCP server."""
    catalog = tuple(catalog)
    app = Server(SERVER_NAME, version=SERVER_VERSION)

    @app.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=dict(tool.input_schema))
            for tool in catalog
        ]

    # Registered directly so failures map onto JSON-RPC error codes
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        try:
            result = await handle(catalog, adapter, name, request.params.arguments)
        except UnknownToolError as e:
            logger.warning(str(e))
            raise McpError(types.ErrorData(code=types.METHOD_NOT_FOUND, message=str(e)))
        except ToolExecutionError as e:
            raise McpError(types.ErrorData(code=types.INTERNAL_ERROR, message=str(e)))

        return types.ServerResult(types.CallToolResult(
            content=[types.TextContent(type="text", text=block.text) for block in result.content],
            isError=False,
        ))

    app.request_handlers[types.CallToolRequest] = call_tool
    return app

async def run(settings: Settings) -> None:
    """Serve requests over stdio until the stream closes."""
    if not settings.github_token:
        logger.warning("GITHUB_TOKEN is not set; GitHub calls will be unauthenticated")

    async with httpx.AsyncClient(timeout=settings.timeout) as client:
        adapter = GitHubAPI(client, settings.github_token, base_url=settings.api_url)
        app = create_server(adapter)

        async with stdio_server() as (read_stream, write_stream):
            logger.info("GitHub MCP server running on stdio")
            await app.run(read_stream, write_stream, app.create_initialization_options())

def main() -> None:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Invalid configuration: {str(e)}")
        sys.exit(1)

    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.error(f"GitHub MCP server failed: {str(e)}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()
