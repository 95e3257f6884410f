"""MCP SDK bridge adapter.

This adapter connects the tool registry to the MCP SDK's low-level server so
``tools/list`` and ``tools/call`` requests arriving over stdio are answered
by the same dispatch logic the tests exercise directly.

Tool call failures are returned as ``isError`` results whose text and
structured content hold the full failure body (code, message, kind and
details). The SDK would otherwise reduce a raised exception to its message.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, List, Union

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .. import __version__
from ..core.tool_registry import ToolRegistry
from ..exceptions import ClassifiedFailure, unexpected

logger = logging.getLogger(__name__)

SERVER_NAME = "graphql-mcp-server"


def to_mcp_error(failure: ClassifiedFailure) -> McpError:
    """Render a classified failure as an MCP protocol error."""
    error = failure.to_dict()
    return McpError(types.ErrorData(code=error["code"], message=error["message"], data=error["data"]))


def to_error_result(failure: ClassifiedFailure) -> types.CallToolResult:
    """Render a classified failure as an ``isError`` tool result."""
    error = failure.to_dict()
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=json.dumps(error, indent=2))],
        structuredContent=error,
        isError=True,
    )


class MCPBridge:
    """Bridge between the tool registry and the MCP SDK transport."""

    def __init__(self, registry: ToolRegistry, name: str = SERVER_NAME) -> None:
        self.registry = registry
        self.server: Server = Server(name, version=__version__)
        self._register_handlers()

    def _register_handlers(self) -> None:
        @self.server.list_tools()
        async def _list_tools() -> List[types.Tool]:
            return await self.list_tools()

        # Input validation belongs to the registry so failures keep their kind.
        @self.server.call_tool(validate_input=False)
        async def _call_tool(name: str, arguments: Any) -> Union[List[types.TextContent], types.CallToolResult]:
            return await self.call_tool(name, arguments)

    async def list_tools(self) -> List[types.Tool]:
        try:
            tools = self.registry.list_tools()
        except ClassifiedFailure as failure:
            raise to_mcp_error(failure) from failure
        return [
            types.Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
            for tool in tools
        ]

    async def call_tool(self, name: str, arguments: Any) -> Union[List[types.TextContent], types.CallToolResult]:
        """Run a tool call in a worker thread; the HTTP request blocks."""
        try:
            result = await asyncio.to_thread(self.registry.call_tool, name, arguments)
        except ClassifiedFailure as failure:
            logger.warning("Tool %s failed (%s): %s", name, failure.kind.value, failure.message)
            return to_error_result(failure)
        except Exception as exc:
            logger.error("Unexpected error in tool %s: %s", name, exc, exc_info=True)
            return to_error_result(unexpected(f"An unexpected error occurred while executing tool {name}.", exc))
        return [types.TextContent(type="text", text=item["text"]) for item in result["content"]]

    async def run(self) -> None:
        """Serve MCP requests over stdio until the client disconnects."""
        logger.info("Starting %s v%s over stdio", self.server.name, __version__)
        async with stdio_server() as (read_stream, write_stream):
            logger.info("GraphQL MCP server connected and running via stdio.")
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )
