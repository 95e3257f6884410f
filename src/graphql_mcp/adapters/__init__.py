"""Transport adapters for the GraphQL MCP server."""

from .mcp_bridge import MCPBridge, to_error_result, to_mcp_error

__all__ = ["MCPBridge", "to_error_result", "to_mcp_error"]
