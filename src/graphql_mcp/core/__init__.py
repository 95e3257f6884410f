"""Core MCP dispatch components.

Components:
- tool_registry: Tool registration, input validation and dispatch
"""

from .tool_registry import (
    EXECUTE_TOOL_NAME,
    INTROSPECT_TOOL_NAME,
    ToolDefinition,
    ToolRegistry,
    ToolResult,
    create_tool_registry,
)

__all__ = [
    "EXECUTE_TOOL_NAME",
    "INTROSPECT_TOOL_NAME",
    "ToolDefinition",
    "ToolRegistry",
    "ToolResult",
    "create_tool_registry",
]
