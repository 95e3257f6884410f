"""GraphQL MCP tool handlers."""

from .execution import handle_execution
from .introspection import INTROSPECTION_QUERY, handle_introspection

__all__ = ["INTROSPECTION_QUERY", "handle_execution", "handle_introspection"]
