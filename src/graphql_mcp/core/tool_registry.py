"""Tool registry: advertises the GraphQL tools and dispatches calls to them."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type, TypedDict

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..clients.graphql import GraphQLClient
from ..exceptions import ClassifiedFailure, ErrorKind, unexpected
from ..models.inputs import ExecuteOperationParams, IntrospectSchemaParams
from ..tools.execution import handle_execution
from ..tools.introspection import handle_introspection

logger = logging.getLogger(__name__)

INTROSPECT_TOOL_NAME = "introspectGraphQLSchema"
EXECUTE_TOOL_NAME = "executeGraphQLOperation"


class TextContent(TypedDict):
    type: str
    text: str


class ToolResult(TypedDict):
    content: List[TextContent]


@dataclass
class ToolDefinition:
    """Definition of an MCP tool."""

    name: str
    description: str
    params_model: Type[BaseModel]
    handler: Callable[[Any], Any]

    def to_mcp_format(self) -> Dict[str, Any]:
        """Convert to MCP tools/list format."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.params_model.model_json_schema(),
        }


def _format_location(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "(root)"


def validation_failure(tool_name: str, exc: PydanticValidationError) -> ClassifiedFailure:
    """Turn a pydantic validation error into a ``VALIDATION_ERROR`` failure."""
    issues = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors(include_url=False)
    ]
    summary = "; ".join(f"{_format_location(tuple(issue['loc']))} - {issue['msg']}" for issue in issues)
    return ClassifiedFailure(
        ErrorKind.VALIDATION_ERROR,
        f"Invalid input for tool {tool_name}: {summary}",
        details={"issues": issues},
    )


class ToolRegistry:
    """Registry for managing MCP tools."""

    def __init__(self) -> None:
        self._tools: Dict[str, ToolDefinition] = {}

    def register_tool(
        self,
        name: str,
        handler: Callable[[Any], Any],
        params_model: Type[BaseModel],
        description: str = "",
    ) -> None:
        """Register a tool handler.

        Args:
            name: Tool name
            handler: Callable receiving the validated params model
            params_model: Pydantic model describing the tool's input contract
            description: Tool description for MCP clients
        """
        if not description:
            description = handler.__doc__ or f"Execute {name}"

        self._tools[name] = ToolDefinition(
            name=name,
            description=description,
            params_model=params_model,
            handler=handler,
        )
        logger.debug("Registered tool: %s", name)

    def get_tool(self, name: str) -> ToolDefinition:
        """Get a tool by name."""
        if name not in self._tools:
            logger.warning("Received request for unknown tool: %s", name)
            raise ClassifiedFailure(ErrorKind.UNKNOWN_OPERATION, f"Unknown tool: {name}")
        return self._tools[name]

    def list_tools(self) -> List[Dict[str, Any]]:
        """List all registered tools in MCP format."""
        logger.info("Handling ListTools request")
        try:
            return [tool.to_mcp_format() for tool in self._tools.values()]
        except Exception as exc:
            logger.error("Error generating tool schemas: %s", exc, exc_info=True)
            raise unexpected("Failed to generate tool schemas", exc) from exc

    def call_tool(self, name: str, arguments: Any = None) -> ToolResult:
        """Validate arguments, run the tool, and wrap its result as pretty JSON text.

        Raises:
            ClassifiedFailure: For unknown tools, invalid arguments, and any
                failure raised while the tool runs
        """
        logger.info("Handling CallTool request for tool: %s", name)
        tool = self.get_tool(name)
        params = self._validate(tool, {} if arguments is None else arguments)

        try:
            result = tool.handler(params)
            text = json.dumps(result, indent=2)
        except ClassifiedFailure as exc:
            logger.error("Error executing tool %s: [%s] %s", name, exc.kind.value, exc.message)
            raise
        except Exception as exc:
            logger.error("Error executing tool %s: %s", name, exc, exc_info=True)
            raise unexpected(f"An unexpected error occurred while executing tool {name}.", exc) from exc

        logger.info("Tool %s executed successfully", name)
        return {"content": [{"type": "text", "text": text}]}

    def _validate(self, tool: ToolDefinition, arguments: Any) -> BaseModel:
        try:
            return tool.params_model.model_validate(arguments)
        except PydanticValidationError as exc:
            failure = validation_failure(tool.name, exc)
            logger.error("Input validation failed: %s", failure.message)
            raise failure from exc

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


def create_tool_registry(client: GraphQLClient) -> ToolRegistry:
    """Build the registry with both GraphQL tools bound to ``client``."""
    registry = ToolRegistry()

    def introspect(params: IntrospectSchemaParams) -> Dict[str, Any]:
        return handle_introspection(client)

    def execute(params: ExecuteOperationParams) -> Dict[str, Any]:
        return dict(handle_execution(client, params))

    registry.register_tool(
        INTROSPECT_TOOL_NAME,
        introspect,
        IntrospectSchemaParams,
        description=(
            "Fetches the schema of the target GraphQL API using introspection. "
            "Returns the schema in JSON format."
        ),
    )
    registry.register_tool(
        EXECUTE_TOOL_NAME,
        execute,
        ExecuteOperationParams,
        description=(
            "Executes an arbitrary GraphQL query or mutation against the target API. "
            "Use introspectGraphQLSchema first to understand the available operations."
        ),
    )
    return registry
