"""MCP SDK bridge tests."""

from __future__ import annotations

import asyncio
import json
from unittest.mock import Mock

import pytest
from mcp import types
from mcp.shared.exceptions import McpError

from graphql_mcp.adapters.mcp_bridge import SERVER_NAME, MCPBridge, to_error_result, to_mcp_error
from graphql_mcp.clients.graphql import GraphQLClient
from graphql_mcp.core.tool_registry import EXECUTE_TOOL_NAME, INTROSPECT_TOOL_NAME, ToolRegistry, create_tool_registry
from graphql_mcp.exceptions import INVALID_PARAMS, INVALID_REQUEST, METHOD_NOT_FOUND, ClassifiedFailure, ErrorKind
from tests.helpers import make_response


@pytest.fixture
def mock_client() -> Mock:
    return Mock(spec=GraphQLClient)


@pytest.fixture
def bridge(mock_client) -> MCPBridge:
    return MCPBridge(create_tool_registry(mock_client))


def send_call_tool(bridge: MCPBridge, name: str, arguments=None) -> types.CallToolResult:
    """Dispatch ``tools/call`` through the handler registered with the SDK server."""
    handler = bridge.server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


def send_list_tools(bridge: MCPBridge) -> types.ListToolsResult:
    handler = bridge.server.request_handlers[types.ListToolsRequest]
    return asyncio.run(handler(types.ListToolsRequest(method="tools/list"))).root


def test_server_identity(bridge):
    assert bridge.server.name == SERVER_NAME


def test_list_tools_returns_sdk_tools(bridge):
    tools = asyncio.run(bridge.list_tools())

    assert all(isinstance(tool, types.Tool) for tool in tools)
    assert [tool.name for tool in tools] == [INTROSPECT_TOOL_NAME, EXECUTE_TOOL_NAME]
    assert tools[1].inputSchema["required"] == ["query"]


def test_call_tool_returns_text_content(bridge, mock_client):
    mock_client.execute.return_value = {"data": {"ping": "pong"}}

    content = asyncio.run(bridge.call_tool(EXECUTE_TOOL_NAME, {"query": "{ ping }"}))

    assert len(content) == 1
    assert isinstance(content[0], types.TextContent)
    assert json.loads(content[0].text) == {"data": {"ping": "pong"}}


def test_unknown_tool_becomes_error_result(bridge, mock_client):
    result = asyncio.run(bridge.call_tool("nope", {}))

    assert result.isError is True
    assert result.structuredContent["code"] == METHOD_NOT_FOUND
    assert result.structuredContent["data"] == {"kind": "unknown_operation"}
    mock_client.execute.assert_not_called()


def test_unclassified_registry_error_is_wrapped():
    registry = Mock(spec=ToolRegistry)
    registry.call_tool.side_effect = RuntimeError("boom")

    result = asyncio.run(MCPBridge(registry).call_tool("any", {}))

    assert result.isError is True
    assert result.structuredContent["data"]["kind"] == "unexpected"
    assert result.structuredContent["data"]["details"] == {"cause": "RuntimeError: boom"}


def test_list_tools_failure_is_mcp_error():
    registry = Mock(spec=ToolRegistry)
    registry.list_tools.side_effect = ClassifiedFailure(ErrorKind.UNEXPECTED, "Failed to generate tool schemas")

    with pytest.raises(McpError, match="Failed to generate tool schemas"):
        asyncio.run(MCPBridge(registry).list_tools())


def test_to_mcp_error_carries_message():
    failure = ClassifiedFailure(ErrorKind.SERVER_ERROR, "GraphQL request failed", details={"status_code": 500})

    error = to_mcp_error(failure).error

    assert error.message == "GraphQL request failed"
    assert error.data == {"kind": "server_error", "details": {"status_code": 500}}


def test_to_error_result_text_matches_structured_content():
    failure = ClassifiedFailure(ErrorKind.FORBIDDEN, "Permission denied for GraphQL operation.")

    result = to_error_result(failure)

    assert result.isError is True
    assert json.loads(result.content[0].text) == result.structuredContent == failure.to_dict()


class TestRegisteredHandlers:
    """Requests dispatched through ``server.request_handlers``, as the stdio loop does."""

    def test_list_tools_request(self, bridge):
        result = send_list_tools(bridge)

        assert [tool.name for tool in result.tools] == [INTROSPECT_TOOL_NAME, EXECUTE_TOOL_NAME]

    def test_list_tools_request_failure_keeps_code(self):
        registry = Mock(spec=ToolRegistry)
        registry.list_tools.side_effect = ClassifiedFailure(ErrorKind.UNEXPECTED, "Failed to generate tool schemas")

        with pytest.raises(McpError) as excinfo:
            send_list_tools(MCPBridge(registry))

        assert excinfo.value.error.data == {"kind": "unexpected"}

    def test_successful_call(self, bridge, mock_client):
        mock_client.execute.return_value = {"data": {"ping": "pong"}}

        result = send_call_tool(bridge, EXECUTE_TOOL_NAME, {"query": "{ ping }"})

        assert not result.isError
        assert json.loads(result.content[0].text) == {"data": {"ping": "pong"}}

    def test_unknown_tool_keeps_kind(self, bridge, mock_client):
        result = send_call_tool(bridge, "nope", {})

        assert result.isError is True
        assert result.structuredContent == {
            "code": METHOD_NOT_FOUND,
            "message": "Unknown tool: nope",
            "data": {"kind": "unknown_operation"},
        }
        assert json.loads(result.content[0].text) == result.structuredContent
        mock_client.execute.assert_not_called()

    def test_validation_error_keeps_issues(self, bridge, mock_client):
        result = send_call_tool(bridge, EXECUTE_TOOL_NAME, {})

        assert result.isError is True
        error = result.structuredContent
        assert error["code"] == INVALID_PARAMS
        assert error["data"]["kind"] == "validation_error"
        assert error["data"]["details"]["issues"]
        mock_client.execute.assert_not_called()

    def test_introspection_rejects_extra_arguments(self, bridge):
        result = send_call_tool(bridge, INTROSPECT_TOOL_NAME, {"unexpected": True})

        assert result.isError is True
        assert result.structuredContent["data"]["kind"] == "validation_error"

    def test_unauthenticated_keeps_status_code(self, client, session):
        session.post.return_value = make_response(401, {"errors": [{"message": "bad token"}]})
        bridge = MCPBridge(create_tool_registry(client))

        result = send_call_tool(bridge, EXECUTE_TOOL_NAME, {"query": "{ viewer { id } }"})

        assert result.isError is True
        error = result.structuredContent
        assert error["code"] == INVALID_REQUEST
        assert error["message"] == "Authentication failed. Check your AUTH_TOKEN."
        assert error["data"] == {"kind": "unauthenticated", "details": {"status_code": 401}}
