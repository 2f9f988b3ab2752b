"""
Unit tests for the MCP server wiring.

The registered request handlers are invoked directly with MCP request
objects, which exercises the same code the stdio transport would call.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import mcp.types as types
import pytest

from touchbistro_mcp.server import SERVER_NAME, create_server, serve
from touchbistro_mcp.tools.dispatcher import TouchBistroTools


def _call_request(name, arguments=None):
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.fixture
def server(client):
    return create_server(TouchBistroTools(client))


class TestCreateServer:

    def test_server_name(self, server):
        assert server.name == SERVER_NAME == "touchbistro-mcp"

    def test_tools_capability_advertised(self, server):
        options = server.create_initialization_options()
        assert options.capabilities.tools is not None
        assert options.server_version == "1.0.0"

    @pytest.mark.asyncio
    async def test_list_tools(self, server):
        handler = server.request_handlers[types.ListToolsRequest]
        result = await handler(types.ListToolsRequest(method="tools/list"))

        tools = result.root.tools
        assert [tool.name for tool in tools][:2] == ["list_orders", "get_order"]
        assert len(tools) == 7
        report = next(tool for tool in tools if tool.name == "get_sales_report")
        assert report.inputSchema["required"] == ["startDate", "endDate"]


class TestCallTool:

    @pytest.mark.asyncio
    async def test_success(self, server, client, upstream):
        upstream.reply(200, json={"id": "ord_1"})
        handler = server.request_handlers[types.CallToolRequest]

        async with client:
            result = await handler(_call_request("get_order", {"id": "ord_1"}))

        call_result = result.root
        assert call_result.isError is False
        assert len(call_result.content) == 1
        assert call_result.content[0].type == "text"
        assert json.loads(call_result.content[0].text) == {"id": "ord_1"}

    @pytest.mark.asyncio
    async def test_upstream_error_flagged(self, server, client, upstream):
        upstream.reply(404, text="Not Found")
        handler = server.request_handlers[types.CallToolRequest]

        async with client:
            result = await handler(_call_request("get_order", {"id": "missing"}))

        assert result.root.isError is True
        assert result.root.content[0].text == (
            "Error: TouchBistro API error: 404 Not Found - Not Found"
        )

    @pytest.mark.asyncio
    async def test_unknown_tool_flagged(self, server, upstream):
        handler = server.request_handlers[types.CallToolRequest]

        result = await handler(_call_request("close_register"))

        assert result.root.isError is True
        assert "close_register" in result.root.content[0].text
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_schema_not_enforced_by_transport(self, server, client, upstream):
        """An out-of-enum value reaches the API instead of being rejected locally."""
        handler = server.request_handlers[types.CallToolRequest]

        async with client:
            result = await handler(_call_request("list_orders", {"status": "pending_payment"}))

        assert result.root.isError is False
        assert upstream.last.url.query == b"status=pending_payment"


class TestServe:

    @pytest.mark.asyncio
    async def test_serve_runs_server_and_manages_adapter(self, capsys):
        tools = MagicMock()
        tools.__aenter__ = AsyncMock(return_value=tools)
        tools.__aexit__ = AsyncMock(return_value=False)

        stdio = MagicMock()
        stdio.__aenter__ = AsyncMock(return_value=("read", "write"))
        stdio.__aexit__ = AsyncMock(return_value=False)

        mock_server = MagicMock()
        mock_server.run = AsyncMock()

        with patch("touchbistro_mcp.server.stdio_server", return_value=stdio), \
             patch("touchbistro_mcp.server.create_server", return_value=mock_server):
            await serve(tools)

        tools.__aenter__.assert_awaited_once()
        tools.__aexit__.assert_awaited_once()
        args = mock_server.run.await_args.args
        assert args[:2] == ("read", "write")
        assert "touchbistro MCP server running on stdio" in capsys.readouterr().err
