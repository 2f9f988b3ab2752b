"""
MCP server wiring.

Exposes a ToolAdapter over the Model Context Protocol on stdio. The
tools/call handler is registered directly rather than through the SDK's
call_tool decorator: the decorator validates arguments against the input
schema, while here schemas are advisory and errors must come back as
"Error: <message>" with isError set.
"""

import sys

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from touchbistro_mcp import __version__
from touchbistro_mcp.tools.base import ToolAdapter

MCP_NAME = "touchbistro"
SERVER_NAME = f"{MCP_NAME}-mcp"


def create_server(tools: ToolAdapter) -> Server:
    """
    Build an MCP server whose tools/list and tools/call are backed by `tools`.

    Args:
        tools: Adapter providing the catalog and servicing calls

    Returns:
        Configured (not yet running) MCP server
    """
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [types.Tool(**tool) for tool in tools.list_tools()]

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        result = await tools.call(request.params.name, request.params.arguments or {})
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.text)],
                isError=result.is_error,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool
    return server


async def serve(tools: ToolAdapter) -> None:
    """Serve `tools` on stdin/stdout until the client closes the stream."""
    server = create_server(tools)

    async with tools, stdio_server() as (read_stream, write_stream):
        # Always shown, whatever the log level
        print(f"{MCP_NAME} MCP server running on stdio", file=sys.stderr, flush=True)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
