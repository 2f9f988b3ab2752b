"""
Base classes for tool adapters.

Provides the interface the MCP server layer talks to, independent of which
backend API actually services the tools.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToolResult:
    """
    Outcome of one tool call as seen by the MCP transport.

    Callers detect failure through is_error, never by parsing text.
    """

    text: str
    is_error: bool = False


class ToolAdapter(ABC):
    """
    Abstract base class for tool adapters.

    An adapter owns whatever connections its tools need, advertises a tool
    catalog and turns a (name, arguments) pair into a ToolResult.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Open connections needed to service tool calls."""
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        """Release connections and other resources."""
        pass

    @abstractmethod
    def list_tools(self) -> list[dict[str, Any]]:
        """
        List all available tools.

        Returns:
            List of tool schemas, each with name, description and inputSchema.

        Example:
            [
                {
                    "name": "get_order",
                    "description": "Get detailed information about a specific order by ID",
                    "inputSchema": {
                        "type": "object",
                        "properties": {
                            "id": {"type": "string", "description": "The order ID"}
                        },
                        "required": ["id"]
                    }
                }
            ]
        """
        pass

    @abstractmethod
    async def call(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        """
        Call a tool with the given arguments.

        Must not raise for per-call failures: they are reported as a
        ToolResult with is_error set.

        Args:
            tool_name: Name of the tool to invoke
            arguments: Tool-specific arguments

        Returns:
            Tool execution result
        """
        pass

    async def __aenter__(self):
        """Context manager entry - initialize the adapter."""
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit - shutdown the adapter."""
        await self.shutdown()
        return False
