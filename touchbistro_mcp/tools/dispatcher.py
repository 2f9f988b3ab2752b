"""
TouchBistro tool dispatcher.

Routes an MCP tool call to the matching TouchBistroClient operation:

    (name, arguments) -> catalog lookup -> parameter model -> client method
                                                                   |
                  ToolResult(text, is_error)  <-  JSON or error  <-+

Design decisions:
- The routing table is checked against the catalog at construction, so a
  tool that is advertised but cannot be serviced is a startup bug rather
  than a per-call surprise.
- Unknown names fail before any parameter mapping or network call.
- Every per-call failure is turned into an error-flagged ToolResult so one
  failing call never takes the server down.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import ValidationError

from touchbistro_mcp.client import TouchBistroClient
from touchbistro_mcp.errors import InvalidArgumentsError, UnknownToolError
from touchbistro_mcp.models import (
    CreateReservationParams,
    GetOrderParams,
    ListMenuItemsParams,
    ListOrdersParams,
    ListReservationsParams,
    ListStaffParams,
    SalesReportParams,
    ToolParams,
)
from touchbistro_mcp.tools.base import ToolAdapter, ToolResult
from touchbistro_mcp.tools.catalog import CATALOG, ToolDescriptor

logger = logging.getLogger(__name__)

# tool name -> (parameter model, client method name)
ROUTES: dict[str, tuple[type[ToolParams], str]] = {
    "list_orders": (ListOrdersParams, "list_orders"),
    "get_order": (GetOrderParams, "get_order"),
    "list_menu_items": (ListMenuItemsParams, "list_menu_items"),
    "list_reservations": (ListReservationsParams, "list_reservations"),
    "create_reservation": (CreateReservationParams, "create_reservation"),
    "list_staff": (ListStaffParams, "list_staff"),
    "get_sales_report": (SalesReportParams, "get_sales_report"),
}


def _format_validation_error(tool_name: str, error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "arguments"
        problems.append(f"{location}: {item['msg']}")
    return f"Invalid arguments for {tool_name}: " + "; ".join(problems)


class TouchBistroTools(ToolAdapter):
    """
    Tool adapter backed by the TouchBistro API.

    Stateless apart from the client it wraps; calls may interleave freely.
    """

    def __init__(
        self,
        client: TouchBistroClient,
        catalog: tuple[ToolDescriptor, ...] = CATALOG,
    ):
        names = [descriptor.name for descriptor in catalog]
        unrouted = set(names) - set(ROUTES)
        if unrouted:
            raise RuntimeError(f"No client operation for tools: {sorted(unrouted)}")
        if len(set(names)) != len(names):
            raise RuntimeError("Tool catalog contains duplicate names")

        self._client = client
        self._catalog = catalog
        self._by_name = {descriptor.name: descriptor for descriptor in catalog}

    async def initialize(self) -> None:
        await self._client.initialize()

    async def shutdown(self) -> None:
        await self._client.shutdown()

    def list_tools(self) -> list[dict[str, Any]]:
        """Return the catalog in declaration order."""
        return [descriptor.to_dict() for descriptor in self._catalog]

    async def dispatch(self, tool_name: str, arguments: dict[str, Any] | None) -> Any:
        """
        Invoke the client operation behind a tool and return its raw result.

        Raises:
            UnknownToolError: If tool_name is not in the catalog
            InvalidArgumentsError: If arguments are not a mapping, or a new reservation
                lacks a required field
            TouchBistroError: Whatever the client operation raises
        """
        if tool_name not in self._by_name:
            raise UnknownToolError(tool_name)

        model, method_name = ROUTES[tool_name]
        try:
            params = model.model_validate(arguments or {})
        except ValidationError as e:
            raise InvalidArgumentsError(_format_validation_error(tool_name, e), tool_name) from e

        operation = getattr(self._client, method_name)
        return await operation(params)

    async def call(self, tool_name: str, arguments: dict[str, Any] | None) -> ToolResult:
        """Dispatch a tool call and convert the outcome into a ToolResult."""
        logger.info(f"Tool call: {tool_name}")
        try:
            result = await self.dispatch(tool_name, arguments)
        except Exception as e:
            logger.warning(f"Tool '{tool_name}' failed: {e}")
            return ToolResult(text=f"Error: {e}", is_error=True)

        return ToolResult(text=json.dumps(result, indent=2, ensure_ascii=False))
