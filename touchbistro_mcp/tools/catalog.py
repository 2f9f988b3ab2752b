"""
TouchBistro tool catalog.

The fixed, ordered set of tools this server advertises. Schemas are
advisory: they guide the calling agent, and only the required fields of a
new reservation are enforced at dispatch time.
"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON input schema of one tool."""

    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Return the MCP tool listing entry (a copy, safe to mutate)."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": deepcopy(self.input_schema),
        }


_PAGE = {"type": "number", "description": "Page number for pagination"}
_PAGE_SIZE = {"type": "number", "description": "Number of results per page (max: 100)"}


CATALOG: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        name="list_orders",
        description="List orders from TouchBistro POS. Filter by status, order type, and date range.",
        input_schema={
            "type": "object",
            "properties": {
                "page": {"type": "number", "description": "Page number for pagination (default: 1)"},
                "pageSize": {
                    "type": "number",
                    "description": "Number of results per page (default: 25, max: 100)",
                },
                "status": {
                    "type": "string",
                    "description": "Filter by order status",
                    "enum": ["open", "closed", "voided", "refunded"],
                },
                "orderType": {
                    "type": "string",
                    "description": "Filter by order type",
                    "enum": ["dine_in", "takeout", "delivery", "bar"],
                },
                "startDate": {
                    "type": "string",
                    "description": "Filter by order date (start) in YYYY-MM-DD format",
                },
                "endDate": {
                    "type": "string",
                    "description": "Filter by order date (end) in YYYY-MM-DD format",
                },
            },
        },
    ),
    ToolDescriptor(
        name="get_order",
        description=(
            "Get detailed information about a specific order by ID, including all items, "
            "modifiers, payments, and discounts"
        ),
        input_schema={
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The order ID"},
            },
            "required": ["id"],
        },
    ),
    ToolDescriptor(
        name="list_menu_items",
        description="List menu items from TouchBistro. Get all items available for ordering.",
        input_schema={
            "type": "object",
            "properties": {
                "page": _PAGE,
                "pageSize": _PAGE_SIZE,
                "categoryId": {"type": "string", "description": "Filter by menu category ID"},
                "active": {
                    "type": "boolean",
                    "description": "Filter by active status (true = available for ordering)",
                },
            },
        },
    ),
    ToolDescriptor(
        name="list_reservations",
        description="List reservations from TouchBistro",
        input_schema={
            "type": "object",
            "properties": {
                "page": _PAGE,
                "pageSize": _PAGE_SIZE,
                "date": {
                    "type": "string",
                    "description": "Filter by reservation date in YYYY-MM-DD format",
                },
                "status": {
                    "type": "string",
                    "description": "Filter by reservation status",
                    "enum": ["pending", "confirmed", "seated", "completed", "cancelled", "no_show"],
                },
                "partySize": {"type": "number", "description": "Filter by party size"},
            },
        },
    ),
    ToolDescriptor(
        name="create_reservation",
        description="Create a new reservation in TouchBistro",
        input_schema={
            "type": "object",
            "properties": {
                "customerName": {"type": "string", "description": "Customer name (required)"},
                "customerPhone": {"type": "string", "description": "Customer phone number"},
                "customerEmail": {"type": "string", "description": "Customer email address"},
                "partySize": {"type": "number", "description": "Number of guests (required)"},
                "date": {
                    "type": "string",
                    "description": "Reservation date in YYYY-MM-DD format (required)",
                },
                "time": {
                    "type": "string",
                    "description": "Reservation time in HH:MM format (required)",
                },
                "tableId": {"type": "string", "description": "Specific table ID to reserve"},
                "notes": {"type": "string", "description": "Special requests or notes"},
                "source": {
                    "type": "string",
                    "description": "Reservation source",
                    "enum": ["phone", "walk_in", "online", "third_party"],
                },
            },
            "required": ["customerName", "partySize", "date", "time"],
        },
    ),
    ToolDescriptor(
        name="list_staff",
        description="List staff members from TouchBistro",
        input_schema={
            "type": "object",
            "properties": {
                "page": _PAGE,
                "pageSize": _PAGE_SIZE,
                "role": {
                    "type": "string",
                    "description": "Filter by staff role",
                    "enum": ["server", "bartender", "host", "manager", "kitchen", "cashier"],
                },
                "active": {"type": "boolean", "description": "Filter by active employment status"},
            },
        },
    ),
    ToolDescriptor(
        name="get_sales_report",
        description="Get sales report data from TouchBistro for analysis and reporting",
        input_schema={
            "type": "object",
            "properties": {
                "startDate": {
                    "type": "string",
                    "description": "Report start date in YYYY-MM-DD format (required)",
                },
                "endDate": {
                    "type": "string",
                    "description": "Report end date in YYYY-MM-DD format (required)",
                },
                "groupBy": {
                    "type": "string",
                    "description": "How to group the report data",
                    "enum": ["day", "week", "month", "category", "item", "server"],
                },
                "includeVoids": {"type": "boolean", "description": "Include voided orders in the report"},
                "includeRefunds": {
                    "type": "boolean",
                    "description": "Include refunded orders in the report",
                },
            },
            "required": ["startDate", "endDate"],
        },
    ),
)
