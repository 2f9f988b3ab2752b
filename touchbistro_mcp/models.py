"""
Parameter models for the TouchBistro tools.

Each tool's untyped MCP argument bag is mapped into one of these models at
the dispatch boundary. Field names are snake_case in Python and camelCase on
the wire (the same names the tool schemas advertise).

Read parameters are typed loosely and all optional: values pass through
untouched and an absent value is simply left out of the query, so the API
rather than this server decides what is malformed. The only check made here
is that a new reservation carries its four required fields.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ToolParams(BaseModel):
    """Base class for tool parameter models."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def query_items(self) -> list[tuple[str, Any]]:
        """Return (wire name, value) pairs for every supplied field, in declaration order."""
        return list(self.model_dump(by_alias=True, exclude_none=True).items())


class ListOrdersParams(ToolParams):
    page: Any = None
    page_size: Any = None
    status: Any = None
    order_type: Any = None
    start_date: Any = None
    end_date: Any = None


class GetOrderParams(ToolParams):
    id: Any = None


class ListMenuItemsParams(ToolParams):
    page: Any = None
    page_size: Any = None
    category_id: Any = None
    active: Any = None


class ListReservationsParams(ToolParams):
    page: Any = None
    page_size: Any = None
    date: Any = None
    status: Any = None
    party_size: Any = None


class CreateReservationParams(ToolParams):
    """
    Body of a new reservation.

    The four required fields must be present. Every key the caller sent,
    known or not, is kept with its original value, and nothing the caller
    left out is added.
    """

    model_config = ConfigDict(extra="allow")

    customer_name: Any
    customer_phone: Any = None
    customer_email: Any = None
    party_size: Any
    date: Any
    time: Any
    table_id: Any = None
    notes: Any = None
    source: Any = None

    def body(self) -> dict[str, Any]:
        """Return the JSON request body with unset fields left out."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ListStaffParams(ToolParams):
    page: Any = None
    page_size: Any = None
    role: Any = None
    active: Any = None


class SalesReportParams(ToolParams):
    start_date: Any = None
    end_date: Any = None
    group_by: Any = None
    include_voids: Any = None
    include_refunds: Any = None
