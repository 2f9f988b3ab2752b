"""
TouchBistro API client.

Performs exactly one authenticated HTTP request per operation and normalizes
the outcome: parsed JSON on success, or one of UpstreamError / ParseError /
TransportError on failure. There are no retries, no backoff and no timeout
override; httpx defaults apply.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from touchbistro_mcp.config.settings import API_BASE_URL
from touchbistro_mcp.errors import ConfigurationError, ParseError, TransportError, UpstreamError
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

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    """Render a query value the way the API expects (true/false, 4 not 4.0)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_query(params: ToolParams) -> list[tuple[str, str]]:
    """
    Build query parameters from a parameter model.

    Only supplied fields are included, in declaration order. Nothing is
    defaulted, so an absent page size means the API's own default applies.
    """
    return [(name, _stringify(value)) for name, value in params.query_items()]


class TouchBistroClient:
    """
    Async client for the TouchBistro cloud API.

    Holds the API key, venue ID and base URL for the lifetime of the process
    and shares a single httpx connection pool across calls.
    """

    def __init__(
        self,
        api_key: str,
        venue_id: str,
        base_url: str = API_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Bearer token for the TouchBistro API
            venue_id: Venue the requests are scoped to (X-Venue-Id header)
            base_url: API base URL, without a trailing slash
            transport: Optional httpx transport (used by tests)

        Raises:
            ConfigurationError: If api_key or venue_id is empty
        """
        if not api_key:
            raise ConfigurationError("TOUCHBISTRO_API_KEY environment variable required")
        if not venue_id:
            raise ConfigurationError("TOUCHBISTRO_VENUE_ID environment variable required")

        self._api_key = api_key
        self._venue_id = venue_id
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Open the shared HTTP connection pool."""
        if self._http is None:
            self._http = httpx.AsyncClient(transport=self._transport)

    async def shutdown(self) -> None:
        """Close the HTTP connection pool."""
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> TouchBistroClient:
        await self.initialize()
        return self

    async def __aexit__(self, *_args):
        await self.shutdown()
        return None

    def _default_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "X-Venue-Id": self._venue_id,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        headers: dict[str, str] | None = None,
        params: list[tuple[str, str]] | None = None,
    ) -> Any:
        """
        Issue one request against the API and return the decoded JSON body.

        Args:
            endpoint: Path relative to the base URL, e.g. "/orders"
            method: HTTP method
            body: JSON-serializable request body (writes only)
            headers: Per-call headers; these override the defaults
            params: Ordered query parameters

        Returns:
            The JSON response exactly as returned by the API

        Raises:
            UpstreamError: If the response status is not 2xx
            ParseError: If a successful response is not valid JSON
            TransportError: If the API cannot be reached
        """
        if self._http is None:
            raise RuntimeError("TouchBistro client not initialized")

        url = f"{self._base_url}{endpoint}"
        request_headers = {**self._default_headers(), **(headers or {})}

        logger.debug(f"{method} {url} params={params or []}")
        try:
            response = await self._http.request(
                method,
                url,
                params=params or None,
                json=body,
                headers=request_headers,
            )
        except httpx.RequestError as e:
            raise TransportError(f"Request to {url} failed: {e!r}") from e

        if not response.is_success:
            raise UpstreamError(response.status_code, response.reason_phrase, response.text)

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON in TouchBistro response: {e}") from e

    async def get(self, endpoint: str, params: list[tuple[str, str]] | None = None) -> Any:
        return await self.request(endpoint, "GET", params=params)

    async def post(self, endpoint: str, data: Any) -> Any:
        return await self.request(endpoint, "POST", body=data)

    async def put(self, endpoint: str, data: Any) -> Any:
        return await self.request(endpoint, "PUT", body=data)

    async def delete(self, endpoint: str) -> Any:
        return await self.request(endpoint, "DELETE")

    # Orders

    async def list_orders(self, params: ListOrdersParams) -> Any:
        return await self.get("/orders", build_query(params))

    async def get_order(self, params: GetOrderParams) -> Any:
        order_id = "" if params.id is None else quote(str(params.id), safe="")
        return await self.get(f"/orders/{order_id}")

    # Menu

    async def list_menu_items(self, params: ListMenuItemsParams) -> Any:
        return await self.get("/menu/items", build_query(params))

    # Reservations

    async def list_reservations(self, params: ListReservationsParams) -> Any:
        return await self.get("/reservations", build_query(params))

    async def create_reservation(self, params: CreateReservationParams) -> Any:
        return await self.post("/reservations", params.body())

    # Staff

    async def list_staff(self, params: ListStaffParams) -> Any:
        return await self.get("/staff", build_query(params))

    # Reports

    async def get_sales_report(self, params: SalesReportParams) -> Any:
        return await self.get("/reports/sales", build_query(params))
