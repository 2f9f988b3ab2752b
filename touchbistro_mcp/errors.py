"""
Exception hierarchy for the TouchBistro MCP server.

Only ConfigurationError is fatal. Everything else raised while handling a
single tool call is converted into an error-flagged tool result.
"""


class TouchBistroError(Exception):
    """Base exception for all server errors."""


class ConfigurationError(TouchBistroError):
    """Raised at startup when a required setting is missing."""


class UnknownToolError(TouchBistroError):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class InvalidArgumentsError(TouchBistroError):
    """Raised when tool arguments cannot be mapped to the tool's parameters."""

    def __init__(self, message: str, tool_name: str | None = None):
        self.tool_name = tool_name
        super().__init__(message)


class UpstreamError(TouchBistroError):
    """Raised when the TouchBistro API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str):
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(f"TouchBistro API error: {status_code} {reason} - {body}")


class ParseError(TouchBistroError):
    """Raised when a successful response body is not valid JSON."""


class TransportError(TouchBistroError):
    """Raised when the TouchBistro API cannot be reached at all."""
