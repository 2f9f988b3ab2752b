"""
touchbistro-mcp - MCP server exposing the TouchBistro POS API as tools.

Each tool call is translated into a single authenticated request against the
TouchBistro cloud API and the JSON response is relayed back to the caller.
"""

__version__ = "1.0.0"
