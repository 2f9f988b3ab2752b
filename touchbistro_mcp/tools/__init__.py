"""
Tool Integration Layer.

Declares the TouchBistro tool catalog and routes MCP tool calls to the
matching API client operation.
"""
