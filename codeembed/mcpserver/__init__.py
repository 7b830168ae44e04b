"""MCP server for the embed service."""

from .server import mcp

__all__ = ["mcp"]
