"""MCP server exposing markdown dev notes stored in a single directory."""

__version__ = "0.1.0"
