"""MCP server exposing the settings and files payloads."""

from agreedisclaimer.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
