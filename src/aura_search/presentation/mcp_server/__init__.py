"""
Aura Search MCP Server

This module provides a Model Context Protocol (MCP) server exposing the
ask-anything search pipeline.

Usage as standalone server:
    python -m aura_search.presentation.mcp_server

Or in mcp.json:
    {
        "servers": {
            "aura-search": {
                "type": "stdio",
                "command": "aura-search-mcp"
            }
        }
    }

Usage for integration:
    from aura_search.presentation.mcp_server import create_server

    server = create_server(google_api_key="...", google_cx="...")
    server.run()
"""

from __future__ import annotations

from .server import create_server, main
from .tools import register_all_tools

__all__ = ["create_server", "main", "register_all_tools"]
