"""
Aura Search MCP Tools

✅ Search (1):
- ask_anything: fan out to every knowledge source, return one merged answer

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, ask_service)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .ask import register_ask_tools
from .formatting import format_outcome_json, format_outcome_markdown

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP

    from aura_search.application.search.ask_service import AskService


def register_all_tools(mcp: FastMCP, ask_service: AskService) -> list[str]:
    """Register every tool; returns the registered tool names."""
    register_ask_tools(mcp, ask_service)
    return ["ask_anything"]


__all__ = [
    "register_all_tools",
    "register_ask_tools",
    "format_outcome_markdown",
    "format_outcome_json",
]
