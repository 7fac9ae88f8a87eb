"""
Ask Tool - Single entry point for "ask anything" search.

The tool hands the query to AskService and renders whichever of the three
outcomes comes back. It never raises to the MCP client.
"""

import json
import logging
from typing import Literal

from mcp.server.fastmcp import FastMCP

from aura_search.application.search.ask_service import AskService
from aura_search.shared.exceptions import AuraSearchError

from .formatting import format_outcome_json, format_outcome_markdown

logger = logging.getLogger(__name__)


def register_ask_tools(mcp: FastMCP, ask_service: AskService) -> None:
    """Register the ask_anything tool."""

    @mcp.tool()
    async def ask_anything(
        query: str,
        output_format: Literal["markdown", "json"] = "markdown",
    ) -> str:
        """
        🔍 Ask anything - search several public knowledge sources at once.

        Queries Wikipedia, Reddit, PokéAPI, Minecraft Wiki, Google and
        YouTube (when configured) in parallel, then merges everything into
        one short answer with key points and up to 3 source links.

        Examples:
            ask_anything("pikachu")
            ask_anything("how do redstone repeaters work")
            ask_anything("alan turing", output_format="json")

        Args:
            query: Free-text question or topic
            output_format: "markdown" (human-readable) or "json" (programmatic)

        Returns:
            The unified answer, a "not enough information" notice when no
            source found anything, or a retry notice if the search failed.
        """
        logger.info(f"ask_anything: query={query!r}, output_format={output_format!r}")

        try:
            outcome = await ask_service.ask(query)
        except AuraSearchError as e:
            if output_format == "json":
                return json.dumps(e.to_dict(), ensure_ascii=False, indent=2)
            return e.to_agent_message()

        if output_format == "json":
            return format_outcome_json(outcome)
        return format_outcome_markdown(outcome)
