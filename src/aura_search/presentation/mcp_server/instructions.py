"""
MCP Server Instructions - usage guide for AI agents.

Kept apart from server.py so the text can be edited without touching wiring.
"""

from __future__ import annotations

SERVER_INSTRUCTIONS = """
Aura Search MCP Server - ask anything, get one merged answer

═══════════════════════════════════════════════════════════════════════════════
🎯 How to use
═══════════════════════════════════════════════════════════════════════════════

There is one tool: ask_anything(query).

It searches these sources in parallel and merges what they return:
- Wikipedia (encyclopedia, preferred for the main answer)
- PokéAPI (Pokémon names, even partial ones)
- Minecraft Wiki
- Reddit (top discussion threads)
- Google Custom Search and YouTube (only when API keys are configured)
- Programming docs / translation pointers (only for matching keywords)

Results:
- "## Unified Answer": up to 4 sentences, key points, up to 3 source links
- "Not enough information...": no source found anything; rephrase the query
- "Failed to fetch data...": the search itself failed; retry the same query

Prefer short topical queries ("pikachu", "alan turing") over long questions.
Use output_format="json" when you need the raw per-source results.
"""
