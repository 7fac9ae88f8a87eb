"""
Presentation Layer

Contains:
- mcp_server: FastMCP server exposing the ask_anything tool
"""
