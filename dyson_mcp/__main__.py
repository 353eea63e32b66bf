"""Run the Dyson MCP server."""

from .server import main

main()
