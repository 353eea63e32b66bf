"""MCP stdio server for Dyson devices."""

import asyncio
from functools import partial
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
import mcp.types as types

from . import __version__
from .client import DysonClient
from .config import DysonConfig
from .const import SERVER_NAME
from .exceptions import DysonConfigError
from .tools import TOOL_SCHEMA, DysonTools

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ToolCallError(Exception):
    """Raised to report a failed tool call to the MCP host."""


def create_server(tools: DysonTools) -> Server:
    """Create an MCP server exposing the Dyson tools."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=tool["name"],
                description=tool["description"],
                inputSchema=tool["inputSchema"],
            )
            for tool in TOOL_SCHEMA
        ]

    @server.call_tool()
    async def call_tool(
        name: str, arguments: Optional[Dict[str, Any]]
    ) -> List[types.TextContent]:
        # The client is blocking, keep it off the event loop
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, partial(tools.call, name, arguments))
        if result.is_error:
            # The server turns exceptions into results flagged with isError
            raise ToolCallError(result.text)
        return [types.TextContent(type="text", text=result.text)]

    return server


async def serve(config: DysonConfig) -> None:
    """Serve the Dyson tools over stdio until the host disconnects."""
    client = DysonClient(config.email, config.password, config.region)
    server = create_server(DysonTools(client))
    async with stdio_server() as (read_stream, write_stream):
        # Printed regardless of log level, stdout is reserved for the transport
        print("Dyson MCP server running on stdio", file=sys.stderr)
        await server.run(
            read_stream, write_stream, server.create_initialization_options()
        )


def main() -> None:
    """Run the server, exiting with status 1 on invalid configuration."""
    # stdout carries the MCP transport
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    try:
        config = DysonConfig.from_env()
    except DysonConfigError as err:
        _LOGGER.error("%s", err)
        _LOGGER.error("Set them in your MCP configuration or environment")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    _LOGGER.debug("Using Dyson cloud region %s", config.region)
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        pass
    except Exception:  # pylint: disable=broad-except
        _LOGGER.exception("Failed to start server")
        sys.exit(1)
