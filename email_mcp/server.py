"""
server.py
---------
Builds the MCP server: every tool group is registered against one
ServerContext and the low-level handlers delegate to the registry.
"""

import logging
from typing import Iterable, List

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from pydantic import AnyUrl

from email_mcp import SERVICE_NAME, __version__
from email_mcp.context import ServerContext
from email_mcp.registry import Content, ToolRegistry
from email_mcp.tools import ALL_TOOL_GROUPS

logger = logging.getLogger(__name__)


def build_registry(ctx: ServerContext) -> ToolRegistry:
    registry = ToolRegistry(ctx)
    for add_tools in ALL_TOOL_GROUPS:
        add_tools(registry, ctx)
    logger.info(f"Registered {len(registry.names)} tools")
    return registry


def create_server(ctx: ServerContext) -> Server:
    registry = build_registry(ctx)
    server = Server(SERVICE_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.tool_definitions()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict) -> List[Content]:
        return await registry.call(name, arguments)

    @server.list_resources()
    async def list_resources() -> List[types.Resource]:
        return registry.resource_definitions()

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> Iterable[ReadResourceContents]:
        spec = registry.read_resource(str(uri))
        return [ReadResourceContents(content=spec.reader(), mime_type=spec.mime_type)]

    return server
