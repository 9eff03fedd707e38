"""
registry.py
-----------
Holds every tool and UI resource the server exposes and dispatches calls.

Tool modules register handlers through ``ToolRegistry.tool``; the MCP server
in server.py only ever talks to the registry.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type, Union

from mcp import types
from pydantic import BaseModel

from email_mcp.context import ServerContext

logger = logging.getLogger(__name__)

Content = Union[types.TextContent, types.ImageContent, types.EmbeddedResource]
Handler = Callable[[Any], Awaitable[List[Content]]]


def text(*blocks: str) -> List[types.TextContent]:
    """Wrap plain strings as MCP text content blocks."""
    return [types.TextContent(type="text", text=block) for block in blocks]


@dataclass
class ToolSpec:
    name: str
    description: str
    input_model: Type[BaseModel]
    handler: Handler
    title: Optional[str] = None
    meta: Optional[Dict[str, Any]] = None

    def definition(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(by_alias=True),
            _meta=self.meta,
        )


@dataclass
class ResourceSpec:
    uri: str
    name: str
    description: str
    mime_type: str
    reader: Callable[[], str]

    def definition(self) -> types.Resource:
        return types.Resource(
            uri=self.uri,
            name=self.name,
            description=self.description,
            mimeType=self.mime_type,
        )


class ToolRegistry:
    """Tools and resources for one server, bound to one ServerContext."""

    def __init__(self, ctx: ServerContext):
        self.ctx = ctx
        self._tools: Dict[str, ToolSpec] = {}
        self._resources: Dict[str, ResourceSpec] = {}

    # ── registration ──────────────────────────────────────────────────────

    def tool(self, name: str, description: str, input_model: Type[BaseModel],
             title: Optional[str] = None, meta: Optional[Dict[str, Any]] = None):
        """Decorator registering an async handler ``(args) -> content blocks``."""
        def decorator(handler: Handler) -> Handler:
            if name in self._tools:
                raise ValueError(f"Tool already registered: {name}")
            self._tools[name] = ToolSpec(name, description, input_model, handler, title, meta)
            return handler
        return decorator

    def resource(self, uri: str, name: str, description: str, mime_type: str = "text/html"):
        def decorator(reader: Callable[[], str]) -> Callable[[], str]:
            self._resources[uri] = ResourceSpec(uri, name, description, mime_type, reader)
            return reader
        return decorator

    # ── lookup ────────────────────────────────────────────────────────────

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolSpec:
        if name not in self._tools:
            raise ValueError(f"Unknown tool: {name}")
        return self._tools[name]

    def tool_definitions(self) -> List[types.Tool]:
        return [spec.definition() for spec in self._tools.values()]

    def resource_definitions(self) -> List[types.Resource]:
        return [spec.definition() for spec in self._resources.values()]

    # ── dispatch ──────────────────────────────────────────────────────────

    async def call(self, name: str, arguments: Optional[Dict[str, Any]]) -> List[Content]:
        """Validate ``arguments`` and run the handler.

        Any exception is logged and re-raised; the MCP layer reports it to the
        agent as a failed call and the server keeps running.
        """
        spec = self.get(name)
        try:
            args = spec.input_model.model_validate(arguments or {})
            return await spec.handler(args)
        except Exception as e:
            logger.error(f"Tool '{name}' failed: {e}")
            raise

    def read_resource(self, uri: str) -> ResourceSpec:
        if uri not in self._resources:
            raise ValueError(f"Unknown resource: {uri}")
        return self._resources[uri]
