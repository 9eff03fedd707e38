"""
transports.py
-------------
The two ways to serve the MCP server.

stdio (default):
    email-mcp --key re_xxx

HTTP:
    email-mcp --key re_xxx --http --port 3000

    GET  /health      → service info
    POST /mcp         → MCP streamable HTTP (stateless)
    GET  /mcp, /sse   → MCP event stream
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from email_mcp import SERVICE_NAME, __version__
from email_mcp.context import ServerContext
from email_mcp.server import create_server

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────
# stdio
# ─────────────────────────────────────────────

async def run_stdio(ctx: ServerContext) -> None:
    server = create_server(ctx)
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Email sending service MCP Server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await ctx.aclose()


# ─────────────────────────────────────────────
# HTTP
# ─────────────────────────────────────────────

class MCPEndpoint:
    """Raw ASGI endpoint handing requests to the session manager."""

    def __init__(self, session_manager: StreamableHTTPSessionManager):
        self.session_manager = session_manager

    async def __call__(self, scope, receive, send) -> None:
        try:
            await self.session_manager.handle_request(scope, receive, send)
        except Exception as e:
            logger.error(f"Error handling MCP request: {e}")
            raise


def create_http_app(ctx: ServerContext) -> FastAPI:
    server = create_server(ctx)
    session_manager = StreamableHTTPSessionManager(app=server, stateless=True)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        async with session_manager.run():
            try:
                yield
            finally:
                await ctx.aclose()

    app = FastAPI(title="Email Sending MCP Server", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "mcp-session-id", "Mcp-Session-Id"],
        expose_headers=["mcp-session-id"],
    )

    @app.get("/health")
    async def health():
        return {"status": "ok", "service": SERVICE_NAME, "version": __version__}

    endpoint = MCPEndpoint(session_manager)
    app.add_route("/mcp", endpoint, methods=["GET", "POST", "DELETE"])
    app.add_route("/sse", endpoint, methods=["GET"])
    return app


def run_http(ctx: ServerContext, host: str, port: int) -> None:
    app = create_http_app(ctx)
    logger.info(f"Email sending service MCP Server running on http://{host}:{port}")
    logger.info(f"Health check: http://{host}:{port}/health")
    logger.info(f"MCP endpoint: http://{host}:{port}/mcp")
    logger.info(f"SSE endpoint: http://{host}:{port}/sse")
    uvicorn.run(app, host=host, port=port, log_level="warning")
