"""
tools/api_keys.py
-----------------
API key management.
"""

import logging

from email_mcp.builder import build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import CreateApiKey, Pagination, ResourceId

logger = logging.getLogger(__name__)

API_KEY_FIELDS = ("name", "id", "created_at")


def add_api_key_tools(registry: ToolRegistry, ctx: ServerContext) -> None:

    @registry.tool(
        "create-api-key",
        "Create a new Resend API key. The token is shown only once; tell the user to store it securely.",
        CreateApiKey,
    )
    async def create_api_key(args):
        logger.info(f"Creating API key {args.name}")

        response = await ctx.client.post("/api-keys", json=args.model_dump(exclude_none=True))
        created = unwrap_record(response, "Failed to create API key")
        return text("API key created successfully.", format_record({"name": args.name, **created}, API_KEY_FIELDS))

    @registry.tool("list-api-keys", "List API keys in the Resend account (tokens are never included).", Pagination)
    async def list_api_keys(args):
        params = build_pagination(args.limit, args.after, args.before)
        response = await ctx.client.get("/api-keys", params=params)
        keys, has_more = list_page(unwrap(response, "Failed to list API keys"))
        return text(*format_list("API key", keys, has_more, API_KEY_FIELDS))

    @registry.tool(
        "remove-api-key",
        "Revoke an API key by ID. Before using this tool, you MUST double-check with the user, referencing the key "
        "NAME, and warn that anything using the key will stop working. This is irreversible.",
        ResourceId,
    )
    async def remove_api_key(args):
        logger.info(f"Removing API key {args.id}")

        response = await ctx.client.delete(resource_path("api-keys", args.id))
        unwrap(response, "Failed to remove API key")
        return text("API key removed successfully.", f"ID: {args.id}")
