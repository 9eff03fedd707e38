"""
tools/webhooks.py
-----------------
Webhook endpoints that receive email events.
"""

import logging

from email_mcp.builder import build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import CreateWebhook, Pagination, ResourceId

logger = logging.getLogger(__name__)

WEBHOOK_FIELDS = ("endpoint", "id", "events", "status", "created_at")


def add_webhook_tools(registry: ToolRegistry, ctx: ServerContext) -> None:

    @registry.tool("create-webhook", "Register a webhook endpoint for the given email events.", CreateWebhook)
    async def create_webhook(args):
        logger.info(f"Creating webhook for {args.endpoint}")

        response = await ctx.client.post("/webhooks", json=args.model_dump())
        created = unwrap_record(response, "Failed to create webhook")
        # the signing secret is only returned here
        return text("Webhook created successfully.", format_record({**args.model_dump(), **created}, WEBHOOK_FIELDS))

    @registry.tool("list-webhooks", "List webhook endpoints registered in Resend.", Pagination)
    async def list_webhooks(args):
        params = build_pagination(args.limit, args.after, args.before)
        response = await ctx.client.get("/webhooks", params=params)
        webhooks, has_more = list_page(unwrap(response, "Failed to list webhooks"))
        return text(*format_list("webhook", webhooks, has_more, WEBHOOK_FIELDS))

    @registry.tool("get-webhook", "Get a webhook by ID from Resend.", ResourceId)
    async def get_webhook(args):
        response = await ctx.client.get(resource_path("webhooks", args.id))
        webhook = unwrap_record(response, "Failed to get webhook")
        return text(format_record(webhook, WEBHOOK_FIELDS))

    @registry.tool(
        "remove-webhook",
        "Remove a webhook by ID. Before using this tool, you MUST double-check with the user, referencing the "
        "webhook endpoint URL. This is irreversible.",
        ResourceId,
    )
    async def remove_webhook(args):
        logger.info(f"Removing webhook {args.id}")

        response = await ctx.client.delete(resource_path("webhooks", args.id))
        removed = unwrap_record(response, "Failed to remove webhook")
        return text("Webhook removed successfully.", f"ID: {removed.get('id', args.id)}")
