"""
tools/broadcasts.py
-------------------
Broadcast tools: one email sent to every contact of a segment.

create-broadcast follows the same sender/reply-to rules as send-email, so
its schema is built from the Config as well.
"""

import logging

from email_mcp.builder import build_broadcast_request, build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import Pagination, ResourceId, SendBroadcast, build_create_broadcast_model

logger = logging.getLogger(__name__)

BROADCAST_FIELDS = ("name", "id", "status", "subject", "segment_id", "created_at", "scheduled_at", "sent_at")


def add_broadcast_tools(registry: ToolRegistry, ctx: ServerContext) -> None:
    create_broadcast_model = build_create_broadcast_model(ctx.config)

    @registry.tool(
        "create-broadcast",
        "Create a broadcast (a draft email to every contact in a segment). This does NOT send it; use "
        "send-broadcast afterwards. Use list-segments to find the segment ID.",
        create_broadcast_model,
    )
    async def create_broadcast(args):
        request = build_broadcast_request(args, ctx.config)
        logger.info(f"Creating broadcast for segment {request['segment_id']} from {request['from']}")

        response = await ctx.client.post("/broadcasts", json=request)
        created = unwrap_record(response, "Failed to create broadcast")
        return text(
            "Broadcast created successfully. It has not been sent yet.",
            format_record(created, BROADCAST_FIELDS),
        )

    @registry.tool(
        "list-broadcasts",
        "List broadcasts from Resend with their status. Don't bother telling the user the IDs or creation dates "
        "unless they ask for them.",
        Pagination,
    )
    async def list_broadcasts(args):
        params = build_pagination(args.limit, args.after, args.before)
        logger.debug(f"Listing broadcasts with {params}")

        response = await ctx.client.get("/broadcasts", params=params)
        broadcasts, has_more = list_page(unwrap(response, "Failed to list broadcasts"))
        return text(*format_list("broadcast", broadcasts, has_more, BROADCAST_FIELDS))

    @registry.tool("get-broadcast", "Get a broadcast by ID from Resend, including its content.", ResourceId)
    async def get_broadcast(args):
        response = await ctx.client.get(resource_path("broadcasts", args.id))
        broadcast = unwrap_record(response, "Failed to get broadcast")
        return text(format_record(broadcast, BROADCAST_FIELDS))

    @registry.tool(
        "send-broadcast",
        "Send (or schedule) a previously created broadcast. Before using this tool, you MUST confirm with the user "
        "that they want to send the broadcast to the whole segment.",
        SendBroadcast,
    )
    async def send_broadcast(args):
        body = {"scheduled_at": args.scheduled_at} if args.scheduled_at else {}
        logger.info(f"Sending broadcast {args.id}")

        response = await ctx.client.post(resource_path("broadcasts", args.id, "send"), json=body)
        sent = unwrap_record(response, "Failed to send broadcast")
        verb = "scheduled" if args.scheduled_at else "sent"
        return text(f"Broadcast {verb} successfully.", f"ID: {sent.get('id', args.id)}")

    @registry.tool(
        "remove-broadcast",
        "Remove a draft or scheduled broadcast by ID. Before using this tool, you MUST double-check with the user, "
        "referencing the NAME of the broadcast. This is irreversible.",
        ResourceId,
    )
    async def remove_broadcast(args):
        logger.info(f"Removing broadcast {args.id}")

        response = await ctx.client.delete(resource_path("broadcasts", args.id))
        removed = unwrap_record(response, "Failed to remove broadcast")
        return text("Broadcast removed successfully.", f"ID: {removed.get('id', args.id)}")
