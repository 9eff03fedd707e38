"""
tools/segments.py
-----------------
Segment and audience tools. A segment is a group of contacts that
broadcasts can target.
"""

import logging

from email_mcp.builder import build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import CreateSegment, NoArguments, Pagination, ResourceId

logger = logging.getLogger(__name__)

SEGMENT_FIELDS = ("name", "id", "created_at")


def add_segment_tools(registry: ToolRegistry, ctx: ServerContext) -> None:

    @registry.tool(
        "create-segment",
        "Create a new segment in Resend. A segment is a group of contacts that can be used to target specific broadcasts.",
        CreateSegment,
    )
    async def create_segment(args):
        logger.debug(f"Creating segment with name: {args.name}")

        response = await ctx.client.post("/segments", json={"name": args.name})
        created = unwrap_record(response, "Failed to create segment")
        return text(
            "Segment created successfully.",
            format_record({"name": args.name, **created}, SEGMENT_FIELDS),
            "Don't bother telling the user the ID unless they ask for it.",
        )

    @registry.tool(
        "list-segments",
        "List all segments from Resend. This tool is useful for getting the segment ID to help the user find the "
        "segment they want to use for other tools. If you need a segment ID, you MUST use this tool to get all "
        "available segments and then ask the user to select the segment they want to use. Don't bother telling "
        "the user the IDs or creation dates unless they ask for them.",
        Pagination,
    )
    async def list_segments(args):
        params = build_pagination(args.limit, args.after, args.before)
        logger.debug(f"Listing segments with {params}")

        response = await ctx.client.get("/segments", params=params)
        segments, has_more = list_page(unwrap(response, "Failed to list segments"))
        return text(*format_list("segment", segments, has_more, SEGMENT_FIELDS))

    @registry.tool("get-segment", "Get a segment by ID from Resend.", ResourceId)
    async def get_segment(args):
        logger.debug(f"Getting segment with id: {args.id}")

        response = await ctx.client.get(resource_path("segments", args.id))
        segment = unwrap_record(response, "Failed to get segment")
        return text(format_record(segment, SEGMENT_FIELDS))

    @registry.tool(
        "remove-segment",
        "Remove a segment by ID from Resend. Before using this tool, you MUST double-check with the user that they "
        "want to remove this segment. Reference the NAME of the segment when double-checking, and warn the user "
        "that removing a segment is irreversible. You may only use this tool if the user explicitly confirms they "
        "want to remove the segment after you double-check.",
        ResourceId,
    )
    async def remove_segment(args):
        logger.info(f"Removing segment with id: {args.id}")

        response = await ctx.client.delete(resource_path("segments", args.id))
        removed = unwrap_record(response, "Failed to remove segment")
        return text("Segment removed successfully.", f"ID: {removed.get('id', args.id)}")

    @registry.tool(
        "list-audiences",
        "List all audiences from Resend. This tool is useful for getting the audience ID to help the user find the "
        "audience they want to use for other tools. If you need an audience ID, you MUST use this tool to get all "
        "available audiences and then ask the user to select the audience they want to use.",
        NoArguments,
    )
    async def list_audiences(args):
        logger.debug("Listing audiences")

        response = await ctx.client.get("/audiences")
        audiences, has_more = list_page(unwrap(response, "Failed to list audiences"))
        return text(*format_list("audience", audiences, has_more, SEGMENT_FIELDS))
