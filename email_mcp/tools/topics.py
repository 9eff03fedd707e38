"""
tools/topics.py
---------------
Subscription topics. send-email and create-broadcast accept a topic ID so
that contacts' per-topic preferences are respected.
"""

import logging

from email_mcp.builder import build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import CreateTopic, Pagination, ResourceId, UpdateTopic

logger = logging.getLogger(__name__)

TOPIC_FIELDS = ("name", "id", "description", "default_subscription", "created_at")


def add_topic_tools(registry: ToolRegistry, ctx: ServerContext) -> None:

    @registry.tool("create-topic", "Create a subscription topic in Resend.", CreateTopic)
    async def create_topic(args):
        body = args.model_dump(exclude_none=True)
        logger.debug(f"Creating topic {args.name}")

        response = await ctx.client.post("/topics", json=body)
        created = unwrap_record(response, "Failed to create topic")
        return text("Topic created successfully.", format_record({**body, **created}, TOPIC_FIELDS))

    @registry.tool("list-topics", "List subscription topics from Resend.", Pagination)
    async def list_topics(args):
        params = build_pagination(args.limit, args.after, args.before)
        response = await ctx.client.get("/topics", params=params)
        topics, has_more = list_page(unwrap(response, "Failed to list topics"))
        return text(*format_list("topic", topics, has_more, TOPIC_FIELDS))

    @registry.tool("get-topic", "Get a subscription topic by ID from Resend.", ResourceId)
    async def get_topic(args):
        response = await ctx.client.get(resource_path("topics", args.id))
        topic = unwrap_record(response, "Failed to get topic")
        return text(format_record(topic, TOPIC_FIELDS))

    @registry.tool("update-topic", "Rename a topic or change its description.", UpdateTopic)
    async def update_topic(args):
        body = args.model_dump(exclude_none=True, exclude={"id"})
        response = await ctx.client.patch(resource_path("topics", args.id), json=body)
        unwrap(response, "Failed to update topic")
        return text("Topic updated successfully.", f"ID: {args.id}")

    @registry.tool(
        "remove-topic",
        "Remove a topic by ID. Before using this tool, you MUST double-check with the user, referencing the topic "
        "NAME. This is irreversible.",
        ResourceId,
    )
    async def remove_topic(args):
        logger.info(f"Removing topic {args.id}")

        response = await ctx.client.delete(resource_path("topics", args.id))
        removed = unwrap_record(response, "Failed to remove topic")
        return text("Topic removed successfully.", f"ID: {removed.get('id', args.id)}")
