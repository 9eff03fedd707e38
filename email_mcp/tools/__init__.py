"""
tools
-----
One add_*_tools(registry, ctx) function per provider area.
"""

from email_mcp.tools.api_keys import add_api_key_tools
from email_mcp.tools.broadcasts import add_broadcast_tools
from email_mcp.tools.compose import add_compose_tools
from email_mcp.tools.contacts import add_contact_tools
from email_mcp.tools.domains import add_domain_tools
from email_mcp.tools.emails import add_email_tools
from email_mcp.tools.segments import add_segment_tools
from email_mcp.tools.topics import add_topic_tools
from email_mcp.tools.webhooks import add_webhook_tools

ALL_TOOL_GROUPS = (
    add_api_key_tools,
    add_broadcast_tools,
    add_contact_tools,
    add_domain_tools,
    add_email_tools,
    add_segment_tools,
    add_topic_tools,
    add_webhook_tools,
    add_compose_tools,
)

__all__ = [
    "ALL_TOOL_GROUPS",
    "add_api_key_tools",
    "add_broadcast_tools",
    "add_compose_tools",
    "add_contact_tools",
    "add_domain_tools",
    "add_email_tools",
    "add_segment_tools",
    "add_topic_tools",
    "add_webhook_tools",
]
