"""
tools/emails.py
---------------
send-email, list-emails and get-email.
"""

import json
import logging

from email_mcp.builder import build_pagination, build_send_request, describe_request
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_email_details, format_email_list, format_sent_email, unwrap
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import Pagination, ResourceId, build_send_email_model

logger = logging.getLogger(__name__)

SEND_EMAIL_DESCRIPTION = """**Purpose:** Send a single transactional email to one or more recipients immediately (or schedule it). Use for one-off messages, notifications, and direct replies.

**NOT for:** Sending the same email to a whole list/audience (use create-broadcast + send-broadcast). Not for managing contacts or audiences.

**Returns:** Send confirmation and email ID.

**When to use:**
- User wants to "send an email" to specific people (names or addresses)
- One-off messages: password reset, order confirmation, receipt, alert
- User says "email this to X", "notify them", "send a message to..."
- Scheduling a single email for later

**Workflow:** Get recipient(s) and content from user → send-email. Use list-emails or get-email to check delivery status afterward.

**Key trigger phrases:** "Send an email", "Email this to", "Notify", "Send a message", "Reply to them", "Schedule an email\""""

LIST_EMAILS_DESCRIPTION = """**Purpose:** List recently sent emails (transactional emails sent via send-email) with metadata: recipient, subject, status, timestamps.

**NOT for:** Listing broadcast campaigns (use list-broadcasts). Not for composing or sending.

**Returns:** Paginated list with to, subject, status, created_at, and ID per email.

**When to use:**
- User asks "what emails were sent?", "show recent emails", "did my email go out?"
- Checking delivery status of sent messages
- Finding an email ID to fetch full content (then use get-email)

**Workflow:** list-emails → get-email( id ) when user needs full body or details."""


def add_email_tools(registry: ToolRegistry, ctx: ServerContext) -> None:
    send_email_model = build_send_email_model(ctx.config)

    @registry.tool("send-email", SEND_EMAIL_DESCRIPTION, send_email_model, title="Send Email")
    async def send_email(args):
        request = await build_send_request(args, ctx.config)
        logger.info(f"Sending email from {request['from']} to {len(request['to'])} recipient(s)")
        logger.debug(f"Email request: {json.dumps(describe_request(request))}")

        response = await ctx.client.post("/emails", json=request)
        data = unwrap(response, "Email failed to send")
        return text(format_sent_email(data))

    @registry.tool("list-emails", LIST_EMAILS_DESCRIPTION, Pagination, title="List Emails")
    async def list_emails(args):
        params = build_pagination(args.limit, args.after, args.before)
        logger.debug(f"Listing emails with {params}")

        response = await ctx.client.get("/emails", params=params)
        data = unwrap(response, "Failed to list emails")
        return text(format_email_list(data))

    @registry.tool(
        "get-email",
        "Retrieve full details of a specific sent transactional email by ID, including HTML and plain text content.",
        ResourceId,
        title="Get Email",
    )
    async def get_email(args):
        logger.debug(f"Getting email with ID: {args.id}")

        response = await ctx.client.get(resource_path("emails", args.id))
        email = unwrap(response, "Failed to retrieve email")
        if not email:
            raise ValueError(f"Email with ID {args.id} not found.")
        return text(format_email_details(email))
