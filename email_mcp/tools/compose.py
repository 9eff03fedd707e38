"""
tools/compose.py
----------------
compose_email: an interactive HTML form the host renders in the chat.

The user completes the form and the host calls send-email with the result.
From / Reply-To inputs only appear when there is no configured default,
matching the send-email schema.
"""

import logging
import time
from typing import Optional, Sequence

from jinja2 import Environment, PackageLoader, select_autoescape
from mcp import types

from email_mcp.context import ServerContext
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import ComposeEmail

logger = logging.getLogger(__name__)

MCP_APPS_TEMPLATE_URI = "ui://resend/email-composer-mcp-apps"
APPS_SDK_TEMPLATE_URI = "ui://resend/email-composer-apps-sdk"
COMPOSER_URI_PREFIX = "ui://resend/email-composer"

HTML_MIME_TYPE = "text/html"
APPS_SDK_MIME_TYPE = "text/html+skybridge"

WIDGET_META = {
    "openai/widgetDescription": "Interactive email composition form",
    "openai/widgetPrefersBorder": True,
    "openai/widgetAccessible": True,
}

COMPOSE_EMAIL_DESCRIPTION = """**Purpose:** Open an interactive email form in the chat so the user can fill or edit fields and send in one step. Use this when the user wants to send an email but some fields are missing or should be edited visually.

**When to use:**
- User says "send an email" without giving all details (to, subject, body)
- You have partial data (e.g. recipient and subject) and want the user to complete the rest in a form
- User prefers filling a form over answering multiple chat messages

**Workflow:** Call this tool with any known fields (to, subject, text, cc, bcc). A form appears with those pre-filled; the user fills the rest and clicks Send. The host will then call send-email with the completed data.

**Pass whatever you already know;** leave other params empty so the user can fill them in the form."""

_env = Environment(
    loader=PackageLoader("email_mcp", "templates"),
    autoescape=select_autoescape(["html"]),
)


def render_composer(
    show_from: bool,
    show_reply_to: bool,
    to: Optional[Sequence[str]] = None,
    subject: str = "",
    body: str = "",
    cc: Optional[Sequence[str]] = None,
    bcc: Optional[Sequence[str]] = None,
    reply_to: Sequence[str] = (),
) -> str:
    """Render the compose form; every prefilled value is HTML-escaped."""
    return _env.get_template("compose_email.html").render(
        to=", ".join(to or []),
        subject=subject,
        text=body,
        cc=", ".join(cc or []),
        bcc=", ".join(bcc or []),
        sender="",
        reply_to=", ".join(reply_to),
        show_from=show_from,
        show_reply_to=show_reply_to,
    )


def add_compose_tools(registry: ToolRegistry, ctx: ServerContext) -> None:
    config = ctx.config
    show_from = not config.has_default_sender
    show_reply_to = not config.has_default_reply_to

    def default_form() -> str:
        return render_composer(show_from, show_reply_to, reply_to=config.replier_email_addresses)

    registry.resource(
        MCP_APPS_TEMPLATE_URI,
        "email-composer-mcp-apps",
        "Email composer UI template for MCP Apps hosts",
        HTML_MIME_TYPE,
    )(default_form)

    registry.resource(
        APPS_SDK_TEMPLATE_URI,
        "email-composer-apps-sdk",
        "Email composer UI template for ChatGPT Apps SDK",
        APPS_SDK_MIME_TYPE,
    )(default_form)

    @registry.tool(
        "compose_email",
        COMPOSE_EMAIL_DESCRIPTION,
        ComposeEmail,
        title="Compose Email (UI)",
        meta={
            "ui": {"resourceUri": MCP_APPS_TEMPLATE_URI},
            "openai/outputTemplate": APPS_SDK_TEMPLATE_URI,
            "openai/toolInvocation/invoking": "Preparing email form...",
            "openai/toolInvocation/invoked": "Email form ready",
            "openai/widgetAccessible": True,
        },
    )
    async def compose_email(args):
        html = render_composer(
            show_from,
            show_reply_to,
            to=args.to,
            subject=args.subject or "",
            body=args.text or "",
            cc=args.cc,
            bcc=args.bcc,
            reply_to=config.replier_email_addresses,
        )
        uri = f"{COMPOSER_URI_PREFIX}/{int(time.time() * 1000)}"
        logger.debug(f"Rendered compose form {uri}")

        form = types.EmbeddedResource(
            type="resource",
            resource=types.TextResourceContents(uri=uri, mimeType=HTML_MIME_TYPE, text=html, _meta=WIDGET_META),
        )
        return [*text("Fill in any missing fields below and click **Send email** to send."), form]
