"""
builder.py
----------
Turns validated tool arguments plus the configured defaults into the JSON
body the provider expects.

Merge rules:
  - from / replyTo: the call-time value replaces the default entirely.
  - cc / bcc: call-time addresses come first, the defaults are appended.
  - Optional keys are omitted (never sent as null) when there is no value.
"""

import base64
from typing import Any, Dict, List, Optional, Sequence

import anyio

from email_mcp.config import Config
from email_mcp.errors import InvalidPaginationError, MissingReplyToError, MissingSenderError
from email_mcp.schemas import Attachment, CreateBroadcastBase, SendEmailBase


def merge_addresses(call_value: Optional[Sequence[str]], defaults: Sequence[str]) -> List[str]:
    """Call-time addresses first, then the configured defaults."""
    if call_value is not None:
        return [*call_value, *defaults]
    return list(defaults)


def resolve_sender(call_value: Optional[str], config: Config) -> str:
    if call_value:
        return call_value
    if not config.sender_email_address:
        raise MissingSenderError()
    if config.sender_name:
        return f"{config.sender_name} <{config.sender_email_address}>"
    return config.sender_email_address


def resolve_reply_to(call_value: Optional[Sequence[str]], config: Config) -> List[str]:
    reply_to = call_value if call_value is not None else config.replier_email_addresses
    if isinstance(reply_to, str):
        return [reply_to]
    if not isinstance(reply_to, (list, tuple)):
        raise MissingReplyToError()
    return list(reply_to)


def build_pagination(limit: Optional[int] = None, after: Optional[str] = None,
                     before: Optional[str] = None) -> Dict[str, Any]:
    """Query parameters for a list call. ``after`` and ``before`` are exclusive."""
    if after and before:
        raise InvalidPaginationError()

    params: Dict[str, Any] = {}
    if limit is not None:
        params["limit"] = limit
    if after:
        params["after"] = after
    elif before:
        params["before"] = before
    return params


async def resolve_attachment(attachment: Attachment) -> Dict[str, Any]:
    """Priority: file_path > url > content.

    A local file is read and base64-encoded; a read failure propagates.
    """
    result: Dict[str, Any] = {"filename": attachment.filename}
    if attachment.content_type:
        result["content_type"] = attachment.content_type
    if attachment.content_id:
        result["content_id"] = attachment.content_id

    if attachment.file_path:
        data = await anyio.Path(attachment.file_path).read_bytes()
        result["content"] = base64.b64encode(data).decode("ascii")
    elif attachment.url:
        result["path"] = attachment.url
    elif attachment.content:
        result["content"] = attachment.content

    return result


async def build_send_request(args: SendEmailBase, config: Config) -> Dict[str, Any]:
    """Body for ``POST /emails``."""
    request: Dict[str, Any] = {
        "from": resolve_sender(getattr(args, "sender", None), config),
        "to": list(args.to),
        "subject": args.subject,
        "text": args.text,
    }

    reply_to = resolve_reply_to(getattr(args, "reply_to", None), config)
    if reply_to:
        request["reply_to"] = reply_to

    if args.html:
        request["html"] = args.html

    if args.scheduled_at:
        request["scheduled_at"] = args.scheduled_at

    cc = merge_addresses(args.cc, config.cc_email_addresses)
    if cc:
        request["cc"] = cc

    bcc = merge_addresses(args.bcc, config.bcc_email_addresses)
    if bcc:
        request["bcc"] = bcc

    if args.attachments:
        request["attachments"] = [await resolve_attachment(a) for a in args.attachments]

    if args.tags:
        request["tags"] = [{"name": t.name, "value": t.value} for t in args.tags]

    if args.topic_id:
        request["topic_id"] = args.topic_id

    return request


def build_broadcast_request(args: CreateBroadcastBase, config: Config) -> Dict[str, Any]:
    """Body for ``POST /broadcasts``; same sender/reply-to defaulting as emails."""
    request: Dict[str, Any] = {
        "segment_id": args.segment_id,
        "from": resolve_sender(getattr(args, "sender", None), config),
        "subject": args.subject,
        "text": args.text,
    }

    reply_to = resolve_reply_to(getattr(args, "reply_to", None), config)
    if reply_to:
        request["reply_to"] = reply_to

    if args.html:
        request["html"] = args.html
    if args.name:
        request["name"] = args.name
    if args.topic_id:
        request["topic_id"] = args.topic_id

    return request


def describe_request(request: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of a request that is safe to log (attachment bodies elided)."""
    if "attachments" not in request:
        return request
    summary = dict(request)
    summary["attachments"] = [
        {k: (f"<{len(v)} chars>" if k == "content" else v) for k, v in a.items()}
        for a in request["attachments"]
    ]
    return summary
