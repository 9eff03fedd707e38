"""
formatting.py
-------------
Maps provider responses to the text the agent reads.

unwrap() turns an error payload into a ProviderError. The format_* helpers
are deterministic and never drop a field the provider returned: known
fields are printed first in a fixed order, then every remaining field in
the order the provider sent it. Only the ``object`` type tag is skipped.
"""

import json
from typing import Any, Dict, Iterable, List, Sequence

from email_mcp.client import ProviderResponse
from email_mcp.errors import ProviderError

SKIPPED_FIELDS = {"object"}

_LABELS = {
    "id": "ID",
    "to": "To",
    "cc": "CC",
    "bcc": "BCC",
    "reply_to": "Reply-To",
    "from": "From",
    "last_event": "Status",
    "created_at": "Created at",
    "scheduled_at": "Scheduled",
    "dns_provider": "DNS provider",
}


def unwrap(response: ProviderResponse, action: str) -> Any:
    """Return the response data, or raise ProviderError carrying the payload."""
    if not response.ok:
        raise ProviderError(action, response.error)
    return response.data


def unwrap_record(response: ProviderResponse, action: str) -> Dict[str, Any]:
    """Like unwrap(), for calls that answer with a single object.

    A 2xx with an empty or non-JSON body yields an empty record.
    """
    data = unwrap(response, action)
    return data if isinstance(data, dict) else {}


def label(key: str) -> str:
    if key in _LABELS:
        return _LABELS[key]
    if key.endswith("_id"):
        return key[:-3].replace("_", " ").capitalize() + " ID"
    return key.replace("_", " ").capitalize()


def render(value: Any) -> str:
    if value is None or value == [] or value == "":
        return "(none)"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return ", ".join(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, sort_keys=True)
    return str(value)


def _remaining(record: Dict[str, Any], shown: Iterable[str]) -> List[str]:
    shown = set(shown) | SKIPPED_FIELDS
    return [key for key in record if key not in shown]


def format_record(record: Dict[str, Any], order: Sequence[str] = ("name", "id")) -> str:
    """One ``Label: value`` line per field; ``order`` fields first."""
    keys = [k for k in order if k in record] + _remaining(record, order)
    return "\n".join(f"{label(k)}: {render(record[k])}" for k in keys)


def format_list(noun: str, records: Sequence[Dict[str, Any]], has_more: bool,
                order: Sequence[str] = ("name", "id")) -> List[str]:
    """Text blocks for a list response: a header, one block per record, hints."""
    if not records:
        return [f"No {noun}s found."]

    blocks = [f"Found {len(records)} {noun}{'' if len(records) == 1 else 's'}:"]
    blocks.extend(format_record(r, order) for r in records)
    if has_more:
        blocks.append(
            f'There are more {noun}s available. Use the "after" parameter with the last ID to retrieve more.'
        )
    blocks.append("Don't bother telling the user the IDs or creation dates unless they ask for them.")
    return blocks


def list_page(data: Any) -> tuple:
    """Split a list payload into (records, has_more)."""
    if isinstance(data, dict):
        return data.get("data") or [], bool(data.get("has_more", False))
    return data or [], False


# ─────────────────────────────────────────────
# Emails
# ─────────────────────────────────────────────

_EMAIL_SUMMARY_FIELDS = ("to", "subject", "last_event", "created_at", "scheduled_at", "id")

_EMAIL_DETAIL_FIELDS = (
    "id", "from", "to", "cc", "bcc", "reply_to", "subject", "last_event",
    "created_at", "scheduled_at",
)


def format_sent_email(data: Any) -> str:
    return f"Email sent successfully! {json.dumps(data, sort_keys=True)}"


def format_email_list(data: Any) -> str:
    emails, has_more = list_page(data)
    if not emails:
        return "No emails found."

    lines = []
    for email in emails:
        parts = [
            f"To: {render(email.get('to'))}",
            f'Subject: "{email.get("subject", "")}"',
            f"Status: {email.get('last_event')}",
            f"Sent: {email.get('created_at')}",
        ]
        if email.get("scheduled_at"):
            parts.append(f"Scheduled: {email['scheduled_at']}")
        parts.append(f"ID: {email.get('id')}")
        parts.extend(f"{label(k)}: {render(email[k])}" for k in _remaining(email, _EMAIL_SUMMARY_FIELDS))
        lines.append("- " + " | ".join(parts))

    more = " (more available)" if has_more else ""
    return f"Found {len(emails)} email(s){more}:\n\n" + "\n".join(lines)


def format_email_details(email: Dict[str, Any]) -> str:
    details = "Email Details:\n"
    for key in _EMAIL_DETAIL_FIELDS:
        value = email.get(key)
        # cc/bcc/reply_to/scheduled_at only when set
        if key in ("cc", "bcc", "reply_to", "scheduled_at") and not value:
            continue
        details += f"- {label(key)}: {render(value)}\n"

    for key in _remaining(email, _EMAIL_DETAIL_FIELDS + ("text", "html")):
        details += f"- {label(key)}: {render(email[key])}\n"

    details += f"\n--- Plain Text Content ---\n{email.get('text') or '(none)'}\n"
    if email.get("html"):
        details += f"\n--- HTML Content ---\n{email['html']}\n"
    return details
