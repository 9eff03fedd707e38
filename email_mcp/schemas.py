"""
schemas.py
----------
Pydantic input models for every tool.

Each model doubles as the tool's JSON ``inputSchema`` (via
``model_json_schema``) and as the validator for incoming arguments.
Field names are snake_case in Python and camelCase on the wire.

The send-type models are built per Config: when a default sender (or reply-to)
is configured the field is left out of the schema entirely, so the agent is
never offered a value it might make up.
"""

from typing import Any, Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, EmailStr, Field, create_model, model_validator
from pydantic.alias_generators import to_camel

from email_mcp.config import Config

ASK_USER = "You MUST ask the user for this parameter. Under no circumstance provide it yourself"


class ToolInput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class NoArguments(ToolInput):
    pass


class ResourceId(ToolInput):
    id: str = Field(min_length=1, description="Resource ID")


class Pagination(ToolInput):
    limit: Optional[int] = Field(
        default=None, ge=1, le=100,
        description="Number of items to retrieve. Default: 20, Max: 100, Min: 1",
    )
    after: Optional[str] = Field(
        default=None,
        description='ID after which to retrieve more items (forward pagination). Cannot be used with "before".',
    )
    before: Optional[str] = Field(
        default=None,
        description='ID before which to retrieve more items (backward pagination). Cannot be used with "after".',
    )


# ─────────────────────────────────────────────
# Emails
# ─────────────────────────────────────────────

class Attachment(ToolInput):
    filename: str = Field(description='Name of the file with extension (e.g., "report.pdf")')
    file_path: Optional[str] = Field(default=None, description="Local file path to read and attach")
    url: Optional[str] = Field(default=None, description="URL where the file is hosted (Resend will fetch it)")
    content: Optional[str] = Field(default=None, description="Base64-encoded file content")
    content_type: Optional[str] = Field(
        default=None,
        description='MIME type (e.g., "application/pdf"). Auto-derived from filename if not set',
    )
    content_id: Optional[str] = Field(
        default=None,
        description="Content ID for inline images. Reference in HTML with cid:<contentId>",
    )


class Tag(ToolInput):
    name: str = Field(description="Tag name (key)")
    value: str = Field(description="Tag value")


class SendEmailBase(ToolInput):
    to: List[EmailStr] = Field(
        min_length=1, max_length=50,
        description="Array of recipient email addresses (1-50 recipients)",
    )
    subject: str = Field(description="Email subject line")
    text: str = Field(description="Plain text email content")
    html: Optional[str] = Field(
        default=None,
        description="HTML email content. When provided, the plain text argument MUST be provided as well.",
    )
    cc: Optional[List[EmailStr]] = Field(default=None, description=f"Optional array of CC email addresses. {ASK_USER}")
    bcc: Optional[List[EmailStr]] = Field(default=None, description=f"Optional array of BCC email addresses. {ASK_USER}")
    scheduled_at: Optional[str] = Field(
        default=None,
        description=(
            "Optional parameter to schedule the email. This uses natural language. Examples would be "
            "'tomorrow at 10am' or 'in 2 hours' or 'next day at 9am PST' or 'Friday at 3pm ET'."
        ),
    )
    attachments: Optional[List[Attachment]] = Field(
        default=None,
        description="Array of file attachments. Each needs filename plus one of: filePath, url, or content. Max 40MB total.",
    )
    tags: Optional[List[Tag]] = Field(
        default=None,
        description="Array of custom tags for tracking/analytics. Each tag has a name and value.",
    )
    topic_id: Optional[str] = Field(
        default=None,
        description=(
            "Topic ID for subscription-based sending. When set, the email respects contact "
            "subscription preferences for this topic."
        ),
    )


class ComposeEmail(ToolInput):
    to: Optional[List[str]] = Field(default=None, description="Recipient email address(es). Pre-fill in the form; leave empty if unknown.")
    subject: Optional[str] = Field(default=None, description="Subject line to pre-fill")
    text: Optional[str] = Field(default=None, description="Plain text body to pre-fill")
    cc: Optional[List[str]] = Field(default=None, description="CC addresses to pre-fill")
    bcc: Optional[List[str]] = Field(default=None, description="BCC addresses to pre-fill")


# ─────────────────────────────────────────────
# Segments / contacts
# ─────────────────────────────────────────────

class CreateSegment(ToolInput):
    name: str = Field(min_length=1, description="Name for the new segment")


class CreateContact(ToolInput):
    email: EmailStr = Field(description="Contact email address")
    first_name: Optional[str] = Field(default=None, description="Contact first name")
    last_name: Optional[str] = Field(default=None, description="Contact last name")
    unsubscribed: Optional[bool] = Field(default=None, description="Whether the contact is unsubscribed from all broadcasts")
    segment_id: Optional[str] = Field(default=None, description="Segment ID to add the contact to")


class ContactLookup(ToolInput):
    id: Optional[str] = Field(default=None, description="Contact ID")
    email: Optional[EmailStr] = Field(default=None, description="Contact email address (alternative to id)")

    @model_validator(mode="after")
    def _id_or_email(self):
        if not self.id and not self.email:
            raise ValueError("Either id or email must be provided.")
        return self


class UpdateContact(ContactLookup):
    first_name: Optional[str] = Field(default=None, description="New first name")
    last_name: Optional[str] = Field(default=None, description="New last name")
    unsubscribed: Optional[bool] = Field(default=None, description="New unsubscribed status")


class ListContacts(Pagination):
    segment_id: Optional[str] = Field(default=None, description="Only list contacts in this segment")


# ─────────────────────────────────────────────
# Broadcasts
# ─────────────────────────────────────────────

class CreateBroadcastBase(ToolInput):
    segment_id: str = Field(min_length=1, description="Segment ID to send the broadcast to")
    subject: str = Field(description="Broadcast subject line")
    text: str = Field(description="Plain text broadcast content")
    html: Optional[str] = Field(default=None, description="HTML broadcast content")
    name: Optional[str] = Field(default=None, description="Internal name for the broadcast")
    topic_id: Optional[str] = Field(default=None, description="Topic ID to scope the broadcast to")


class SendBroadcast(ToolInput):
    id: str = Field(min_length=1, description="Broadcast ID")
    scheduled_at: Optional[str] = Field(
        default=None,
        description="Optional natural-language schedule, e.g. 'in 1 hour' or 'tomorrow at 9am ET'.",
    )


# ─────────────────────────────────────────────
# Domains / topics / webhooks / API keys
# ─────────────────────────────────────────────

class CreateDomain(ToolInput):
    name: str = Field(min_length=1, description="Domain name, e.g. example.com")
    region: Optional[str] = Field(
        default=None,
        description="Region to send from: us-east-1, eu-west-1, sa-east-1 or ap-northeast-1",
    )


class CreateTopic(ToolInput):
    name: str = Field(min_length=1, description="Topic name")
    default_subscription: str = Field(
        default="opt_in",
        pattern="^(opt_in|opt_out)$",
        description='Default subscription for contacts: "opt_in" or "opt_out"',
    )
    description: Optional[str] = Field(default=None, description="Topic description shown to contacts")


class UpdateTopic(ToolInput):
    id: str = Field(min_length=1, description="Topic ID")
    name: Optional[str] = Field(default=None, description="New topic name")
    description: Optional[str] = Field(default=None, description="New topic description")


class CreateWebhook(ToolInput):
    endpoint: str = Field(min_length=1, description="HTTPS URL that will receive the events")
    events: List[str] = Field(
        min_length=1,
        description='Event types to subscribe to, e.g. "email.sent", "email.delivered", "email.bounced"',
    )


class CreateApiKey(ToolInput):
    name: str = Field(min_length=1, max_length=50, description="Name for the API key")
    permission: Optional[str] = Field(
        default=None,
        pattern="^(full_access|sending_access)$",
        description='"full_access" or "sending_access"',
    )
    domain_id: Optional[str] = Field(default=None, description="Restrict a sending_access key to this domain")


# ─────────────────────────────────────────────
# Config-dependent models
# ─────────────────────────────────────────────

def _sender_fields(config: Config) -> Dict[str, Tuple[Any, Any]]:
    fields: Dict[str, Tuple[Any, Any]] = {}
    if not config.has_default_sender:
        fields["sender"] = (
            EmailStr,
            Field(alias="from", description=f"Sender email address. {ASK_USER}"),
        )
    if not config.has_default_reply_to:
        fields["reply_to"] = (
            Optional[List[EmailStr]],
            Field(
                default=None,
                description=f"Optional email addresses for the email readers to reply to. {ASK_USER}",
            ),
        )
    return fields


def build_send_email_model(config: Config) -> Type[SendEmailBase]:
    return create_model("SendEmail", __base__=SendEmailBase, **_sender_fields(config))


def build_create_broadcast_model(config: Config) -> Type[CreateBroadcastBase]:
    return create_model("CreateBroadcast", __base__=CreateBroadcastBase, **_sender_fields(config))
