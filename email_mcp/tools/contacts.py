"""
tools/contacts.py
-----------------
Contact CRUD. Contacts can be looked up by ID or by email address.
"""

import logging

from email_mcp.builder import build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import ContactLookup, CreateContact, ListContacts, UpdateContact

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("email", "first_name", "last_name", "unsubscribed", "id", "created_at")


def _contact_path(args: ContactLookup) -> str:
    return resource_path("contacts", args.id or args.email)


def add_contact_tools(registry: ToolRegistry, ctx: ServerContext) -> None:

    @registry.tool(
        "create-contact",
        "Create a new contact in Resend. Optionally add it to a segment straight away. "
        "Use list-segments first if you need a segment ID.",
        CreateContact,
    )
    async def create_contact(args):
        body = args.model_dump(exclude_none=True, exclude={"segment_id"})
        if args.segment_id:
            body["segments"] = [{"id": args.segment_id}]
        logger.debug(f"Creating contact {args.email}")

        response = await ctx.client.post("/contacts", json=body)
        created = unwrap_record(response, "Failed to create contact")
        return text("Contact created successfully.", format_record({**body, **created}, CONTACT_FIELDS))

    @registry.tool(
        "list-contacts",
        "List contacts from Resend, optionally only those in one segment. Don't bother telling the user the IDs "
        "or creation dates unless they ask for them.",
        ListContacts,
    )
    async def list_contacts(args):
        params = build_pagination(args.limit, args.after, args.before)
        if args.segment_id:
            params["segment_id"] = args.segment_id
        logger.debug(f"Listing contacts with {params}")

        response = await ctx.client.get("/contacts", params=params)
        contacts, has_more = list_page(unwrap(response, "Failed to list contacts"))
        return text(*format_list("contact", contacts, has_more, CONTACT_FIELDS))

    @registry.tool("get-contact", "Get a contact by ID or email address from Resend.", ContactLookup)
    async def get_contact(args):
        response = await ctx.client.get(_contact_path(args))
        contact = unwrap_record(response, "Failed to get contact")
        return text(format_record(contact, CONTACT_FIELDS))

    @registry.tool(
        "update-contact",
        "Update a contact's name or unsubscribed status. Identify the contact by ID or email address.",
        UpdateContact,
    )
    async def update_contact(args):
        body = args.model_dump(exclude_none=True, exclude={"id", "email"})
        logger.debug(f"Updating contact {args.id or args.email} with {sorted(body)}")

        response = await ctx.client.patch(_contact_path(args), json=body)
        updated = unwrap_record(response, "Failed to update contact")
        return text("Contact updated successfully.", format_record(updated, CONTACT_FIELDS))

    @registry.tool(
        "remove-contact",
        "Remove a contact from Resend. Before using this tool, you MUST double-check with the user that they want "
        "to remove this contact, referencing its email address. Removing a contact is irreversible.",
        ContactLookup,
    )
    async def remove_contact(args):
        logger.info(f"Removing contact {args.id or args.email}")

        response = await ctx.client.delete(_contact_path(args))
        removed = unwrap_record(response, "Failed to remove contact")
        return text("Contact removed successfully.", format_record(removed, CONTACT_FIELDS))
