"""
tools/domains.py
----------------
Sending-domain tools. A new domain must be verified (DNS records added, then
verify-domain) before mail can be sent from it.
"""

import logging

from email_mcp.builder import build_pagination
from email_mcp.client import resource_path
from email_mcp.context import ServerContext
from email_mcp.formatting import format_list, format_record, list_page, unwrap, unwrap_record
from email_mcp.registry import ToolRegistry, text
from email_mcp.schemas import CreateDomain, Pagination, ResourceId

logger = logging.getLogger(__name__)

DOMAIN_FIELDS = ("name", "id", "status", "region", "created_at")


def _format_dns_records(records) -> str:
    lines = ["DNS records to add:"]
    for record in records:
        lines.append(
            f"- {record.get('record')} {record.get('type')} {record.get('name')} -> {record.get('value')}"
            f" (status: {record.get('status')})"
        )
    return "\n".join(lines)


def add_domain_tools(registry: ToolRegistry, ctx: ServerContext) -> None:

    @registry.tool(
        "create-domain",
        "Add a sending domain to Resend. Returns the DNS records the user must add before the domain can be "
        "verified with verify-domain.",
        CreateDomain,
    )
    async def create_domain(args):
        logger.info(f"Creating domain {args.name}")

        response = await ctx.client.post("/domains", json=args.model_dump(exclude_none=True))
        domain = unwrap_record(response, "Failed to create domain")
        records = domain.get("records") or []
        blocks = ["Domain created successfully.", format_record(domain, DOMAIN_FIELDS)]
        if records:
            blocks.append(_format_dns_records(records))
        return text(*blocks)

    @registry.tool("list-domains", "List all sending domains in Resend with their verification status.", Pagination)
    async def list_domains(args):
        params = build_pagination(args.limit, args.after, args.before)
        response = await ctx.client.get("/domains", params=params)
        domains, has_more = list_page(unwrap(response, "Failed to list domains"))
        return text(*format_list("domain", domains, has_more, DOMAIN_FIELDS))

    @registry.tool("get-domain", "Get a domain by ID from Resend, including its DNS records.", ResourceId)
    async def get_domain(args):
        response = await ctx.client.get(resource_path("domains", args.id))
        domain = unwrap_record(response, "Failed to get domain")
        return text(format_record(domain, DOMAIN_FIELDS))

    @registry.tool(
        "verify-domain",
        "Trigger DNS verification for a domain. Verification runs asynchronously; use get-domain to check the result.",
        ResourceId,
    )
    async def verify_domain(args):
        logger.info(f"Verifying domain {args.id}")

        response = await ctx.client.post(resource_path("domains", args.id, "verify"))
        unwrap(response, "Failed to verify domain")
        return text("Domain verification started.", f"ID: {args.id}")

    @registry.tool(
        "remove-domain",
        "Remove a domain from Resend. Before using this tool, you MUST double-check with the user, referencing the "
        "domain NAME, and warn them that emails can no longer be sent from it. This is irreversible.",
        ResourceId,
    )
    async def remove_domain(args):
        logger.info(f"Removing domain {args.id}")

        response = await ctx.client.delete(resource_path("domains", args.id))
        removed = unwrap_record(response, "Failed to remove domain")
        return text("Domain removed successfully.", f"ID: {removed.get('id', args.id)}")
