"""Tests for response formatting (email_mcp/formatting.py)."""

import json

import pytest

from email_mcp.client import ProviderResponse
from email_mcp.errors import ProviderError
from email_mcp.formatting import (
    format_email_details,
    format_email_list,
    format_list,
    format_record,
    format_sent_email,
    label,
    list_page,
    render,
    unwrap,
    unwrap_record,
)

EMAIL = {
    "object": "email",
    "id": "em_1",
    "from": "Acme <hi@acme.com>",
    "to": ["a@acme.com", "b@acme.com"],
    "subject": "Welcome",
    "last_event": "delivered",
    "created_at": "2026-01-01 10:00:00",
    "scheduled_at": None,
    "cc": [],
    "bcc": None,
    "reply_to": ["r@acme.com"],
    "text": "Hello there",
    "html": "<p>Hello there</p>",
    "tags": [{"name": "kind", "value": "welcome"}],
}


def test_unwrap_returns_data():
    assert unwrap(ProviderResponse(data={"id": "x"}), "Failed") == {"id": "x"}


def test_unwrap_raises_with_payload():
    payload = {"statusCode": 422, "name": "validation_error", "message": "Invalid `to` field"}

    with pytest.raises(ProviderError) as exc:
        unwrap(ProviderResponse(error=payload), "Email failed to send")

    assert exc.value.payload == payload
    assert str(exc.value) == f"Email failed to send: {json.dumps(payload)}"


@pytest.mark.parametrize(
    "key, expected",
    [("id", "ID"), ("segment_id", "Segment ID"), ("first_name", "First name"), ("last_event", "Status")],
)
def test_label(key, expected):
    assert label(key) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(None, "(none)"), (True, "yes"), (False, "no"), (["a", "b"], "a, b"), ({"b": 1, "a": 2}, '{"a": 2, "b": 1}'), (3, "3")],
)
def test_render(value, expected):
    assert render(value) == expected


def test_format_record_orders_known_fields_and_keeps_the_rest():
    record = {"object": "segment", "created_at": "2026-01-01", "id": "seg_1", "name": "VIP", "extra": "kept"}

    assert format_record(record) == "Name: VIP\nID: seg_1\nCreated at: 2026-01-01\nExtra: kept"


def test_format_list_empty():
    assert format_list("segment", [], False) == ["No segments found."]


def test_format_list_with_more():
    blocks = format_list("segment", [{"name": "VIP", "id": "seg_1"}], True)

    assert blocks[0] == "Found 1 segment:"
    assert blocks[1] == "Name: VIP\nID: seg_1"
    assert '"after"' in blocks[2]
    assert blocks[-1].startswith("Don't bother telling the user the IDs")


def test_list_page_shapes():
    assert list_page({"data": [{"id": 1}], "has_more": True}) == ([{"id": 1}], True)
    assert list_page({"data": None}) == ([], False)
    assert list_page([{"id": 2}]) == ([{"id": 2}], False)


def test_format_sent_email():
    assert format_sent_email({"id": "em_1"}) == 'Email sent successfully! {"id": "em_1"}'


def test_format_email_list_empty():
    assert format_email_list({"data": [], "has_more": False}) == "No emails found."


def test_format_email_list():
    out = format_email_list({"data": [EMAIL], "has_more": True})

    assert out.startswith("Found 1 email(s) (more available):\n\n- ")
    assert "To: a@acme.com, b@acme.com" in out
    assert 'Subject: "Welcome"' in out
    assert "Status: delivered" in out
    assert "ID: em_1" in out
    assert "Scheduled" not in out
    # every remaining field is listed, empty ones included
    assert "Reply-To: r@acme.com" in out
    assert "From: Acme <hi@acme.com>" in out
    assert "CC: (none)" in out
    assert "BCC: (none)" in out


def test_format_email_details_covers_every_field():
    out = format_email_details(EMAIL)

    assert out.startswith("Email Details:\n- ID: em_1\n- From: Acme <hi@acme.com>\n- To: a@acme.com, b@acme.com\n")
    assert "- Reply-To: r@acme.com\n" in out
    assert "- CC:" not in out
    assert "- BCC:" not in out
    assert '- Tags: [{"name": "kind", "value": "welcome"}]\n' in out
    assert "\n--- Plain Text Content ---\nHello there\n" in out
    assert out.endswith("\n--- HTML Content ---\n<p>Hello there</p>\n")
    assert "object" not in out


def test_format_email_details_without_html():
    out = format_email_details({"id": "em_2", "text": None})

    assert "--- HTML Content ---" not in out
    assert "--- Plain Text Content ---\n(none)" in out


def test_formatting_is_deterministic():
    assert format_email_details(dict(EMAIL)) == format_email_details(dict(EMAIL))
    assert format_email_list({"data": [EMAIL]}) == format_email_list({"data": [EMAIL]})


@pytest.mark.parametrize("data", [None, "OK", ["not", "an", "object"]])
def test_unwrap_record_without_json_object(data):
    assert unwrap_record(ProviderResponse(data=data), "Failed") == {}


def test_unwrap_record_still_raises():
    with pytest.raises(ProviderError):
        unwrap_record(ProviderResponse(error={"statusCode": 500}), "Failed to get segment")


def test_render_empty_values():
    assert render([]) == "(none)"
    assert render("") == "(none)"
