"""Tests for the tool input models (email_mcp/schemas.py)."""

import pytest
from pydantic import ValidationError

from email_mcp.config import Config
from email_mcp.schemas import (
    ContactLookup,
    CreateApiKey,
    CreateTopic,
    Pagination,
    build_create_broadcast_model,
    build_send_email_model,
)

MESSAGE = {"to": ["to@acme.com"], "subject": "Hi", "text": "Hello"}


def test_from_required_without_default_sender():
    schema = build_send_email_model(Config(api_key="k")).model_json_schema(by_alias=True)

    assert "from" in schema["properties"]
    assert "from" in schema["required"]
    assert "replyTo" in schema["properties"]
    assert "replyTo" not in schema["required"]


def test_from_hidden_with_default_sender():
    config = Config(api_key="k", sender_email_address="from@acme.com")
    schema = build_send_email_model(config).model_json_schema(by_alias=True)

    assert "from" not in schema["properties"]
    assert "from" not in schema.get("required", [])


def test_reply_to_hidden_with_default_reply_to():
    config = Config(api_key="k", replier_email_addresses=("r@acme.com",))
    schema = build_send_email_model(config).model_json_schema(by_alias=True)

    assert "replyTo" not in schema["properties"]
    assert "from" in schema["properties"]


def test_broadcast_model_follows_same_rules():
    with_defaults = Config(api_key="k", sender_email_address="a@acme.com", replier_email_addresses=("r@acme.com",))

    assert "from" in build_create_broadcast_model(Config(api_key="k")).model_json_schema(by_alias=True)["required"]
    assert "from" not in build_create_broadcast_model(with_defaults).model_json_schema(by_alias=True)["properties"]


def test_hidden_field_is_rejected():
    model = build_send_email_model(Config(api_key="k", sender_email_address="from@acme.com"))

    with pytest.raises(ValidationError):
        model.model_validate({**MESSAGE, "from": "other@acme.com"})


def test_missing_from_is_rejected():
    with pytest.raises(ValidationError):
        build_send_email_model(Config(api_key="k")).model_validate(MESSAGE)


def test_schema_uses_camel_case():
    properties = build_send_email_model(Config(api_key="k")).model_json_schema(by_alias=True)["properties"]

    assert "scheduledAt" in properties
    assert "topicId" in properties
    assert "scheduled_at" not in properties


@pytest.mark.parametrize("to", [[], ["not-an-email"], [f"u{i}@acme.com" for i in range(51)]])
def test_recipient_bounds(to):
    model = build_send_email_model(Config(api_key="k", sender_email_address="from@acme.com"))
    with pytest.raises(ValidationError):
        model.model_validate({**MESSAGE, "to": to})


@pytest.mark.parametrize("limit", [0, 101])
def test_pagination_limit_bounds(limit):
    with pytest.raises(ValidationError):
        Pagination.model_validate({"limit": limit})


def test_contact_lookup_needs_id_or_email():
    with pytest.raises(ValidationError):
        ContactLookup.model_validate({})
    assert ContactLookup.model_validate({"email": "c@acme.com"}).email == "c@acme.com"


def test_topic_subscription_values():
    assert CreateTopic.model_validate({"name": "News"}).default_subscription == "opt_in"
    with pytest.raises(ValidationError):
        CreateTopic.model_validate({"name": "News", "defaultSubscription": "maybe"})


def test_api_key_permission_values():
    assert CreateApiKey.model_validate({"name": "ci", "permission": "sending_access"}).permission == "sending_access"
    with pytest.raises(ValidationError):
        CreateApiKey.model_validate({"name": "ci", "permission": "root"})
