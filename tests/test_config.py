"""Tests for config resolution (email_mcp/config.py)."""

import pytest

from email_mcp.cli import parse_args
from email_mcp.config import Config, parse_address_list, resolve_config
from email_mcp.errors import ConfigError, MissingApiKeyError


# ------------------------------------------------------------------
# API key
# ------------------------------------------------------------------


def test_missing_api_key_fails():
    with pytest.raises(MissingApiKeyError, match="API key"):
        resolve_config(parse_args([]), {})


def test_whitespace_api_key_fails():
    with pytest.raises(MissingApiKeyError):
        resolve_config(parse_args(["--key", "   "]), {"RESEND_API_KEY": "   "})


def test_whitespace_env_key_fails():
    with pytest.raises(ConfigError):
        resolve_config({}, {"RESEND_API_KEY": "\t "})


def test_key_flag_is_trimmed():
    config = resolve_config(parse_args(["--key", "  re_abc  "]), {})

    assert config.api_key == "re_abc"
    assert config.sender_email_address == ""
    assert config.replier_email_addresses == ()


def test_key_from_env_when_flag_absent():
    config = resolve_config(parse_args([]), {"RESEND_API_KEY": "re_env"})
    assert config.api_key == "re_env"


def test_key_flag_overrides_env():
    config = resolve_config(parse_args(["--key", "re_cli"]), {"RESEND_API_KEY": "re_env"})
    assert config.api_key == "re_cli"


# ------------------------------------------------------------------
# Sender
# ------------------------------------------------------------------


def test_sender_from_flag():
    config = resolve_config(parse_args(["--key", "re_x", "--sender", "from@resend.dev"]), {})
    assert config.sender_email_address == "from@resend.dev"
    assert config.has_default_sender


def test_sender_from_env_is_trimmed():
    config = resolve_config(
        parse_args(["--key", "re_x"]),
        {"RESEND_API_KEY": "re_x", "SENDER_EMAIL_ADDRESS": " env@resend.dev "},
    )
    assert config.sender_email_address == "env@resend.dev"


def test_sender_flag_overrides_env():
    config = resolve_config(
        parse_args(["--key", "re_x", "--sender", "cli@resend.dev"]),
        {"SENDER_EMAIL_ADDRESS": "env@resend.dev"},
    )
    assert config.sender_email_address == "cli@resend.dev"


def test_sender_defaults_to_empty_string():
    config = resolve_config(parse_args(["--key", "re_x"]), {"RESEND_API_KEY": "re_x"})
    assert config.sender_email_address == ""
    assert not config.has_default_sender


def test_sender_name_from_flag_and_env():
    from_flag = resolve_config(parse_args(["--key", "k", "--sender-name", "Acme"]), {"SENDER_NAME": "Other"})
    from_env = resolve_config(parse_args(["--key", "k"]), {"SENDER_NAME": " Acme Support "})

    assert from_flag.sender_name == "Acme"
    assert from_env.sender_name == "Acme Support"


# ------------------------------------------------------------------
# Address lists
# ------------------------------------------------------------------


def test_reply_to_from_env():
    config = resolve_config(
        parse_args(["--key", "re_x"]),
        {"RESEND_API_KEY": "re_x", "REPLY_TO_EMAIL_ADDRESSES": "r1@x.com,r2@x.com"},
    )
    assert config.replier_email_addresses == ("r1@x.com", "r2@x.com")


def test_repeated_reply_to_flags():
    config = resolve_config(
        parse_args(["--key", "k", "--reply-to", "a@x.com", "--reply-to", "b@x.com"]),
        {"REPLY_TO_EMAIL_ADDRESSES": "env@x.com"},
    )
    assert config.replier_email_addresses == ("a@x.com", "b@x.com")


def test_cc_and_bcc_resolve_independently():
    config = resolve_config(
        parse_args(["--key", "k", "--cc", "cc@x.com"]),
        {"CC_EMAIL_ADDRESSES": "ignored@x.com", "BCC_EMAIL_ADDRESSES": "b1@x.com, b2@x.com"},
    )
    assert config.cc_email_addresses == ("cc@x.com",)
    assert config.bcc_email_addresses == ("b1@x.com", "b2@x.com")


@pytest.mark.parametrize(
    "cli_value, env_value, expected",
    [
        (["a@x.com", "b@x.com"], "env@x.com", ("a@x.com", "b@x.com")),
        ("a@x.com", "env@x.com", ("a@x.com",)),
        (None, "e1@x.com,e2@x.com", ("e1@x.com", "e2@x.com")),
        (None, None, ()),
        (None, "", ()),
    ],
)
def test_parse_address_list(cli_value, env_value, expected):
    assert parse_address_list(cli_value, env_value) == expected


def test_config_is_immutable():
    config = Config(api_key="re_x")
    with pytest.raises(AttributeError):
        config.api_key = "other"
