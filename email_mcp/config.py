"""
config.py
---------
Resolves the process configuration from parsed CLI flags and environment
variables.

Precedence is always: CLI flag, then environment variable, then default.
resolve_config() is pure (no printing, no exiting) so it can be tested on its
own; cli.resolve_config_or_exit() wraps it for the entry point.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from email_mcp.errors import MissingApiKeyError

API_KEY_ENV = "RESEND_API_KEY"
SENDER_EMAIL_ENV = "SENDER_EMAIL_ADDRESS"
SENDER_NAME_ENV = "SENDER_NAME"
REPLY_TO_ENV = "REPLY_TO_EMAIL_ADDRESSES"
CC_ENV = "CC_EMAIL_ADDRESSES"
BCC_ENV = "BCC_EMAIL_ADDRESSES"

ADDRESS_DELIMITER = ","


@dataclass(frozen=True)
class Config:
    """Resolved once at startup and shared read-only by every tool call."""
    api_key: str
    sender_email_address: str = ""
    sender_name: str = ""
    replier_email_addresses: Tuple[str, ...] = ()
    cc_email_addresses: Tuple[str, ...] = ()
    bcc_email_addresses: Tuple[str, ...] = ()

    @property
    def has_default_sender(self) -> bool:
        return bool(self.sender_email_address)

    @property
    def has_default_reply_to(self) -> bool:
        return len(self.replier_email_addresses) > 0


def _optional_string(cli_value: Any, env_value: Optional[str]) -> str:
    """CLI string wins; otherwise the trimmed env value; otherwise ""."""
    if isinstance(cli_value, str):
        return cli_value.strip()
    if isinstance(env_value, str):
        return env_value.strip()
    return ""


def parse_address_list(
    cli_value: Any,
    env_value: Optional[str],
    delimiter: str = ADDRESS_DELIMITER,
) -> Tuple[str, ...]:
    """Shared rule for the reply-to, cc and bcc defaults.

    A sequence from the CLI is used as-is, a single CLI string becomes a
    one-element sequence, otherwise the env value is split on ``delimiter``.
    """
    if isinstance(cli_value, (list, tuple)):
        return tuple(cli_value)
    if isinstance(cli_value, str):
        return (cli_value,)
    if env_value:
        return tuple(part.strip() for part in env_value.split(delimiter) if part.strip())
    return ()


def resolve_config(parsed: Mapping[str, Any], env: Mapping[str, str]) -> Config:
    """Merge parsed CLI flags and environment variables into a Config.

    Raises MissingApiKeyError when no usable API key is found.
    """
    key_flag = parsed.get("key")
    api_key = key_flag if isinstance(key_flag, str) else env.get(API_KEY_ENV)

    if not api_key or not api_key.strip():
        raise MissingApiKeyError()

    return Config(
        api_key=api_key.strip(),
        sender_email_address=_optional_string(parsed.get("sender"), env.get(SENDER_EMAIL_ENV)),
        sender_name=_optional_string(parsed.get("sender_name"), env.get(SENDER_NAME_ENV)),
        replier_email_addresses=parse_address_list(parsed.get("reply_to"), env.get(REPLY_TO_ENV)),
        cc_email_addresses=parse_address_list(parsed.get("cc"), env.get(CC_ENV)),
        bcc_email_addresses=parse_address_list(parsed.get("bcc"), env.get(BCC_ENV)),
    )

