"""
errors.py
---------
Exception hierarchy for the email MCP server.

Only ConfigError is fatal (raised at startup). Everything else is raised from
inside a tool call and reported back to the agent as a failed call.
"""

import json
from typing import Any, Dict, Optional


class EmailMCPError(Exception):
    """Base class for all errors raised by this package."""


# ─────────────────────────────────────────────
# Startup
# ─────────────────────────────────────────────

class ConfigError(EmailMCPError):
    """The process configuration is missing or invalid."""


class MissingApiKeyError(ConfigError):
    def __init__(self, message: str = "No API key. Set RESEND_API_KEY or use --key=<your-resend-api-key>"):
        super().__init__(message)


# ─────────────────────────────────────────────
# Per-call
# ─────────────────────────────────────────────

class CallerInputError(EmailMCPError, ValueError):
    """The tool arguments are inconsistent with each other or the config."""


class InvalidPaginationError(CallerInputError):
    def __init__(self):
        super().__init__(
            'Cannot use both "after" and "before" parameters. Use only one for pagination.'
        )


class MissingSenderError(CallerInputError):
    def __init__(self):
        super().__init__("from argument must be provided.")


class MissingReplyToError(CallerInputError):
    def __init__(self):
        super().__init__("replyTo argument must be provided.")


class ProviderError(EmailMCPError):
    """The provider answered with an error payload.

    The raw payload is kept on ``payload`` and serialized into the message so
    the agent sees exactly what the provider said.
    """

    def __init__(self, action: str, payload: Optional[Dict[str, Any]]):
        self.action = action
        self.payload = payload or {}
        super().__init__(f"{action}: {json.dumps(self.payload)}")
