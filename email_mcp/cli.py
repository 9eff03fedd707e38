"""
cli.py
------
Command-line parsing and the exit-on-error wrapper around resolve_config().

Help and errors go to stderr: in stdio mode stdout belongs to the MCP
protocol stream.
"""

import argparse
import os
import sys
from typing import Any, Dict, List, Mapping, Optional

from email_mcp.config import Config, resolve_config
from email_mcp.errors import ConfigError

DEFAULT_PORT = 3000
DEFAULT_HOST = "127.0.0.1"

HELP_TEXT = """
Email sending MCP – stdio or HTTP transport

Usage:
  email-mcp [options]
  RESEND_API_KEY=re_xxx email-mcp [options]

Options:
  --key <key>              Resend API key for all tools (or set RESEND_API_KEY)
  --sender <email>         Default from address for sending (or SENDER_EMAIL_ADDRESS)
  --sender-name <name>     Display name for the default sender (or SENDER_NAME)
  --reply-to <email>       Default reply-to for sending; repeat for multiple (or REPLY_TO_EMAIL_ADDRESSES)
  --cc <email>             Default CC for sending; repeat for multiple (or CC_EMAIL_ADDRESSES)
  --bcc <email>            Default BCC for sending; repeat for multiple (or BCC_EMAIL_ADDRESSES)
  --http                   Serve over HTTP instead of stdio
  --port <port>            HTTP port (default: 3000)
  --host <host>            HTTP bind address (default: 127.0.0.1)
  -h, --help               Show this help

Environment:
  RESEND_API_KEY           Required if --key not set
  SENDER_EMAIL_ADDRESS     Optional
  SENDER_NAME              Optional
  REPLY_TO_EMAIL_ADDRESSES Optional, comma-separated
  CC_EMAIL_ADDRESSES       Optional, comma-separated
  BCC_EMAIL_ADDRESSES      Optional, comma-separated
  LOG_LEVEL                Optional (default: INFO)
""".strip()


class _ArgumentParser(argparse.ArgumentParser):
    """Reports unknown or malformed flags as a ConfigError instead of exiting."""

    def error(self, message):
        raise ConfigError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="email-mcp", add_help=False)
    parser.add_argument("-h", "--help", action="store_true", default=False)
    parser.add_argument("--key")
    parser.add_argument("--sender")
    parser.add_argument("--sender-name", dest="sender_name")
    parser.add_argument("--reply-to", dest="reply_to", action="append")
    parser.add_argument("--cc", action="append")
    parser.add_argument("--bcc", action="append")
    parser.add_argument("--http", action="store_true", default=False)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--host", default=DEFAULT_HOST)
    return parser


def parse_args(argv: List[str]) -> Dict[str, Any]:
    """Turn raw CLI tokens into a flat dict. Absent flags map to None."""
    return vars(_build_parser().parse_args(argv))


def print_help() -> None:
    print(HELP_TEXT, file=sys.stderr)


def resolve_config_or_exit(parsed: Mapping[str, Any], env: Optional[Mapping[str, str]] = None) -> Config:
    """Resolve the config, or print help / the error and terminate.

    Exits 0 for --help and 1 for an invalid configuration.
    """
    if parsed.get("help"):
        print_help()
        sys.exit(0)

    try:
        return resolve_config(parsed, env if env is not None else os.environ)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
