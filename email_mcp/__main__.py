"""
__main__.py
-----------
Entry point: ``email-mcp [options]`` or ``python -m email_mcp [options]``.

Exit codes: 0 for --help or Ctrl-C, 1 for bad configuration or a fatal
startup error.
"""

import asyncio
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from email_mcp.cli import parse_args, print_help, resolve_config_or_exit
from email_mcp.context import ServerContext
from email_mcp.errors import ConfigError
from email_mcp.transports import run_http, run_stdio

logger = logging.getLogger("email_mcp")


def main(argv: Optional[List[str]] = None) -> None:
    # real environment variables win over .env
    load_dotenv(override=False)

    logging.basicConfig(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s | %(levelname)-8s | %(message)s",
        stream=sys.stderr,
    )

    try:
        parsed = parse_args(sys.argv[1:] if argv is None else argv)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        print_help()
        sys.exit(1)

    config = resolve_config_or_exit(parsed, os.environ)
    ctx = ServerContext.from_config(config)

    try:
        if parsed["http"]:
            run_http(ctx, parsed["host"], parsed["port"])
        else:
            asyncio.run(run_stdio(ctx))
    except KeyboardInterrupt:
        logger.info("Shutting down")
        sys.exit(0)
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
