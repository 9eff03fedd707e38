"""
email_mcp
---------
MCP server exposing the Resend email API as agent tools.
"""

__version__ = "1.1.0"

SERVICE_NAME = "email-sending-service"
