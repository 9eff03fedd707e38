"""
context.py
----------
The state shared by every tool call: the resolved Config and the provider
client. Built once at startup and handed to each tool-registration function.
"""

from dataclasses import dataclass

from email_mcp.client import ResendClient
from email_mcp.config import Config


@dataclass(frozen=True)
class ServerContext:
    config: Config
    client: ResendClient

    @classmethod
    def from_config(cls, config: Config) -> "ServerContext":
        return cls(config=config, client=ResendClient(config.api_key))

    async def aclose(self) -> None:
        await self.client.close()
