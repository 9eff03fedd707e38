"""Shared fixtures for the email MCP tests.

Provider calls never leave the process: every ResendClient built here is
backed by an ``httpx.MockTransport`` that records requests and replays
canned responses.
"""

import json

import httpx
import pytest

from email_mcp.client import ResendClient
from email_mcp.config import Config
from email_mcp.context import ServerContext
from email_mcp.registry import ToolRegistry
from email_mcp.server import build_registry


class FakeResend:
    """Records requests; answers with queued (status, body) pairs."""

    def __init__(self):
        self.requests = []
        self.responses = []

    def reply(self, status: int = 200, body=None):
        self.responses.append((status, body))
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.responses.pop(0) if self.responses else (200, {})
        return httpx.Response(status, json=body)

    @property
    def last_json(self):
        return json.loads(self.requests[-1].content)


@pytest.fixture()
def fake_resend():
    return FakeResend()


@pytest.fixture()
def config():
    return Config(api_key="re_test")


@pytest.fixture()
def make_ctx(fake_resend):
    def _make(cfg: Config) -> ServerContext:
        client = ResendClient(cfg.api_key, transport=httpx.MockTransport(fake_resend.handler))
        return ServerContext(config=cfg, client=client)
    return _make


@pytest.fixture()
def make_registry(make_ctx):
    def _make(cfg: Config) -> ToolRegistry:
        return build_registry(make_ctx(cfg))
    return _make


@pytest.fixture()
def registry(make_registry, config):
    return make_registry(config)
