"""Tests for the Resend HTTP client (email_mcp/client.py)."""

import httpx

from email_mcp.client import ResendClient, resource_path


def test_resource_path_escapes_segments():
    assert resource_path("emails", "abc") == "/emails/abc"
    assert resource_path("contacts", "jo@acme.com") == "/contacts/jo@acme.com"
    assert resource_path("emails", "../api-keys") == "/emails/..%2Fapi-keys"


async def test_success_returns_data(fake_resend):
    fake_resend.reply(200, {"id": "em_1"})

    async with ResendClient("re_test", transport=httpx.MockTransport(fake_resend.handler)) as client:
        response = await client.post("/emails", json={"subject": "Hi"})

    assert response.ok
    assert response.data == {"id": "em_1"}
    request = fake_resend.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/emails"
    assert request.headers["Authorization"] == "Bearer re_test"
    assert fake_resend.last_json == {"subject": "Hi"}


async def test_query_params_are_sent(fake_resend):
    fake_resend.reply(200, {"data": []})

    async with ResendClient("re_test", transport=httpx.MockTransport(fake_resend.handler)) as client:
        await client.get("/emails", params={"limit": 5, "after": "em_9"})

    assert dict(fake_resend.requests[0].url.params) == {"limit": "5", "after": "em_9"}


async def test_error_status_returns_payload(fake_resend):
    fake_resend.reply(422, {"name": "validation_error", "message": "Invalid `to` field"})

    async with ResendClient("re_test", transport=httpx.MockTransport(fake_resend.handler)) as client:
        response = await client.get("/emails/x")

    assert not response.ok
    assert response.error == {"name": "validation_error", "message": "Invalid `to` field", "statusCode": 422}


async def test_non_json_error_body():
    transport = httpx.MockTransport(lambda request: httpx.Response(502, text="Bad gateway"))

    async with ResendClient("re_test", transport=transport) as client:
        response = await client.get("/domains")

    assert response.error == {"message": "Bad gateway", "statusCode": 502}


async def test_transport_failure_becomes_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with ResendClient("re_test", transport=httpx.MockTransport(handler)) as client:
        response = await client.delete("/segments/seg_1")

    assert response.error == {"name": "application_error", "message": "connection refused"}


async def test_empty_body_is_none():
    transport = httpx.MockTransport(lambda request: httpx.Response(200))

    async with ResendClient("re_test", transport=transport) as client:
        response = await client.post("/domains/d_1/verify")

    assert response.ok
    assert response.data is None
