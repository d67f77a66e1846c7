from __future__ import annotations

import asyncio
import logging

import httpx
import pytest

from typedfetch import Client, RequestOptions, Success, TransportResponse
from typedfetch.security import sanitize_headers, validate_base_url


def test_sanitize_headers_redacts_credentials() -> None:
    headers = {"Authorization": "Bearer secret", "X-Api-Key": "k", "Accept": "application/json"}

    assert sanitize_headers(headers) == {
        "Authorization": "[REDACTED]",
        "X-Api-Key": "[REDACTED]",
        "Accept": "application/json",
    }
    assert sanitize_headers([("cookie", "session=1")]) == {"cookie": "[REDACTED]"}


@pytest.mark.parametrize(
    "url, message",
    [
        ("api.example.com/users", "scheme and host"),
        ("ftp://files.example.com", "Unsupported base_url scheme"),
        ("http://api.example.com", "Non-HTTPS"),
        ("https://api.example.com/\x00", "Invalid base_url"),
    ],
)
def test_validate_base_url_rejects(url: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        validate_base_url(url)


def test_validate_base_url_allows_loopback_http() -> None:
    validate_base_url("http://localhost:8080")
    validate_base_url("http://127.0.0.1")
    validate_base_url("http://api.example.com", allow_http=True)


def test_request_log_redacts_authorization(caplog) -> None:
    class StaticTransport:
        async def __call__(self, url, request):
            return Success(TransportResponse(status=200, headers=httpx.Headers()))

    client = Client(
        "https://api.example.com",
        headers={"Authorization": "Bearer secret-token"},
        transport=StaticTransport(),
    )

    with caplog.at_level(logging.DEBUG, logger="typedfetch"):
        asyncio.run(client.get("/me", RequestOptions(headers={"X-Trace": "abc"})))

    assert "GET https://api.example.com/me" in caplog.text
    assert "secret-token" not in caplog.text
    assert "[REDACTED]" in caplog.text
    assert "abc" in caplog.text
