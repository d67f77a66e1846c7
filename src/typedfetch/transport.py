"""Transport collaborators that perform the actual network exchange."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from .exceptions import TransportError, TransportTimeoutError
from .models import TransportRequest, TransportResponse
from .result import Failure, Result, Success

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Async callable that sends one request and reports the outcome.

    Implementations return ``Failure`` for network-level problems instead of
    raising. Timeouts, retries, connection reuse and redirects are their
    concern alone.
    """

    async def __call__(
        self,
        url: str,
        request: TransportRequest,
    ) -> Result[TransportResponse, Exception]: ...


class HTTPXTransport:
    """Transport backed by an ``httpx.AsyncClient``."""

    default_timeout = 30.0

    def __init__(
        self,
        *,
        timeout: float = default_timeout,
        httpx_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._owns_client = httpx_client is None
        self._httpx = httpx_client or httpx.AsyncClient(timeout=timeout, trust_env=False)

    async def __aenter__(self) -> "HTTPXTransport":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._httpx.aclose()

    async def __call__(
        self,
        url: str,
        request: TransportRequest,
    ) -> Result[TransportResponse, Exception]:
        try:
            response = await self._httpx.request(
                request.method,
                url,
                headers=request.headers,
                content=request.content,
                follow_redirects=False,
            )
        except httpx.TimeoutException as exc:
            logger.debug("%s %s timed out", request.method, url)
            return Failure(TransportTimeoutError("Request timed out", cause=exc))
        except httpx.HTTPError as exc:
            logger.debug("%s %s failed: %s", request.method, url, exc)
            return Failure(TransportError(f"Network error: {exc}", cause=exc))

        return Success(
            TransportResponse(
                status=response.status_code,
                headers=response.headers,
                content=response.content or None,
            )
        )
