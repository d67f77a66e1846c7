"""Configuration and response records shared by the client and transports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, model_validator

from .security import validate_base_url

T = TypeVar("T")


class ClientConfig(BaseModel):
    """Immutable configuration bound to one client.

    ``headers`` holds name/value pairs already coalesced case-insensitively;
    ``params`` keeps duplicate keys in insertion order. Accessors always hand
    out fresh ``httpx`` collections so callers cannot write back into the
    stored defaults.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str
    headers: tuple[tuple[str, str], ...] = ()
    params: tuple[tuple[str, str], ...] = ()
    allow_http: bool = False

    @model_validator(mode="after")
    def _check_base_url(self) -> "ClientConfig":
        validate_base_url(self.base_url, allow_http=self.allow_http)
        return self

    @property
    def url(self) -> httpx.URL:
        return httpx.URL(self.base_url)

    @property
    def default_headers(self) -> httpx.Headers:
        return httpx.Headers(list(self.headers))

    @property
    def default_params(self) -> httpx.QueryParams:
        return httpx.QueryParams(list(self.params))


@dataclass(frozen=True)
class TransportRequest:
    method: str
    headers: httpx.Headers
    content: bytes | None = None


@dataclass(frozen=True)
class TransportResponse:
    status: int
    headers: httpx.Headers
    content: bytes | None = None


@dataclass(frozen=True)
class Response(Generic[T]):
    status: int
    headers: httpx.Headers
    data: T | None = None
