"""Request body encoding and response body decoding."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx
from pydantic import BaseModel, TypeAdapter

from .exceptions import DecodeError, EncodeError
from .result import Result, Success, catching


class ContentKind(enum.Enum):
    """How a response body is interpreted, derived from its content type."""

    NONE = "none"
    TEXT = "text"
    JSON = "json"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class EncodedBody:
    content: bytes | None = None
    headers: httpx.Headers = field(default_factory=httpx.Headers)


def _coerce_json_payload(payload: Any) -> Any:
    if isinstance(payload, BaseModel):
        return payload.model_dump(mode="json")
    if isinstance(payload, Mapping):
        return dict(payload)
    return payload


def _implied_headers(content_type: str, content: bytes) -> httpx.Headers:
    return httpx.Headers(
        {
            "Content-Type": content_type,
            "Content-Length": str(len(content)),
        }
    )


@catching(EncodeError, "Could not encode request body")
def encode_body(payload: Any) -> Result[EncodedBody, EncodeError]:
    """Serialize an outgoing payload and report the headers it implies.

    ``None`` produces no body. Strings are sent as ``text/plain``; any other
    value is serialized to compact JSON and sent as ``application/json``.
    """
    if payload is None:
        return Success(EncodedBody())

    if isinstance(payload, str):
        content = payload.encode("utf-8")
        return Success(EncodedBody(content, _implied_headers("text/plain", content)))

    text = json.dumps(
        _coerce_json_payload(payload),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )
    content = text.encode("utf-8")
    return Success(EncodedBody(content, _implied_headers("application/json", content)))


def classify_content(headers: httpx.Headers, content: bytes | None) -> ContentKind:
    content_type = headers.get("content-type")
    if not content or not content_type:
        return ContentKind.NONE
    content_type = content_type.lower()
    if "text/html" in content_type:
        return ContentKind.TEXT
    if "application/json" in content_type:
        return ContentKind.JSON
    return ContentKind.UNRECOGNIZED


@catching(DecodeError, "Could not decode response body")
def decode_body(
    headers: httpx.Headers,
    content: bytes | None,
    response_type: Any = None,
) -> Result[Any, DecodeError]:
    """Decode a response body according to its declared content type.

    Bodies that are empty, untyped or of an unrecognized type decode to
    ``None``. When ``response_type`` is given the decoded value is validated
    against it.
    """
    kind = classify_content(headers, content)
    if kind in (ContentKind.NONE, ContentKind.UNRECOGNIZED):
        return Success(None)

    text = (content or b"").decode("utf-8")
    data: Any = text if kind is ContentKind.TEXT else json.loads(text)
    if response_type is not None:
        data = TypeAdapter(response_type).validate_python(data)
    return Success(data)
