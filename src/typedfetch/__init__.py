"""Typed async HTTP client with explicit success/failure results."""

from .client import Client, build_url, merge_headers, merge_params
from .codec import ContentKind, EncodedBody, classify_content, decode_body, encode_body
from .exceptions import DecodeError, EncodeError, TransportError, TransportTimeoutError, TypedFetchError
from .models import ClientConfig, Response, TransportRequest, TransportResponse
from .request_options import RequestOptions
from .result import Failure, Result, Success, catching, catching_async
from .transport import HTTPXTransport, Transport

__all__ = [
    "Client",
    "ClientConfig",
    "ContentKind",
    "DecodeError",
    "EncodeError",
    "EncodedBody",
    "Failure",
    "HTTPXTransport",
    "RequestOptions",
    "Response",
    "Result",
    "Success",
    "Transport",
    "TransportError",
    "TransportRequest",
    "TransportResponse",
    "TransportTimeoutError",
    "TypedFetchError",
    "build_url",
    "catching",
    "catching_async",
    "classify_content",
    "decode_body",
    "encode_body",
    "merge_headers",
    "merge_params",
]
