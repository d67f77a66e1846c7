"""Async client bound to a base URL, default headers and default query parameters."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, Iterable, Mapping

import httpx

from .codec import EncodedBody, decode_body, encode_body
from .exceptions import EncodeError, TransportError, TypedFetchError
from .models import ClientConfig, Response, TransportRequest, TransportResponse
from .request_options import HeaderTypes, ParamTypes, RequestOptions
from .result import Failure, Result, Success, catching, catching_async
from .security import sanitize_headers
from .transport import HTTPXTransport, Transport

logger = logging.getLogger(__name__)

BASE_URL_ENV_VAR = "TYPEDFETCH_BASE_URL"


def _coerce_query_value(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def _coerce_query_params(params: ParamTypes | None) -> httpx.QueryParams:
    if params is None:
        return httpx.QueryParams()
    if isinstance(params, httpx.QueryParams):
        return params
    if isinstance(params, Mapping):
        normalized: dict[str, Any] = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, (list, tuple)):
                normalized[key] = [_coerce_query_value(v) for v in value]
                continue
            normalized[key] = _coerce_query_value(value)
        return httpx.QueryParams(normalized)
    return httpx.QueryParams(params)


def merge_params(defaults: ParamTypes | None, override: ParamTypes | None = None) -> httpx.QueryParams:
    """Merge query parameters, letting per-call values win.

    Every key present in ``override`` replaces all default values for that
    key. Other default keys keep their values and position; new keys follow.
    """
    return _coerce_query_params(defaults).merge(_coerce_query_params(override))


def merge_headers(*sources: HeaderTypes | None) -> httpx.Headers:
    """Merge header sets given from lowest to highest precedence.

    Keys compare case-insensitively and the last write wins, both within one
    source and across sources. A new collection is returned every time.
    """
    merged = httpx.Headers()
    for source in sources:
        if not source:
            continue
        if isinstance(source, httpx.Headers):
            items: Iterable[tuple[str, Any]] = source.multi_items()
        elif isinstance(source, Mapping):
            items = source.items()
        else:
            items = source
        for key, value in items:
            merged[str(key)] = str(value)
    return merged


def build_url(base_url: httpx.URL | str, path: str, params: ParamTypes | None = None) -> httpx.URL:
    """Append ``path`` to the base path and replace the query with ``params``.

    The path is appended as given. A bare ``/`` base path is dropped when
    ``path`` brings its own leading slash.
    """
    url = httpx.URL(base_url)
    base_path = "" if url.path == "/" and path.startswith("/") else url.path
    return url.copy_with(path=base_path + path, params=_coerce_query_params(params))


@catching(EncodeError, "Could not build request URL")
def _prepare_url(base_url: httpx.URL, path: str, params: httpx.QueryParams) -> Result[httpx.URL, EncodeError]:
    return Success(build_url(base_url, path, params))


class Client:
    """Async HTTP client returning ``Success``/``Failure`` results.

    The base URL, default headers and default params are fixed at
    construction. Each call merges its own overrides into fresh collections,
    so concurrent calls never observe each other's headers or params.
    """

    def __init__(
        self,
        base_url: str | httpx.URL,
        headers: HeaderTypes | None = None,
        params: ParamTypes | None = None,
        *,
        transport: Transport | None = None,
        allow_http: bool = False,
    ) -> None:
        self._config = ClientConfig(
            base_url=str(base_url),
            headers=tuple(merge_headers(headers).multi_items()),
            params=tuple(_coerce_query_params(params).multi_items()),
            allow_http=allow_http,
        )
        self._owns_transport = transport is None
        self._transport: Transport = transport or HTTPXTransport()

    @classmethod
    def from_env(cls, *, env_var: str = BASE_URL_ENV_VAR, **kwargs: Any) -> "Client":
        base_url = os.getenv(env_var)
        if not base_url:
            raise ValueError(f"{env_var} is not set")
        return cls(base_url, **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if not self._owns_transport:
            return
        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def get(
        self,
        path: str,
        options: RequestOptions | None = None,
        *,
        response_type: Any = None,
    ) -> Result[Response[Any], TypedFetchError]:
        return await self._send("GET", path, options, response_type=response_type)

    async def post(
        self,
        path: str,
        payload: Any = None,
        options: RequestOptions | None = None,
        *,
        response_type: Any = None,
    ) -> Result[Response[Any], TypedFetchError]:
        return await self._send(
            "POST",
            path,
            options,
            response_type=response_type,
            payload=payload,
            has_body=True,
        )

    async def _send(
        self,
        method: str,
        path: str,
        options: RequestOptions | None,
        *,
        response_type: Any = None,
        payload: Any = None,
        has_body: bool = False,
    ) -> Result[Response[Any], TypedFetchError]:
        request_options = options or RequestOptions()
        params = merge_params(self._config.default_params, request_options.params)

        body = EncodedBody()
        if has_body:
            encoded = encode_body(payload)
            if isinstance(encoded, Failure):
                return self._failed(method, path, encoded)
            body = encoded.value
        headers = merge_headers(self._config.default_headers, body.headers, request_options.headers)

        prepared = _prepare_url(self._config.url, path, params)
        if isinstance(prepared, Failure):
            return self._failed(method, path, prepared)
        url = str(prepared.value)

        logger.debug("%s %s headers=%s", method, url, sanitize_headers(headers.multi_items()))
        sent = await self._call_transport(url, TransportRequest(method, headers, body.content))
        if isinstance(sent, Failure):
            return self._failed(method, url, sent)

        response_headers = httpx.Headers(sent.value.headers)
        decoded = decode_body(response_headers, sent.value.content, response_type)
        if isinstance(decoded, Failure):
            return self._failed(method, url, decoded)

        logger.debug("%s %s -> %s", method, url, sent.value.status)
        return Success(Response(status=sent.value.status, headers=response_headers, data=decoded.value))

    @catching_async(TransportError, "Transport failed")
    async def _call_transport(
        self,
        url: str,
        request: TransportRequest,
    ) -> Result[TransportResponse, TypedFetchError]:
        outcome = await self._transport(url, request)
        if isinstance(outcome, Failure) and not isinstance(outcome.error, TransportError):
            error = outcome.error
            cause = error if isinstance(error, BaseException) else None
            return Failure(TransportError(f"Transport failed: {error}", cause=cause))
        return outcome

    @staticmethod
    def _failed(method: str, target: str, failure: Failure[TypedFetchError]) -> Failure[TypedFetchError]:
        logger.debug("%s %s failed (%s): %s", method, target, failure.error.kind, failure.error)
        return failure
