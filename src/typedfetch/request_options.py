"""Per-call overrides for :class:`typedfetch.Client`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Union

import httpx

HeaderTypes = Union[httpx.Headers, Mapping[str, Any], Iterable[tuple[str, Any]]]
ParamTypes = Union[httpx.QueryParams, Mapping[str, Any], Iterable[tuple[str, Any]], str]


@dataclass(frozen=True)
class RequestOptions:
    headers: HeaderTypes | None = None
    params: ParamTypes | None = None
