from __future__ import annotations

import asyncio

import pytest

from typedfetch.exceptions import DecodeError, EncodeError, TransportError, TransportTimeoutError, TypedFetchError
from typedfetch.result import Failure, Success, catching, catching_async


def test_success_and_failure_accessors() -> None:
    error = DecodeError("bad body")

    assert Success(3).is_success
    assert Success(3).unwrap() == 3
    assert Success(3).unwrap_or(0) == 3
    assert not Failure(error).is_success
    assert Failure(error).unwrap_or(0) == 0
    with pytest.raises(DecodeError, match="bad body"):
        Failure(error).unwrap()


def test_catching_wraps_raised_exceptions() -> None:
    @catching(EncodeError, "Could not encode")
    def explode() -> Success[int]:
        raise TypeError("not serializable")

    result = explode()

    assert isinstance(result, Failure)
    assert isinstance(result.error, EncodeError)
    assert str(result.error) == "Could not encode: not serializable"
    assert isinstance(result.error.cause, TypeError)
    assert result.error.__cause__ is result.error.cause


def test_catching_passes_taxonomy_errors_through() -> None:
    original = DecodeError("already classified")

    @catching(EncodeError, "Could not encode")
    def explode() -> Success[int]:
        raise original

    assert explode() == Failure(original)


def test_catching_returns_step_result_unchanged() -> None:
    @catching(EncodeError, "Could not encode")
    def fine() -> Success[int]:
        return Success(1)

    assert fine() == Success(1)


def test_catching_async_wraps_raised_exceptions() -> None:
    @catching_async(TransportError, "Transport failed")
    async def explode() -> Success[int]:
        raise ConnectionRefusedError("refused")

    result = asyncio.run(explode())

    assert isinstance(result, Failure)
    assert isinstance(result.error, TransportError)
    assert isinstance(result.error.cause, ConnectionRefusedError)


def test_error_kinds() -> None:
    assert TypedFetchError("x").kind == "error"
    assert EncodeError("x").kind == "encode"
    assert TransportError("x").kind == "transport"
    assert TransportTimeoutError("x").kind == "transport"
    assert DecodeError("x").kind == "decode"
    assert TypedFetchError("x").cause is None
