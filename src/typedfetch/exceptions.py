"""Error kinds carried by ``Failure`` results."""

from __future__ import annotations


class TypedFetchError(Exception):
    """Base exception for every failure the client reports."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def kind(self) -> str:
        return "error"


class EncodeError(TypedFetchError):
    """Raised when an outgoing payload cannot be serialized."""

    @property
    def kind(self) -> str:
        return "encode"


class TransportError(TypedFetchError):
    """Raised when the transport collaborator reports a failure."""

    @property
    def kind(self) -> str:
        return "transport"


class TransportTimeoutError(TransportError):
    """Raised when the transport gives up waiting for a response."""


class DecodeError(TypedFetchError):
    """Raised when a response body does not match its declared content type."""

    @property
    def kind(self) -> str:
        return "decode"
