"""Explicit success/failure outcomes used throughout the request pipeline."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from .exceptions import TypedFetchError

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
_D = TypeVar("_D")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> Any:
        raise self.error

    def unwrap_or(self, default: _D) -> _D:
        return default


Result = Union[Success[T], Failure[E]]


def _wrap_error(
    exc: Exception,
    error_type: type[TypedFetchError],
    message: str,
) -> TypedFetchError:
    if isinstance(exc, TypedFetchError):
        return exc
    return error_type(f"{message}: {exc}", cause=exc)


def catching(
    error_type: type[TypedFetchError],
    message: str,
) -> Callable[[Callable[..., Result[T, Any]]], Callable[..., Result[T, TypedFetchError]]]:
    """Turn exceptions raised inside a pipeline step into a ``Failure``.

    The wrapped function is expected to return a ``Result`` itself; anything it
    raises is captured as ``error_type`` with the original exception kept as
    ``cause``. Errors that already belong to the taxonomy are passed through.
    """

    def decorator(func: Callable[..., Result[T, Any]]) -> Callable[..., Result[T, TypedFetchError]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Result[T, TypedFetchError]:
            try:
                return func(*args, **kwargs)
            except Exception as exc:
                return Failure(_wrap_error(exc, error_type, message))

        return wrapper

    return decorator


def catching_async(
    error_type: type[TypedFetchError],
    message: str,
) -> Callable[
    [Callable[..., Awaitable[Result[T, Any]]]],
    Callable[..., Awaitable[Result[T, TypedFetchError]]],
]:
    """Coroutine counterpart of :func:`catching`."""

    def decorator(
        func: Callable[..., Awaitable[Result[T, Any]]],
    ) -> Callable[..., Awaitable[Result[T, TypedFetchError]]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Result[T, TypedFetchError]:
            try:
                return await func(*args, **kwargs)
            except Exception as exc:
                return Failure(_wrap_error(exc, error_type, message))

        return wrapper

    return decorator
