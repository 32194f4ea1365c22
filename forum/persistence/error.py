"""Translation of database failures into domain errors."""

import functools
from typing import Any, Awaitable, Callable, TypeVar

import logfire
from sqlalchemy.exc import SQLAlchemyError

from forum.domain.error import StoreError

T = TypeVar("T")


def translate_store_errors(
    operation: str,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Wrap a repository coroutine so SQLAlchemy failures raise StoreError.

    Args:
        operation: Name reported in the error and the log event
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except SQLAlchemyError as e:
                logfire.error(
                    "Store operation failed", operation=operation, error=str(e)
                )
                raise StoreError(operation, str(e)) from e

        return wrapper

    return decorator
