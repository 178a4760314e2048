"""
Errors surfaced to GraphQL callers.

A missing document on a point lookup is ``NOT_FOUND``; every failure coming
out of the store is ``OPERATION_ERROR`` carrying the original message.
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from graphql import GraphQLError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


class NotFoundError(GraphQLError):
    code = "NOT_FOUND"

    def __init__(self, message: str):
        super().__init__(message, extensions={"code": self.code})


class OperationError(GraphQLError):
    code = "OPERATION_ERROR"

    def __init__(self, message: str):
        super().__init__(message, extensions={"code": self.code})


def store_operation(func: F) -> F:
    """
    Boundary between resolvers and the store.

    GraphQL errors pass through untouched; anything else raised while talking
    to Firestore becomes an :class:`OperationError`. Nothing is retried.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            return await func(*args, **kwargs)
        except GraphQLError:
            raise
        except Exception as exc:
            logger.warning(f"{func.__name__} failed: {exc}")
            raise OperationError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]
