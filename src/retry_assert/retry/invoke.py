r"""Single-attempt invocation of a synchronous or asynchronous callable.

This module normalizes the outcome of one call into an
``AttemptResult``, whether the callable returns a plain value, returns
an awaitable, raises synchronously, or raises while being awaited.
"""

from __future__ import annotations

__all__ = ["AttemptResult", "invoke"]

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass
class AttemptResult:
    """Outcome of a single attempt.

    Attributes:
        value: The value produced by the call, or None if it failed.
        error: The exception raised by the call, or None on success.
    """

    value: Any = None
    error: Exception | None = None

    @property
    def failed(self) -> bool:
        """Whether the attempt raised an exception."""
        return self.error is not None


async def invoke(func: Callable[[], Any]) -> AttemptResult:
    """Call ``func`` once and capture its outcome.

    If the call returns an awaitable, it is awaited. A synchronous raise
    and a failing awaitable produce the same ``AttemptResult``.

    Args:
        func: Zero-argument callable to invoke.

    Returns:
        The attempt result holding either the value or the exception.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retry_assert.retry.invoke import invoke
        >>> async def fetch():
        ...     return 42
        ...
        >>> asyncio.run(invoke(fetch)).value
        42
        >>> result = asyncio.run(invoke(lambda: 1 / 0))
        >>> type(result.error).__name__
        'ZeroDivisionError'

        ```
    """
    try:
        value = func()
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:  # noqa: BLE001
        return AttemptResult(error=exc)
    return AttemptResult(value=value)
