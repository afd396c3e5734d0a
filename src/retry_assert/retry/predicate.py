r"""Adapter turning a boolean predicate into a success check."""

from __future__ import annotations

__all__ = ["PredicateAssertion", "identity", "to_assertion"]

import inspect
from typing import TYPE_CHECKING, Any

from retry_assert.exceptions import PredicateMismatchError
from retry_assert.validation import validate_callable

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


def identity(value: Any) -> Any:
    """Return ``value`` unchanged. Default predicate of the truthy checks."""
    return value


class PredicateAssertion:
    """Success check that raises when a predicate is falsy.

    Exceptions raised by the predicate itself propagate unchanged. If
    the predicate returns an awaitable, the returned check is awaitable
    too and the truthiness of the awaited value is used.

    Args:
        predicate: One-argument callable whose result is interpreted as
            a boolean.

    Example:
        ```pycon
        >>> from retry_assert.retry.predicate import PredicateAssertion
        >>> check = PredicateAssertion(lambda x: x > 1)
        >>> check(2)
        >>> check(0)
        Traceback (most recent call last):
        ...
        retry_assert.exceptions.PredicateMismatchError: predicate did not match

        ```
    """

    def __init__(self, predicate: Callable[[Any], Any]) -> None:
        self.predicate = predicate

    def __call__(self, value: Any) -> Awaitable[None] | None:
        result = self.predicate(value)
        if inspect.isawaitable(result):
            return self._check_async(result)
        self._check(result)
        return None

    async def _check_async(self, result: Awaitable[Any]) -> None:
        self._check(await result)

    @staticmethod
    def _check(result: Any) -> None:
        if not result:
            raise PredicateMismatchError


def to_assertion(predicate: Callable[[Any], Any]) -> PredicateAssertion:
    """Wrap a predicate into a success check.

    Args:
        predicate: One-argument callable whose result is interpreted as
            a boolean.

    Returns:
        The success check.

    Raises:
        RetryConfigError: If ``predicate`` is not callable.
    """
    validate_callable(predicate, "predicate")
    return PredicateAssertion(predicate)
