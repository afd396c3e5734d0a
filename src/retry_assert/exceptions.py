r"""Exceptions raised by retry_assert.

Failures raised by the retried operation or by the success check are
never wrapped: the original exception object reaches the caller. The
classes below only cover errors produced by the library itself.
"""

from __future__ import annotations

__all__ = ["PREDICATE_MISMATCH_MESSAGE", "PredicateMismatchError", "RetryConfigError"]

PREDICATE_MISMATCH_MESSAGE = "predicate did not match"


class RetryConfigError(TypeError):
    """Raised when a builder is launched with an invalid configuration.

    This covers a missing or non-callable operation, assertion, or
    predicate. It is raised synchronously by the terminal method, before
    the operation is invoked.

    Example:
        ```pycon
        >>> from retry_assert import retry
        >>> from retry_assert.exceptions import RetryConfigError
        >>> try:
        ...     retry().until_truthy()
        ... except RetryConfigError as exc:
        ...     print(exc)
        ...
        retry function undefined or not a function

        ```
    """


class PredicateMismatchError(AssertionError):
    """Raised by a predicate-based success check when the predicate is falsy.

    Args:
        message: The error message.
    """

    def __init__(self, message: str = PREDICATE_MISMATCH_MESSAGE) -> None:
        super().__init__(message)
