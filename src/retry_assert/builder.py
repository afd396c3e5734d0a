r"""Fluent builder for retrying an operation against a success check.

Example:
    Wait until a deleted resource is gone:

    ```python
    from retry_assert import retry

    def is_gone(response):
        assert response.status_code == 404

    response = await (
        retry(lambda: client.get("/deleted-resource")).with_timeout(5.0).until(is_gone)
    )
    ```

    Make sure it stays gone:

    ```python
    await retry(lambda: client.get("/deleted-resource")).ensure_truthy(
        lambda response: response.status_code == 404
    )
    ```
"""

from __future__ import annotations

__all__ = ["RetryBuilder", "retry"]

import asyncio
import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from retry_assert import config
from retry_assert.retry.config import RetryConfig
from retry_assert.retry.predicate import identity, to_assertion
from retry_assert.retry.strategy import EnsureStrategy, UntilStrategy
from retry_assert.validation import validate_callable, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from retry_assert.retry.strategy import BaseRetryStrategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class RetryBuilder(Generic[T]):
    """Chainable retry configuration.

    Any number of configuration methods (``fn``, ``with_timeout``,
    ``with_retry_delay``) may be chained, followed by a single terminal
    method (``until``, ``until_truthy``, ``ensure``, ``ensure_truthy``).
    Terminal methods validate the configuration synchronously and return
    an awaitable resolving to the value of the last invocation of the
    operation. Inside a running event loop, that awaitable is an
    ``asyncio.Task`` scheduled right away: the attempts run whether or
    not it is awaited yet, and it can be awaited more than once. Outside
    a running loop, it is a coroutine to pass to ``asyncio.run``.

    The timeout and retry delay default to the process-wide values of
    ``retry_assert.config.defaults`` at construction time.

    Args:
        fn: Optional zero-argument operation to retry. It may return an
            awaitable.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retry_assert import RetryBuilder
        >>> builder = RetryBuilder(lambda: "ready").with_timeout(0.1).with_retry_delay(0.05)
        >>> builder.timeout, builder.retry_delay
        (0.1, 0.05)
        >>> asyncio.run(builder.until_truthy())
        'ready'

        ```
    """

    def __init__(self, fn: Callable[[], T] | None = None) -> None:
        self._timeout: float = config.defaults.timeout
        self._retry_delay: float = config.defaults.retry_delay
        self._fn = fn
        self._assertion: Callable[[T], Any] | None = None
        self._strategy: BaseRetryStrategy | None = None

    @property
    def timeout(self) -> float:
        """Time budget in seconds."""
        return self._timeout

    @property
    def retry_delay(self) -> float:
        """Wait in seconds between attempts."""
        return self._retry_delay

    @property
    def operation(self) -> Callable[[], T] | None:
        """The operation to retry, if set."""
        return self._fn

    def with_timeout(self, timeout: float) -> RetryBuilder[T]:
        """Set the time budget in seconds.

        The timeout is only used to compute the number of attempts up
        front, as ``ceil(timeout / retry_delay)`` retries after the
        first attempt. The elapsed time is only guaranteed to be *at
        least* this long: slow operations extend it. Individual
        invocations are not timed out.

        Args:
            timeout: Time budget in seconds.

        Returns:
            This builder.
        """
        self._timeout = timeout
        return self

    def with_retry_delay(self, retry_delay: float) -> RetryBuilder[T]:
        """Set the fixed wait in seconds between attempts.

        Args:
            retry_delay: Wait in seconds.

        Returns:
            This builder.
        """
        self._retry_delay = retry_delay
        return self

    def fn(self, fn: Callable[[], Any]) -> RetryBuilder[Any]:
        """Set or replace the operation to retry.

        Args:
            fn: Zero-argument callable. It may return an awaitable.

        Returns:
            This builder.
        """
        self._fn = fn
        return self

    def until(self, assertion: Callable[[T], Any]) -> Awaitable[T]:
        """Retry until the assertion passes or the budget is exhausted.

        Any assertion library can be used, as long as a failed assertion
        raises an exception.

        Args:
            assertion: One-argument success check applied to each value.

        Returns:
            A task (a coroutine outside a running event loop) resolving
            to the first value passing the assertion. It raises the
            failure of the last attempt if the budget is exhausted.

        Raises:
            RetryConfigError: If the operation or the assertion is not
                callable.
            ValueError: If the timeout or retry delay is invalid.
        """
        self._assertion = assertion
        self._strategy = UntilStrategy()
        return self._launch()

    def until_truthy(self, predicate: Callable[[T], Any] = identity) -> Awaitable[T]:
        """Retry until the predicate is truthy or the budget is exhausted.

        Args:
            predicate: One-argument callable applied to each value.
                Defaults to identity.

        Returns:
            A task (a coroutine outside a running event loop) resolving
            to the first value matching the predicate. It raises
            ``PredicateMismatchError`` (or the failure of the last
            attempt) if the budget is exhausted.

        Raises:
            RetryConfigError: If the operation or the predicate is not
                callable.
        """
        return self.until(to_assertion(predicate))

    def ensure(self, assertion: Callable[[T], Any]) -> Awaitable[T]:
        """Retry while the assertion passes, until the budget is exhausted.

        Args:
            assertion: One-argument success check applied to each value.

        Returns:
            A task (a coroutine outside a running event loop) resolving
            to the last value once the assertion has passed for every
            attempt. It raises the first failure of the operation or the
            assertion.

        Raises:
            RetryConfigError: If the operation or the assertion is not
                callable.
            ValueError: If the timeout or retry delay is invalid.
        """
        self._assertion = assertion
        self._strategy = EnsureStrategy()
        return self._launch()

    def ensure_truthy(self, predicate: Callable[[T], Any] = identity) -> Awaitable[T]:
        """Retry while the predicate is truthy, until the budget is exhausted.

        Args:
            predicate: One-argument callable applied to each value.
                Defaults to identity.

        Returns:
            A task (a coroutine outside a running event loop) resolving
            to the last value once the predicate was truthy for every
            attempt. It raises ``PredicateMismatchError`` on the first
            falsy result.

        Raises:
            RetryConfigError: If the operation or the predicate is not
                callable.
        """
        return self.ensure(to_assertion(predicate))

    def _launch(self) -> Awaitable[T]:
        validate_callable(self._fn, "retry")
        validate_callable(self._assertion, "assertion")
        validate_retry_params(timeout=self._timeout, retry_delay=self._retry_delay)
        retry_config = RetryConfig(
            operation=self._fn,
            assertion=self._assertion,
            timeout=self._timeout,
            retry_delay=self._retry_delay,
        )
        logger.debug(
            f"Starting {self._strategy.name} with {retry_config.max_retries + 1} attempts "
            f"(timeout={self._timeout}s, retry_delay={self._retry_delay}s)"
        )
        run = self._strategy.run(retry_config)
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # No running loop, the caller drives the coroutine (e.g. asyncio.run)
            return run
        return asyncio.ensure_future(run)


def retry(fn: Callable[[], T] | None = None) -> RetryBuilder[T]:
    """Create a new ``RetryBuilder``.

    Args:
        fn: Optional zero-argument operation to retry. It can also be
            set later with ``RetryBuilder.fn``.

    Returns:
        A fresh builder.

    Example:
        ```pycon
        >>> import asyncio
        >>> from itertools import count
        >>> from retry_assert import retry
        >>> counter = count()
        >>> asyncio.run(retry(lambda: next(counter)).with_retry_delay(0.01).until_truthy())
        1

        ```
    """
    return RetryBuilder(fn)
