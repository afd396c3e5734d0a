r"""Retry strategies driving repeated attempts of an operation.

This module provides the two scheduling strategies:

- ``UntilStrategy`` retries until the success check passes.
- ``EnsureStrategy`` retries while the success check keeps passing.

Both make the first attempt unconditionally, followed by up to
``RetryConfig.max_retries`` further attempts separated by a fixed
``retry_delay``. Attempts are strictly sequential.
"""

from __future__ import annotations

__all__ = ["BaseRetryStrategy", "EnsureStrategy", "UntilStrategy"]

import asyncio
import logging
from abc import ABC, abstractmethod
from functools import partial
from typing import TYPE_CHECKING, Any

from retry_assert.retry.invoke import AttemptResult, invoke
from retry_assert.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from retry_assert.retry.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class BaseRetryStrategy(ABC):
    """Abstract base class for retry strategies."""

    name: str = "base"

    @abstractmethod
    async def run(self, config: RetryConfig) -> Any:
        """Run the retry loop.

        Args:
            config: The retry configuration.

        Returns:
            The value of the last invocation of the operation.
        """

    async def check(self, assertion: Callable[[Any], Any], value: Any) -> AttemptResult:
        """Apply the success check to a value.

        Args:
            assertion: The success check. It may return an awaitable.
            value: The value produced by the operation.

        Returns:
            An attempt result carrying ``value`` if the check passed, or
            the exception raised by the check otherwise.
        """
        outcome = await invoke(partial(assertion, value))
        if outcome.failed:
            return outcome
        return AttemptResult(value=value)

    async def wait(self, config: RetryConfig, attempt: int, max_attempts: int) -> None:
        """Sleep for the retry delay before the next attempt.

        Args:
            config: The retry configuration holding ``retry_delay``.
            attempt: Number of the attempt that just completed (0-indexed).
            max_attempts: Total number of attempts of the budget.
        """
        log_structured(
            logger,
            logging.DEBUG,
            f"{self.name}: waiting {config.retry_delay:.3f}s before attempt "
            f"{attempt + 2}/{max_attempts}",
            strategy=self.name,
            attempt=attempt + 1,
            max_attempts=max_attempts,
        )
        await asyncio.sleep(config.retry_delay)


class UntilStrategy(BaseRetryStrategy):
    """Retry until the success check passes.

    A failing invocation counts as a failed check, and the check is not
    applied to it. When the budget is exhausted, the failure of the last
    attempt is raised unchanged.

    Example:
        ```pycon
        >>> import asyncio
        >>> from itertools import count
        >>> from retry_assert.retry import RetryConfig, UntilStrategy
        >>> counter = count()
        >>> def check(value):
        ...     assert value == 2
        ...
        >>> config = RetryConfig(
        ...     operation=lambda: next(counter), assertion=check, timeout=0.05, retry_delay=0.01
        ... )
        >>> asyncio.run(UntilStrategy().run(config))
        2

        ```
    """

    name = "until"

    async def run(self, config: RetryConfig) -> Any:
        max_retries = config.max_retries
        max_attempts = max_retries + 1
        for attempt in range(max_attempts):
            outcome = await invoke(config.operation)
            if not outcome.failed:
                outcome = await self.check(config.assertion, outcome.value)
                if not outcome.failed:
                    logger.debug(f"until: check passed on attempt {attempt + 1}/{max_attempts}")
                    return outcome.value

            if attempt == max_retries:
                logger.debug(
                    f"until: check did not pass after {max_attempts} attempts "
                    f"({type(outcome.error).__name__})"
                )
                raise outcome.error
            log_structured(
                logger,
                logging.DEBUG,
                f"until: attempt {attempt + 1}/{max_attempts} failed "
                f"({type(outcome.error).__name__}: {outcome.error})",
                strategy=self.name,
                attempt=attempt + 1,
                max_attempts=max_attempts,
            )
            await self.wait(config, attempt, max_attempts)
        return None


class EnsureStrategy(BaseRetryStrategy):
    """Retry while the success check keeps passing.

    The run fails fast on the first failing invocation or check, with
    that failure. It resolves with the last value once the check has
    passed on every attempt of the budget.
    """

    name = "ensure"

    async def run(self, config: RetryConfig) -> Any:
        max_retries = config.max_retries
        max_attempts = max_retries + 1
        for attempt in range(max_attempts):
            outcome = await invoke(config.operation)
            if not outcome.failed:
                outcome = await self.check(config.assertion, outcome.value)
            if outcome.failed:
                log_structured(
                    logger,
                    logging.DEBUG,
                    f"ensure: attempt {attempt + 1}/{max_attempts} failed "
                    f"({type(outcome.error).__name__}: {outcome.error})",
                    strategy=self.name,
                    attempt=attempt + 1,
                    max_attempts=max_attempts,
                )
                raise outcome.error

            if attempt == max_retries:
                logger.debug(f"ensure: check held for all {max_attempts} attempts")
                return outcome.value
            await self.wait(config, attempt, max_attempts)
        return None
