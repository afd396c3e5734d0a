r"""retry_assert - Retry an operation until, or while, an assertion holds.

This package helps test and integration code wait on eventually
consistent state. An operation is invoked repeatedly, with a fixed
delay between attempts, until a success check passes (``until``) or
for as long as it keeps passing (``ensure``). The number of attempts is
derived once from a timeout and the retry delay.

Key Features:
    - Synchronous or asynchronous operations and checks
    - Any assertion library, as long as a failed assertion raises
    - Truthy predicate variants (``until_truthy``, ``ensure_truthy``)
    - Original failures are re-raised unchanged
    - Process-wide defaults for timeout and retry delay
    - HTTP polling helpers built on httpx

Example:
    ```pycon
    >>> import asyncio
    >>> from itertools import count
    >>> from retry_assert import retry
    >>> counter = count()
    >>> def check(value):
    ...     assert value == 2
    ...
    >>> asyncio.run(retry(lambda: next(counter)).with_retry_delay(0.01).until(check))
    2

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "PredicateMismatchError",
    "RetryBuilder",
    "RetryConfigError",
    "__version__",
    "retry",
]

from importlib.metadata import PackageNotFoundError, version

from retry_assert.builder import RetryBuilder, retry
from retry_assert.config import DEFAULT_RETRY_DELAY, DEFAULT_TIMEOUT
from retry_assert.exceptions import PredicateMismatchError, RetryConfigError

try:
    __version__ = version("retry-assert")
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
