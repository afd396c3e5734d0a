r"""Configuration record for a single retry run.

This module provides the configuration object handed to a retry
strategy, and the computation of the attempt budget.
"""

from __future__ import annotations

__all__ = ["RetryConfig", "compute_max_retries"]

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


def compute_max_retries(timeout: float, retry_delay: float) -> int:
    """Compute the number of retries allowed after the first attempt.

    The budget is ``ceil(timeout / retry_delay)``, so the total number
    of attempts is one more than the returned value. The quotient is
    rounded to 9 decimal places before the ceiling so that float noise
    does not add an attempt. Quotients within 1e-9 above an integer are
    therefore rounded down to it, e.g. ``timeout=1.0000000001`` with
    ``retry_delay=1`` gives 1 retry instead of 2.

    Args:
        timeout: Total time budget in seconds.
        retry_delay: Fixed wait in seconds between attempts.

    Returns:
        The number of retries after the first attempt.

    Example:
        ```pycon
        >>> from retry_assert.retry.config import compute_max_retries
        >>> compute_max_retries(timeout=0.05, retry_delay=0.01)
        5
        >>> compute_max_retries(timeout=0.3, retry_delay=0.1)
        3
        >>> compute_max_retries(timeout=0.0, retry_delay=0.2)
        0
        >>> compute_max_retries(timeout=1.0000000001, retry_delay=1)
        1
        >>> compute_max_retries(timeout=1.00001, retry_delay=1)
        2

        ```
    """
    return math.ceil(round(timeout / retry_delay, 9))


@dataclass
class RetryConfig:
    """Configuration for one retry run.

    Attributes:
        operation: Zero-argument callable to retry. May return an
            awaitable.
        assertion: One-argument success check. Passes by returning and
            fails by raising.
        timeout: Total time budget in seconds.
        retry_delay: Fixed wait in seconds between attempts.
    """

    operation: Callable[[], Any]
    assertion: Callable[[Any], Any]
    timeout: float
    retry_delay: float

    @property
    def max_retries(self) -> int:
        """Number of retries after the first attempt."""
        return compute_max_retries(self.timeout, self.retry_delay)
