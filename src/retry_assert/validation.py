r"""Parameter validation utilities for retry configuration.

This module provides validation functions to ensure the retry
parameters meet the required constraints before the operation is
invoked.
"""

from __future__ import annotations

__all__ = ["validate_callable", "validate_retry_params"]

import math
from typing import Any

from retry_assert.exceptions import RetryConfigError


def validate_retry_params(timeout: float, retry_delay: float) -> None:
    """Validate retry parameters.

    Args:
        timeout: Total time budget in seconds. Must be >= 0. A value of
            0 means only the initial attempt is guaranteed.
        retry_delay: Fixed wait in seconds between attempts. Must be > 0.

    Raises:
        ValueError: If timeout or retry_delay is not finite, timeout is
            negative, or retry_delay is non-positive.

    Example:
        ```pycon
        >>> from retry_assert.validation import validate_retry_params
        >>> validate_retry_params(timeout=1.0, retry_delay=0.2)
        >>> validate_retry_params(timeout=0, retry_delay=0.2)
        >>> validate_retry_params(timeout=1.0, retry_delay=0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: retry_delay must be > 0, got 0

        ```
    """
    if not math.isfinite(timeout):
        msg = f"timeout must be finite, got {timeout}"
        raise ValueError(msg)
    if not math.isfinite(retry_delay):
        msg = f"retry_delay must be finite, got {retry_delay}"
        raise ValueError(msg)
    if timeout < 0:
        msg = f"timeout must be >= 0, got {timeout}"
        raise ValueError(msg)
    if retry_delay <= 0:
        msg = f"retry_delay must be > 0, got {retry_delay}"
        raise ValueError(msg)


def validate_callable(obj: Any, name: str) -> None:
    """Check that a configured capability can be called.

    Args:
        obj: The object to check.
        name: Short name used in the error message, e.g. ``"retry"``.

    Raises:
        RetryConfigError: If ``obj`` is not callable.
    """
    if not callable(obj):
        msg = f"{name} function undefined or not a function"
        raise RetryConfigError(msg)
