r"""Process-wide defaults for the retry builder.

The defaults are read once, when a ``RetryBuilder`` is constructed.
Modifying them afterwards only affects builders created later.

Example:
    ```pycon
    >>> from retry_assert import config, retry
    >>> config.defaults.timeout
    1.0
    >>> config.set_defaults(timeout=5.0)
    >>> retry(lambda: 1).timeout
    5.0
    >>> config.reset_defaults()

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_RETRY_DELAY",
    "DEFAULT_TIMEOUT",
    "RetryDefaults",
    "defaults",
    "reset_defaults",
    "set_defaults",
]

from dataclasses import dataclass

from retry_assert.validation import validate_retry_params

# Default time budget in seconds
# Only used to derive the number of attempts, elapsed time is not measured
DEFAULT_TIMEOUT = 1.0

# Default wait in seconds between two attempts
DEFAULT_RETRY_DELAY = 0.2


@dataclass
class RetryDefaults:
    """Mutable defaults applied to newly created builders.

    Attributes:
        timeout: Default time budget in seconds.
        retry_delay: Default wait in seconds between attempts.
    """

    timeout: float = DEFAULT_TIMEOUT
    retry_delay: float = DEFAULT_RETRY_DELAY


defaults = RetryDefaults()


def set_defaults(timeout: float | None = None, retry_delay: float | None = None) -> None:
    """Update the process-wide defaults.

    Args:
        timeout: New default time budget in seconds, or None to keep
            the current value.
        retry_delay: New default wait in seconds between attempts, or
            None to keep the current value.

    Raises:
        ValueError: If the resulting values are invalid.
    """
    new_timeout = defaults.timeout if timeout is None else timeout
    new_retry_delay = defaults.retry_delay if retry_delay is None else retry_delay
    validate_retry_params(timeout=new_timeout, retry_delay=new_retry_delay)
    defaults.timeout = new_timeout
    defaults.retry_delay = new_retry_delay


def reset_defaults() -> None:
    """Restore the library defaults."""
    defaults.timeout = DEFAULT_TIMEOUT
    defaults.retry_delay = DEFAULT_RETRY_DELAY
