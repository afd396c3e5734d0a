r"""Retry package implementing the scheduling strategies.

Public API:
    - RetryConfig: Configuration of a single retry run
    - AttemptResult: Outcome of a single attempt
    - UntilStrategy: Retry until the success check passes
    - EnsureStrategy: Retry while the success check keeps passing
    - to_assertion: Adapter from a predicate to a success check
"""

from __future__ import annotations

__all__ = [
    "AttemptResult",
    "BaseRetryStrategy",
    "EnsureStrategy",
    "PredicateAssertion",
    "RetryConfig",
    "UntilStrategy",
    "compute_max_retries",
    "identity",
    "invoke",
    "to_assertion",
]

from retry_assert.retry.config import RetryConfig, compute_max_retries
from retry_assert.retry.invoke import AttemptResult, invoke
from retry_assert.retry.predicate import PredicateAssertion, identity, to_assertion
from retry_assert.retry.strategy import BaseRetryStrategy, EnsureStrategy, UntilStrategy
