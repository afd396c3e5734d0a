r"""Utility functions shared by the retry strategies."""

from __future__ import annotations

__all__ = ["StructuredFormatter", "log_structured"]

from retry_assert.utils.structured_logging import StructuredFormatter, log_structured
