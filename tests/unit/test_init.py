r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import retry_assert


def test_package_version_is_string() -> None:
    assert isinstance(retry_assert.__version__, str)


def test_package_version_format() -> None:
    assert "." in retry_assert.__version__


def test_all_exports_defined() -> None:
    for name in retry_assert.__all__:
        assert hasattr(retry_assert, name), f"{name} is in __all__ but not defined in module"


def test_default_constants() -> None:
    assert retry_assert.DEFAULT_TIMEOUT == 1.0
    assert retry_assert.DEFAULT_RETRY_DELAY == 0.2


def test_retry_is_callable() -> None:
    assert callable(retry_assert.retry)
    assert isinstance(retry_assert.retry(), retry_assert.RetryBuilder)
