from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from retry_assert import config

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture(autouse=True)
def restore_defaults() -> Generator[None, None, None]:
    """Restore the process-wide retry defaults after each test."""
    yield
    config.reset_defaults()
