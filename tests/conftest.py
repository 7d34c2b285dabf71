from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("aretry.executor.asyncio.sleep", new_callable=AsyncMock, return_value=None) as mock:
        yield mock


@pytest.fixture
def failing_operation() -> AsyncMock:
    """Create an async operation that always fails."""
    return AsyncMock(side_effect=RuntimeError("Test failure"))


@pytest.fixture
def retry_logger() -> logging.Logger:
    """Create a dedicated logger for retry events.

    Use it together with ``caplog`` to inspect the emitted events.
    """
    logger = logging.getLogger("tests.retry")
    logger.setLevel(logging.DEBUG)
    return logger
