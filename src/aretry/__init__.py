r"""aretry - Retry harness for asynchronous operations.

This package re-executes a fallible async operation up to a configured
number of attempts, waits between attempts according to a pluggable
backoff strategy, and raises a ``RetryError`` carrying the attempt count
and the last underlying error once every attempt failed.

Key Features:
    - Fixed, exponential and custom backoff strategies
    - Immutable configuration with named presets
    - Structured log events for each failed attempt and on exhaustion
    - Cancellation-friendly waits built on asyncio.sleep

Example:
    ```pycon
    >>> import asyncio
    >>> import logging
    >>> from aretry import RetryConfig, attempt, run
    >>> async def fetch_data():
    ...     return {"status": "ok"}
    ...
    >>> # Use default configuration: 3 attempts, no delay
    >>> asyncio.run(run(fetch_data))
    {'status': 'ok'}
    >>> # Use exponential backoff: waits 0.5s, then 1.0s
    >>> config = RetryConfig.with_exponential_backoff(
    ...     max_attempts=3, initial_delay=0.5, factor=2.0
    ... ).with_logger(logging.getLogger("my-app"))
    >>> asyncio.run(attempt(fetch_data, config))
    {'status': 'ok'}

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_CONFIG",
    "AsyncRetryExecutor",
    "BaseBackoffStrategy",
    "CustomBackoff",
    "ExponentialBackoff",
    "FixedBackoff",
    "RetryConfig",
    "RetryError",
    "WaitPolicy",
    "__version__",
    "attempt",
    "run",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.backoff import BaseBackoffStrategy, CustomBackoff, ExponentialBackoff, FixedBackoff
from aretry.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_RETRY_CONFIG, RetryConfig, WaitPolicy
from aretry.exceptions import RetryError
from aretry.executor import AsyncRetryExecutor, attempt, run

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
