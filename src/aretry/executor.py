r"""Asynchronous retry executor.

This module provides the ``AsyncRetryExecutor`` class that awaits an
operation until it succeeds or the configured number of attempts is
exhausted, and the ``attempt`` and ``run`` helper functions built on
top of it.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor", "attempt", "run"]

import asyncio
import logging
from typing import TYPE_CHECKING, TypeVar

from aretry.config import DEFAULT_RETRY_CONFIG, RetryConfig
from aretry.exceptions import RetryError
from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class AsyncRetryExecutor:
    """Executes an async operation with automatic retry logic.

    The operation is awaited at most ``config.max_attempts`` times.
    Every ``Exception`` it raises is treated as retryable. Between two
    attempts the executor sleeps for the delay computed by the
    configured wait policy, if any. It never sleeps before the first
    attempt nor after the last one.

    The executor keeps no state between calls of ``execute``, so a single
    instance can drive many concurrent retry loops.

    Attributes:
        config: Retry configuration containing max attempts, wait policy
            and logger.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import AsyncRetryExecutor, RetryConfig
        >>> async def main():
        ...     executor = AsyncRetryExecutor(RetryConfig.with_fixed_delay(delay=0.5))
        ...     return await executor.execute(fetch_data)
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(self, config: RetryConfig = DEFAULT_RETRY_CONFIG) -> None:
        self.config = config

    async def execute(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Execute an async operation with automatic retry logic.

        The retry loop handles:
        - Successful call: returns the value immediately, without logging
        - Failed call with attempts left: logs a warning, waits, retries
        - Failed final call: logs an error and raises ``RetryError``

        Note:
            Only ``Exception`` subclasses are retried. ``asyncio.CancelledError``
            raised by the operation or during the wait between attempts
            propagates to the caller and stops the loop.

        Args:
            operation: Zero-argument async callable, called again for
                each attempt.

        Returns:
            The value returned by the first successful call of the
            operation.

        Raises:
            RetryError: If all attempts failed. The exception raised by
                the last attempt is available as ``underlying_error`` and
                chained as the cause.
        """
        max_attempts = self.config.max_attempts
        wait_policy = self.config.wait_policy

        for attempt in range(1, max_attempts + 1):
            try:
                result = await operation()
            except Exception as exc:
                if attempt == max_attempts:
                    self._log_exhausted(attempt, exc)
                    raise RetryError(
                        attempts=attempt,
                        max_attempts=max_attempts,
                        underlying_error=exc,
                    ) from exc

                self._log_failed_attempt(attempt, exc)
                if wait_policy is not None:
                    delay = wait_policy.delay_after(attempt)
                    logger.debug(f"Waiting {delay:.2f}s before attempt {attempt + 1}/{max_attempts}")
                    await asyncio.sleep(delay)
            else:
                if attempt > 1:
                    logger.debug(f"Operation succeeded on attempt {attempt}/{max_attempts}")
                return result

        # max_attempts >= 1 is validated by RetryConfig, so the loop always returns or raises
        msg = f"retry loop ended without result (max_attempts={max_attempts})"  # pragma: no cover
        raise RuntimeError(msg)  # pragma: no cover

    def _log_failed_attempt(self, attempt: int, exc: Exception) -> None:
        if not self.config.should_log:
            return
        log_structured(
            self.config.logger,
            logging.WARNING,
            "Retry attempt failed",
            attempt=attempt,
            max_attempts=self.config.max_attempts,
            error=_describe(exc),
        )

    def _log_exhausted(self, attempts: int, exc: Exception) -> None:
        if not self.config.should_log:
            return
        log_structured(
            self.config.logger,
            logging.ERROR,
            "Max retry attempts exceeded",
            attempts=attempts,
            max_attempts=self.config.max_attempts,
            final_error=_describe(exc),
        )


async def attempt(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig = DEFAULT_RETRY_CONFIG,
) -> T:
    """Execute an async operation with retry logic.

    The operation comes first so the configuration can default to
    ``DEFAULT_RETRY_CONFIG``. Both can be passed by keyword:
    ``attempt(config=config, operation=fetch_data)``.

    Args:
        operation: Zero-argument async callable to retry.
        config: Configuration for retry behavior. Defaults to 3 attempts
            without delay.

    Returns:
        The value returned by the first successful call of the operation.

    Raises:
        RetryError: If all attempts failed.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretry import RetryConfig, attempt
        >>> calls = []
        >>> async def flaky():
        ...     calls.append(1)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("temporary failure")
        ...     return "ok"
        ...
        >>> config = RetryConfig.with_exponential_backoff(initial_delay=0.01)
        >>> asyncio.run(attempt(flaky, config))
        'ok'
        >>> len(calls)
        2

        ```
    """
    return await AsyncRetryExecutor(config).execute(operation)


async def run(operation: Callable[[], Awaitable[T]]) -> T:
    """Execute an async operation with the default retry configuration.

    The default configuration makes up to 3 attempts without any delay
    and without logger.

    Args:
        operation: Zero-argument async callable to retry.

    Returns:
        The value returned by the first successful call of the operation.

    Raises:
        RetryError: If all 3 attempts failed.
    """
    return await attempt(operation, DEFAULT_RETRY_CONFIG)
