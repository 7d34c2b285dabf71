r"""Configuration dataclasses and defaults for the retry executor.

This module provides the immutable ``RetryConfig`` object consumed by the
retry executor, the derived ``WaitPolicy`` and named configuration
presets.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_RETRY_CONFIG",
    "RetryConfig",
    "WaitPolicy",
]

import logging
from dataclasses import dataclass, replace

from aretry.backoff import BaseBackoffStrategy, ExponentialBackoff, FixedBackoff
from aretry.validation import validate_retry_params

# Default total number of attempts
# The first attempt counts, so 3 means 1 initial call + 2 retries
DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class WaitPolicy:
    """Base delay and backoff strategy used between two attempts.

    Args:
        base_delay: The base delay in seconds fed to the strategy.
        strategy: The backoff strategy computing the actual delay.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> from aretry.config import WaitPolicy
        >>> policy = WaitPolicy(base_delay=0.5, strategy=ExponentialBackoff(factor=3.0))
        >>> policy.delay_after(2)
        1.5

        ```
    """

    base_delay: float
    strategy: BaseBackoffStrategy

    def delay_after(self, attempt: int) -> float:
        """Compute the delay to wait after the given failed attempt.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).

        Returns:
            The delay in seconds.
        """
        return self.strategy.calculate(attempt, self.base_delay)


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for retry behavior.

    A wait between attempts only happens when both ``delay`` and
    ``backoff_strategy`` are set, see ``wait_policy``. Instances are
    immutable and can be shared by concurrent retry invocations.

    Args:
        max_attempts: Total number of attempts allowed, the first one
            included. Must be >= 1.
        delay: Optional base delay in seconds given to the backoff
            strategy. Must be >= 0 if provided.
        backoff_strategy: Optional strategy computing the wait between
            attempts.
        logger: Optional logger (or ``logging.LoggerAdapter``) receiving
            a warning for each failed attempt and an error when all
            attempts are exhausted.
        enable_logging: Whether to emit events to ``logger``. It never
            changes the retry behavior itself.

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> from aretry.config import RetryConfig
        >>> config = RetryConfig()  # Use defaults
        >>> config.max_attempts
        3
        >>> config.wait_policy is None
        True
        >>> config = RetryConfig(
        ...     max_attempts=5, delay=1.0, backoff_strategy=ExponentialBackoff(factor=2.0)
        ... )
        >>> config.wait_policy
        WaitPolicy(base_delay=1.0, strategy=ExponentialBackoff(factor=2.0))

        ```
    """

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay: float | None = None
    backoff_strategy: BaseBackoffStrategy | None = None
    logger: logging.Logger | logging.LoggerAdapter | None = None
    enable_logging: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_retry_params(max_attempts=self.max_attempts, delay=self.delay)

    @property
    def wait_policy(self) -> WaitPolicy | None:
        """The wait policy, or ``None`` if either the delay or the
        backoff strategy is missing."""
        if self.delay is None or self.backoff_strategy is None:
            return None
        return WaitPolicy(base_delay=self.delay, strategy=self.backoff_strategy)

    @property
    def should_log(self) -> bool:
        """Whether retry events are emitted to the logger."""
        return self.enable_logging and self.logger is not None

    def with_logger(self, logger: logging.Logger | logging.LoggerAdapter) -> RetryConfig:
        """Create a new config with the given logger.

        All the other settings are kept unchanged.

        Args:
            logger: The logger to use for retry events.

        Returns:
            A new ``RetryConfig`` instance.

        Example:
            ```pycon
            >>> import logging
            >>> from aretry.config import RetryConfig
            >>> config = RetryConfig.with_fixed_delay(delay=0.5, max_attempts=4)
            >>> new_config = config.with_logger(logging.getLogger("my-app"))
            >>> new_config.logger.name
            'my-app'
            >>> new_config.max_attempts, new_config.delay
            (4, 0.5)
            >>> config.logger is None  # Original unchanged
            True

            ```
        """
        return replace(self, logger=logger)

    @classmethod
    def with_exponential_backoff(
        cls,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        initial_delay: float = 1.0,
        factor: float = 2.0,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> RetryConfig:
        """Create a configuration with exponential backoff.

        Args:
            max_attempts: Total number of attempts allowed (default: 3).
            initial_delay: Delay in seconds after the first failed
                attempt (default: 1.0).
            factor: Multiplier applied for each additional failed
                attempt (default: 2.0).
            logger: Optional logger for retry events.

        Returns:
            A configuration using ``ExponentialBackoff``.

        Example:
            ```pycon
            >>> from aretry.config import RetryConfig
            >>> config = RetryConfig.with_exponential_backoff(initial_delay=0.1, factor=3.0)
            >>> config.backoff_strategy
            ExponentialBackoff(factor=3.0)
            >>> config.delay
            0.1

            ```
        """
        return cls(
            max_attempts=max_attempts,
            delay=initial_delay,
            backoff_strategy=ExponentialBackoff(factor=factor),
            logger=logger,
        )

    @classmethod
    def with_fixed_delay(
        cls,
        delay: float,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        logger: logging.Logger | logging.LoggerAdapter | None = None,
    ) -> RetryConfig:
        """Create a configuration with a fixed delay between attempts.

        Args:
            delay: Delay in seconds between two attempts.
            max_attempts: Total number of attempts allowed (default: 3).
            logger: Optional logger for retry events.

        Returns:
            A configuration using ``FixedBackoff``.
        """
        return cls(
            max_attempts=max_attempts,
            delay=delay,
            backoff_strategy=FixedBackoff(),
            logger=logger,
        )


DEFAULT_RETRY_CONFIG = RetryConfig()
