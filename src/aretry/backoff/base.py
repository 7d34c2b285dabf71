r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before the next
    attempt of a failed operation, based on the number of the attempt
    that just failed and the configured base delay.

    Strategies are stateless and must not raise, so a single instance
    can be shared by any number of concurrent retry loops.
    """

    @abstractmethod
    def calculate(self, attempt: int, base_delay: float) -> float:
        """Calculate the delay to wait after a failed attempt.

        Args:
            attempt: The number of the attempt that just failed
                (1-indexed). For example, attempt=1 means the first
                call of the operation failed.
            base_delay: The configured base delay in seconds.

        Returns:
            The delay in seconds before the next attempt.
        """
