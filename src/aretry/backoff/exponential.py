r"""Exponential backoff strategy."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import math

from aretry.backoff.base import BaseBackoffStrategy


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy.

    Calculates delay as: base_delay * (factor ** (attempt - 1)), so the
    wait after the first failed attempt equals the base delay.

    A factor lower than or equal to 1 is accepted and produces
    non-growing (or shrinking) delays. A delay too large to be
    represented as a float is returned as ``math.inf``.

    Args:
        factor: The multiplier applied for each additional failed
            attempt (default: 2.0).

    Example:
        ```pycon
        >>> from aretry.backoff import ExponentialBackoff
        >>> backoff = ExponentialBackoff(factor=2.0)
        >>> backoff.calculate(1, base_delay=0.5)  # After first failure
        0.5
        >>> backoff.calculate(2, base_delay=0.5)  # After second failure
        1.0
        >>> backoff.calculate(3, base_delay=0.5)  # After third failure
        2.0

        ```
    """

    def __init__(self, factor: float = 2.0) -> None:
        self.factor = factor

    def calculate(self, attempt: int, base_delay: float) -> float:
        """Calculate exponential backoff delay.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).
            base_delay: The configured base delay in seconds.

        Returns:
            The calculated delay: base_delay * (factor ** (attempt - 1)).
        """
        if base_delay == 0:
            return 0.0
        try:
            return base_delay * self.factor ** (attempt - 1)
        except OverflowError:
            return math.inf

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExponentialBackoff):
            return NotImplemented
        return self.factor == other.factor

    def __hash__(self) -> int:
        return hash((ExponentialBackoff, self.factor))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(factor={self.factor})"
