r"""Fixed backoff strategy."""

from __future__ import annotations

__all__ = ["FixedBackoff"]

from aretry.backoff.base import BaseBackoffStrategy


class FixedBackoff(BaseBackoffStrategy):
    """Fixed backoff strategy.

    Returns the base delay for every attempt, regardless of the attempt
    number.

    Example:
        ```pycon
        >>> from aretry.backoff import FixedBackoff
        >>> backoff = FixedBackoff()
        >>> backoff.calculate(1, base_delay=2.5)
        2.5
        >>> backoff.calculate(10, base_delay=2.5)
        2.5

        ```
    """

    def calculate(self, attempt: int, base_delay: float) -> float:  # noqa: ARG002
        """Calculate fixed backoff delay.

        Args:
            attempt: The number of the attempt that just failed (unused).
            base_delay: The configured base delay in seconds.

        Returns:
            The base delay.
        """
        return base_delay

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FixedBackoff)

    def __hash__(self) -> int:
        return hash(FixedBackoff)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
