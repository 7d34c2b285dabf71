r"""Custom backoff strategy built from a user function."""

from __future__ import annotations

__all__ = ["CustomBackoff"]

from typing import TYPE_CHECKING

from aretry.backoff.base import BaseBackoffStrategy

if TYPE_CHECKING:
    from collections.abc import Callable


class CustomBackoff(BaseBackoffStrategy):
    """Backoff strategy delegating to a user-supplied function.

    The function only receives the attempt number. The base delay is
    ignored unless the function captures it itself.

    Note:
        The function must be fast, perform no I/O and never raise.
        Clamp or default the value inside the function if needed.

    Args:
        func: A function mapping the number of the attempt that just
            failed (1-indexed) to a delay in seconds.

    Example:
        ```pycon
        >>> from aretry.backoff import CustomBackoff
        >>> backoff = CustomBackoff(lambda attempt: attempt * 0.1)
        >>> backoff.calculate(1, base_delay=5.0)
        0.1
        >>> backoff.calculate(3, base_delay=5.0)
        0.30000000000000004

        ```
    """

    def __init__(self, func: Callable[[int], float]) -> None:
        if not callable(func):
            msg = f"func must be callable, got {type(func).__name__}"
            raise TypeError(msg)
        self.func = func

    def calculate(self, attempt: int, base_delay: float) -> float:  # noqa: ARG002
        """Calculate the delay with the user function.

        Args:
            attempt: The number of the attempt that just failed (1-indexed).
            base_delay: The configured base delay in seconds (unused).

        Returns:
            The value returned by ``func(attempt)``.
        """
        return self.func(attempt)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomBackoff):
            return NotImplemented
        return self.func is other.func

    def __hash__(self) -> int:
        return hash((CustomBackoff, id(self.func)))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(func={self.func!r})"
