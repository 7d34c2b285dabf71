r"""Exceptions raised by the retry executor."""

from __future__ import annotations

__all__ = ["RetryError"]


class RetryError(Exception):
    """Raised when every allowed attempt of an operation failed.

    Only the error of the last attempt is kept, errors from earlier
    attempts are discarded.

    Args:
        attempts: The number of attempts actually made.
        max_attempts: The configured maximum number of attempts.
        underlying_error: The exception raised by the last attempt.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryError
        >>> error = RetryError(
        ...     attempts=3, max_attempts=3, underlying_error=ValueError("boom")
        ... )
        >>> str(error)
        'Operation failed after 3 attempts (max: 3). Last error: boom'
        >>> error.underlying_error
        ValueError('boom')

        ```
    """

    def __init__(self, attempts: int, max_attempts: int, underlying_error: Exception) -> None:
        self.attempts = attempts
        self.max_attempts = max_attempts
        self.underlying_error = underlying_error
        super().__init__(
            f"Operation failed after {attempts} attempts (max: {max_attempts}). "
            f"Last error: {underlying_error}"
        )

    def __reduce__(self) -> tuple:
        return (self.__class__, (self.attempts, self.max_attempts, self.underlying_error))
