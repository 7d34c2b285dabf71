r"""Parameter validation utilities for retry configuration.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before being used by the retry
executor.
"""

from __future__ import annotations

__all__ = ["validate_retry_params"]

import math


def validate_retry_params(max_attempts: int, delay: float | None = None) -> None:
    """Validate retry parameters.

    Args:
        max_attempts: Total number of attempts allowed, including the
            first one. Must be an integer >= 1.
        delay: Optional base delay in seconds between attempts.
            Must be finite and >= 0 if provided.

    Raises:
        ValueError: If max_attempts is not a positive integer or delay
            is negative or not finite.

    Example:
        ```pycon
        >>> from aretry.validation import validate_retry_params
        >>> validate_retry_params(max_attempts=3)
        >>> validate_retry_params(max_attempts=1, delay=0.5)
        >>> validate_retry_params(max_attempts=0)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {type(max_attempts).__name__}"
        raise ValueError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
    if delay is not None and delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise ValueError(msg)
    if delay is not None and not math.isfinite(delay):
        msg = f"delay must be finite, got {delay}"
        raise ValueError(msg)
