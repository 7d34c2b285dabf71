r"""Backoff strategies for delays between retry attempts.

This package provides the fixed, exponential and custom backoff
strategies, all implementing the ``BaseBackoffStrategy`` interface.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "CustomBackoff",
    "ExponentialBackoff",
    "FixedBackoff",
]

from aretry.backoff.base import BaseBackoffStrategy
from aretry.backoff.custom import CustomBackoff
from aretry.backoff.exponential import ExponentialBackoff
from aretry.backoff.fixed import FixedBackoff
