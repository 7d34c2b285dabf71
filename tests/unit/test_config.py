r"""Unit tests for RetryConfig and WaitPolicy."""

from __future__ import annotations

import dataclasses
import logging

import pytest

from aretry.backoff import CustomBackoff, ExponentialBackoff, FixedBackoff
from aretry.config import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_RETRY_CONFIG,
    RetryConfig,
    WaitPolicy,
)

#################################
#     Tests for RetryConfig     #
#################################


def test_retry_config_defaults() -> None:
    config = RetryConfig()
    assert config.max_attempts == DEFAULT_MAX_ATTEMPTS == 3
    assert config.delay is None
    assert config.backoff_strategy is None
    assert config.logger is None
    assert config.enable_logging is True


def test_default_retry_config() -> None:
    assert DEFAULT_RETRY_CONFIG == RetryConfig()


def test_retry_config_is_frozen() -> None:
    config = RetryConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.max_attempts = 5  # type: ignore[misc]


@pytest.mark.parametrize("max_attempts", [0, -1, -10])
def test_retry_config_rejects_non_positive_max_attempts(max_attempts: int) -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryConfig(max_attempts=max_attempts)


def test_retry_config_rejects_non_integer_max_attempts() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be an integer"):
        RetryConfig(max_attempts=2.5)  # type: ignore[arg-type]


def test_retry_config_rejects_negative_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be >= 0"):
        RetryConfig(delay=-0.1)


def test_retry_config_wait_policy() -> None:
    strategy = ExponentialBackoff(factor=2.0)
    config = RetryConfig(delay=0.5, backoff_strategy=strategy)
    assert config.wait_policy == WaitPolicy(base_delay=0.5, strategy=strategy)


def test_retry_config_wait_policy_without_delay() -> None:
    assert RetryConfig(backoff_strategy=FixedBackoff()).wait_policy is None


def test_retry_config_wait_policy_without_strategy() -> None:
    assert RetryConfig(delay=1.0).wait_policy is None


def test_retry_config_wait_policy_zero_delay() -> None:
    config = RetryConfig(delay=0.0, backoff_strategy=FixedBackoff())
    assert config.wait_policy == WaitPolicy(base_delay=0.0, strategy=FixedBackoff())


def test_retry_config_should_log() -> None:
    logger = logging.getLogger(__name__)
    assert RetryConfig(logger=logger).should_log
    assert not RetryConfig(logger=logger, enable_logging=False).should_log
    assert not RetryConfig().should_log


def test_retry_config_with_logger() -> None:
    strategy = CustomBackoff(lambda attempt: 0.1)
    config = RetryConfig(
        max_attempts=7, delay=0.3, backoff_strategy=strategy, enable_logging=False
    )
    logger = logging.getLogger(__name__)
    new_config = config.with_logger(logger)

    assert new_config is not config
    assert new_config.logger is logger
    assert new_config.max_attempts == 7
    assert new_config.delay == 0.3
    assert new_config.backoff_strategy is strategy
    assert new_config.enable_logging is False
    assert config.logger is None


def test_retry_config_with_logger_replaces_existing_logger() -> None:
    config = RetryConfig(logger=logging.getLogger("first"))
    assert config.with_logger(logging.getLogger("second")).logger.name == "second"


def test_retry_config_with_exponential_backoff() -> None:
    logger = logging.getLogger(__name__)
    config = RetryConfig.with_exponential_backoff(
        max_attempts=5, initial_delay=0.2, factor=3.0, logger=logger
    )
    assert config.max_attempts == 5
    assert config.delay == 0.2
    assert config.backoff_strategy == ExponentialBackoff(factor=3.0)
    assert config.logger is logger
    assert config.enable_logging is True


def test_retry_config_with_exponential_backoff_defaults() -> None:
    config = RetryConfig.with_exponential_backoff()
    assert config.max_attempts == 3
    assert config.delay == 1.0
    assert config.backoff_strategy == ExponentialBackoff(factor=2.0)
    assert config.logger is None


def test_retry_config_with_fixed_delay() -> None:
    config = RetryConfig.with_fixed_delay(delay=0.4, max_attempts=2)
    assert config.max_attempts == 2
    assert config.delay == 0.4
    assert config.backoff_strategy == FixedBackoff()
    assert config.logger is None


def test_retry_config_presets_validate() -> None:
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        RetryConfig.with_fixed_delay(delay=0.1, max_attempts=0)
    with pytest.raises(ValueError, match=r"delay must be >= 0"):
        RetryConfig.with_exponential_backoff(initial_delay=-1.0)


################################
#     Tests for WaitPolicy     #
################################


def test_wait_policy_delay_after_fixed() -> None:
    policy = WaitPolicy(base_delay=0.5, strategy=FixedBackoff())
    assert policy.delay_after(1) == 0.5
    assert policy.delay_after(4) == 0.5


def test_wait_policy_delay_after_exponential() -> None:
    policy = WaitPolicy(base_delay=0.1, strategy=ExponentialBackoff(factor=2.0))
    assert policy.delay_after(1) == 0.1
    assert policy.delay_after(2) == 0.2
    assert policy.delay_after(3) == 0.4


def test_wait_policy_delay_after_custom() -> None:
    policy = WaitPolicy(base_delay=9.0, strategy=CustomBackoff(lambda attempt: attempt * 2.0))
    assert policy.delay_after(3) == 6.0


def test_retry_config_rejects_nan_delay() -> None:
    with pytest.raises(ValueError, match=r"delay must be finite"):
        RetryConfig.with_fixed_delay(delay=float("nan"))


def test_retry_config_with_logger_adapter() -> None:
    adapter = logging.LoggerAdapter(logging.getLogger(__name__), {"job": "sync"})
    config = RetryConfig(max_attempts=2).with_logger(adapter)
    assert config.logger is adapter
    assert config.should_log
