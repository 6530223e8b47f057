"""Retry utilities for chat client HTTP calls, built on tenacity."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import requests
from tenacity import (
    RetryCallState,
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

from modelhub.domain.models.model_config import ModelConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RetryConfig:
    max_attempts: int = 3
    initial_delay: float = 1.0
    backoff_multiplier: float = 2.0
    jitter: float = 0.1  # +/-10% by default


def retry_config_from_model_config(config: ModelConfig) -> RetryConfig:
    """Derive retry policy from a model config.

    max_retries counts retries after the first attempt.
    """
    return RetryConfig(max_attempts=max(config.max_retries, 0) + 1)


def should_retry_http_error(exception: requests.exceptions.HTTPError) -> bool:
    """Check if HTTPError should be retried."""
    status_code = exception.response.status_code if exception.response is not None else None
    # Don't retry on auth errors or most 4xx (except 429)
    if status_code in (401, 403):
        return False
    if status_code and 400 <= status_code < 500 and status_code != 429:
        return False
    return True


def should_retry_request(exception: BaseException) -> bool:
    """Retry network errors, 429 and 5xx responses."""
    if isinstance(exception, requests.exceptions.HTTPError):
        return should_retry_http_error(exception)
    return isinstance(exception, requests.exceptions.RequestException)


def create_retry_decorator(
    retry_config: RetryConfig,
    retry_condition: Callable[[BaseException], bool] = should_retry_request,
    before_sleep: Callable[[RetryCallState], None] | None = None,
) -> Callable[[Callable], Callable]:
    """Create a retry decorator with tenacity.

    Args:
        retry_config: Retry configuration
        retry_condition: Function that returns True if exception should be retried
        before_sleep: Optional callback before sleep (defaults to logging)

    Returns:
        Retry decorator
    """
    # Exponential backoff: initial_delay * (backoff_multiplier ^ attempt)
    wait = wait_exponential(
        multiplier=retry_config.initial_delay,
        exp_base=retry_config.backoff_multiplier,
        min=retry_config.initial_delay,
        max=60.0,
    )

    if retry_config.jitter > 0:
        jitter_amount = retry_config.initial_delay * retry_config.jitter
        wait = wait + wait_random(-jitter_amount, jitter_amount)

    if before_sleep is None:
        before_sleep = before_sleep_log(logger, logging.WARNING)

    def decorator(func: Callable) -> Callable:
        return retry(
            stop=stop_after_attempt(retry_config.max_attempts),
            wait=wait,
            retry=retry_if_exception(retry_condition),
            reraise=True,
            before_sleep=before_sleep,
        )(func)

    return decorator
