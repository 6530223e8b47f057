"""Shared HTTP client utilities (requests + retry/backoff).

We keep HTTP logic centralized to avoid divergence across chat clients.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from modelhub.infrastructure.llm.retry import RetryConfig, create_retry_decorator

logger = logging.getLogger(__name__)


def post_json_with_retries(
    url: str,
    *,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    timeout: float,
    retry: RetryConfig,
) -> requests.Response:
    """POST JSON with retry on network errors, 429 and 5xx."""

    @create_retry_decorator(retry)
    def _request_with_retry() -> requests.Response:
        logger.debug(f"HTTP POST {url}")
        resp = requests.post(url, json=payload, headers=headers, timeout=timeout)
        resp.raise_for_status()
        return resp

    try:
        return _request_with_retry()
    except requests.exceptions.HTTPError:
        raise
    except Exception as e:
        raise RuntimeError(f"HTTP request failed: {e}") from e
