"""Shared HTTP helpers used by the repository transports.

Encapsulates request/timeout/retry handling so transports avoid duplicating
try/except blocks. Failures that survive the retries are re-raised: callers
decide how to report them.
"""
from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import requests

from constants import Constants
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def _default_headers(headers: Optional[Dict[str, str]]) -> Dict[str, str]:
    merged = {"User-Agent": Constants.USER_AGENT, "Accept": "text/html, */*"}
    if headers:
        merged.update(headers)
    return merged


def robust_get(
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    **kwargs: Any
) -> requests.Response:
    """Perform a GET request with timeout and retries, with DEBUG traces.

    Server errors (5xx) and transport exceptions are retried up to
    ``Constants.HTTP_RETRY_MAX`` attempts with a linear back-off.

    Args:
        url: Target URL.
        headers: Optional request headers merged over the defaults.
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The last response received.

    Raises:
        requests.RequestException: When every attempt failed at transport level.
    """
    safe_target = safe_url(url)
    attempts = max(1, int(Constants.HTTP_RETRY_MAX))
    request_headers = _default_headers(headers)
    last_exception: Optional[requests.RequestException] = None
    response: Optional[requests.Response] = None

    for attempt in range(attempts):
        if attempt:
            time.sleep(Constants.HTTP_RETRY_BASE_DELAY_SEC * attempt)
        with Timer() as t:
            try:
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP request",
                        extra=extra_context(
                            event="http_request",
                            component="http_client",
                            action="GET",
                            target=safe_target,
                            attempt=attempt + 1
                        )
                    )
                response = requests.get(
                    url,
                    timeout=Constants.REQUEST_TIMEOUT,
                    headers=request_headers,
                    **kwargs
                )
            except requests.Timeout as exc:
                last_exception = exc
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP timeout",
                        extra=extra_context(
                            event="http_exception",
                            component="http_client",
                            action="GET",
                            outcome="timeout",
                            attempt=attempt + 1,
                            target=safe_target
                        )
                    )
                continue
            except requests.RequestException as exc:  # includes ConnectionError
                last_exception = exc
                if is_debug_enabled(logger):
                    logger.debug(
                        "HTTP request exception",
                        extra=extra_context(
                            event="http_exception",
                            component="http_client",
                            action="GET",
                            outcome="request_exception",
                            attempt=attempt + 1,
                            target=safe_target
                        )
                    )
                continue

        if is_debug_enabled(logger):
            logger.debug(
                "HTTP response",
                extra=extra_context(
                    event="http_response",
                    component="http_client",
                    action="GET",
                    outcome="success" if response.status_code < 500 else "server_error",
                    status_code=response.status_code,
                    duration_ms=t.duration_ms(),
                    target=safe_target
                )
            )
        if response.status_code < 500:
            return response
        last_exception = None

    # The final attempt decides: a 5xx response is handed back, an exception re-raised.
    if last_exception is None:
        return response
    logger.warning("GET %s failed after %s attempts: %s", safe_target, attempts, last_exception)
    raise last_exception
