"""Retry logic with exponential backoff for dev.to write requests.

This module provides retry functionality for article create and update
calls. Any request-level failure (connection reset, timeout, DNS error, ...)
triggers another attempt with exponential backoff (1s, 2s, 4s by default).
HTTP error statuses are not exceptions at this layer and are never retried.
"""

import time
import logging
from typing import Callable, TypeVar

from requests.exceptions import RequestException

from .errors import APIAccessError

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF = 1.0


def retry_on_transport_error(
    func: Callable[..., T],
    *args,
    max_retries: int = DEFAULT_MAX_RETRIES,
    backoff: float = DEFAULT_BACKOFF,
    **kwargs,
) -> T:
    """Retry function on transport errors with exponential backoff.

    Executes the given function with the provided arguments, retrying up to
    ``max_retries`` times with exponential backoff when a request-level error
    is raised. Any other exception is passed through immediately.

    Args:
        func: The function to execute with retry logic
        *args: Positional arguments to pass to the function
        max_retries: Number of retries after the first attempt
        backoff: Base wait time in seconds, doubled after every retry
        **kwargs: Keyword arguments to pass to the function

    Returns:
        The return value of the function

    Raises:
        APIAccessError: If the transport keeps failing after all retries
        Other exceptions: Passed through immediately without retry

    Example:
        >>> resp = retry_on_transport_error(session.post, url, json=payload)
    """
    last_error = None

    for retry_num in range(max_retries + 1):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if not _is_transport_error(e):
                raise

            last_error = e
            if retry_num >= max_retries:
                logger.error(
                    f"Request still failing after {max_retries} retries, giving up: {e}"
                )
                break

            wait_time = backoff * (2 ** retry_num)
            logger.info(
                f"Request failed ({e}), retrying in {wait_time}s "
                f"(retry {retry_num + 1}/{max_retries})"
            )
            time.sleep(wait_time)

    raise APIAccessError(
        f"dev.to API failure (after {max_retries} retries): {last_error}"
    )


def _is_transport_error(exception: Exception) -> bool:
    """Check if an exception is a request-level failure worth retrying.

    Args:
        exception: The exception to check

    Returns:
        True for requests exceptions (connection errors, timeouts, ...)
    """
    return isinstance(exception, RequestException)
