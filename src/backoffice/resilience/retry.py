"""Retry decorator for idempotent backoffice API calls.

Transport failures (connection refused, timeouts, dropped connections) are
retried with exponential backoff and jitter.  HTTP error responses are never
retried: the server has answered and its error body is surfaced as-is.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

import httpx
import structlog
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
    wait_random,
)

logger = structlog.get_logger()

F = TypeVar("F", bound=Callable[..., Any])


def log_final_failure(retry_state: RetryCallState) -> None:
    """Log the failure once all attempts are exhausted.

    Args:
        retry_state: Tenacity retry state with attempt info and exception.
    """
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    api_name = getattr(retry_state.fn, "_api_name", "unknown") if retry_state.fn else "unknown"

    logger.error(
        "API call failed after all retries",
        api_name=api_name,
        attempts=retry_state.attempt_number,
        exception=str(exception),
    )

    if exception is not None:
        raise exception


def _before_sleep_log(retry_state: RetryCallState) -> None:
    """Log a warning before each retry attempt.

    Args:
        retry_state: Tenacity retry state with attempt info.
    """
    api_name = getattr(retry_state.fn, "_api_name", "unknown") if retry_state.fn else "unknown"
    logger.warning(
        "Retrying API call",
        api_name=api_name,
        attempt=retry_state.attempt_number,
        wait=retry_state.next_action.sleep if retry_state.next_action else 0,
    )


def resilient_api_call(
    api_name: str,
    attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 30.0,
    jitter: float = 5.0,
) -> Callable[[F], F]:
    """Create a retry decorator for an idempotent API call.

    Returns a tenacity retry decorator configured with:
    - *attempts* attempts maximum
    - Exponential backoff with jitter
    - Retries only on ``httpx.TransportError``
    - Warning log before each retry, error log on final failure
    - Original exception re-raised after exhaustion

    Args:
        api_name: Human-readable name for the API (used in logs).
        attempts: Maximum number of attempts, including the first.
        initial_wait: First backoff interval in seconds.
        max_wait: Upper bound for a single backoff interval.
        jitter: Maximum random seconds added to each interval.

    Returns:
        A decorator that wraps the function with retry logic.
    """

    def decorator(func: F) -> F:
        func._api_name = api_name  # type: ignore[attr-defined]

        wrapped = retry(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(attempts),
            wait=wait_exponential(multiplier=initial_wait, max=max_wait) + wait_random(0, jitter),
            before_sleep=_before_sleep_log,
            retry_error_callback=log_final_failure,
            reraise=True,
        )(func)

        return wrapped

    return decorator
