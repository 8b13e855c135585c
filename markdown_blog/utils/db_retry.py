"""Retry reads that fail because the database connection dropped."""

import time
import functools
from typing import Any, Callable, TypeVar

import structlog
from sqlalchemy.exc import OperationalError, DisconnectionError
from psycopg2 import OperationalError as Psycopg2OperationalError

F = TypeVar('F', bound=Callable[..., Any])

log = structlog.get_logger()

RETRYABLE_ERRORS = (OperationalError, DisconnectionError, Psycopg2OperationalError)

# Substrings of driver messages that mean the connection, not the query, failed
CONNECTION_ERROR_MARKERS = (
    'ssl syscall error',
    'eof detected',
    'connection closed',
    'server closed the connection',
    'connection reset',
    'connection timed out',
    'could not connect',
    'bad record mac',
)


def is_connection_error(exc: BaseException) -> bool:
    message = str(exc).lower()
    return any(marker in message for marker in CONNECTION_ERROR_MARKERS)


def retry_db_operation(max_retries: int = 3, delay: float = 0.5, backoff: float = 2.0):
    """
    Decorator to retry database operations on connection failures.

    Args:
        max_retries: Maximum number of retry attempts
        delay: Initial delay between retries in seconds
        backoff: Multiplier for delay after each retry
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            current_delay = delay
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except RETRYABLE_ERRORS as e:
                    if attempt >= max_retries or not is_connection_error(e):
                        raise
                    log.warning(
                        "db_connection_retry",
                        operation=func.__name__,
                        attempt=attempt + 1,
                        max_attempts=max_retries + 1,
                        delay=current_delay,
                        error=str(e),
                    )
                    time.sleep(current_delay)
                    current_delay *= backoff

        return wrapper  # type: ignore[return-value]
    return decorator
