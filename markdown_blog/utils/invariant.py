"""Assertions for states a request cannot recover from."""
from __future__ import annotations

from typing import Any


class InvariantError(Exception):
    """Raised when a request reaches a state its handler cannot serve.

    The app-level error handler turns it into a 500; nothing retries it.
    """


def invariant(condition: Any, message: str) -> None:
    """Raise :class:`InvariantError` with ``message`` unless ``condition`` is truthy."""
    if not condition:
        raise InvariantError(message)
