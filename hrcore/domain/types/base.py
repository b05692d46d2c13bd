"""Shared pieces of the algebraic result types."""

from collections.abc import Sequence
from typing import Any


class UnwrapError(RuntimeError):
    """Raised when the wrong arm of a Result/Maybe/Either is read.

    This signals a programming error, never a business condition: callers
    must branch on the state predicate before reading a payload.
    """


class CombinedError(Exception):
    """Failure payload produced by ``Result.combine``.

    Carries every collected failure, in order, and a message made of all of
    their messages.
    """

    def __init__(self, errors: Sequence[Any]):
        self.errors = list(errors)
        super().__init__(", ".join(error_message(error) for error in self.errors))


def error_message(error: Any) -> str:
    """Human readable message for an arbitrary failure payload."""
    message = getattr(error, "message", None)
    if isinstance(message, str):
        return message
    return str(error)
