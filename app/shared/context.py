"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (the request ID) so that
log records can carry it without passing it through every call.

Usage:
    token = set_request_id("abc")
    ...
    reset_request_id(token)
"""

from contextvars import ContextVar, Token

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)


def set_request_id(request_id: str | None) -> Token:
    """Set the request ID for the current async task; return a reset token."""
    return _current_request_id.set(request_id)


def reset_request_id(token: Token) -> None:
    """Restore the request ID that was current before set_request_id."""
    _current_request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request ID, or None outside a request."""
    return _current_request_id.get()
