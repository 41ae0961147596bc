"""Request context using contextvars.

Async-safe storage for request-scoped values set by middleware and read by
handlers and log lines (e.g. the correlation id of the current request).
"""

from contextvars import ContextVar

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value)


def get_correlation_id() -> str | None:
    """Return the correlation id of the request being handled, if any."""
    return _correlation_id.get()
