"""UTC datetime helpers. All datetimes in the system are timezone-aware UTC."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Return the current UTC datetime with timezone info.

    Use instead of datetime.now() (naive, local) or datetime.utcnow()
    (naive, deprecated).
    """
    return datetime.now(UTC)
