"""Per-session client state: cached collections and change notification.

Each tracked collection lives in a CacheSlot. A slot expires five minutes
after it was filled; notify_changed() clears it and then calls every
subscriber in registration order, so views know to refetch.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime, timedelta

from app.core.constants import CLIENT_CACHE_EXPIRATION
from app.shared.utils.datetime import utc_now

logger = logging.getLogger(__name__)


class CacheSlot[T]:
    """One cached collection with its fill time and change subscribers."""

    def __init__(
        self,
        name: str,
        clock: Callable[[], datetime] = utc_now,
        expiration: timedelta = CLIENT_CACHE_EXPIRATION,
    ) -> None:
        self.name = name
        self._clock = clock
        self._expiration = expiration
        self._value: T | None = None
        self._stored_at: datetime | None = None
        self._subscribers: list[Callable[[], None]] = []
        self._lock = threading.Lock()

    def get_cached(self) -> T | None:
        """Return the collection, or None if never filled or expired."""
        with self._lock:
            if self._value is None or self._stored_at is None:
                return None
            if self._clock() - self._stored_at >= self._expiration:
                return None
            return self._value

    def set_cached(self, value: T) -> None:
        with self._lock:
            self._value = value
            self._stored_at = self._clock()

    def invalidate(self) -> None:
        with self._lock:
            self._value = None
            self._stored_at = None

    def notify_changed(self) -> None:
        """Invalidate, then call each subscriber in registration order."""
        self.invalidate()
        with self._lock:
            subscribers = list(self._subscribers)
        logger.debug("%s changed, notifying %d subscribers", self.name, len(subscribers))
        for callback in subscribers:
            callback()

    def subscribe(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register callback for change events. Returns a function that unsubscribes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe


class AppStateService:
    """Holds the portfolio user, project and skill slots of one session."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        self.portfolio_users: CacheSlot[list] = CacheSlot("portfolio users", clock)
        self.projects: CacheSlot[list] = CacheSlot("projects", clock)
        self.skills: CacheSlot[list] = CacheSlot("skills", clock)

    def clear_all(self) -> None:
        """Invalidate every slot (e.g. on logout). Subscribers are not called."""
        for slot in (self.portfolio_users, self.projects, self.skills):
            slot.invalidate()
