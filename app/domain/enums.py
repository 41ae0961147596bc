"""Domain enumerations for the SkillSnap application.

Enums represent fixed sets of domain values (account roles, cache mutations).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class UserRole(_ValuesMixin, str, Enum):
    """Account role. Admin may delete records and seed sample data."""

    ADMIN = "Admin"
    USER = "User"


class CacheMutation(_ValuesMixin, str, Enum):
    """Kind of committed write that triggers cache invalidation."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
