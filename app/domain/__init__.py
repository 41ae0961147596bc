"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import CacheMutation, UserRole
from app.domain.exceptions import (
    AccountAlreadyExistsException,
    AuthenticationException,
    AuthorizationException,
    DatabaseNotConfiguredException,
    ResourceNotFoundException,
    SkillSnapException,
    ValidationException,
)

__all__ = [
    # Enums
    "CacheMutation",
    "UserRole",
    # Exceptions
    "AccountAlreadyExistsException",
    "AuthenticationException",
    "AuthorizationException",
    "DatabaseNotConfiguredException",
    "ResourceNotFoundException",
    "SkillSnapException",
    "ValidationException",
]
