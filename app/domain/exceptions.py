"""Domain exceptions for the SkillSnap application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class SkillSnapException(Exception):
    """Base exception for all SkillSnap application errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SkillSnapException):
    """Raised when input validation fails (e.g. unknown owner, duplicate seed)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(SkillSnapException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(SkillSnapException):
    """Raised when the caller's role does not allow the operation."""

    def __init__(
        self,
        required_role: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with the role the operation requires.

        Args:
            required_role: Role needed for the operation (e.g. 'Admin').
            message: Human-readable message; default used when role omitted.
        """
        details: dict[str, Any] = {}
        if required_role:
            message = f"Permission denied: requires role {required_role}"
            details["required_role"] = required_role
        super().__init__(message, "PERMISSION_DENIED", details)


class AccountAlreadyExistsException(SkillSnapException):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "User with this email already exists",
            "ACCOUNT_ALREADY_EXISTS",
            {"email": email},
        )


class ResourceNotFoundException(SkillSnapException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'project', 'skill').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": str(resource_id)},
        )


class DatabaseNotConfiguredException(SkillSnapException):
    """Raised when an operation needs the database but no engine is configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
