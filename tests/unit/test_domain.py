"""Domain exceptions and enums."""

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


def test_base_exception_defaults_error_code_to_class_name() -> None:
    exc = SkillSnapException("Something failed")
    assert exc.error_code == "SkillSnapException"
    assert exc.to_dict() == {
        "error": "SkillSnapException",
        "message": "Something failed",
        "details": {},
    }


def test_validation_exception_field() -> None:
    exc = ValidationException("bad", field="portfolio_user_id")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "portfolio_user_id"}


def test_not_found_details() -> None:
    exc = ResourceNotFoundException("Project", 4)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.message == "Project not found: 4"
    assert exc.details == {"resource_type": "Project", "resource_id": "4"}


def test_authorization_with_role() -> None:
    exc = AuthorizationException(required_role="Admin")
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"required_role": "Admin"}


def test_other_codes() -> None:
    assert AuthenticationException().error_code == "AUTHENTICATION_ERROR"
    assert AccountAlreadyExistsException("a@b.io").error_code == "ACCOUNT_ALREADY_EXISTS"
    assert DatabaseNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"


def test_enum_values() -> None:
    assert UserRole.values() == ["Admin", "User"]
    assert CacheMutation.values() == ["create", "update", "delete"]
