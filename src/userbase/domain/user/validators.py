"""Validation rules for user attributes.

Each rule is a pure function returning a ValidationResult instead of
raising, so callers can decide whether to raise, collect or report.
"""

from typing import Any

from userbase.domain.shared.validation import ValidationResult
from userbase.domain.user.exceptions import InvalidUserAttributeError

MINIMUM_PASSWORD_LENGTH = 5


def _required_text(attribute: str, value: Any, message: str) -> ValidationResult[str]:
    if not isinstance(value, str) or not value:
        return ValidationResult.fail(InvalidUserAttributeError(attribute, message))
    return ValidationResult.ok(value)


def validate_username(value: Any) -> ValidationResult[str]:
    return _required_text("username", value, "No username provided")


def validate_password(value: Any) -> ValidationResult[str]:
    if not isinstance(value, str) or len(value) < MINIMUM_PASSWORD_LENGTH:
        msg = (
            "Invalid password. Password must be at least "
            f"{MINIMUM_PASSWORD_LENGTH} characters."
        )
        return ValidationResult.fail(InvalidUserAttributeError("password", msg))
    return ValidationResult.ok(value)


def validate_first_name(value: Any) -> ValidationResult[str]:
    return _required_text("first_name", value, "First name must be provided")


def validate_last_name(value: Any) -> ValidationResult[str]:
    return _required_text("last_name", value, "Last name must be provided")


def validate_user_attributes(
    username: Any,
    password: Any,
    first_name: Any,
    last_name: Any,
) -> list[InvalidUserAttributeError]:
    """Run every attribute rule and return all violations.

    Parameters
    ----------
    username, password, first_name, last_name
        Candidate attribute values

    Returns
    -------
    Violations in attribute order; empty when every value is valid.
    """
    results = [
        validate_username(username),
        validate_password(password),
        validate_first_name(first_name),
        validate_last_name(last_name),
    ]
    return [r.error for r in results if r.error is not None]  # type: ignore[misc]
