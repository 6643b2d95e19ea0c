"""userbase - user account entity with validated attributes.

The User aggregate keeps credentials, names and an administrator flag
for one account and validates every attribute on assignment.
"""

from userbase.domain.shared import (
    DomainException,
    ErrorCode,
    ValidationError,
    ValidationResult,
)
from userbase.domain.user import (
    MINIMUM_PASSWORD_LENGTH,
    InvalidUserAttributeError,
    User,
    validate_first_name,
    validate_last_name,
    validate_password,
    validate_user_attributes,
    validate_username,
)

__all__ = [
    # Domain - User
    "InvalidUserAttributeError",
    "MINIMUM_PASSWORD_LENGTH",
    "User",
    "validate_first_name",
    "validate_last_name",
    "validate_password",
    "validate_user_attributes",
    "validate_username",
    # Shared
    "DomainException",
    "ErrorCode",
    "ValidationError",
    "ValidationResult",
]
