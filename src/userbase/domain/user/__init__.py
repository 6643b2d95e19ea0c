"""User domain manages account identity and profile data.

This domain handles:
- User aggregate (id, credentials, names, administrator flag)
- Field-level validation rules for user attributes
"""

from userbase.domain.user.aggregates import User
from userbase.domain.user.exceptions import InvalidUserAttributeError
from userbase.domain.user.validators import (
    MINIMUM_PASSWORD_LENGTH,
    validate_first_name,
    validate_last_name,
    validate_password,
    validate_user_attributes,
    validate_username,
)

__all__ = [
    "InvalidUserAttributeError",
    "MINIMUM_PASSWORD_LENGTH",
    "User",
    "validate_first_name",
    "validate_last_name",
    "validate_password",
    "validate_user_attributes",
    "validate_username",
]
