"""User domain exceptions.

Custom exceptions for the user domain, used for validation
of user attributes.
"""

from userbase.domain.shared.exceptions import ErrorCode, ValidationError


class InvalidUserAttributeError(ValidationError):
    """
    Raised when a user attribute fails its validation rule.

    Attributes
    ----------
    attribute
        Name of the rejected attribute (e.g. ``"username"``)
    """

    def __init__(self, attribute: str, message: str) -> None:
        self.attribute = attribute
        super().__init__(
            message,
            code=ErrorCode.INVALID_USER_ATTRIBUTE,
            details={"attribute": attribute},
        )
