"""Shared domain components.

This module exports the exception hierarchy and the validation result
type used across domain boundaries.
"""

from userbase.domain.shared.exceptions import (
    DomainException,
    ErrorCode,
    ValidationError,
)
from userbase.domain.shared.validation import ValidationResult

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    # Results
    "ValidationResult",
]
