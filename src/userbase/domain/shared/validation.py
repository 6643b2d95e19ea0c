"""Validation result value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from userbase.domain.shared.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of a validation rule: either an accepted value or an error."""

    value: Optional[T] = None
    error: Optional[ValidationError] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            msg = "ValidationResult cannot carry both a value and an error"
            raise ValueError(msg)

    @classmethod
    def ok(cls, value: T) -> ValidationResult[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: ValidationError) -> ValidationResult[T]:
        return cls(error=error)

    @property
    def is_valid(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the accepted value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
