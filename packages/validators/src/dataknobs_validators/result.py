"""Validation result type wrapping a validator's violations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .base import Validator
from .exceptions import SubjectValidationError
from .violation import Violation


@dataclass
class ValidationResult:
    """Outcome of validating one subject.

    Allows ``if result:`` to check validity, and renders the violations as
    messages through ``errors``.
    """

    valid: bool
    value: Any
    violations: tuple[Violation, ...] = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return self.valid

    @property
    def errors(self) -> list[str]:
        """Rendered messages, prefixed with the path when there is one."""
        return [violation.describe() for violation in self.violations]

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine results for composite validation.

        Args:
            other: Another ValidationResult to merge with this one

        Returns:
            New ValidationResult with combined state
        """
        return ValidationResult(
            valid=self.valid and other.valid,
            value=other.value if other.valid else self.value,
            violations=self.violations + other.violations,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "violations": [violation.to_dict() for violation in self.violations],
        }

    @classmethod
    def success(cls, value: Any) -> ValidationResult:
        return cls(valid=True, value=value)

    @classmethod
    def failure(cls, value: Any, violations: tuple[Violation, ...] | list[Violation]) -> ValidationResult:
        return cls(valid=False, value=value, violations=tuple(violations))


def validate(validator: Validator, subject: Any) -> ValidationResult:
    """Validate a subject and wrap the outcome in a ValidationResult."""
    violations = validator(subject)
    if violations:
        return ValidationResult.failure(subject, violations)
    return ValidationResult.success(subject)


def assert_valid(validator: Validator, subject: Any) -> Any:
    """Return the subject if it is valid.

    Raises:
        SubjectValidationError: If the validator reports any violations
    """
    violations = validator(subject)
    if violations:
        raise SubjectValidationError(violations)
    return subject
