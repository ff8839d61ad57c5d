"""Custom exceptions for the dataknobs_validators package.

Validators never raise to report an invalid subject; these exceptions are
for callers that want to stop at a boundary and for malformed configuration.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from dataknobs_common import ConfigurationError, ValidationError

if TYPE_CHECKING:
    from .violation import Violation


class SubjectValidationError(ValidationError):
    """Raised by assert_valid when a subject has violations."""

    def __init__(self, violations: Sequence[Violation], message: str | None = None):
        self.violations = tuple(violations)
        if message is None:
            message = "; ".join(violation.describe() for violation in self.violations)
        super().__init__(
            message,
            context={"violations": [violation.to_dict() for violation in self.violations]},
        )


class ValidatorConfigurationError(ConfigurationError):
    """Raised when a validator configuration cannot be built."""

    def __init__(self, message: str, config: Any = None):
        self.config = config
        super().__init__(message, context={"config": config} if config is not None else None)

