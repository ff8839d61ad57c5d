"""Validator base class with composable operators.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from .violation import Violation, ViolationCode, make_violation

if TYPE_CHECKING:
    from .combinators import AllOf, Not, WunOf

Violations = tuple[Violation, ...]

PASS: Violations = ()


def fail(code: ViolationCode | str, *exhibits: Any) -> Violations:
    """Return a result holding a single violation at the subject's root."""
    return (make_violation(code, *exhibits),)


class Validator(ABC):
    """Base class for all validators.

    A validator is a pure function of its subject. Calling it returns a tuple
    of violations which is empty exactly when the subject is valid. Validators
    hold no mutable state, so one instance may be shared freely, including
    across threads.
    """

    @abstractmethod
    def check(self, subject: Any) -> Violations:
        """Validate a subject.

        Args:
            subject: Any value

        Returns:
            The violations found, in a stable order. Empty if valid.
        """

    def __call__(self, subject: Any) -> Violations:
        return self.check(subject)

    def __and__(self, other: Any) -> AllOf:
        """Combine with AND: both validators must pass."""
        from .combinators import AllOf, euphemize

        if isinstance(self, AllOf) and not self.exhaustive:
            return AllOf(self.validators + (euphemize(other),))
        return AllOf([self, euphemize(other)])

    def __or__(self, other: Any) -> WunOf:
        """Combine with OR: at least one validator must pass."""
        from .combinators import WunOf, euphemize

        if isinstance(self, WunOf):
            return WunOf(self.validators + (euphemize(other),))
        return WunOf([self, euphemize(other)])

    def __invert__(self) -> Not:
        """Negate this validator."""
        from .combinators import Not

        return Not(self)


class FunctionValidator(Validator):
    """Adapts a plain callable to the Validator interface.

    The callable may return a single Violation, an iterable of violations, or
    None for success.
    """

    def __init__(self, function: Callable[[Any], Violation | Iterable[Violation] | None]):
        self.function = function

    def check(self, subject: Any) -> Violations:
        result = self.function(subject)
        if result is None:
            return PASS
        if isinstance(result, Violation):
            return (result,)
        return tuple(result)

    def __repr__(self) -> str:
        name = getattr(self.function, "__name__", repr(self.function))
        return f"FunctionValidator({name})"
