"""Leaf validators that inspect the subject directly.
"""

from __future__ import annotations

import re
from re import Pattern as RegexPattern
from typing import Any

from .base import PASS, Validator, Violations, fail
from .subjects import MAX_SAFE_INTEGER, is_finite_number, strict_equal, type_tag
from .violation import ViolationCode


class TypeOf(Validator):
    """Subject's type tag must equal the expected tag."""

    def __init__(self, expected: str):
        """Initialize with the expected type tag.

        Args:
            expected: One of the tags returned by ``type_tag``
        """
        self.expected = expected

    def check(self, subject: Any) -> Violations:
        """Check the subject's type tag."""
        if type_tag(subject) != self.expected:
            return fail(ViolationCode.NOT_TYPE_A, self.expected)
        return PASS

    def __repr__(self) -> str:
        return f"TypeOf({self.expected!r})"


class Literal(Validator):
    """Subject must be identical to the expected value.

    NaN is accepted by ``Literal(nan)`` even though NaN never equals itself.
    """

    def __init__(self, expected: Any):
        """Initialize with the expected value.

        Args:
            expected: Value the subject must be identical to
        """
        self.expected = expected

    def check(self, subject: Any) -> Violations:
        """Check the subject is the expected value."""
        if strict_equal(subject, self.expected):
            return PASS
        return fail(ViolationCode.NOT_EQUAL_TO_A, self.expected)

    def __repr__(self) -> str:
        return f"Literal({self.expected!r})"


class FiniteNumber(Validator):
    """Subject must be a finite number."""

    def check(self, subject: Any) -> Violations:
        """Check the subject is finite."""
        if is_finite_number(subject):
            return PASS
        return fail(ViolationCode.NOT_FINITE)


class Bounds(Validator):
    """Subject must lie within the given bounds."""

    def __init__(
        self,
        minimum: Any = None,
        maximum: Any = None,
        exclusive_minimum: bool = False,
        exclusive_maximum: bool = False,
    ):
        """Initialize bounds.

        Args:
            minimum: Lower bound (inclusive by default); None for no bound
            maximum: Upper bound (inclusive by default); None for no bound
            exclusive_minimum: If True, the subject must be > minimum
            exclusive_maximum: If True, the subject must be < maximum
        """
        self.minimum = minimum
        self.maximum = maximum
        self.exclusive_minimum = exclusive_minimum
        self.exclusive_maximum = exclusive_maximum

    def _within(self, subject: Any) -> bool:
        if self.minimum is not None:
            if self.exclusive_minimum:
                if not subject > self.minimum:
                    return False
            elif subject < self.minimum:
                return False
        if self.maximum is not None:
            if self.exclusive_maximum:
                if not subject < self.maximum:
                    return False
            elif subject > self.maximum:
                return False
        return True

    def check(self, subject: Any) -> Violations:
        """Check the subject against the bounds."""
        try:
            within = self._within(subject)
        except TypeError:
            # Not orderable against the bounds
            within = False
        if within:
            return PASS
        return fail(ViolationCode.OUT_OF_BOUNDS)


class SafeInteger(Validator):
    """Subject must be an integer that a double holds exactly."""

    def check(self, subject: Any) -> Violations:
        """Check the subject is a safe integer."""
        if (
            is_finite_number(subject)
            and float(subject).is_integer()
            and abs(subject) <= MAX_SAFE_INTEGER
        ):
            return PASS
        return fail(ViolationCode.NOT_TYPE_A, "integer")


class PatternMatch(Validator):
    """String subject must contain a match for the regular expression."""

    def __init__(self, regex: str | RegexPattern[str]):
        """Initialize with a regular expression.

        Args:
            regex: Pattern string or compiled pattern searched for in the subject
        """
        self.regex = re.compile(regex) if isinstance(regex, str) else regex

    def check(self, subject: Any) -> Violations:
        """Check the subject matches the pattern."""
        if isinstance(subject, str) and self.regex.search(subject) is not None:
            return PASS
        return fail(ViolationCode.WRONG_PATTERN)

    def __repr__(self) -> str:
        return f"PatternMatch({self.regex.pattern!r})"


class AnyValue(Validator):
    """Accepts every subject."""

    def check(self, subject: Any) -> Violations:
        """Accept the subject."""
        return PASS

    def __repr__(self) -> str:
        return "AnyValue()"


class Refuse(Validator):
    """Refuses every subject with a fixed violation."""

    def __init__(self, code: ViolationCode | str, *exhibits: Any):
        """Initialize with the violation to report.

        Args:
            code: Violation code
            *exhibits: Values for the message placeholders
        """
        self.result = fail(code, *exhibits)

    def check(self, subject: Any) -> Violations:
        """Refuse the subject."""
        return self.result


def type_of(expected: str) -> TypeOf:
    """Return a validator requiring the given type tag."""
    return TypeOf(expected)


def literal(expected: Any) -> Literal:
    """Return a validator requiring the subject to be ``expected``.

    Scalars compare by value within their type, NaN included; other values
    compare by identity.
    """
    return Literal(expected)


def finite_number() -> FiniteNumber:
    """Return a validator rejecting infinities, NaN and non-numbers."""
    return FiniteNumber()


def bounds(
    minimum: Any = None,
    maximum: Any = None,
    exclusive_minimum: bool = False,
    exclusive_maximum: bool = False,
) -> Bounds:
    """Return a validator for a range, inclusive unless told otherwise."""
    return Bounds(minimum, maximum, exclusive_minimum, exclusive_maximum)


def safe_integer() -> SafeInteger:
    """Return a validator for integers within +/-(2**53 - 1)."""
    return SafeInteger()


def pattern(regex: str | RegexPattern[str]) -> PatternMatch:
    """Return a validator searching strings for ``regex``."""
    return PatternMatch(regex)


def any_() -> AnyValue:
    """Return a validator accepting everything."""
    return AnyValue()


def none(code: ViolationCode | str, *exhibits: Any) -> Refuse:
    """Return a validator that refuses all values with the given violation."""
    return Refuse(code, *exhibits)
