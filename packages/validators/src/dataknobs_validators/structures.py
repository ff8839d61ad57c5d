"""Structural validators for sequences and keyed collections.

Nested failures gain their location through :class:`Property`, which runs a
validator against one member of the subject and prepends the member's key to
the path of every resulting violation. The sequence and keyed collection
validators are assembled from Property and the combinators.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import PASS, Validator, Violations, fail
from .combinators import AllOf, euphemize
from .primitives import AnyValue, Literal
from .subjects import (
    ABSENT,
    is_mapping,
    is_sequence,
    key_string,
    own_keys,
    read_length,
    read_member,
)
from .violation import ViolationCode

LENGTH_KEY = "length"


def scope(key: Any, violations: Violations) -> Violations:
    """Prepend ``key`` to the path of each violation."""
    return tuple(violation.scoped(key) for violation in violations)


class Property(Validator):
    """Validates one member of the subject, read by key or index.

    A missing member is read as ABSENT, so the wrapped validator decides
    whether absence is acceptable.
    """

    def __init__(self, key: Any, validator: Any):
        """Initialize with the member to read and its validator.

        Args:
            key: Mapping key or sequence index of the member
            validator: Validator (or literal) for the member's value
        """
        self.key = key
        self.validator = euphemize(validator)

    def check(self, subject: Any) -> Violations:
        """Check the member, locating failures under the key."""
        return scope(self.key, self.validator(read_member(subject, self.key)))

    def __repr__(self) -> str:
        return f"Property({self.key!r}, {self.validator!r})"


class Length(Validator):
    """Validates ``len(subject)``, reported under the ``length`` key."""

    def __init__(self, validator: Any):
        """Initialize with the length validator.

        Args:
            validator: Validator (or literal) for the subject's length
        """
        self.validator = euphemize(validator)

    def check(self, subject: Any) -> Violations:
        """Check the subject's length."""
        return scope(LENGTH_KEY, self.validator(read_length(subject)))


class IsArray(Validator):
    """Accepts lists and tuples only."""

    def check(self, subject: Any) -> Violations:
        """Check the subject is a sequence."""
        if is_sequence(subject):
            return PASS
        return fail(ViolationCode.NOT_TYPE_A, "array")


class IsObject(Validator):
    """Accepts mappings only."""

    def check(self, subject: Any) -> Violations:
        """Check the subject is a mapping."""
        if is_mapping(subject):
            return PASS
        return fail(ViolationCode.NOT_TYPE_A, "object")


class Elements(Validator):
    """Validates every element of a sequence, exhaustively.

    Element ``n`` is validated by the ``n``th positional validator. Past the
    end of the positional list the rest validator applies; without one, the
    positional list is reused cyclically. With neither, extra elements are
    expected to be ABSENT and so always fail.
    """

    def __init__(self, validators: list[Any], rest: Any = None):
        """Initialize with positional and rest validators.

        Args:
            validators: Validators (or literals) by position
            rest: Validator for elements past the positional list
        """
        self.validators = tuple(euphemize(validator) for validator in validators)
        self.rest = None if rest is None else euphemize(rest)

    def find_validator(self, element_nr: int) -> Validator:
        """Return the validator that applies to one index."""
        if element_nr < len(self.validators):
            return self.validators[element_nr]
        if self.rest is not None:
            return self.rest
        if self.validators:
            return self.validators[element_nr % len(self.validators)]
        return Literal(ABSENT)

    def check(self, subject: Any) -> Violations:
        """Check every element, reporting each failure at its index."""
        if not is_sequence(subject):
            return PASS
        return AllOf(
            [Property(element_nr, self.find_validator(element_nr)) for element_nr in range(len(subject))],
            exhaustive=True,
        ).check(subject)


class Properties(Validator):
    """Validates a mapping whose keys each have their own validator.

    Problems are reported together, in this order: missing required keys,
    invalid required values, invalid optional values, stray keys.
    """

    def __init__(
        self,
        required: Mapping[Any, Any] | None = None,
        optional: Mapping[Any, Any] | None = None,
        allow_strays: bool = False,
    ):
        """Initialize with per-key validators.

        Args:
            required: Keys that must be present, mapped to their validators
            optional: Keys that may be present, mapped to their validators
            allow_strays: Whether keys in neither map are accepted
        """
        self.required = {key: euphemize(value) for key, value in (required or {}).items()}
        self.optional = {key: euphemize(value) for key, value in (optional or {}).items()}
        self.allow_strays = allow_strays

    def check(self, subject: Any) -> Violations:
        """Check keys and values, reporting every problem."""
        keys = own_keys(subject)
        present = set(keys)
        missing = [_Missing(key) for key in self.required if key not in present]
        required_values = [
            Property(key, validator) for key, validator in self.required.items() if key in present
        ]
        optional_values = [
            Property(key, validator)
            for key, validator in self.optional.items()
            if read_member(subject, key) is not ABSENT
        ]
        strays = []
        if not self.allow_strays:
            strays = [
                _Stray(key) for key in keys if key not in self.required and key not in self.optional
            ]
        return AllOf(
            [
                AllOf(missing, exhaustive=True),
                AllOf(required_values, exhaustive=True),
                AllOf(optional_values, exhaustive=True),
                AllOf(strays, exhaustive=True),
            ],
            exhaustive=True,
        ).check(subject)

    def __repr__(self) -> str:
        return (
            f"Properties(required={list(self.required)!r}, optional={list(self.optional)!r}, "
            f"allow_strays={self.allow_strays})"
        )


class Entries(Validator):
    """Validates every key and value of a mapping with the same validators."""

    def __init__(self, key_validator: Any = None, value_validator: Any = None):
        """Initialize with validators shared by every entry.

        Args:
            key_validator: Validator for each key's string form
            value_validator: Validator for each value
        """
        self.key_validator = AnyValue() if key_validator is None else euphemize(key_validator)
        self.value_validator = AnyValue() if value_validator is None else euphemize(value_validator)

    def check(self, subject: Any) -> Violations:
        """Check every entry, key first."""
        return AllOf(
            [_Entry(key, self.key_validator, self.value_validator) for key in own_keys(subject)],
            exhaustive=True,
        ).check(subject)


class _Missing(Validator):
    def __init__(self, key: Any):
        self.key = key

    def check(self, subject: Any) -> Violations:
        return fail(ViolationCode.MISSING_PROPERTY_A, self.key)


class _Stray(Validator):
    def __init__(self, key: Any):
        self.key = key

    def check(self, subject: Any) -> Violations:
        return fail(ViolationCode.UNEXPECTED_PROPERTY_A, self.key)


class _Entry(Validator):
    """Validates one key of a mapping as a string, then its value.

    The value is still read by, and located at, the key as given.
    """

    def __init__(self, key: Any, key_validator: Validator, value_validator: Validator):
        self.key = key
        self.key_validator = key_validator
        self.value = Property(key, value_validator)

    def check(self, subject: Any) -> Violations:
        return self.key_validator(key_string(self.key)) + self.value(subject)


def property_(key: Any, validator: Any) -> Property:
    """Return a validator for one member of the subject.

    Violations of the member gain ``key`` at the front of their path.
    """
    return Property(key, validator)


def length(validator: Any) -> Length:
    """Return a validator for the subject's length."""
    return Length(validator)


def array(validators: Any = None, length_validator: Any = None, rest_validator: Any = None) -> AllOf:
    """Return a validator for lists and tuples.

    Called with a list or tuple, each position has its own validator; the length must
    equal the list's length unless ``length_validator`` says otherwise, and
    ``rest_validator`` covers any elements past the end of the list.
    Called with anything else, it is the validator of every element.

    Args:
        validators: List (or tuple) of positional validators, or a single
            element validator
        length_validator: Validator (or literal) for the number of elements
        rest_validator: Validator for elements past the positional list

    Returns:
        Validator failing fast with ``not_type_a("array")`` for non-sequences
    """
    if not isinstance(validators, (list, tuple)):
        return array(
            [],
            AnyValue() if length_validator is None else length_validator,
            AnyValue() if validators is None else validators,
        )
    if length_validator is None:
        length_validator = len(validators)
    return AllOf([IsArray(), Length(length_validator), Elements(validators, rest_validator)])


def object_(*args: Any) -> AllOf:
    """Return a validator for mappings.

    The mode is chosen by the shape of the arguments. If either of the first
    two is a mapping, they are ``required`` and ``optional`` maps from key to
    validator, and the third is ``allow_strays``. Otherwise they are a key
    validator and a value validator applied to every entry.

    Note that a Mapping passed as a key or value validator therefore selects
    the heterogeneous mode.
    """
    if len(args) > 3:
        raise TypeError(f"object_ takes at most 3 arguments ({len(args)} given)")
    first = args[0] if len(args) > 0 else None
    second = args[1] if len(args) > 1 else None
    if is_mapping(first) or is_mapping(second):
        allow_strays = bool(args[2]) if len(args) > 2 and args[2] is not None else False
        body: Validator = Properties(
            first if is_mapping(first) else None,
            second if is_mapping(second) else None,
            allow_strays,
        )
    else:
        body = Entries(first, second)
    return AllOf([IsObject(), body])
