"""Named constructors for ready-to-use validators.

Example:
    ```python
    from dataknobs_validators import array, integer, object_, string

    person = object_(
        {"name": string(), "age": integer(0, 150)},
        {"tags": array(string())},
    )
    person({"name": "Ada", "age": "old"})
    # (Violation(code=<ViolationCode.NOT_TYPE_A: 'not_type_a'>,
    #            exhibits=('integer',), path=('age',)),)
    ```
"""

from __future__ import annotations

import inspect
from re import Pattern as RegexPattern
from typing import Any

from .base import Validator, Violations
from .combinators import AllOf, euphemize
from .primitives import AnyValue, Bounds, FiniteNumber, PatternMatch, SafeInteger, TypeOf
from .structures import LENGTH_KEY, Length, scope
from .subjects import ABSENT


def boolean() -> TypeOf:
    return TypeOf("boolean")


def number(
    minimum: Any = None,
    maximum: Any = None,
    exclusive_minimum: bool = False,
    exclusive_maximum: bool = False,
) -> AllOf:
    """Return a validator for finite numbers, optionally bounded.

    Booleans are not numbers. Bounds are inclusive unless the matching
    exclusive flag is set.
    """
    return AllOf([
        TypeOf("number"),
        FiniteNumber(),
        Bounds(minimum, maximum, exclusive_minimum, exclusive_maximum),
    ])


def integer(minimum: Any = None, maximum: Any = None) -> AllOf:
    """Return a validator for safe integers, optionally bounded (inclusive)."""
    return AllOf([SafeInteger(), number(minimum, maximum)])


def string(argument: Any = None) -> AllOf:
    """Return a validator for strings.

    Args:
        argument: A compiled regular expression the string must contain a
            match for, or a validator (or literal) for the string's length

    Returns:
        Validator failing fast with ``not_type_a("string")`` for non-strings
    """
    if argument is None:
        refinement: Validator = AnyValue()
    elif isinstance(argument, RegexPattern):
        refinement = PatternMatch(argument)
    else:
        refinement = Length(argument)
    return AllOf([TypeOf("string"), refinement])


def arity(function: Any) -> Any:
    """Count the positional parameters of a callable before the first default.

    Returns ABSENT when the callable has no inspectable signature.
    """
    try:
        signature = inspect.signature(function)
    except (TypeError, ValueError):
        return ABSENT
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind not in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            break
        if parameter.default is not parameter.empty:
            break
        count += 1
    return count


class Arity(Validator):
    """Validates the arity of a callable, reported under the ``length`` key."""

    def __init__(self, validator: Validator):
        self.validator = validator

    def check(self, subject: Any) -> Violations:
        return scope(LENGTH_KEY, self.validator(arity(subject)))


def function(length_validator: Any = None) -> AllOf:
    """Return a validator for callables, optionally checking their arity."""
    checked = AnyValue() if length_validator is None else euphemize(length_validator)
    return AllOf([TypeOf("function"), Arity(checked)])
