"""Total helpers for inspecting arbitrary subjects.

Every function here accepts any Python value and never raises. Validators use
them to read members and classify values without guarding each access.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any


class _Absent:
    """Marker for a member that is not there.

    Plays the part of JavaScript's ``undefined``: it is distinct from every
    legal value, ``None`` included.
    """

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()

# The largest integer a double represents exactly, along with all smaller ones
MAX_SAFE_INTEGER = 2**53 - 1

_SCALAR_TAGS = frozenset({"null", "boolean", "number", "string"})


def is_number(value: Any) -> bool:
    """Return True for real numbers, excluding booleans."""
    return isinstance(value, Real) and not isinstance(value, bool)


def is_finite_number(value: Any) -> bool:
    if not is_number(value):
        return False
    try:
        return math.isfinite(value)
    except (TypeError, ValueError, OverflowError):
        return False


def is_nan(value: Any) -> bool:
    if not is_number(value):
        return False
    try:
        return math.isnan(value)
    except (TypeError, ValueError, OverflowError):
        return False


def is_sequence(value: Any) -> bool:
    """Return True for array-shaped subjects (lists and tuples)."""
    return isinstance(value, (list, tuple))


def is_mapping(value: Any) -> bool:
    """Return True for genuine keyed collections."""
    return isinstance(value, Mapping)


def type_tag(value: Any) -> str:
    """Return the dynamic type tag of a value.

    The tags are ``undefined``, ``null``, ``boolean``, ``number``, ``string``,
    ``function`` and ``object``. Lists and mappings are both ``object``; use
    :func:`is_sequence` or :func:`is_mapping` to tell them apart.
    """
    if value is ABSENT:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"
    return "object"


def own_keys(value: Any) -> list[Any]:
    """Return the keys of a mapping in iteration order, or an empty list."""
    if not is_mapping(value):
        return []
    try:
        return list(value.keys())
    except Exception:
        return []


def read_member(subject: Any, key: Any) -> Any:
    """Read ``subject[key]``, returning ABSENT instead of raising.

    Mappings are read by key. Lists, tuples and strings are read by a
    non-negative integer index. Anything else has no members.
    """
    if is_mapping(subject):
        try:
            return subject[key] if key in subject else ABSENT
        except Exception:
            return ABSENT
    if isinstance(subject, (list, tuple, str)):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(subject):
            return subject[key]
    return ABSENT


def read_length(subject: Any) -> Any:
    """Return ``len(subject)`` for sized subjects, ABSENT otherwise."""
    if subject is ABSENT or subject is None:
        return ABSENT
    try:
        return len(subject)
    except Exception:
        return ABSENT


def strict_equal(left: Any, right: Any) -> bool:
    """Compare two values the way ``===`` does, except that NaN equals NaN.

    Scalars of the same type tag compare by value, so ``0 == -0.0`` holds but
    ``True`` never equals ``1``. Byte strings compare by value too. Everything
    else compares by identity.
    """
    if left is right:
        return True
    if is_nan(left) and is_nan(right):
        return True
    if isinstance(left, bytes) and isinstance(right, bytes):
        return left == right
    left_tag = type_tag(left)
    if left_tag not in _SCALAR_TAGS or left_tag != type_tag(right):
        return False
    try:
        return bool(left == right)
    except Exception:
        return False


def number_text(value: Any) -> str | None:
    """Return the text JavaScript's ``String(n)`` gives for a finite number.

    The shortest round-tripping digits are written in fixed notation while the
    decimal exponent lies in (-7, 21], and in exponential notation outside it,
    so ``1e21`` is ``"1e+21"`` and ``1e-7`` is ``"1e-7"``. Zero of either sign
    is ``"0"``. Returns None for anything that is not a finite number.
    """
    if not is_finite_number(value):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(number))).as_tuple()
    digits = "".join(str(digit) for digit in digit_tuple).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    # The decimal point sits after the first ``point`` digits
    point = exponent + len(digits)
    if len(digits) <= point <= 21:
        return sign + digits + "0" * (point - len(digits))
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits
    shown = point - 1
    mantissa = digits if len(digits) == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if shown >= 0 else '-'}{abs(shown)}"


def key_text(key: Any) -> str | None:
    """Return the string form of a usable classification key.

    Strings are returned unchanged and finite numbers use
    :func:`number_text`, so ``1.0`` and ``1`` are both ``"1"``. Any other
    value yields None.
    """
    if isinstance(key, str):
        return key
    return number_text(key)


def key_string(key: Any) -> str:
    """Return a mapping key as a string, for validating keys as text.

    Numbers use their JavaScript text and other values their ``str()``.
    """
    text = key_text(key)
    if text is not None:
        return text
    try:
        return str(key)
    except Exception:
        return object.__repr__(key)
