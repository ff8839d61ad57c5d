"""Violation records produced by validators.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ViolationCode(str, Enum):
    """The closed set of violation codes.

    The suffix ``_a`` marks codes whose message refers to the first exhibit.
    """

    NOT_TYPE_A = "not_type_a"
    NOT_WUN_OF = "not_wun_of"
    NOT_EQUAL_TO_A = "not_equal_to_a"
    NOT_FINITE = "not_finite"
    OUT_OF_BOUNDS = "out_of_bounds"
    WRONG_PATTERN = "wrong_pattern"
    MISSING_PROPERTY_A = "missing_property_a"
    UNEXPECTED = "unexpected"
    UNEXPECTED_CLASSIFICATION_A = "unexpected_classification_a"
    UNEXPECTED_PROPERTY_A = "unexpected_property_a"

    def __str__(self) -> str:
        return self.value


def exhibit_name(position: int) -> str:
    """Return the canonical name of the exhibit at ``position`` (a, b, c...)."""
    return chr(ord("a") + position)


@dataclass(frozen=True)
class Violation:
    """A single failed constraint.

    Attributes:
        code: Which constraint failed
        exhibits: Values relevant to the failure, in positional order
        path: Keys leading from the subject to the offending member. Empty
            when the subject itself failed.
    """

    code: ViolationCode
    exhibits: tuple[Any, ...] = ()
    path: tuple[Any, ...] = ()

    @property
    def named_exhibits(self) -> dict[str, Any]:
        """Exhibits keyed by their canonical names."""
        return {exhibit_name(nr): exhibit for nr, exhibit in enumerate(self.exhibits)}

    @property
    def message(self) -> str:
        """Human readable message in the default English templates."""
        from .messages import render

        return render(self.code, self.exhibits)

    def describe(self) -> str:
        """Message prefixed with the dotted path, when there is one."""
        if not self.path:
            return self.message
        location = ".".join(str(key) for key in self.path)
        return f"{location}: {self.message}"

    def scoped(self, key: Any) -> Violation:
        """Return a copy of this violation one level deeper, under ``key``."""
        return Violation(self.code, self.exhibits, (key,) + self.path)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "exhibits": list(self.exhibits),
            "path": list(self.path),
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Violation:
        return cls(
            code=ViolationCode(data["code"]),
            exhibits=tuple(data.get("exhibits", ())),
            path=tuple(data.get("path", ())),
        )


def make_violation(code: ViolationCode | str, *exhibits: Any) -> Violation:
    """Build a violation from a code and its positional exhibits.

    Args:
        code: A ViolationCode or its symbolic name
        *exhibits: Values named a, b, c... in call order

    Returns:
        Violation at the root of the subject

    Raises:
        ValueError: If ``code`` is not a known violation code
    """
    return Violation(ViolationCode(code), tuple(exhibits))
