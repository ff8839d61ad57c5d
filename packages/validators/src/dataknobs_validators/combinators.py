"""Validators composed from other validators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .base import PASS, FunctionValidator, Validator, Violations, fail
from .primitives import Literal
from .subjects import ABSENT, key_text
from .violation import ViolationCode

logger = logging.getLogger(__name__)


def euphemize(value: Any) -> Validator:
    """Resolve a validator-or-literal argument into a validator.

    Validators are returned unchanged, other callables are adapted with
    FunctionValidator, and any other value becomes a Literal.
    """
    if isinstance(value, Validator):
        return value
    if callable(value):
        return FunctionValidator(value)
    return Literal(value)


class AllOf(Validator):
    """All validators must pass (AND logic)."""

    def __init__(self, validators: Iterable[Any], exhaustive: bool = False):
        """Initialize with an ordered list of validators.

        Args:
            validators: Validators (or literals) applied in order
            exhaustive: If False, stop at the first failing validator and
                return only its violations. If True, run every validator and
                concatenate all of their violations.
        """
        self.validators = tuple(euphemize(validator) for validator in validators)
        self.exhaustive = exhaustive

    def check(self, subject: Any) -> Violations:
        """Check the validators in order."""
        collected = PASS
        for validator in self.validators:
            violations = validator(subject)
            if violations and not self.exhaustive:
                return violations
            collected += violations
        return collected

    def __repr__(self) -> str:
        return f"AllOf({list(self.validators)!r}, exhaustive={self.exhaustive})"


class WunOf(Validator):
    """At least one validator must pass (OR logic).

    When every validator fails, the result starts with a ``not_wun_of``
    violation followed by each validator's violations, in order.
    """

    def __init__(self, validators: Iterable[Any]):
        """Initialize with the alternatives.

        Args:
            validators: Validators (or literals) tried in order
        """
        self.validators = tuple(euphemize(validator) for validator in validators)

    def check(self, subject: Any) -> Violations:
        """Check if any validator passes."""
        attempted = PASS
        for validator in self.validators:
            violations = validator(subject)
            if not violations:
                return PASS
            attempted += violations
        return fail(ViolationCode.NOT_WUN_OF) + attempted

    def __repr__(self) -> str:
        return f"WunOf({list(self.validators)!r})"


class Classified(Validator):
    """Dispatches to one validator chosen by a classifier.

    The classifier maps the subject to a key. Usable keys are strings and
    finite numbers; they select the validator registered under the key's
    string form. Any other outcome, including the classifier raising, is
    reported as ``unexpected_classification_a`` without trying the others.
    """

    def __init__(self, validators_by_key: Mapping[Any, Any], classifier: Callable[[Any], Any]):
        """Initialize with keyed validators and a classifier.

        Args:
            validators_by_key: Validators (or literals) by classification key;
                keys that are not strings or finite numbers are ignored
            classifier: Function returning the key for a subject
        """
        self.validators_by_key: dict[str, Validator] = {}
        for key, validator in validators_by_key.items():
            text = key_text(key)
            if text is not None:
                self.validators_by_key[text] = euphemize(validator)
        self.classifier = classifier

    def classify(self, subject: Any) -> Any:
        """Return the subject's key, or ABSENT if the classifier raises."""
        try:
            return self.classifier(subject)
        except Exception as e:
            logger.debug(f"Classifier raised, subject is unclassifiable: {e!r}")
            return ABSENT

    def check(self, subject: Any) -> Violations:
        """Check the subject with the validator for its key."""
        key = self.classify(subject)
        text = key_text(key)
        if text is not None and text in self.validators_by_key:
            return self.validators_by_key[text](subject)
        return fail(ViolationCode.UNEXPECTED_CLASSIFICATION_A, key)

    def __repr__(self) -> str:
        return f"Classified({sorted(self.validators_by_key)!r})"


class Not(Validator):
    """Negates a validator."""

    def __init__(self, validator: Any):
        """Initialize with the validator to negate.

        Args:
            validator: Validator (or literal) that must fail
        """
        self.validator = euphemize(validator)

    def check(self, subject: Any) -> Violations:
        """Check if the validator fails (negation)."""
        if self.validator(subject):
            return PASS
        return fail(ViolationCode.UNEXPECTED)

    def __repr__(self) -> str:
        return f"Not({self.validator!r})"


def all_of(validators: Iterable[Any], exhaustive: bool = False) -> AllOf:
    """Return a validator requiring every validator to pass.

    Args:
        validators: Validators (or literals) applied in order
        exhaustive: Report every failure instead of only the first
    """
    return AllOf(validators, exhaustive)


def wun_of(
    validators: Iterable[Any] | Mapping[Any, Any],
    classifier: Callable[[Any], Any] | None = None,
) -> Validator:
    """Return a validator requiring the subject to match one of several.

    Args:
        validators: Validators (or literals) to try in order. With a
            classifier, a mapping from classification key to validator.
        classifier: Optional function returning the key of the validator
            that applies to the subject

    Returns:
        WunOf, or Classified when a classifier is given
    """
    if classifier is None:
        return WunOf(validators)
    if not isinstance(validators, Mapping):
        raise TypeError("wun_of with a classifier needs a mapping of validators")
    return Classified(validators, classifier)


def not_(validator: Any) -> Not:
    """Return a validator that passes exactly when ``validator`` fails."""
    return Not(validator)
