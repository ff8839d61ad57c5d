"""Runtime structural validation with composable validators.

A validator is a pure function from a subject to a tuple of violations; the
tuple is empty exactly when the subject is valid. Validators are built from
a few primitives and composed with combinators:

- **Primitives**: type_of, literal, finite_number, bounds, safe_integer, pattern
- **Combinators**: all_of, wun_of (with optional classifier), not_, any_
- **Structures**: property_, array, object_
- **Named constructors**: boolean, number, integer, string, function

Each violation carries a code, positional exhibits and a path into the
subject, so nested failures can be located.

Example:
    ```python
    from dataknobs_validators import integer, object_, string, validate

    user = object_({"id": string(), "age": integer(0, 150)})
    result = validate(user, {"id": "u1", "age": "old"})
    result.valid
    # False
    result.errors
    # ['age: Not of type integer.']
    ```
"""

from .base import FunctionValidator, Validator, Violations
from .combinators import AllOf, Classified, Not, WunOf, all_of, euphemize, not_, wun_of
from .exceptions import SubjectValidationError, ValidatorConfigurationError
from .factory import ValidatorFactory, validator_factory
from .messages import VIOLATION_MESSAGES, interpolate, render
from .primitives import (
    AnyValue,
    Bounds,
    FiniteNumber,
    Literal,
    PatternMatch,
    Refuse,
    SafeInteger,
    TypeOf,
    any_,
    bounds,
    finite_number,
    literal,
    none,
    pattern,
    safe_integer,
    type_of,
)
from .result import ValidationResult, assert_valid, validate
from .structures import Length, Property, array, length, object_, property_
from .subjects import ABSENT, type_tag
from .validators import boolean, function, integer, number, string
from .violation import Violation, ViolationCode, make_violation

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Violations
    "Violation",
    "ViolationCode",
    "make_violation",
    "VIOLATION_MESSAGES",
    "interpolate",
    "render",
    # Subjects
    "ABSENT",
    "type_tag",
    # Validator types
    "Validator",
    "Violations",
    "FunctionValidator",
    "TypeOf",
    "Literal",
    "FiniteNumber",
    "Bounds",
    "SafeInteger",
    "PatternMatch",
    "AnyValue",
    "Refuse",
    "AllOf",
    "WunOf",
    "Classified",
    "Not",
    "Property",
    "Length",
    # Primitives
    "type_of",
    "literal",
    "finite_number",
    "bounds",
    "safe_integer",
    "pattern",
    "any_",
    "none",
    # Combinators
    "euphemize",
    "all_of",
    "wun_of",
    "not_",
    # Structures
    "property_",
    "length",
    "array",
    "object_",
    # Named constructors
    "boolean",
    "number",
    "integer",
    "string",
    "function",
    # Results
    "ValidationResult",
    "validate",
    "assert_valid",
    # Errors
    "SubjectValidationError",
    "ValidatorConfigurationError",
    # Configuration
    "ValidatorFactory",
    "validator_factory",
]
