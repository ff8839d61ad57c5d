"""Default English messages for violation codes.

Messages are derived from a violation's code and exhibits and are never
needed by the validators themselves. Callers wanting other wording can
pass their own templates to :func:`render`.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

from .violation import ViolationCode, exhibit_name

VIOLATION_MESSAGES: dict[ViolationCode, str] = {
    ViolationCode.NOT_TYPE_A: "Not of type {a}.",
    ViolationCode.NOT_WUN_OF: "Not a valid option.",
    ViolationCode.NOT_EQUAL_TO_A: "Not equal to '{a}'.",
    ViolationCode.NOT_FINITE: "Not a finite number.",
    ViolationCode.OUT_OF_BOUNDS: "Out of bounds.",
    ViolationCode.WRONG_PATTERN: "Wrong pattern.",
    ViolationCode.MISSING_PROPERTY_A: "Missing property '{a}'.",
    ViolationCode.UNEXPECTED: "Unexpected.",
    ViolationCode.UNEXPECTED_CLASSIFICATION_A: "Unexpected classification '{a}'.",
    ViolationCode.UNEXPECTED_PROPERTY_A: "Unexpected property '{a}'.",
}

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


def interpolate(template: str, container: Mapping[str, Any]) -> str:
    """Replace ``{name}`` placeholders with values from ``container``.

    A placeholder whose value is missing or cannot be turned into a string
    is left in place.
    """

    def fill(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in container:
            return match.group(0)
        try:
            return str(container[name])
        except Exception:
            return match.group(0)

    return _PLACEHOLDER.sub(fill, template)


def render(
    code: ViolationCode | str,
    exhibits: Sequence[Any] = (),
    templates: Mapping[ViolationCode, str] | None = None,
) -> str:
    """Render the message for a violation code and its exhibits.

    Args:
        code: Violation code
        exhibits: Exhibits in positional order
        templates: Optional replacement for VIOLATION_MESSAGES

    Returns:
        The rendered message
    """
    code = ViolationCode(code)
    template = (templates or VIOLATION_MESSAGES).get(code, code.value)
    container = {exhibit_name(nr): exhibit for nr, exhibit in enumerate(exhibits)}
    return interpolate(template, container)
