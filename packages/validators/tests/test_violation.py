"""Tests for violation records and their messages."""

import pytest

from dataknobs_validators import (
    VIOLATION_MESSAGES,
    Violation,
    ViolationCode,
    interpolate,
    make_violation,
    render,
)


class TestMakeViolation:
    """Test building violations from codes and exhibits."""

    def test_exhibits_are_positional(self):
        """Test exhibits keep call order and get letter names."""
        violation = make_violation("not_type_a", "integer", 7)
        assert violation.code is ViolationCode.NOT_TYPE_A
        assert violation.exhibits == ("integer", 7)
        assert violation.named_exhibits == {"a": "integer", "b": 7}
        assert violation.path == ()

    def test_code_compares_to_name(self):
        """Test the code enum equals its symbolic name."""
        violation = make_violation(ViolationCode.OUT_OF_BOUNDS)
        assert violation.code == "out_of_bounds"
        assert str(violation.code) == "out_of_bounds"

    def test_unknown_code_rejected(self):
        """Test the code set is closed."""
        with pytest.raises(ValueError):
            make_violation("not_a_code")

    def test_violations_are_immutable(self):
        """Test violations cannot be changed after construction."""
        violation = make_violation("unexpected")
        with pytest.raises(AttributeError):
            violation.path = ("x",)

    def test_scoped_prepends_key(self):
        """Test scoping builds a new violation with the key in front."""
        inner = make_violation("not_finite").scoped(2)
        outer = inner.scoped("items")
        assert outer.path == ("items", 2)
        assert inner.path == (2,)

    def test_equality_is_structural(self):
        """Test equal fields make equal violations."""
        assert make_violation("not_equal_to_a", 3) == Violation(ViolationCode.NOT_EQUAL_TO_A, (3,))


class TestSerialization:
    """Test dict conversion of violations."""

    def test_to_dict(self):
        """Test serializing a nested violation."""
        violation = make_violation("missing_property_a", "id").scoped("user")
        assert violation.to_dict() == {
            "code": "missing_property_a",
            "exhibits": ["id"],
            "path": ["user"],
            "message": "Missing property 'id'.",
        }

    def test_from_dict(self):
        """Test restoring a violation from a dict."""
        data = {"code": "not_type_a", "exhibits": ["array"], "path": ["tags", 0]}
        violation = Violation.from_dict(data)
        assert violation == Violation(ViolationCode.NOT_TYPE_A, ("array",), ("tags", 0))


class TestMessages:
    """Test rendering messages from codes and exhibits."""

    def test_every_code_has_a_template(self):
        """Test the templates cover the closed code set."""
        assert set(VIOLATION_MESSAGES) == set(ViolationCode)

    def test_render_substitutes_exhibits(self):
        """Test placeholders are filled from exhibits."""
        assert render("not_type_a", ["string"]) == "Not of type string."
        assert render("unexpected_property_a", ["extra"]) == "Unexpected property 'extra'."
        assert render("not_wun_of") == "Not a valid option."

    def test_missing_exhibit_left_in_place(self):
        """Test a placeholder without an exhibit stays as written."""
        assert render("not_equal_to_a") == "Not equal to '{a}'."

    def test_unprintable_exhibit_left_in_place(self):
        """Test an exhibit whose str() raises does not break rendering."""

        class Unprintable:
            def __str__(self):
                raise RuntimeError("no")

        assert interpolate("Got {a}.", {"a": Unprintable()}) == "Got {a}."

    def test_custom_templates(self):
        """Test rendering with replacement templates."""
        templates = {ViolationCode.NOT_FINITE: "Must be finite"}
        assert render("not_finite", (), templates) == "Must be finite"

    def test_violation_message_and_describe(self):
        """Test the message properties on a violation."""
        violation = make_violation("not_type_a", "integer").scoped("age")
        assert violation.message == "Not of type integer."
        assert violation.describe() == "age: Not of type integer."
