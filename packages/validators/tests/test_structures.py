"""Tests for property scoping, sequence and keyed collection validators."""

import pytest

from dataknobs_validators import (
    ABSENT,
    Validator,
    ViolationCode,
    any_,
    array,
    bounds,
    integer,
    length,
    literal,
    make_violation,
    object_,
    pattern,
    property_,
    string,
)


class Recording(Validator):
    """Validator that remembers the subjects it was called with."""

    def __init__(self, validator=None):
        self.validator = validator or any_()
        self.calls = []

    def check(self, subject):
        self.calls.append(subject)
        return self.validator(subject)


def codes(violations):
    return [violation.code for violation in violations]


class TestProperty:
    """Test scoping a validator to one member."""

    def test_path_gains_key(self):
        """Test a failing member is located by its key."""
        violations = property_("age", integer())({"age": "old"})
        assert len(violations) == 1
        assert violations[0].path == ("age",)
        assert violations[0].code == ViolationCode.NOT_TYPE_A
        assert violations[0].exhibits == ("integer",)

    def test_passing_member(self):
        """Test a valid member yields nothing."""
        assert property_("age", integer())({"age": 30}) == ()

    def test_nested_paths_are_root_to_leaf(self):
        """Test each level prepends exactly one key."""
        validator = property_("a", property_(0, property_("b", string())))
        violations = validator({"a": [{"b": 5}]})
        assert violations[0].path == ("a", 0, "b")

    def test_absent_member_is_read_safely(self):
        """Test reading missing members of any subject never raises."""
        validator = property_("name", literal(ABSENT))
        for subject in ({}, None, 5, [], "text", ABSENT):
            assert validator(subject) == ()

    def test_literal_argument(self):
        """Test a bare value scoped to a member."""
        assert property_(1, "b")(["a", "b"]) == ()
        assert property_(1, "b")(["a", "c"]) == (make_violation("not_equal_to_a", "b").scoped(1),)

    def test_length(self):
        """Test validating the length under the length key."""
        assert length(bounds(1, 3))([1]) == ()
        assert length(bounds(1, 3))([]) == (make_violation("out_of_bounds").scoped("length"),)
        assert length(2)(None) == (make_violation("not_equal_to_a", 2).scoped("length"),)


class TestArray:
    """Test sequence validators."""

    def test_not_a_sequence(self):
        """Test non-sequences fail fast with a single violation."""
        expected = (make_violation("not_type_a", "array"),)
        for subject in ("abc", {"0": 1}, None, 3, ABSENT):
            assert array(string())(subject) == expected
            assert array([string()])(subject) == expected

    def test_tuples_are_sequences(self):
        """Test tuples validate like lists."""
        assert array([string(), integer()])(("a", 1)) == ()

    def test_homogeneous_elements(self):
        """Test every bad element is reported with its index."""
        violations = array(integer())([1, "x", 2.5])
        assert [violation.path for violation in violations] == [(1,), (2,)]
        assert codes(violations) == [ViolationCode.NOT_TYPE_A] * 2

    def test_homogeneous_length(self):
        """Test a length validator on a homogeneous array."""
        validator = array(string(), bounds(1))
        assert validator(["a"]) == ()
        assert validator([]) == (make_violation("out_of_bounds").scoped("length"),)

    def test_positional_default_length(self):
        """Test the length defaults to the number of positions."""
        validator = array([string(), integer()])
        assert validator(["a", 1]) == ()
        violations = validator(["a"])
        assert violations == (make_violation("not_equal_to_a", 2).scoped("length"),)

    def test_length_failure_skips_elements(self):
        """Test element checks do not run after a length failure."""
        element = Recording()
        assert codes(array([element])([1, 2])) == [ViolationCode.NOT_EQUAL_TO_A]
        assert element.calls == []

    def test_cycles_positional_validators(self):
        """Test a short positional list is reused cyclically."""
        first = Recording()
        second = Recording()
        assert array([first, second], any_())(["x", "y", "z"]) == ()
        assert first.calls == ["x", "z"]
        assert second.calls == ["y"]

    def test_cycling_reports_indexes(self):
        """Test cycled validators report the real index."""
        violations = array([string(), integer()], any_())(["a", 1, 2, "b"])
        assert [violation.path for violation in violations] == [(2,), (3,)]

    def test_exact_length_never_uses_rest(self):
        """Test the rest validator only sees elements past the positions."""
        rest = Recording()
        assert array([any_(), any_()], None, rest)(["x", "y"]) == ()
        assert rest.calls == []

    def test_rest_validator(self):
        """Test elements past the positions use the rest validator."""
        rest = Recording(integer())
        validator = array([string()], any_(), rest)
        violations = validator(["a", 1, "b"])
        assert rest.calls == [1, "b"]
        assert [violation.path for violation in violations] == [(2,)]

    def test_no_positions_and_no_rest(self):
        """Test extra elements with nothing to validate them fail."""
        violations = array([], any_())([1])
        assert violations == (make_violation("not_equal_to_a", ABSENT).scoped(0),)
        assert array([])([]) == ()

    def test_literal_positions(self):
        """Test bare values as positional validators."""
        validator = array(["point", integer(), integer()])
        assert validator(["point", 1, 2]) == ()
        assert validator(["line", 1, 2]) == (make_violation("not_equal_to_a", "point").scoped(0),)

    def test_nested_structures(self):
        """Test paths through arrays of objects."""
        validator = array(object_({"id": string()}))
        violations = validator([{"id": "a"}, {"id": 1}])
        assert violations == (make_violation("not_type_a", "string").scoped("id").scoped(1),)


class TestHeterogeneousObject:
    """Test mappings with per-key validators."""

    def test_missing_required(self):
        """Test a missing required key is reported, a missing optional is not."""
        violations = object_({"id": string()}, {"note": string()})({})
        assert violations == (make_violation("missing_property_a", "id"),)

    def test_stray_keys(self):
        """Test unknown keys are reported unless strays are allowed."""
        subject = {"id": 1, "extra": 2}
        assert object_({"id": any_()})(subject) == (make_violation("unexpected_property_a", "extra"),)
        assert object_({"id": any_()}, None, True)(subject) == ()

    def test_values_are_scoped(self):
        """Test invalid values are located by key."""
        violations = object_({"age": integer(0)})({"age": -1})
        assert violations == (make_violation("out_of_bounds").scoped("age"),)

    def test_everything_reported_in_order(self):
        """Test missing, required, optional and stray problems together."""
        validator = object_({"a": string(), "b": string()}, {"c": integer()})
        violations = validator({"b": 1, "c": "x", "z": 0})
        assert codes(violations) == [
            ViolationCode.MISSING_PROPERTY_A,
            ViolationCode.NOT_TYPE_A,
            ViolationCode.NOT_TYPE_A,
            ViolationCode.UNEXPECTED_PROPERTY_A,
        ]
        assert [violation.path for violation in violations] == [(), ("b",), ("c",), ()]
        assert violations[0].exhibits == ("a",)
        assert violations[3].exhibits == ("z",)

    def test_optional_none_is_validated(self):
        """Test None is a present value, unlike ABSENT."""
        validator = object_({}, {"note": string()})
        assert validator({"note": None}) == (make_violation("not_type_a", "string").scoped("note"),)
        assert validator({"note": ABSENT}) == ()
        assert validator({}) == ()

    def test_required_none_is_present(self):
        """Test a required key holding None is not missing."""
        validator = object_({"id": any_()})
        assert validator({"id": None}) == ()

    def test_literal_values(self):
        """Test bare values as per-key validators."""
        validator = object_({"kind": "circle", "radius": integer()})
        assert validator({"kind": "circle", "radius": 1}) == ()
        assert validator({"kind": "square", "radius": 1}) == (
            make_violation("not_equal_to_a", "circle").scoped("kind"),
        )

    def test_optional_map_alone_selects_mode(self):
        """Test a mapping in second position also selects per-key mode."""
        validator = object_(None, {"note": string()})
        assert validator({"other": 1}) == (make_violation("unexpected_property_a", "other"),)


class TestHomogeneousObject:
    """Test mappings validated entry by entry."""

    def test_no_arguments_accepts_any_mapping(self):
        """Test object_() only checks the subject is a mapping."""
        assert object_()({"a": 1, 2: [3]}) == ()

    def test_not_a_mapping(self):
        """Test non-mappings fail fast."""
        expected = (make_violation("not_type_a", "object"),)
        for subject in ([], None, "x", 0, ABSENT):
            assert object_()(subject) == expected
            assert object_({"id": string()})(subject) == expected

    def test_values_checked(self):
        """Test every value is validated and located."""
        violations = object_(string(), integer())({"a": 1, "b": "x", "c": 2.5})
        assert [violation.path for violation in violations] == [("b",), ("c",)]

    def test_keys_checked(self):
        """Test keys are validated at the subject's level."""
        validator = object_(pattern("^[a-z]+$"))
        assert validator({"ok": 1}) == ()
        violations = validator({"ok": 1, "Bad": 2, "1": 3})
        assert violations == (make_violation("wrong_pattern"), make_violation("wrong_pattern"))

    def test_key_then_value_per_entry(self):
        """Test each entry reports its key problem before its value problem."""
        validator = object_(string(1), integer())
        violations = validator({"ab": "x", "c": 1})
        assert codes(violations) == [ViolationCode.NOT_EQUAL_TO_A, ViolationCode.NOT_TYPE_A]
        assert violations[0].path == ("length",)
        assert violations[1].path == ("ab",)

    def test_keys_checked_as_strings(self):
        """Test non-string keys are validated by their string form."""
        assert object_(string(), any_())({1: "x"}) == ()
        assert object_(string(1))({2.0: "x"}) == ()
        validator = object_(pattern("^[0-9]+$"), string())
        assert validator({12: "x"}) == ()
        assert validator({12: 3}) == (make_violation("not_type_a", "string").scoped(12),)

    def test_too_many_arguments(self):
        """Test more than three arguments is a programming error."""
        with pytest.raises(TypeError):
            object_({}, {}, False, None)
