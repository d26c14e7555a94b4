# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for guard, make_validator, equal and combine."""

import logging

import pytest

from lionverify.rules import Problem, as_problems, combine, guard, make_validator, seqify
from lionverify.rules.cross import equal
from lionverify.testing import FailingPredicateError, exploding_validator
from lionverify.types import Absent


def _boom(value):
    raise FailingPredicateError("boom")


class TestSeqify:
    """Tests for key normalization."""

    def test_bare_key(self):
        """Test a bare key becomes a one-element tuple."""
        assert seqify("a") == ("a",)

    def test_list_and_tuple(self):
        """Test lists and tuples keep their order."""
        assert seqify(["b", "a"]) == ("b", "a")
        assert seqify(("b", "a")) == ("b", "a")

    def test_tuple_key_is_a_sequence(self):
        """Test tuples are treated as key sequences, not as one key."""
        assert seqify((1, 2)) == (1, 2)


class TestGuard:
    """Tests for the fail-closed predicate wrapper."""

    def test_passes_through_result(self):
        """Test guard returns the predicate's verdict as bool."""
        assert guard(lambda v: v > 1)(2) is True
        assert guard(lambda v: v > 1)(0) is False

    def test_exception_means_bad(self):
        """Test a raising predicate reports the value as bad."""
        assert guard(_boom)("anything") is True

    def test_type_error_means_bad(self):
        """Test unguarded comparisons on wrong types count as bad."""
        assert guard(lambda v: v > 1)("not a number") is True

    def test_absorbed_exception_logged(self, caplog):
        """Test absorbed exceptions are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="lionverify.rules.base"):
            guard(_boom)(1)
        assert "FailingPredicateError" in caplog.text

    def test_keyboard_interrupt_not_absorbed(self):
        """Test non-Exception BaseExceptions still propagate."""

        def interrupt(value):
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            guard(interrupt)(1)


class TestMakeValidator:
    """Tests for key-scoped validators."""

    def test_success_returns_empty_list(self):
        """Test all-good keys return []."""
        v = make_validator(["a", "b"], lambda x: x is Absent, "missing")
        assert v({"a": 1, "b": 2}) == []

    def test_collects_bad_keys_in_target_order(self):
        """Test bad keys keep target order, not record order."""
        v = make_validator(["c", "a", "b"], lambda x: x is Absent, "missing")
        assert v({"b": 1}) == [Problem(keys=("c", "a"), msg="missing")]

    def test_bare_key(self):
        """Test a bare key target."""
        v = make_validator("a", lambda x: x is Absent, "missing")
        assert v({}) == [Problem(keys=("a",), msg="missing")]

    def test_predicate_receives_absent_sentinel(self):
        """Test missing keys reach the predicate as Absent."""
        seen = []
        v = make_validator(["a", "b"], lambda x: seen.append(x), "msg")
        v({"b": None})
        assert seen == [Absent, None]

    def test_structured_message_returned_verbatim(self):
        """Test a mapping message replaces the default problem shape."""
        custom = {"code": "E42", "fields": ["other"]}
        v = make_validator(["a", "b"], lambda x: x is Absent, custom)
        assert v({"a": 1}) == [custom]
        assert v({"a": 1})[0] is custom

    def test_structured_problem_returned_verbatim(self):
        """Test a Problem message overrides the reported keys."""
        custom = Problem(keys=("x",), msg="custom")
        v = make_validator(["a", "b"], lambda x: True, custom)
        assert v({}) == [custom]

    def test_structured_message_not_returned_on_success(self):
        """Test structured messages only appear on failure."""
        v = make_validator("a", lambda x: False, {"code": "E1"})
        assert v({}) == []

    def test_raising_predicate_fails_key(self):
        """Test predicate exceptions become problems, not crashes."""
        v = make_validator(["a", "b"], lambda x: int(x) < 0, "bad")
        assert v({"a": "12", "b": "twelve"}) == [Problem(keys=("b",), msg="bad")]

    def test_never_raises_for_any_record(self):
        """Test odd records do not crash the validator."""
        v = make_validator("a", lambda x: x is Absent, "missing")
        assert v(None) == [Problem(keys=("a",), msg="missing")]
        assert v(["a"]) == [Problem(keys=("a",), msg="missing")]

    def test_record_not_mutated(self):
        """Test validators do not modify the record."""
        record = {"a": " "}
        make_validator(["a", "b"], lambda x: True, "bad")(record)
        assert record == {"a": " "}

    def test_reusable_across_records(self):
        """Test one validator gives independent results per record."""
        v = make_validator("a", lambda x: x is Absent, "missing")
        assert v({}) != []
        assert v({"a": 1}) == []
        assert v({}) == [Problem(keys=("a",), msg="missing")]


class TestEqual:
    """Tests for the cross-key equal rule."""

    def test_equal_values_pass(self):
        """Test equal values pass."""
        assert equal(["a", "b"])({"a": 1, "b": 1}) == []

    def test_unequal_values_fail_with_all_keys(self):
        """Test the problem references every given key."""
        assert equal(["a", "b", "c"])({"a": 1, "b": 1, "c": 2}) == [
            Problem(keys=("a", "b", "c"), msg="must be equal")
        ]

    def test_absent_reads_as_none(self):
        """Test a missing key is compared as None, not skipped."""
        assert equal(["a", "b"])({"a": 1}) == [Problem(keys=("a", "b"), msg="must be equal")]

    def test_all_absent_passes(self):
        """Test all missing keys are equal (all None)."""
        assert equal(["a", "b"])({}) == []

    def test_absent_equals_explicit_none(self):
        """Test missing and None are indistinguishable for equal."""
        assert equal(["a", "b"])({"a": None}) == []

    def test_single_key(self):
        """Test degenerate single key always passes."""
        assert equal("a")({"a": 5}) == []

    def test_custom_and_structured_message(self):
        """Test string and mapping messages."""
        assert equal(["a", "b"], "mismatch")({"a": 1}) == [
            Problem(keys=("a", "b"), msg="mismatch")
        ]
        custom = {"keys": ["b"], "msg": "confirm does not match"}
        assert equal(["a", "b"], custom)({"a": 1}) == [custom]

    def test_raising_eq_counts_as_unequal(self):
        """Test comparison errors fail the rule instead of raising."""

        class Weird:
            def __eq__(self, other):
                raise FailingPredicateError("no comparing")

        assert equal(["a", "b"])({"a": Weird(), "b": 1}) == [
            Problem(keys=("a", "b"), msg="must be equal")
        ]

    def test_requires_a_key(self):
        """Test an empty key list is rejected at construction."""
        with pytest.raises(ValueError):
            equal([])


class TestAsProblems:
    """Tests for validator result normalization."""

    def test_none_and_empty(self):
        """Test None and empty results normalize to []."""
        assert as_problems(None) == []
        assert as_problems([]) == []
        assert as_problems(()) == []

    def test_single_problem_wrapped(self):
        """Test single problems become one-element lists."""
        p = Problem(keys=("a",), msg="x")
        assert as_problems(p) == [p]
        assert as_problems({"msg": "whole record"}) == [{"msg": "whole record"}]

    def test_iterables_listed(self):
        """Test generators and tuples are listed in order."""
        p1, p2 = Problem(msg="1"), Problem(msg="2")
        assert as_problems(iter([p1, p2])) == [p1, p2]


class TestCombine:
    """Tests for the combinator."""

    def test_concatenates_in_validator_order(self):
        """Test results keep validator order."""
        first = make_validator("a", lambda x: True, "first")
        second = make_validator("b", lambda x: True, "second")
        assert combine(second, first)({}) == [
            Problem(keys=("b",), msg="second"),
            Problem(keys=("a",), msg="first"),
        ]

    def test_discards_empty_results(self):
        """Test None and [] results vanish."""
        passing = make_validator("a", lambda x: False, "never")
        assert combine(passing, lambda r: None, lambda r: [])({}) == []

    def test_never_short_circuits(self):
        """Test every validator runs even after failures."""
        calls = []

        def tracker(name):
            def v(record):
                calls.append(name)
                return [Problem(msg=name)]

            return v

        result = combine(tracker("one"), tracker("two"), tracker("three"))({})
        assert calls == ["one", "two", "three"]
        assert [p.msg for p in result] == ["one", "two", "three"]

    def test_custom_validator_single_problem(self):
        """Test a custom validator returning one mapping is wrapped."""
        combined = combine(lambda r: {"msg": "whole record"})
        assert combined({}) == [{"msg": "whole record"}]

    def test_user_validator_exception_propagates(self):
        """Test top-level validator exceptions are not swallowed."""
        combined = combine(make_validator("a", lambda x: True, "bad"), exploding_validator)
        with pytest.raises(FailingPredicateError):
            combined({})

    def test_no_validators(self):
        """Test combining nothing validates everything."""
        assert combine()({"a": 1}) == []

    def test_rejects_non_callables(self):
        """Test non-callables are rejected when combining."""
        with pytest.raises(TypeError):
            combine("required")
