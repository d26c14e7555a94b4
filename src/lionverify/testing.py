# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Testing utilities for lionverify and downstream projects.

Basic usage:
    from lionverify.testing import create_signup_record, get_sample_rules

    def test_signup_rules():
        problems = validate(create_signup_record(), get_sample_rules())
        assert problems == []

Property-based testing (requires hypothesis):
    from lionverify.testing import record_strategy

    @given(record=record_strategy())
    def test_pure(record):
        assert validate(record, rules) == validate(record, rules)
"""

from __future__ import annotations

from typing import Any

from .rules import Problem

__all__ = (
    "FailingPredicateError",
    "blank_value_strategy",
    "create_signup_record",
    "exploding_validator",
    "get_sample_rules",
    "record_strategy",
    "value_strategy",
)

SAMPLE_KEYS = ("foo", "bar", "password", "confirm", "email", "age")


class FailingPredicateError(RuntimeError):
    """Raised on purpose by test predicates and validators."""

    __test__ = False


def create_signup_record(**overrides: Any) -> dict[str, Any]:
    """A sign-up form record that passes ``get_sample_rules()``.

    Args:
        **overrides: Keys to replace; pass a value of ``...`` to drop a key

    Example:
        >>> record = create_signup_record(confirm="other")
        >>> record["confirm"]
        'other'
    """
    record: dict[str, Any] = {
        "foo": "x",
        "bar": "y",
        "password": "foobarbaz",
        "confirm": "foobarbaz",
        "email": "ocean@example.com",
        "age": 30,
    }
    for key, value in overrides.items():
        if value is ...:
            record.pop(key, None)
        else:
            record[key] = value
    return record


def get_sample_rules() -> list[tuple[Any, ...]]:
    """Rule descriptors for the sign-up record."""
    return [
        ("required", ["foo", "bar", "password"]),
        ("equal", ["password", "confirm"]),
        ("min-length", 8, "password"),
        ("email", "email"),
        ("integer", "age"),
        ("within", 18, 130, "age"),
    ]


def exploding_validator(record: Any) -> list[Problem]:
    """Top-level validator that always raises FailingPredicateError."""
    raise FailingPredicateError(f"exploded on {type(record).__name__}")


try:
    from hypothesis import strategies as st

    def value_strategy() -> st.SearchStrategy[Any]:
        """Values a record may hold: scalars, blanks and small collections.

        Example:
            >>> from hypothesis import given
            >>> @given(value=value_strategy())
            ... def test_value(value): ...
        """
        scalars = st.one_of(
            st.none(),
            st.booleans(),
            st.integers(min_value=-(10**6), max_value=10**6),
            st.floats(allow_nan=False, allow_infinity=False),
            st.text(max_size=12),
            blank_value_strategy(),
        )
        return st.one_of(
            scalars,
            st.lists(scalars, max_size=4),
            st.dictionaries(st.text(max_size=4), scalars, max_size=3),
        )

    def blank_value_strategy() -> st.SearchStrategy[Any]:
        """None or whitespace-only strings."""
        return st.one_of(st.none(), st.text(alphabet=" \t\n\r", max_size=5))

    def record_strategy(keys: tuple[str, ...] = SAMPLE_KEYS) -> st.SearchStrategy[dict[str, Any]]:
        """Records over ``keys`` where any key may be missing."""
        return st.dictionaries(st.sampled_from(keys), value_strategy(), max_size=len(keys))

except ImportError:

    def value_strategy():
        """Hypothesis not installed. Install with: pip install hypothesis"""
        raise ImportError(
            "hypothesis is required for property-based testing strategies. "
            "Install with: pip install hypothesis"
        )

    def blank_value_strategy():
        """Hypothesis not installed. Install with: pip install hypothesis"""
        raise ImportError(
            "hypothesis is required for property-based testing strategies. "
            "Install with: pip install hypothesis"
        )

    def record_strategy(keys: tuple[str, ...] = SAMPLE_KEYS):
        """Hypothesis not installed. Install with: pip install hypothesis"""
        raise ImportError(
            "hypothesis is required for property-based testing strategies. "
            "Install with: pip install hypothesis"
        )
