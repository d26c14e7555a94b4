# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Type rules, singular and plural.

Singular rules skip absent and None values. Plural rules skip absent and
None values, fail anything that is not a list or tuple, and otherwise
require every element to pass the singular check. Values are never coerced.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from typing import Any

from lionverify.types import Absent

from .base import make_validator
from .models import ValidatorFn

__all__ = (
    "bool_",
    "bools",
    "decimal",
    "decimals",
    "floating_point",
    "floating_points",
    "integer",
    "integers",
    "is_integer",
    "string",
    "strings",
)

TypeCheck = Callable[[Any], bool]


def is_integer(value: Any) -> bool:
    """int, but not bool."""
    return isinstance(value, int) and not isinstance(value, bool)


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def _is_float(value: Any) -> bool:
    return isinstance(value, float)


def _is_decimal(value: Any) -> bool:
    return isinstance(value, Decimal)


def _singular(check: TypeCheck, keys: Any, msg: Any) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: v is not Absent and v is not None and not check(v),
        msg,
    )


def _plural(check: TypeCheck, keys: Any, msg: Any) -> ValidatorFn:
    def bad(v: Any) -> bool:
        if v is Absent or v is None:
            return False
        if not isinstance(v, (list, tuple)):
            return True
        return not all(check(item) for item in v)

    return make_validator(keys, bad, msg)


def string(keys: Any, msg: Any = None) -> ValidatorFn:
    return _singular(_is_string, keys, msg if msg is not None else "must be a string")


def strings(keys: Any, msg: Any = None) -> ValidatorFn:
    return _plural(_is_string, keys, msg if msg is not None else "must be strings")


def bool_(keys: Any, msg: Any = None) -> ValidatorFn:
    return _singular(_is_bool, keys, msg if msg is not None else "must be true or false")


def bools(keys: Any, msg: Any = None) -> ValidatorFn:
    return _plural(_is_bool, keys, msg if msg is not None else "must be all true or false")


def integer(keys: Any, msg: Any = None) -> ValidatorFn:
    return _singular(is_integer, keys, msg if msg is not None else "must be a number")


def integers(keys: Any, msg: Any = None) -> ValidatorFn:
    return _plural(is_integer, keys, msg if msg is not None else "must be numbers")


def floating_point(keys: Any, msg: Any = None) -> ValidatorFn:
    return _singular(_is_float, keys, msg if msg is not None else "must be a decimal number")


def floating_points(keys: Any, msg: Any = None) -> ValidatorFn:
    return _plural(_is_float, keys, msg if msg is not None else "must be decimal numbers")


def decimal(keys: Any, msg: Any = None) -> ValidatorFn:
    """Exact decimal (``decimal.Decimal``); floats do not qualify."""
    return _singular(_is_decimal, keys, msg if msg is not None else "must be a decimal number")


def decimals(keys: Any, msg: Any = None) -> ValidatorFn:
    return _plural(_is_decimal, keys, msg if msg is not None else "must be decimal numbers")
