# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Numeric range rules and the Luhn checksum.

Range rules skip absent and None values and fail anything that is not a
number. Booleans are not numbers here.
"""

from __future__ import annotations

import re
from numbers import Number
from typing import Any

from lionverify.types import Absent

from .base import make_validator
from .models import ValidatorFn
from .presence import is_blank

__all__ = (
    "at_least",
    "at_most",
    "is_luhn",
    "is_number",
    "luhn",
    "max_val",
    "min_val",
    "negative",
    "positive",
    "within",
)

_NON_DIGITS = re.compile(r"[^0-9]")


def is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _skipped(value: Any) -> bool:
    return value is Absent or value is None


def min_val(minimum: Any, keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: not _skipped(v) and (not is_number(v) or minimum > v),
        msg if msg is not None else f"cannot be less than {minimum}",
    )


at_least = min_val


def max_val(maximum: Any, keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: not _skipped(v) and (not is_number(v) or maximum < v),
        msg if msg is not None else f"cannot be more than {maximum}",
    )


at_most = max_val


def within(minimum: Any, maximum: Any, keys: Any, msg: Any = None) -> ValidatorFn:
    """Inclusive range: ``minimum <= value <= maximum``."""
    return make_validator(
        keys,
        lambda v: not _skipped(v) and (not is_number(v) or minimum > v or maximum < v),
        msg if msg is not None else f"must be within {minimum} and {maximum}",
    )


def positive(keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: not _skipped(v) and (not is_number(v) or not v > 0),
        msg if msg is not None else "must be a positive number",
    )


def negative(keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: not _skipped(v) and (not is_number(v) or not v < 0),
        msg if msg is not None else "must be a negative number",
    )


def is_luhn(value: Any) -> bool:
    """Luhn checksum over the digits of ``value``.

    Strings may contain separators ("4111-1111 1111 1111"); non-digits are
    dropped. Other values are checked on ``str(value)`` and raise ValueError
    if that contains anything but digits. No digits at all is not valid.
    """
    if isinstance(value, str):
        text = _NON_DIGITS.sub("", value)
    elif isinstance(value, bool):
        raise TypeError("Cannot checksum a bool")
    else:
        text = str(value)
    if not text:
        return False

    total = 0
    for idx, char in enumerate(reversed(text), start=1):
        d = int(char)
        if idx % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return total % 10 == 0


def luhn(keys: Any, msg: Any = None) -> ValidatorFn:
    """Card-like numeric identifiers must pass the Luhn checksum; blanks are skipped."""
    return make_validator(
        keys,
        lambda v: not _skipped(v) and not is_blank(v) and not is_luhn(v),
        msg if msg is not None else "number is not valid",
    )
