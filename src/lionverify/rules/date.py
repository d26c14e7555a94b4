# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Date rules.

A date is any ``datetime.date`` (``datetime.datetime`` included). Comparing
a naive with an aware datetime, or a date with a datetime, raises inside
the predicate and so fails the value.
"""

from __future__ import annotations

from datetime import date as _date
from datetime import datetime
from typing import Any

from lionverify.types import Absent

from .base import make_validator
from .models import ValidatorFn

__all__ = ("after", "before", "date", "dates", "is_date")


def is_date(value: Any) -> bool:
    return isinstance(value, _date)


def _comparable(value: Any, bound: Any) -> bool:
    # datetime is a date subclass but the two do not order against each other
    return isinstance(value, datetime) == isinstance(bound, datetime)


def date(keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: v is not Absent and v is not None and not is_date(v),
        msg if msg is not None else "must be a date",
    )


def dates(keys: Any, msg: Any = None) -> ValidatorFn:
    def bad(v: Any) -> bool:
        if v is Absent or v is None:
            return False
        if not isinstance(v, (list, tuple)):
            return True
        return not all(is_date(item) for item in v)

    return make_validator(keys, bad, msg if msg is not None else "must be dates")


def after(bound: Any, keys: Any, msg: Any = None) -> ValidatorFn:
    """Strictly after ``bound``; fails every value if ``bound`` is not a date."""

    def bad(v: Any) -> bool:
        if v is Absent or v is None:
            return False
        if not is_date(bound) or not _comparable(v, bound):
            return True
        return not v > bound

    return make_validator(keys, bad, msg if msg is not None else f"must be after {bound}")


def before(bound: Any, keys: Any, msg: Any = None) -> ValidatorFn:
    """Strictly before ``bound``; fails every value if ``bound`` is not a date."""

    def bad(v: Any) -> bool:
        if v is Absent or v is None:
            return False
        if not is_date(bound) or not _comparable(v, bound):
            return True
        return not v < bound

    return make_validator(keys, bad, msg if msg is not None else f"must be before {bound}")
