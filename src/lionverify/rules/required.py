# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Presence and exact-value rules."""

from __future__ import annotations

from typing import Any

from lionverify.types import Absent

from .base import make_validator
from .models import ValidatorFn
from .presence import Presence, classify_value

__all__ = ("contains", "exact", "not_blank", "required")


def contains(keys: Any, msg: Any = None) -> ValidatorFn:
    """The keys must be present in the record but may be blank."""
    return make_validator(
        keys,
        lambda v: v is Absent,
        msg if msg is not None else "must be present",
    )


def required(keys: Any, msg: Any = None) -> ValidatorFn:
    """The keys must be present in the record AND not be blank."""
    return make_validator(
        keys,
        lambda v: classify_value(v) is not Presence.PRESENT,
        msg if msg is not None else "must not be blank",
    )


def not_blank(keys: Any, msg: Any = None) -> ValidatorFn:
    """If present, the keys must not be blank."""
    return make_validator(
        keys,
        lambda v: classify_value(v) is Presence.EMPTY,
        msg if msg is not None else "must not be blank",
    )


def exact(val: Any, keys: Any, msg: Any = None) -> ValidatorFn:
    """If present, the keys must equal ``val`` (None included)."""
    return make_validator(
        keys,
        lambda v: v is not Absent and v != val,
        msg if msg is not None else "incorrect value",
    )
