# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Presence classification shared by every built-in rule.

A record value is in exactly one of three states:

- ABSENT: the key is not in the record
- EMPTY: the value is None, or a string of only whitespace ("" included)
- PRESENT: anything else, including 0, False, [] and {}
"""

from __future__ import annotations

from collections.abc import Hashable
from enum import Enum
from typing import Any

from lionverify.types import Absent, MaybeAbsent

__all__ = ("Presence", "classify", "classify_value", "get_value", "is_blank")


class Presence(str, Enum):
    """Presence state of a record value."""

    ABSENT = "absent"
    EMPTY = "empty"
    PRESENT = "present"


def get_value(record: Any, key: Hashable, default: Any = Absent) -> MaybeAbsent[Any]:
    """Look up ``key`` in ``record`` without mutating it.

    Uses ``.get`` so mappings with default factories are left untouched.
    Records that are not mappings, and unhashable keys, yield ``default``.
    """
    getter = getattr(record, "get", None)
    if not callable(getter):
        return default
    try:
        return getter(key, default)
    except TypeError:
        return default


def is_blank(value: Any) -> bool:
    """True for None and whitespace-only strings."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def classify_value(value: Any) -> Presence:
    if value is Absent:
        return Presence.ABSENT
    if is_blank(value):
        return Presence.EMPTY
    return Presence.PRESENT


def classify(record: Any, key: Hashable) -> Presence:
    return classify_value(get_value(record, key))
