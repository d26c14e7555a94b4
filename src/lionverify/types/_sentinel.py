# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Final, TypeAlias, TypeVar

__all__ = ("Absent", "AbsentType", "MaybeAbsent", "is_absent")

T = TypeVar("T")


class AbsentType:
    """Marker for a key missing from a record.

    Distinct from ``None``: ``{"a": None}`` holds a value, ``{}`` does not.
    Falsy, singleton, and survives copy/pickle as the same object.
    """

    __slots__ = ()
    _instance: AbsentType | None = None

    def __new__(cls) -> AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Absent"

    def __reduce__(self) -> str:
        return "Absent"

    def __copy__(self) -> AbsentType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> AbsentType:
        return self


Absent: Final = AbsentType()

MaybeAbsent: TypeAlias = T | AbsentType


def is_absent(value: Any) -> bool:
    return value is Absent
