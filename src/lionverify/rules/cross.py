# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rules that compare several keys jointly."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .base import guard, seqify
from .models import Problem, ProblemLike, ValidatorFn
from .presence import get_value

__all__ = ("equal",)


def _all_equal(values: tuple[Any, ...]) -> bool:
    first = values[0]
    return all(first == v for v in values[1:])


def equal(keys: Any, msg: Any = None) -> ValidatorFn:
    """All given keys must hold equal values.

    Missing keys read as None rather than ``Absent``, so this rule does not
    skip on absence: ``{"a": 1}`` fails ``equal(["a", "b"])`` while ``{}``
    passes. The problem always references every given key.
    """
    targets = seqify(keys)
    if not targets:
        raise ValueError("equal requires at least one key")
    differs = guard(lambda values: not _all_equal(values))

    def validator(record: Mapping[Any, Any]) -> list[ProblemLike]:
        values = tuple(get_value(record, k, None) for k in targets)
        if not differs(values):
            return []
        if isinstance(msg, (Problem, Mapping)):
            return [msg]
        return [Problem(keys=targets, msg=msg if msg is not None else "must be equal")]

    return validator
