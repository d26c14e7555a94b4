# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from lionverify.types import Absent

from .base import make_validator
from .models import ValidatorFn

__all__ = ("in_",)


def in_(choices: Iterable[Any], keys: Any, msg: Any = None) -> ValidatorFn:
    """If present and not None, the value must be one of ``choices``."""
    if isinstance(choices, (set, frozenset)):
        accepted: Any = choices
    else:
        accepted = tuple(choices)
    return make_validator(
        keys,
        lambda v: v is not Absent and v is not None and v not in accepted,
        msg if msg is not None else "not an accepted value",
    )
