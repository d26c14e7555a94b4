# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Models for map validation.

``Problem`` is the unit of every validation report; ``RuleSpec`` is the
named-field form of a rule descriptor, convenient when rule sets are stored
as data (JSON, settings files).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any, TypeAlias

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = (
    "Problem",
    "ProblemLike",
    "RuleSpec",
    "ValidatorFn",
    "dump_problems",
    "problems_to_dicts",
)


class Problem(BaseModel):
    """One reported validation failure.

    Attributes:
        keys: Keys implicated, in rule target order (None for whole-record checks)
        msg: Human-readable message, or any structured value
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    keys: tuple[Any, ...] | None = Field(
        default=None,
        description="Keys that failed the rule, in target order",
    )
    msg: Any = Field(
        default=None,
        description="Failure message (string or structured value)",
    )

    @field_validator("keys", mode="before")
    def _validate_keys(cls, v: Any) -> Any:  # noqa: N805
        if v is None or isinstance(v, tuple):
            return v
        if isinstance(v, list):
            return tuple(v)
        return (v,)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict, omitting ``keys`` when it is None."""
        result: dict[str, Any] = {}
        if self.keys is not None:
            result["keys"] = list(self.keys)
        result["msg"] = self.msg
        return result


ProblemLike: TypeAlias = Problem | Mapping[str, Any]
"""A built-in Problem, or a caller-supplied structured problem returned verbatim."""

ValidatorFn: TypeAlias = Callable[[Mapping[Any, Any]], Sequence[ProblemLike]]
"""Uniform validator shape: record -> problems (empty when valid)."""


class RuleSpec(BaseModel):
    """Rule descriptor with explicit, named fields.

    Equivalent to the positional descriptor ``(name, *args, keys, msg)``:

        RuleSpec(name="min-length", args=(8,), keys=["password"])
        # same as ("min-length", 8, ["password"])
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="Registered rule name, e.g. 'min-length'")
    args: tuple[Any, ...] = Field(
        default=(),
        description="Rule parameters that precede the target keys",
    )
    keys: Any = Field(..., description="Target key or list of keys")
    msg: Any = Field(default=None, description="Custom message or structured problem")

    @field_validator("args", mode="before")
    def _validate_args(cls, v: Any) -> Any:  # noqa: N805
        if v is None:
            return ()
        if isinstance(v, list):
            return tuple(v)
        return v

    def to_descriptor(self) -> tuple[Any, ...]:
        """Positional descriptor form; ``msg`` is dropped when unset."""
        descriptor = (self.name, *self.args, self.keys)
        if self.msg is not None:
            descriptor = (*descriptor, self.msg)
        return descriptor


def problems_to_dicts(problems: Iterable[ProblemLike]) -> list[dict[str, Any]]:
    """Convert problems to plain dicts; structured problems are copied as-is."""
    return [p.to_dict() if isinstance(p, Problem) else dict(p) for p in problems]


def _orjson_default(obj: Any) -> Any:
    if isinstance(obj, Problem):
        return obj.to_dict()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    return str(obj)


def dump_problems(problems: Iterable[ProblemLike]) -> bytes:
    """Serialize problems to JSON bytes.

    Keys and messages that JSON cannot represent natively (dates excepted,
    which orjson handles) are rendered with ``str``.
    """
    return orjson.dumps(
        problems_to_dicts(problems),
        default=_orjson_default,
        option=orjson.OPT_NON_STR_KEYS,
    )
