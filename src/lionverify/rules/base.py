# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Validator building blocks.

Every rule compiles to the same shape, ``record -> list of problems``:

    guard(bad_pred)                      any exception means "bad value"
    make_validator(keys, bad_pred, msg)  key-by-key check, one Problem per rule
    combine(*validators)                 ordered concatenation of all results

Predicates answer "is this value BAD?". They receive the ``Absent`` sentinel
for missing keys so each rule decides how absence is treated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Mapping
from typing import Any

from .models import Problem, ProblemLike, ValidatorFn
from .presence import get_value

__all__ = ("as_problems", "combine", "guard", "make_validator", "seqify")

logger = logging.getLogger(__name__)

BadPredicate = Callable[[Any], Any]


def seqify(keys: Any) -> tuple[Any, ...]:
    """Normalize a bare key or a list/tuple of keys to a tuple."""
    if isinstance(keys, (list, tuple)):
        return tuple(keys)
    return (keys,)


def guard(bad_pred: BadPredicate) -> Callable[[Any], bool]:
    """Wrap a "value is bad" predicate so that raising counts as bad.

    Rule authors can call parsers or comparisons that throw on malformed
    input; the failure itself is evidence the value is invalid.
    """

    def guarded(value: Any) -> bool:
        try:
            return bool(bad_pred(value))
        except Exception as e:
            logger.debug(f"Predicate {bad_pred!r} raised {type(e).__name__}: {e}; value is invalid")
            return True

    guarded.__wrapped__ = bad_pred  # type: ignore[attr-defined]
    return guarded


def _is_structured(msg: Any) -> bool:
    return isinstance(msg, (Problem, Mapping))


def make_validator(keys: Hashable | Iterable[Hashable], bad_pred: BadPredicate, msg: Any) -> ValidatorFn:
    """Build a key-scoped validator.

    Args:
        keys: Target key, or list/tuple of keys
        bad_pred: Predicate returning truthy when a value is bad
        msg: Message for the default Problem, or a structured problem
            (``Problem`` or mapping) returned unchanged on failure

    Returns:
        Validator returning ``[]`` when every key passes, else a single problem
    """
    targets = seqify(keys)
    is_bad = guard(bad_pred)
    structured = _is_structured(msg)

    def validator(record: Mapping[Any, Any]) -> list[ProblemLike]:
        bad_keys = tuple(k for k in targets if is_bad(get_value(record, k)))
        if not bad_keys:
            return []
        if structured:
            return [msg]
        return [Problem(keys=bad_keys, msg=msg)]

    return validator


def as_problems(result: Any) -> list[ProblemLike]:
    """Normalize any validator result to a list of problems.

    None and empty results become ``[]``; a single problem becomes a
    one-element list; other iterables are listed in order.
    """
    if result is None:
        return []
    if isinstance(result, (Problem, Mapping, str)):
        return [result]
    if isinstance(result, Iterable):
        return list(result)
    return [result]


def combine(*validators: Callable[[Mapping[Any, Any]], Any]) -> ValidatorFn:
    """Merge validators into one that runs all of them, in order.

    Never short-circuits. Exceptions raised by a validator itself are not
    caught here: only predicate failures are absorbed, inside ``guard``.
    """
    for i, v in enumerate(validators):
        if not callable(v):
            raise TypeError(f"Validator at index {i} is not callable: {type(v).__name__}")

    def combined(record: Mapping[Any, Any]) -> list[ProblemLike]:
        problems: list[ProblemLike] = []
        for v in validators:
            problems.extend(as_problems(v(record)))
        return problems

    return combined
