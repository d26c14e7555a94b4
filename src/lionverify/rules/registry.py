# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Rule name → constructor registry.

Constructors take ``(*rule_args, keys, msg=None)`` and return a validator.
Names are normalized (case-insensitive, ``_`` treated as ``-``), so
``"min_length"``, ``"MIN-LENGTH"`` and ``"min-length"`` are the same rule.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from lionverify.errors import UnknownRuleError

from . import choice, cross, date, number, required, string, typecheck
from .models import ValidatorFn

__all__ = ("BUILTIN_RULES", "RuleConstructor", "RuleRegistry", "get_default_registry")

logger = logging.getLogger(__name__)

RuleConstructor = Callable[..., ValidatorFn]

BUILTIN_RULES: MappingProxyType[str, RuleConstructor] = MappingProxyType(
    {
        # presence
        "contains": required.contains,
        "required": required.required,
        "not-blank": required.not_blank,
        # equality
        "exact": required.exact,
        "equal": cross.equal,
        # format
        "matches": string.matches,
        "us-zip": string.us_zip,
        "email": string.email,
        "url": string.url,
        "web-url": string.web_url,
        # length / membership
        "min-length": string.min_length,
        "max-length": string.max_length,
        "in": choice.in_,
        # types
        "str": typecheck.string,
        "string": typecheck.string,
        "strs": typecheck.strings,
        "strings": typecheck.strings,
        "bool": typecheck.bool_,
        "boolean": typecheck.bool_,
        "bools": typecheck.bools,
        "booleans": typecheck.bools,
        "integer": typecheck.integer,
        "integers": typecheck.integers,
        "float": typecheck.floating_point,
        "floating-point": typecheck.floating_point,
        "floats": typecheck.floating_points,
        "floating-points": typecheck.floating_points,
        "decimal": typecheck.decimal,
        "decimals": typecheck.decimals,
        # ranges
        "min-val": number.min_val,
        "at-least": number.at_least,
        "max-val": number.max_val,
        "at-most": number.at_most,
        "within": number.within,
        "positive": number.positive,
        "negative": number.negative,
        # dates
        "date": date.date,
        "dates": date.dates,
        "after": date.after,
        "before": date.before,
        # checksums
        "luhn": number.luhn,
    }
)


def normalize_name(name: Any) -> str:
    """Canonical registry key for a rule name.

    Raises:
        UnknownRuleError: If ``name`` is not a string
    """
    if not isinstance(name, str):
        raise UnknownRuleError(name)
    return name.strip().lower().replace("_", "-")


class RuleRegistry:
    """Maps rule names to rule constructors.

    Usage:
        registry = RuleRegistry.with_builtins()
        registry.register("slug", lambda keys, msg=None: make_validator(...))
        validator = compile_rules([("slug", "path")], registry=registry)
    """

    def __init__(self, rules: dict[str, RuleConstructor] | None = None):
        """Initialize registry.

        Args:
            rules: Initial name → constructor entries (empty if None)
        """
        self._rules: dict[str, RuleConstructor] = {}
        for name, constructor in (rules or {}).items():
            self.register(name, constructor)

    @classmethod
    def with_builtins(cls) -> RuleRegistry:
        """New registry preloaded with the built-in rule catalog."""
        return cls(dict(BUILTIN_RULES))

    def register(self, name: str, constructor: RuleConstructor, update: bool = False) -> None:
        """Register a rule constructor under ``name``.

        Raises:
            ValueError: If the name is taken and ``update`` is False
            TypeError: If ``constructor`` is not callable
        """
        if not callable(constructor):
            raise TypeError(f"Rule constructor for '{name}' must be callable")
        key = normalize_name(name)
        if key in self._rules and not update:
            raise ValueError(f"Rule '{key}' already registered")
        self._rules[key] = constructor
        logger.debug(f"Registered rule '{key}'")

    def unregister(self, name: str) -> RuleConstructor:
        """Remove and return the constructor registered under ``name``."""
        key = normalize_name(name)
        if key not in self._rules:
            raise UnknownRuleError(name)
        return self._rules.pop(key)

    def get(self, name: Any) -> RuleConstructor:
        """Constructor registered under ``name``.

        Raises:
            UnknownRuleError: If no such rule exists
        """
        constructor = self._rules.get(normalize_name(name))
        if constructor is None:
            raise UnknownRuleError(name)
        return constructor

    def __contains__(self, name: Any) -> bool:
        if not isinstance(name, str):
            return False
        return normalize_name(name) in self._rules

    def list_names(self) -> list[str]:
        """All registered rule names, sorted."""
        return sorted(self._rules)

    def copy(self) -> RuleRegistry:
        """Independent registry with the same entries."""
        return type(self)(dict(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(count={len(self)})"


@functools.cache
def get_default_registry() -> RuleRegistry:
    """Process-wide registry with the built-in rules, created once."""
    return RuleRegistry.with_builtins()
