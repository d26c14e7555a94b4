# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Validator facade - compiles rule lists and runs them against records.

Flow:
    rule list → compile_rules() → combined validator → validator(record) → problems

Features:
- Rule lists mix descriptors, RuleSpecs, mappings and prebuilt validators
- Per-validator registry for custom rules, default registry otherwise
- Compile once, validate many records; no state kept between calls
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from .compiler import compile_rules
from .models import ProblemLike, ValidatorFn
from .registry import RuleRegistry, get_default_registry

__all__ = ("Validator", "validate")


class Validator:
    """Validation entry point bound to one rule registry.

    Usage:
        validator = Validator()

        problems = validator.validate(
            {"foo": "x", "password": "foobarbaz", "confirm": "foobarba"},
            [
                ("required", ["foo", "bar", "password"]),
                ("equal", ["password", "confirm"]),
                ("min-length", 8, "password"),
            ],
        )
        # → [Problem(keys=("bar",), msg="must not be blank"),
        #    Problem(keys=("password", "confirm"), msg="must be equal")]

        # Compile once for many records
        check = validator.compile(rules)
        for record in records:
            problems = check(record)
    """

    def __init__(self, registry: RuleRegistry | None = None):
        """Initialize validator.

        Args:
            registry: Rule registry for name lookup (default registry if None)
        """
        self.registry = registry if registry is not None else get_default_registry()

    def compile(self, rules: Iterable[Any]) -> ValidatorFn:
        """Compile a rule list into one validator function.

        Raises:
            ConfigurationError: If any rule is unknown or misconfigured
        """
        return compile_rules(rules, registry=self.registry)

    def validate(self, record: Mapping[Any, Any], rules: Iterable[Any]) -> list[ProblemLike]:
        """Validate one record; returns ``[]`` when every rule passes.

        Raises:
            ConfigurationError: If any rule is unknown or misconfigured
        """
        return list(self.compile(rules)(record))

    def __repr__(self) -> str:
        return f"Validator(registry={self.registry!r})"


def validate(
    record: Mapping[Any, Any],
    rules: Iterable[Any],
    registry: RuleRegistry | None = None,
) -> list[ProblemLike]:
    """Validate ``record`` against ``rules`` with the given (or default) registry."""
    return Validator(registry).validate(record, rules)
