# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Compile rule descriptors into validator functions.

Accepted forms, freely mixed in one rule list:

    ("min-length", 8, ["password"])               positional descriptor
    ("min-length", 8, "password", "too short")    ...with a custom message
    RuleSpec(name="min-length", args=(8,), keys="password")
    {"name": "min-length", "args": [8], "keys": "password"}
    my_validator                                  any callable, used as-is

Every configuration mistake is raised here, never during validation.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from lionverify.errors import (
    ConfigurationError,
    InvalidDescriptorError,
    RuleArityError,
)

from .base import combine
from .models import RuleSpec, ValidatorFn
from .registry import RuleRegistry, get_default_registry

__all__ = ("compile_rule", "compile_rules", "to_descriptor")

logger = logging.getLogger(__name__)


def to_descriptor(rule: Any) -> tuple[Any, ...]:
    """Positional descriptor for a tuple/list, RuleSpec or mapping.

    Raises:
        InvalidDescriptorError: If ``rule`` has none of those shapes
    """
    if isinstance(rule, RuleSpec):
        return rule.to_descriptor()
    if isinstance(rule, Mapping):
        try:
            return RuleSpec.model_validate(rule).to_descriptor()
        except PydanticValidationError as e:
            raise InvalidDescriptorError(f"Invalid rule mapping {dict(rule)!r}: {e}") from e
    if isinstance(rule, (list, tuple)):
        if not rule:
            raise InvalidDescriptorError("Rule descriptor is empty")
        return tuple(rule)
    raise InvalidDescriptorError(
        f"Rule must be a descriptor, RuleSpec, mapping or callable, got {type(rule).__name__}"
    )


def _check_arity(name: str, constructor: Any, args: tuple[Any, ...]) -> None:
    try:
        signature = inspect.signature(constructor)
    except (TypeError, ValueError):
        # builtins and some C callables expose no signature; let the call decide
        return
    try:
        signature.bind(*args)
    except TypeError as e:
        raise RuleArityError(name, args, str(e)) from e


def compile_rule(rule: Any, registry: RuleRegistry | None = None) -> ValidatorFn:
    """Compile one rule to a validator function.

    Args:
        rule: Descriptor, RuleSpec, mapping, or prebuilt validator (passed through)
        registry: Rule registry (default registry if None)

    Returns:
        Validator function

    Raises:
        UnknownRuleError: If the rule name is not registered
        RuleArityError: If the arguments do not fit the rule constructor
        ConfigurationError: If the constructor rejects its arguments
        InvalidDescriptorError: If the rule has an unusable shape
    """
    if callable(rule):
        return rule

    if registry is None:
        registry = get_default_registry()
    name, *args = to_descriptor(rule)
    constructor = registry.get(name)
    _check_arity(name, constructor, tuple(args))

    try:
        validator = constructor(*args)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Cannot build rule {name!r} from {args!r}: {e}") from e

    if not callable(validator):
        raise ConfigurationError(
            f"Rule {name!r} constructor returned {type(validator).__name__}, expected a callable"
        )
    return validator


def _looks_like_single_descriptor(rules: Any) -> bool:
    return isinstance(rules, (list, tuple)) and bool(rules) and isinstance(rules[0], str)


def compile_rules(rules: Iterable[Any], registry: RuleRegistry | None = None) -> ValidatorFn:
    """Compile a rule list into one combined validator.

    Problems are reported in rule order, then target-key order.

    Raises:
        InvalidDescriptorError: If ``rules`` is a single descriptor or not iterable
        ConfigurationError: For any rule that fails to compile
    """
    if _looks_like_single_descriptor(rules):
        raise InvalidDescriptorError(
            f"Expected a list of rules, got a single descriptor {tuple(rules)!r}; wrap it in a list"
        )
    if isinstance(rules, (str, Mapping, RuleSpec)) or not isinstance(rules, Iterable):
        raise InvalidDescriptorError(
            f"Expected a list of rules, got {type(rules).__name__}"
        )

    if registry is None:
        registry = get_default_registry()
    validators = [compile_rule(rule, registry) for rule in rules]
    logger.debug(f"Compiled {len(validators)} rules")
    return combine(*validators)
