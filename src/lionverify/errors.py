# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Exceptions raised while building validators.

Bad data never raises: it is reported as ``Problem`` values. Only a
misconfigured rule set raises, and it does so when the rules are compiled.
"""

from __future__ import annotations

from typing import Any

__all__ = (
    "ConfigurationError",
    "InvalidDescriptorError",
    "LionVerifyError",
    "RuleArityError",
    "UnknownRuleError",
)


class LionVerifyError(Exception):
    """Base class for all lionverify errors."""

    pass


class ConfigurationError(LionVerifyError, ValueError):
    """Raised when a rule set cannot be compiled."""

    pass


class UnknownRuleError(ConfigurationError):
    """Raised when a descriptor names a rule missing from the registry."""

    def __init__(self, rule_name: Any):
        self.rule_name = rule_name
        super().__init__(f"Unknown validation rule: {rule_name!r}")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.rule_name,))


class RuleArityError(ConfigurationError):
    """Raised when descriptor arguments do not fit the rule constructor."""

    def __init__(self, rule_name: str, rule_args: tuple[Any, ...], reason: str):
        self.rule_name = rule_name
        self.rule_args = rule_args
        self.reason = reason
        super().__init__(
            f"Invalid arguments for rule {rule_name!r} {list(rule_args)!r}: {reason}"
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self.rule_name, self.rule_args, self.reason))


class InvalidDescriptorError(ConfigurationError):
    """Raised when a rule descriptor has an unusable shape."""

    pass
