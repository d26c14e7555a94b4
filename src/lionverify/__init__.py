# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

from .errors import (
    ConfigurationError,
    InvalidDescriptorError,
    LionVerifyError,
    RuleArityError,
    UnknownRuleError,
)
from .rules import (
    Presence,
    Problem,
    RuleRegistry,
    RuleSpec,
    Validator,
    combine,
    compile_rules,
    dump_problems,
    get_default_registry,
    guard,
    make_validator,
    validate,
)
from .types import Absent, AbsentType, is_absent

__all__ = (
    "Absent",
    "AbsentType",
    "ConfigurationError",
    "InvalidDescriptorError",
    "LionVerifyError",
    "Presence",
    "Problem",
    "RuleArityError",
    "RuleRegistry",
    "RuleSpec",
    "UnknownRuleError",
    "Validator",
    "combine",
    "compile_rules",
    "dump_problems",
    "get_default_registry",
    "guard",
    "is_absent",
    "make_validator",
    "validate",
)
