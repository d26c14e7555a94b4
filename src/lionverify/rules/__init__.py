# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Map-level validation rules.

Every rule sees the whole record, so cross-field checks are as easy as
single-field ones:

    from lionverify.rules import validate

    problems = validate(
        {"password": "foobarbaz", "confirm": "foobarba"},
        [
            ("required", ["password", "confirm"]),
            ("equal", ["password", "confirm"]),
            ("min-length", 8, "password"),
        ],
    )
    # → [Problem(keys=("password", "confirm"), msg="must be equal")]

Pieces:
- presence: Absent / Empty / Present classification of record values
- base: guard, make_validator, combine (the uniform validator contract)
- built-in catalog: required, string, choice, typecheck, number, date, cross
- registry + compiler: rule name → constructor, descriptor → validator
- Validator: facade over compile + run
"""

from . import choice, cross, date, number, required, string, typecheck
from .base import as_problems, combine, guard, make_validator, seqify
from .compiler import compile_rule, compile_rules, to_descriptor
from .models import (
    Problem,
    ProblemLike,
    RuleSpec,
    ValidatorFn,
    dump_problems,
    problems_to_dicts,
)
from .presence import Presence, classify, classify_value, get_value, is_blank
from .registry import BUILTIN_RULES, RuleConstructor, RuleRegistry, get_default_registry
from .validator import Validator, validate

__all__ = (
    "BUILTIN_RULES",
    "Presence",
    "Problem",
    "ProblemLike",
    "RuleConstructor",
    "RuleRegistry",
    "RuleSpec",
    "Validator",
    "ValidatorFn",
    "as_problems",
    "choice",
    "classify",
    "classify_value",
    "combine",
    "compile_rule",
    "compile_rules",
    "cross",
    "date",
    "dump_problems",
    "get_default_registry",
    "get_value",
    "guard",
    "is_blank",
    "make_validator",
    "number",
    "problems_to_dicts",
    "required",
    "seqify",
    "string",
    "to_descriptor",
    "typecheck",
    "validate",
)
