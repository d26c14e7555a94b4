# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""String format and length rules.

Format rules skip absent and blank values; a non-string value fails.
Length rules skip absent and None values; anything without ``len()`` fails.
"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit

from lionverify.types import Absent

from .base import make_validator
from .models import ValidatorFn
from .presence import is_blank

__all__ = (
    "URL_SCHEMES",
    "email",
    "matches",
    "max_length",
    "min_length",
    "url",
    "us_zip",
    "web_url",
)

ZIP_PATTERN = re.compile(r"\d{5}(?:[-\s]\d{4})?", re.ASCII)

# Deliberately loose: something, an @, something
EMAIL_PATTERN = re.compile(r"[^^]+@[^$]+")

WEB_URL_PREFIX = re.compile(r"https?://")

URL_SCHEMES = frozenset({"http", "https", "ftp", "file", "jar", "mailto"})


def _format_check(pattern: re.Pattern[str], keys: Any, msg: Any) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: v is not Absent and not is_blank(v) and pattern.fullmatch(v) is None,
        msg,
    )


def matches(pattern: str | re.Pattern[str], keys: Any, msg: Any = None) -> ValidatorFn:
    """If present and not blank, the value must fully match ``pattern``."""
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return _format_check(regex, keys, msg if msg is not None else "incorrect format")


def min_length(length: int, keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: v is not Absent and v is not None and not len(v) >= length,
        msg if msg is not None else f"must be at least {length} characters",
    )


def max_length(length: int, keys: Any, msg: Any = None) -> ValidatorFn:
    return make_validator(
        keys,
        lambda v: v is not Absent and v is not None and not len(v) <= length,
        msg if msg is not None else f"cannot exceed {length} characters",
    )


def us_zip(keys: Any, msg: Any = None) -> ValidatorFn:
    """Five digits, optionally followed by a dash or space and four digits."""
    return _format_check(ZIP_PATTERN, keys, msg if msg is not None else "must be a valid US zip code")


def email(keys: Any, msg: Any = None) -> ValidatorFn:
    return _format_check(EMAIL_PATTERN, keys, msg if msg is not None else "must be a valid email")


def _is_url(value: str) -> bool:
    parts = urlsplit(value)
    if parts.scheme.lower() not in URL_SCHEMES:
        return False
    return bool(parts.netloc or parts.path)


def url(keys: Any, msg: Any = None) -> ValidatorFn:
    """Parseable URL with a known scheme (see ``URL_SCHEMES``)."""
    return make_validator(
        keys,
        lambda v: v is not Absent and not is_blank(v) and not _is_url(v),
        msg if msg is not None else "must be a valid URL",
    )


def web_url(keys: Any, msg: Any = None) -> ValidatorFn:
    """Like ``url``, but must start with ``http://`` or ``https://``."""
    return make_validator(
        keys,
        lambda v: (
            v is not Absent
            and not is_blank(v)
            and (not _is_url(v) or WEB_URL_PREFIX.match(v) is None)
        ),
        msg if msg is not None else "must be a valid website URL",
    )
