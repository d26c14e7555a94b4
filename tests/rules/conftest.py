# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for rule tests."""

import pytest


@pytest.fixture
def registry():
    """Fresh registry with the built-in rules (safe to mutate)."""
    from lionverify.rules import RuleRegistry

    return RuleRegistry.with_builtins()


@pytest.fixture
def signup_record():
    """Sign-up record that passes the sample rules."""
    from lionverify.testing import create_signup_record

    return create_signup_record()
