# Copyright (c) 2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for presence classification and record lookup."""

import copy
import pickle
from collections import defaultdict

import pytest

from lionverify.rules import Presence, classify, classify_value, get_value, is_blank
from lionverify.types import Absent, AbsentType, is_absent


class TestAbsentSentinel:
    """Tests for the Absent sentinel."""

    def test_singleton(self):
        """Test AbsentType always returns the same instance."""
        assert AbsentType() is Absent

    def test_falsy_and_distinct_from_none(self):
        """Test Absent is falsy but not None."""
        assert not Absent
        assert Absent is not None
        assert is_absent(Absent)
        assert not is_absent(None)

    def test_copy_and_pickle_preserve_identity(self):
        """Test copying or pickling keeps the singleton."""
        assert copy.copy(Absent) is Absent
        assert copy.deepcopy(Absent) is Absent
        assert pickle.loads(pickle.dumps(Absent)) is Absent

    def test_repr(self):
        """Test repr is readable."""
        assert repr(Absent) == "Absent"


class TestIsBlank:
    """Tests for is_blank."""

    @pytest.mark.parametrize("value", [None, "", " ", "\t\n", "   \r\n "])
    def test_blank_values(self, value):
        """Test None and whitespace-only strings are blank."""
        assert is_blank(value)

    @pytest.mark.parametrize("value", [0, False, [], {}, "x", " x ", 0.0, ()])
    def test_non_blank_values(self, value):
        """Test zero, False and empty collections are not blank."""
        assert not is_blank(value)


class TestClassify:
    """Tests for classify and classify_value."""

    def test_absent(self):
        """Test missing key is ABSENT."""
        assert classify({}, "a") is Presence.ABSENT
        assert classify_value(Absent) is Presence.ABSENT

    def test_empty(self):
        """Test None and blank strings are EMPTY."""
        assert classify({"a": None}, "a") is Presence.EMPTY
        assert classify({"a": ""}, "a") is Presence.EMPTY
        assert classify({"a": "  "}, "a") is Presence.EMPTY

    @pytest.mark.parametrize("value", [0, False, [], {}, "text"])
    def test_present(self, value):
        """Test zero, False and empty collections are PRESENT."""
        assert classify({"a": value}, "a") is Presence.PRESENT

    def test_presence_values(self):
        """Test enum string values."""
        assert Presence.ABSENT.value == "absent"
        assert Presence.EMPTY == "empty"


class TestGetValue:
    """Tests for get_value lookups."""

    def test_present_key(self):
        """Test present key returns its value."""
        assert get_value({"a": 1}, "a") == 1

    def test_missing_key_returns_absent(self):
        """Test missing key returns Absent by default."""
        assert get_value({}, "a") is Absent

    def test_missing_key_custom_default(self):
        """Test missing key returns given default."""
        assert get_value({}, "a", None) is None

    def test_does_not_mutate_defaultdict(self):
        """Test lookups never trigger default factories."""
        record = defaultdict(list)
        assert get_value(record, "a") is Absent
        assert "a" not in record

    def test_non_mapping_record(self):
        """Test None and non-mappings behave as empty records."""
        assert get_value(None, "a") is Absent
        assert get_value(42, "a") is Absent

    def test_unhashable_key(self):
        """Test unhashable keys behave as missing."""
        assert get_value({"a": 1}, ["a"]) is Absent
