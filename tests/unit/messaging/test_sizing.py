"""Tests for message size estimation."""

from __future__ import annotations

import pytest

from extsqs.messaging.sizing import ATTRIBUTE_OVERHEAD, compute_message_size


@pytest.mark.parametrize(
    ("attributes", "expected"),
    [
        ({"a": {"StringValue": "c"}}, 10),
        ({"a": {"StringListValues": ["a", "b", "c", "d"]}}, 13),
        ({"a": {"BinaryValue": b"\x10\xa0"}}, 11),
        ({"a": {"BinaryListValues": [b"\x10\xa0", b"\x10\xa0"]}}, 13),
    ],
    ids=["string", "string-list", "binary", "binary-list"],
)
def test_attribute_fixtures(attributes, expected):
    assert compute_message_size("abcde", attributes) == expected


def test_overhead_counted_once_per_attribute():
    attrs = {
        "one": {"DataType": "String", "StringValue": "xy"},
        "two": {"DataType": "String", "StringValue": "z"},
    }
    assert compute_message_size("", attrs) == 2 * ATTRIBUTE_OVERHEAD + 3


def test_string_values_measured_in_utf8_bytes():
    assert compute_message_size("", {"a": {"StringValue": "é"}}) == ATTRIBUTE_OVERHEAD + 2


def test_include_body_adds_body_bytes():
    attrs = {"a": {"StringValue": "c"}}
    assert compute_message_size("abcde", attrs, include_body=True) == 15
    assert compute_message_size(b"\x00\x01", attrs, include_body=True) == 12


def test_no_attributes():
    assert compute_message_size("abc", None) == 0
    assert compute_message_size("abc", {}, include_body=True) == 3
