"""Tests for the pointer attribute convention."""

from __future__ import annotations

from extsqs.messaging.attributes import (
    BUCKET_ATTRIBUTE,
    KEY_ATTRIBUTE,
    read_pointer,
    strip_pointer,
    tag_pointer,
)
from extsqs.messaging.models import InlineBody, OverflowPointer


def _s(value: str) -> dict:
    return {"DataType": "String", "StringValue": value}


class TestReadPointer:
    def test_both_attributes_mean_overflow(self):
        attrs = {BUCKET_ATTRIBUTE: _s("bucket"), KEY_ATTRIBUTE: _s("/1/abc.json.gz")}
        assert read_pointer("true", attrs) == OverflowPointer(bucket="bucket", key="/1/abc.json.gz")

    def test_single_attribute_is_inline(self):
        assert read_pointer("Ym9keQ==", {BUCKET_ATTRIBUTE: _s("bucket")}) == InlineBody(body="Ym9keQ==")

    def test_no_attributes_is_inline(self):
        assert read_pointer("Ym9keQ==", None) == InlineBody(body="Ym9keQ==")

    def test_names_are_case_sensitive(self):
        attrs = {"extended_store_bucket": _s("b"), "extended_store_key": _s("k")}
        assert isinstance(read_pointer("x", attrs), InlineBody)

    def test_lambda_field_casing(self):
        attrs = {
            BUCKET_ATTRIBUTE: {"dataType": "String", "stringValue": "b"},
            KEY_ATTRIBUTE: {"dataType": "String", "stringValue": "k"},
        }
        assert read_pointer("true", attrs, field="stringValue") == OverflowPointer(bucket="b", key="k")
        assert isinstance(read_pointer("true", attrs), InlineBody)


class TestTagging:
    def test_tag_does_not_mutate_input(self):
        attrs = {"trace": _s("abc")}
        tagged = tag_pointer(attrs, "bucket", "/3/k.json.gz")
        assert attrs == {"trace": _s("abc")}
        assert tagged[BUCKET_ATTRIBUTE] == _s("bucket")
        assert tagged[KEY_ATTRIBUTE] == _s("/3/k.json.gz")
        assert tagged["trace"] == _s("abc")

    def test_strip_removes_stale_pointer(self):
        attrs = {"trace": _s("abc"), BUCKET_ATTRIBUTE: _s("old"), KEY_ATTRIBUTE: _s("/0/old")}
        assert strip_pointer(attrs) == {"trace": _s("abc")}
        assert BUCKET_ATTRIBUTE in attrs
