"""
Unit tests for URL externalization.
"""

import pytest

from httphelpers.core.externalize import externalize_urls

PREFIX = "scheme://authority"


class TestExternalizeURLs:
    """Tests for externalize_urls()."""

    def test_prefixed_string(self):
        """Test that the prefix is stripped."""
        assert externalize_urls(PREFIX + "/things/1", PREFIX) == "/things/1"

    def test_unprefixed_string(self):
        """Test that other strings are unchanged."""
        assert externalize_urls("http://example.com/a", PREFIX) == "http://example.com/a"
        assert externalize_urls("things/" + PREFIX, PREFIX) == "things/" + PREFIX

    def test_prefix_only_stripped_once(self):
        """Test that a doubled prefix loses just one copy."""
        assert externalize_urls(PREFIX + PREFIX + "/x", PREFIX) == PREFIX + "/x"

    def test_nested_tree(self):
        """Test recursion through dicts and lists."""
        body = {
            "self": PREFIX + "/orders/1",
            "lines": [
                {"item": PREFIX + "/items/7", "qty": 2},
                {"item": "http://elsewhere/items/8", "qty": 1},
            ],
            "paid": True,
            "note": None,
        }

        assert externalize_urls(body, PREFIX) == {
            "self": "/orders/1",
            "lines": [
                {"item": "/items/7", "qty": 2},
                {"item": "http://elsewhere/items/8", "qty": 1},
            ],
            "paid": True,
            "note": None,
        }

    def test_keys_not_rewritten(self):
        """Test that mapping keys are left as they are."""
        assert externalize_urls({PREFIX: PREFIX + "/a"}, PREFIX) == {PREFIX: "/a"}

    def test_key_order_preserved(self):
        """Test that dict iteration order survives."""
        result = externalize_urls({"z": 1, "a": 2, "m": 3}, PREFIX)
        assert list(result) == ["z", "a", "m"]

    def test_input_not_mutated(self):
        """Test that the transform is pure."""
        body = {"links": [PREFIX + "/a"]}
        result = externalize_urls(body, PREFIX)

        assert body == {"links": [PREFIX + "/a"]}
        assert result is not body
        assert result["links"] is not body["links"]

    def test_tuple_becomes_list(self):
        """Test that tuples are walked like lists."""
        assert externalize_urls((PREFIX + "/a", 1), PREFIX) == ["/a", 1]

    @pytest.mark.parametrize("value", [0, 1.5, True, None, b"scheme://authority/raw"])
    def test_scalars_pass_through(self, value):
        """Test that non-string scalars and bytes are unchanged."""
        assert externalize_urls(value, PREFIX) is value

    def test_empty_prefix_is_noop(self):
        """Test that an empty prefix changes nothing."""
        body = {"a": ["scheme://authority/x", "/y"]}
        assert externalize_urls(body, "") == body

    def test_idempotent(self):
        """Test that externalizing twice equals externalizing once."""
        body = {"a": [PREFIX + "/x", {"b": PREFIX + "/y"}], "c": "plain"}
        once = externalize_urls(body, PREFIX)

        assert externalize_urls(once, PREFIX) == once

    def test_deep_tree(self):
        """Test a deeply nested (acyclic) structure."""
        body = PREFIX + "/leaf"
        for _ in range(200):
            body = {"child": [body]}

        result = externalize_urls(body, PREFIX)
        for _ in range(200):
            result = result["child"][0]

        assert result == "/leaf"
