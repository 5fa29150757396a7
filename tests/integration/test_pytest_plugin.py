"""Integration tests for the json-describer pytest plugin.

These tests verify that the assert_json_keys_unchanged fixture is auto-discovered
via the pytest11 entry point and behaves correctly.

NOTE: These tests require json-describer to be installed (even in editable mode
via ``pip install -e .``). The pytest11 entry point is only registered at
install time -- running from a raw source checkout without installing will not
discover the fixture.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_describer import NotAnObjectError, NotValidJSONError, parse_as_object


def test_fixture_passes_identical_docs(assert_json_keys_unchanged: Any) -> None:
    assert_json_keys_unchanged(b'{"a": 1, "b": [2]}', b'{"b": [2], "a": 1}')


def test_fixture_ignores_outer_whitespace(assert_json_keys_unchanged: Any) -> None:
    assert_json_keys_unchanged('{"a":1}', '{\n  "a": 1\n}')


def test_fixture_fails_on_modified_value(assert_json_keys_unchanged: Any) -> None:
    with pytest.raises(AssertionError, match=r"1 key modified"):
        assert_json_keys_unchanged('{"k": "a"}', '{"k": "b"}')


def test_fixture_allow_list(assert_json_keys_unchanged: Any) -> None:
    assert_json_keys_unchanged(
        '{"version": 1, "name": "x"}',
        '{"version": 2, "name": "x", "updated": true}',
        allow=["version", "updated"],
    )


def test_fixture_accepts_raw_objects(assert_json_keys_unchanged: Any) -> None:
    old = parse_as_object(b'{"a": 1}')
    with pytest.raises(AssertionError, match=r"1 key changed type"):
        assert_json_keys_unchanged(old, {"a": '"1"'})


def test_fixture_error_message_contents(assert_json_keys_unchanged: Any) -> None:
    with pytest.raises(AssertionError) as exc_info:
        assert_json_keys_unchanged(
            '{"gone": 1, "edit": 1, "flip": 1}',
            '{"edit": 2, "flip": "1", "new": 1}',
        )
    msg = str(exc_info.value)
    assert (
        "1 key added, 1 key deleted, 1 key modified, and 1 key changed type" in msg
    )
    assert "added:        ['new']" in msg
    assert "deleted:      ['gone']" in msg
    assert "modified:     ['edit']" in msg
    assert "type_changed: ['flip']" in msg


def test_fixture_rejects_non_objects(assert_json_keys_unchanged: Any) -> None:
    with pytest.raises(NotAnObjectError):
        assert_json_keys_unchanged(b"[]", b"{}")
    with pytest.raises(NotValidJSONError):
        assert_json_keys_unchanged(b"{", b"{}")
