"""pytest plugin for json-describer.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import pytest

from json_describer import RawObject, diff_keys, parse_as_object, summarize_diff


def _as_raw_object(value: bytes | bytearray | str | RawObject) -> RawObject:
    if isinstance(value, dict):
        return value
    return parse_as_object(value)


@pytest.fixture(scope="session")
def assert_json_keys_unchanged() -> Any:
    """Fixture that returns a callable top-level key-change asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_config_migration(assert_json_keys_unchanged):
            assert_json_keys_unchanged(old_bytes, new_bytes, allow=["version"])

        def test_secret_rotated(assert_json_keys_unchanged):
            with pytest.raises(AssertionError, match=r"1 key modified"):
                assert_json_keys_unchanged('{"k": "a"}', '{"k": "b"}')

    Returns:
        A callable ``_assert(old, new, allow=()) -> None`` that raises
        ``AssertionError`` when any key outside ``allow`` was added, deleted,
        modified or changed type.
    """

    def _assert(
        old: bytes | bytearray | str | RawObject,
        new: bytes | bytearray | str | RawObject,
        allow: Iterable[str] = (),
    ) -> None:
        """Assert that two JSON objects have the same top-level keys and values.

        Args:
            old:   JSON object as bytes/str, or an already-parsed RawObject.
            new:   JSON object as bytes/str, or an already-parsed RawObject.
            allow: Keys whose changes are ignored.

        Raises:
            AssertionError: When changes remain after ignoring ``allow``, with
                a message holding the change summary and the sorted keys of
                each non-empty category.
            NotValidJSONError / NotAnObjectError: When an input is not a
                JSON object.
        """
        allowed = frozenset(allow)
        old_obj = {k: v for k, v in _as_raw_object(old).items() if k not in allowed}
        new_obj = {k: v for k, v in _as_raw_object(new).items() if k not in allowed}
        result = diff_keys(old_obj, new_obj)
        if not result.is_empty:
            raise AssertionError(
                f"JSON objects differ: {summarize_diff(result.counts())}\n"
                f"  added:        {sorted(result.added)}\n"
                f"  deleted:      {sorted(result.deleted)}\n"
                f"  modified:     {sorted(result.modified)}\n"
                f"  type_changed: {sorted(result.type_changed)}"
            )

    return _assert
