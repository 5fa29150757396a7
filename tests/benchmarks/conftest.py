"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: 10-key, 1000-key and 10000-key flat objects whose values cycle
through every element kind, plus old/new pairs touching every diff category.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_describer import RawObject, parse_as_object

# One value per element kind, cycled through by the generators
_VALUES: list[Any] = [{"nested": [1, 2]}, [1, "two"], "text", 42, True, False, None]


def generate_document(num_keys: int, prefix: str = "key") -> bytes:
    """Generate a flat JSON object whose values cycle through every kind."""
    doc = {f"{prefix}_{i}": _VALUES[i % len(_VALUES)] for i in range(num_keys)}
    return json.dumps(doc).encode()


def _modify(value: Any) -> Any:
    """Return a different value of the same kind, where the kind allows one."""
    if isinstance(value, bool) or value is None:
        # true, false and null have a single spelling
        return value
    if isinstance(value, str):
        return value + "!"
    if isinstance(value, int):
        return value + 1
    if isinstance(value, list):
        return [*value, 0]
    return {**value, "extra": 0}


def _make_pair(num_keys: int) -> tuple[RawObject, RawObject]:
    """Old/new pair touching every diff category.

    A tenth of the keys each is deleted, added, and retyped.  Another tenth
    is rewritten in place: strings, numbers and containers change and become
    modified, while literal values stay the same and remain unchanged.
    """
    old = json.loads(generate_document(num_keys))
    new = dict(old)
    tenth = max(num_keys // 10, 1)
    keys = list(old)
    for key in keys[:tenth]:
        del new[key]
    for i in range(tenth):
        new[f"added_{i}"] = i
    for key in keys[tenth : 2 * tenth]:
        new[key] = _modify(old[key])
    for key in keys[2 * tenth : 3 * tenth]:
        new[key] = None if old[key] is not None else 0
    return (
        parse_as_object(json.dumps(old)),
        parse_as_object(json.dumps(new)),
    )


@pytest.fixture(scope="session")
def doc_10key() -> bytes:
    return generate_document(10)


@pytest.fixture(scope="session")
def doc_1000key() -> bytes:
    return generate_document(1000)


@pytest.fixture(scope="session")
def doc_10000key() -> bytes:
    return generate_document(10_000)


@pytest.fixture(scope="session")
def pair_1000key() -> tuple[RawObject, RawObject]:
    return _make_pair(1000)


@pytest.fixture(scope="session")
def pair_10000key() -> tuple[RawObject, RawObject]:
    return _make_pair(10_000)
