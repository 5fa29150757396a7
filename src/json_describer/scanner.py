"""Iterative JSON scanner for documents nested too deeply for ``json``.

The standard library parser recurses once per nesting level and gives up at
the interpreter recursion limit (about 1000 levels).  ``scan_value()`` walks
the same grammar with an explicit stack instead, so any document nested up to
``MAX_DEPTH`` levels can be validated and split.  Deeper documents raise
``NestingTooDeepError``.

Strings are still checked by ``json.decoder.scanstring``, so escapes and
control characters follow exactly the same rules as ``json.loads``.
"""

from __future__ import annotations

import json
import re
from json.decoder import scanstring  # type: ignore[attr-defined]

from json_describer.errors import NestingTooDeepError

__all__ = ["MAX_DEPTH", "end_of_value", "scan_value", "skip_whitespace"]

# Deepest nesting accepted, same as Go's encoding/json
MAX_DEPTH = 10_000

# Insignificant whitespace per RFC 8259
_WS = re.compile(r"[ \t\n\r]*")

# ASCII digits only; \d would also match other Unicode digits
_NUMBER = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][-+]?[0-9]+)?")

_LITERALS = ("true", "false", "null")
_CLOSERS = {"{": "}", "[": "]"}

# Module-level decoder (stateless, safe to share)
_decoder = json.JSONDecoder()


def skip_whitespace(text: str, idx: int) -> int:
    """Return the index of the first non-whitespace character at or after idx."""
    return _WS.match(text, idx).end()  # type: ignore[union-attr]


def _scalar(text: str, idx: int) -> int:
    if text.startswith('"', idx):
        _, end = scanstring(text, idx + 1)
        return int(end)
    match = _NUMBER.match(text, idx)
    if match:
        return match.end()
    for literal in _LITERALS:
        if text.startswith(literal, idx):
            return idx + len(literal)
    raise ValueError(f"Expecting value at char {idx}")


def _key(text: str, idx: int) -> int:
    """Scan ``"key" :`` starting at idx and return the index after the colon."""
    if not text.startswith('"', idx):
        raise ValueError(f"Expecting property name at char {idx}")
    _, idx = scanstring(text, idx + 1)
    idx = skip_whitespace(text, idx)
    if not text.startswith(":", idx):
        raise ValueError(f"Expecting ':' delimiter at char {idx}")
    return skip_whitespace(text, idx + 1)


def scan_value(text: str, idx: int = 0, max_depth: int = MAX_DEPTH) -> int:
    """Check the JSON value starting at ``idx`` and return the index after it.

    Leading whitespace is skipped; trailing text is left to the caller.

    Raises:
        ValueError:          If the value breaks the JSON grammar.
        NestingTooDeepError: If containers nest deeper than ``max_depth``.
    """
    stack: list[str] = []
    while True:
        idx = skip_whitespace(text, idx)
        opener = text[idx : idx + 1]
        if opener in _CLOSERS:
            if len(stack) >= max_depth:
                raise NestingTooDeepError(max_depth)
            closer = _CLOSERS[opener]
            idx = skip_whitespace(text, idx + 1)
            if not text.startswith(closer, idx):
                stack.append(closer)
                if closer == "}":
                    idx = _key(text, idx)
                continue
            idx += 1
        else:
            idx = _scalar(text, idx)

        # A value just ended: close containers until a comma or the top level
        while stack:
            idx = skip_whitespace(text, idx)
            if text.startswith(stack[-1], idx):
                stack.pop()
                idx += 1
            elif text.startswith(",", idx):
                idx = skip_whitespace(text, idx + 1)
                if stack[-1] == "}":
                    idx = _key(text, idx)
                break
            else:
                raise ValueError(f"Expecting ',' or {stack[-1]!r} at char {idx}")
        else:
            return idx


def end_of_value(text: str, idx: int) -> int:
    """Return the index just after the valid JSON value starting at ``idx``.

    Uses the C decoder and falls back to ``scan_value()`` when the value is
    nested past the recursion limit.
    """
    try:
        _, end = _decoder.raw_decode(text, idx)
    except RecursionError:
        return scan_value(text, idx)
    return int(end)
