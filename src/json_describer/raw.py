"""One-level parsing of JSON containers into unparsed member fragments.

A RawObject maps each key to the exact JSON text of its value; a RawArray is
the ordered list of the exact JSON text of each element.  Fragments are sliced
out of the validated document rather than re-serialized, so nested structure,
number spelling and inner whitespace survive byte-for-byte.  The differ relies
on this for its text-exact "modified" check.

The scanner only walks the top level.  ``scanner.end_of_value`` is used
to find where each member value ends; the decoded value itself is discarded.
"""

from __future__ import annotations

from json.decoder import scanstring  # type: ignore[attr-defined]

from json_describer.errors import NotAnArrayError, NotAnObjectError
from json_describer.kinds import ElementKind, classify, decode
from json_describer.scanner import end_of_value, skip_whitespace

__all__ = [
    "RawArray",
    "RawObject",
    "parse_as_array",
    "parse_as_object",
    "split_array",
    "split_object",
]

# Type aliases for one-level parsed containers
RawObject = dict[str, str]
RawArray = list[str]


def _member(text: str, idx: int) -> tuple[str, int]:
    """Return the exact text of the value starting at ``idx`` and its end."""
    end = end_of_value(text, idx)
    return text[idx:end], end


def split_object(text: str) -> RawObject:
    """Split a validated JSON object into key -> fragment pairs.

    ``text`` must already be known to be a valid JSON object.  Duplicate keys
    keep the last occurrence, matching ``json.loads``.
    """
    obj: RawObject = {}
    idx = skip_whitespace(text, skip_whitespace(text, 0) + 1)
    if text[idx] == "}":
        return obj

    while True:
        # idx points at the opening quote of a key
        key, idx = scanstring(text, idx + 1)
        idx = skip_whitespace(text, skip_whitespace(text, idx) + 1)  # past ':'
        obj[key], idx = _member(text, idx)
        idx = skip_whitespace(text, idx)
        if text[idx] == "}":
            return obj
        idx = skip_whitespace(text, idx + 1)  # past ','


def split_array(text: str) -> RawArray:
    """Split a validated JSON array into its ordered element fragments."""
    arr: RawArray = []
    idx = skip_whitespace(text, skip_whitespace(text, 0) + 1)
    if text[idx] == "]":
        return arr

    while True:
        fragment, idx = _member(text, idx)
        arr.append(fragment)
        idx = skip_whitespace(text, idx)
        if text[idx] == "]":
            return arr
        idx = skip_whitespace(text, idx + 1)


def parse_as_object(data: bytes | bytearray | str) -> RawObject:
    """Parse ``data`` one level deep as a JSON object.

    Raises:
        NotValidJSONError: If ``data`` is not valid JSON.
        NestingTooDeepError: If ``data`` nests deeper than ``MAX_DEPTH``.
        NotAnObjectError:  If ``data`` is valid JSON of another kind.
    """
    text = decode(data)
    kind = classify(text)
    if kind is not ElementKind.OBJECT:
        raise NotAnObjectError(expected=ElementKind.OBJECT, actual=kind)
    return split_object(text)


def parse_as_array(data: bytes | bytearray | str) -> RawArray:
    """Parse ``data`` one level deep as a JSON array.

    Raises:
        NotValidJSONError: If ``data`` is not valid JSON.
        NestingTooDeepError: If ``data`` nests deeper than ``MAX_DEPTH``.
        NotAnArrayError:   If ``data`` is valid JSON of another kind.
    """
    text = decode(data)
    kind = classify(text)
    if kind is not ElementKind.ARRAY:
        raise NotAnArrayError(expected=ElementKind.ARRAY, actual=kind)
    return split_array(text)
