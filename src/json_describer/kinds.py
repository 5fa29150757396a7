"""ElementKind StrEnum and the type classifier.

Every JSON value except a number is uniquely identified by its first
non-whitespace character once the document is known to be valid JSON, so
``classify()`` validates the whole input with a real parser and then looks at a
single character instead of inspecting the parsed value.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum, auto

from json_describer.config import MemberErrorPolicy
from json_describer.errors import MemberClassificationError, NotValidJSONError
from json_describer.scanner import MAX_DEPTH, scan_value, skip_whitespace

__all__ = [
    "ElementKind",
    "classify",
    "classify_member",
    "decode",
    "validate",
]

logger = logging.getLogger(__name__)


class ElementKind(StrEnum):
    """The seven literal-value categories of a JSON element.

    ``TRUE`` and ``FALSE`` are distinct kinds: they describe the literal a
    human reads ("a literal true"), not its type ("a boolean").

    Declaration order is the canonical PRIORITY order used when rendering
    tallies.
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    TRUE = auto()
    FALSE = auto()
    NULL = auto()


# First significant character -> kind; anything else is a number
_HEURISTICS: dict[str, ElementKind] = {
    "{": ElementKind.OBJECT,
    "[": ElementKind.ARRAY,
    '"': ElementKind.STRING,
    "t": ElementKind.TRUE,
    "f": ElementKind.FALSE,
    "n": ElementKind.NULL,
}


def _reject_constant(name: str) -> None:
    # json accepts NaN / Infinity / -Infinity by default; JSON does not
    raise ValueError(f"non-standard constant {name}")


def decode(data: bytes | bytearray | str) -> str:
    """Return ``data`` as text, decoding bytes as UTF-8.

    Raises:
        NotValidJSONError: If ``data`` is bytes that are not valid UTF-8.
        TypeError:         If ``data`` is neither bytes nor str.
    """
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray)):
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise NotValidJSONError(f"not valid json: {exc}") from exc
    raise TypeError(f"expected bytes or str, got {type(data).__name__}")


def _validate_deep(text: str) -> None:
    try:
        end = scan_value(text)
    except ValueError as exc:
        raise NotValidJSONError(f"not valid json: {exc}") from exc
    if skip_whitespace(text, end) != len(text):
        raise NotValidJSONError(f"not valid json: extra data at char {end}")


def validate(text: str) -> None:
    """Raise ``NotValidJSONError`` unless ``text`` is one valid JSON document.

    Documents with more than ``MAX_DEPTH`` container openers, or nested past
    the recursion limit of ``json``, are checked by the iterative scanner,
    which enforces the ``MAX_DEPTH`` nesting limit.

    Raises:
        NotValidJSONError:   If ``text`` breaks the JSON grammar.
        NestingTooDeepError: If ``text`` nests deeper than ``MAX_DEPTH``.
    """
    if text.count("[") + text.count("{") > MAX_DEPTH:
        _validate_deep(text)
        return
    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise NotValidJSONError(f"not valid json: {exc}") from exc
    except RecursionError:
        logger.debug("json hit the recursion limit; rescanning iteratively")
        _validate_deep(text)


def classify(data: bytes | bytearray | str) -> ElementKind:
    """Validate ``data`` as JSON and return the kind of its top-level value.

    Args:
        data: Raw JSON as UTF-8 bytes or text.  Leading and trailing
              whitespace is allowed, as in any JSON document.

    Returns:
        The ``ElementKind`` of the top-level value.

    Raises:
        NotValidJSONError: If ``data`` is not syntactically valid JSON
            (including empty or whitespace-only input).
        NestingTooDeepError: If ``data`` nests deeper than ``MAX_DEPTH``.
    """
    text = decode(data)
    validate(text)
    first = text[skip_whitespace(text, 0)]
    return _HEURISTICS.get(first, ElementKind.NUMBER)


def classify_member(
    fragment: str,
    key: str | int,
    policy: MemberErrorPolicy = MemberErrorPolicy.RAISE,
) -> ElementKind | None:
    """Classify one member fragment of a container.

    A member of a container that validated as a whole is itself valid, so a
    failure here means the container was built by hand or the invariant is
    broken.  It is always logged.

    Args:
        fragment: Exact JSON text of the member.
        key:      Object key or array index, used in the log and the error.
        policy:   ``RAISE`` re-raises as ``MemberClassificationError``;
                  ``SKIP`` returns None.

    Returns:
        The member's kind, or None when it failed under ``SKIP``.
    """
    try:
        return classify(fragment)
    except NotValidJSONError as exc:
        if policy is MemberErrorPolicy.SKIP:
            logger.warning("Skipping member %r: %s", key, exc)
            return None
        logger.error("Member %r of a container is not valid json: %s", key, exc)
        raise MemberClassificationError(key, str(exc)) from exc
