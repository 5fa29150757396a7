"""Exception hierarchy for json-describer.

Every error raised by the package derives from ``JsonDescriberError``.  The
concrete classes also derive from the closest built-in exception so callers
that only know the standard library can still catch them:

- ``NotValidJSONError``        -> ``ValueError``  (input is not JSON at all)
- ``MemberClassificationError``-> ``NotValidJSONError`` (a container member)
- ``NestingTooDeepError``      -> ``JsonDescriberError`` only (too deep, not invalid)
- ``InventoryError``           -> ``NotValidJSONError`` (partial inventory)
- ``NotAnObjectError`` / ``NotAnArrayError`` -> ``TypeError`` (wrong kind)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_describer.kinds import ElementKind

__all__ = [
    "InventoryError",
    "JsonDescriberError",
    "MemberClassificationError",
    "NestingTooDeepError",
    "NotAnArrayError",
    "NotAnObjectError",
    "NotValidJSONError",
    "WrongKindError",
]


class JsonDescriberError(Exception):
    """Base class for all json-describer errors."""


class NotValidJSONError(JsonDescriberError, ValueError):
    """The input is not syntactically valid JSON."""


class MemberClassificationError(NotValidJSONError):
    """A member of a container could not be classified.

    Attributes:
        key: Object key (``str``) or array index (``int``) of the member.
    """

    def __init__(self, key: str | int, reason: str) -> None:
        self.key = key
        super().__init__(f"member {key!r} is not valid json: {reason}")


class InventoryError(NotValidJSONError):
    """One or more values of a raw object could not be classified.

    Attributes:
        partial:     Best-effort inventory of the keys that did classify.
                     Callers must not treat it as complete.
        failed_keys: Keys whose values failed classification, sorted.
    """

    def __init__(
        self, partial: dict[str, ElementKind], failed_keys: list[str]
    ) -> None:
        self.partial = partial
        self.failed_keys = failed_keys
        super().__init__(
            f"{len(failed_keys)} value(s) are not valid json: {failed_keys}"
        )


class WrongKindError(JsonDescriberError, TypeError):
    """Valid JSON whose top-level kind is not the one the caller asked for.

    Attributes:
        expected: The kind the caller required.
        actual:   The kind the input actually classified as.
    """

    def __init__(self, expected: ElementKind, actual: ElementKind) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"given input is {actual}, expected {expected}")


class NotAnObjectError(WrongKindError):
    """Valid JSON that is not an object."""


class NotAnArrayError(WrongKindError):
    """Valid JSON that is not an array."""


class NestingTooDeepError(JsonDescriberError):
    """Containers are nested deeper than the scanner accepts.

    The input may be grammatically valid JSON; it is rejected for depth
    alone, so this is not a ``NotValidJSONError``.

    Attributes:
        max_depth: The deepest nesting accepted.
    """

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(f"json is nested deeper than {max_depth} levels")
