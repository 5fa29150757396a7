"""English rendering of document descriptions and diff counts.

``friendly()`` turns a DocumentDescription into a sentence fragment such as
"an object with 1 string and 2 numbers".  ``summarize_diff()`` does the same
for DiffCounts ("1 key added, 2 keys deleted, and 1 key modified").  Both use
``oxford_join()`` for lists of three or more phrases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_describer.config import DEFAULT_CONFIG, DescriberConfig, TallyOrder
from json_describer.kinds import ElementKind

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from json_describer.description import DocumentDescription
    from json_describer.differ import DiffCounts

__all__ = ["friendly", "oxford_join", "pluralize", "summarize_diff"]

_SCALARS = frozenset({ElementKind.STRING, ElementKind.NUMBER})
_LITERALS = frozenset({ElementKind.TRUE, ElementKind.FALSE, ElementKind.NULL})
_CONTAINERS = frozenset({ElementKind.OBJECT, ElementKind.ARRAY})

# Declaration order of ElementKind is the PRIORITY order
_PRIORITY: dict[ElementKind, int] = {kind: i for i, kind in enumerate(ElementKind)}


def pluralize(count: int, noun: str) -> str:
    """Return ``"<count> <noun>"``, appending ``s`` when count > 1."""
    return f"{count} {noun}s" if count > 1 else f"{count} {noun}"


def oxford_join(phrases: Sequence[str]) -> str:
    """Join phrases as an English list with an Oxford comma.

    ``[]`` -> ``""``; ``[a]`` -> ``a``; ``[a, b]`` -> ``a and b``;
    ``[a, b, c]`` -> ``a, b, and c``.
    """
    if len(phrases) <= 2:
        return " and ".join(phrases)
    return f"{', '.join(phrases[:-1])}, and {phrases[-1]}"


def _priority_key(kind: ElementKind) -> tuple[int, str]:
    # Unknown kinds sort after the known ones, alphabetically
    return (_PRIORITY.get(kind, len(_PRIORITY)), str(kind))


def _tally_phrases(
    members: Mapping[ElementKind, int], order: TallyOrder
) -> list[str]:
    if order is TallyOrder.ALPHABETICAL:
        kinds = sorted(members, key=str)
    else:
        kinds = sorted(members, key=_priority_key)
    return [pluralize(members[k], str(k)) for k in kinds if members[k] > 0]


def friendly(
    description: DocumentDescription,
    config: DescriberConfig | None = None,
) -> str:
    """Render a DocumentDescription as an English sentence fragment.

    - string / number       -> "a string", "a number"
    - true / false / null   -> "a literal true", ...
    - object / array        -> "an empty object", "an array with 1 string",
                               "an object with 1 string and 2 numbers",
                               "an array with 1 object, 1 string, and 3 nulls"
    - anything else         -> "undefined"

    Args:
        description: Output of ``describe()``.
        config:      Options.  Only ``tally_order`` is consulted here.
                     Defaults to ``DescriberConfig()`` when None.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    elem = description.element

    # Descriptions, not values
    if elem in _SCALARS:
        return f"a {elem}"

    # Not to be confused with the string spelling of the value
    if elem in _LITERALS:
        return f"a literal {elem}"

    if elem in _CONTAINERS:
        phrases = _tally_phrases(description.members, cfg.tally_order)
        if not phrases:
            return f"an empty {elem}"
        return f"an {elem} with {oxford_join(phrases)}"

    return "undefined"


# (DiffCounts attribute, label) in rendering order
_DIFF_LABELS: tuple[tuple[str, str], ...] = (
    ("added", "added"),
    ("deleted", "deleted"),
    ("modified", "modified"),
    ("type_changed", "changed type"),
)


def summarize_diff(counts: DiffCounts) -> str:
    """Render DiffCounts as an English change summary.

    Example::

        summarize_diff(DiffCounts(added=1, deleted=2))
        # "1 key added and 2 keys deleted"

    Returns:
        "no changes" when every count is zero.
    """
    phrases = [
        f"{pluralize(getattr(counts, attr), 'key')} {label}"
        for attr, label in _DIFF_LABELS
        if getattr(counts, attr) > 0
    ]
    if not phrases:
        return "no changes"
    return oxford_join(phrases)
