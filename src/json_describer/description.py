"""DocumentDescription dataclass and the document describer.

``describe()`` classifies the top-level value of a JSON document and, for
objects and arrays, tallies how many immediate members of each kind it holds.
Nested containers are counted as a single ``object`` or ``array`` member; they
are never descended into.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

from json_describer.config import DEFAULT_CONFIG, DescriberConfig
from json_describer.kinds import ElementKind, classify, classify_member, decode
from json_describer.raw import split_array, split_object

__all__ = ["DocumentDescription", "describe"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DocumentDescription:
    """Kind of a JSON document and the kinds of its immediate members.

    Attributes:
        element: Kind of the top-level value.  None is the "undefined" zero
                 value of a description that was never filled in.
        members: Count of immediate members per kind.  Populated only when
                 ``element`` is ``OBJECT`` or ``ARRAY``; empty otherwise.
                 Kinds with no members are absent rather than zero.
    """

    element: ElementKind | None = None
    members: dict[ElementKind, int] = field(default_factory=dict)

    @property
    def is_container(self) -> bool:
        return self.element in (ElementKind.OBJECT, ElementKind.ARRAY)

    @property
    def member_count(self) -> int:
        return sum(self.members.values())


def describe(
    data: bytes | bytearray | str,
    config: DescriberConfig | None = None,
) -> DocumentDescription:
    """Classify a JSON document and tally the kinds of its members.

    Args:
        data:   Raw JSON as UTF-8 bytes or text.
        config: Options.  Only ``member_errors`` is consulted here.
                Defaults to ``DescriberConfig()`` when None.

    Returns:
        A ``DocumentDescription``.  For scalars the tally is empty.

    Raises:
        NotValidJSONError: If ``data`` is not valid JSON.
        MemberClassificationError: If a member fails classification under
            the default ``RAISE`` policy.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    text = decode(data)
    element = classify(text)

    fragments: dict[str, str] | dict[int, str]
    if element is ElementKind.OBJECT:
        fragments = split_object(text)
    elif element is ElementKind.ARRAY:
        fragments = dict(enumerate(split_array(text)))
    else:
        logger.debug("Described scalar document as %s", element)
        return DocumentDescription(element=element)

    tally: Counter[ElementKind] = Counter()
    for key, fragment in fragments.items():
        kind = classify_member(fragment, key, cfg.member_errors)
        if kind is not None:
            tally[kind] += 1

    logger.debug(
        "Described %s with %d member(s): %s", element, len(fragments), dict(tally)
    )
    return DocumentDescription(element=element, members=dict(tally))
