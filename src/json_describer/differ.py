"""Top-level key diff between two RawObjects.

Every key of the old and new objects falls into at most one of four
categories:

- added:        only in ``new``.
- deleted:      only in ``old``.
- type_changed: in both, values classify to different kinds.
- modified:     in both, same kind, different JSON text.

Keys whose values have the same text in both objects are unchanged and appear
in no category.  Comparison is text-exact: ``1`` vs ``1.0``, or two objects
that differ only in whitespace or key order, count as modified.  Nested values
are never descended into.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from json_describer.config import DEFAULT_CONFIG, DescriberConfig
from json_describer.kinds import classify_member

if TYPE_CHECKING:
    from collections.abc import Iterator

    from json_describer.raw import RawObject

__all__ = ["DiffCounts", "DiffResult", "diff_counts", "diff_keys"]


@dataclass(frozen=True, slots=True)
class DiffCounts:
    """Number of keys in each diff category."""

    added: int = 0
    deleted: int = 0
    modified: int = 0
    type_changed: int = 0

    @property
    def total(self) -> int:
        return self.added + self.deleted + self.modified + self.type_changed


@dataclass(frozen=True, slots=True)
class DiffResult:
    """Keys in each diff category.  The four sets are pairwise disjoint.

    Attributes:
        added:        Keys present only in the new object.
        deleted:      Keys present only in the old object.
        modified:     Keys whose values kept their kind but changed text.
        type_changed: Keys whose values changed kind.
    """

    added: frozenset[str] = frozenset()
    deleted: frozenset[str] = frozenset()
    modified: frozenset[str] = frozenset()
    type_changed: frozenset[str] = frozenset()

    @property
    def is_empty(self) -> bool:
        return not (self.added or self.deleted or self.modified or self.type_changed)

    def counts(self) -> DiffCounts:
        """Return the cardinality of each category."""
        return DiffCounts(
            added=len(self.added),
            deleted=len(self.deleted),
            modified=len(self.modified),
            type_changed=len(self.type_changed),
        )


def _walk(
    old: RawObject, new: RawObject, cfg: DescriberConfig
) -> Iterator[tuple[str, str]]:
    """Yield ``(category, key)`` for every changed key."""
    for key, old_fragment in old.items():
        if key not in new:
            yield "deleted", key
            continue

        new_fragment = new[key]
        old_kind = classify_member(old_fragment, key, cfg.member_errors)
        new_kind = classify_member(new_fragment, key, cfg.member_errors)
        if old_kind != new_kind:
            yield "type_changed", key
        elif old_fragment != new_fragment:
            yield "modified", key

    for key in new:
        if key not in old:
            yield "added", key


def diff_keys(
    old: RawObject,
    new: RawObject,
    config: DescriberConfig | None = None,
) -> DiffResult:
    """Classify the keys changed from ``old`` to ``new``.

    Args:
        old:    The RawObject before the change.
        new:    The RawObject after the change.
        config: Options.  Only ``member_errors`` is consulted here.  Under
                ``SKIP`` a value that fails classification is treated as
                having no kind, so the comparison still completes.

    Returns:
        A ``DiffResult``.  ``diff_keys(x, x)`` is always empty.

    Raises:
        MemberClassificationError: Under the default ``RAISE`` policy, when a
            value present in both objects fails classification.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    buckets: dict[str, set[str]] = {
        "added": set(),
        "deleted": set(),
        "modified": set(),
        "type_changed": set(),
    }
    for category, key in _walk(old, new, cfg):
        buckets[category].add(key)
    return DiffResult(**{name: frozenset(keys) for name, keys in buckets.items()})


def diff_counts(
    old: RawObject,
    new: RawObject,
    config: DescriberConfig | None = None,
) -> DiffCounts:
    """Count the keys changed from ``old`` to ``new``.

    Same computation as ``diff_keys()``; see there for arguments and errors.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    totals: dict[str, int] = dict.fromkeys(
        ("added", "deleted", "modified", "type_changed"), 0
    )
    for category, _ in _walk(old, new, cfg):
        totals[category] += 1
    return DiffCounts(**totals)
