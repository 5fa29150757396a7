"""Object inventory: key -> ElementKind for every value of a RawObject."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from json_describer.config import DEFAULT_CONFIG, DescriberConfig, MemberErrorPolicy
from json_describer.errors import InventoryError, NotValidJSONError
from json_describer.kinds import ElementKind, classify

if TYPE_CHECKING:
    from json_describer.raw import RawObject

__all__ = ["inventory"]

logger = logging.getLogger(__name__)


def inventory(
    obj: RawObject,
    config: DescriberConfig | None = None,
) -> dict[str, ElementKind]:
    """Map each key of ``obj`` to the kind of its value.

    The mapping is built fresh on every call.

    Args:
        obj:    A RawObject, typically from ``parse_as_object()``.
        config: Options.  Only ``member_errors`` is consulted here.

    Returns:
        Key -> ElementKind for every key.  Under the ``SKIP`` policy keys
        whose values failed classification are left out.

    Raises:
        InventoryError: Under the default ``RAISE`` policy, when any value
            fails classification.  ``partial`` holds the keys that did
            classify; the error is chained from the last failure seen.
    """
    cfg = config if config is not None else DEFAULT_CONFIG
    inv: dict[str, ElementKind] = {}
    failed: list[str] = []
    last_error: NotValidJSONError | None = None

    for key, fragment in obj.items():
        try:
            inv[key] = classify(fragment)
        except NotValidJSONError as exc:
            logger.warning("Value of key %r is not valid json: %s", key, exc)
            failed.append(key)
            last_error = exc

    if failed and cfg.member_errors is MemberErrorPolicy.RAISE:
        raise InventoryError(partial=inv, failed_keys=sorted(failed)) from last_error
    return inv
