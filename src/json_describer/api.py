"""Public API functions for json-describer.

Thin, stateless entry points over the classifier, describer, renderer,
inventory and differ.  Nothing here holds state between calls, so every
function is safe to call from multiple threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_describer.description import DocumentDescription, describe
from json_describer.differ import DiffCounts, DiffResult, diff_counts, diff_keys
from json_describer.inventory import inventory
from json_describer.kinds import ElementKind, classify
from json_describer.raw import RawArray, RawObject, parse_as_array, parse_as_object
from json_describer.render import friendly, summarize_diff

if TYPE_CHECKING:
    from json_describer.config import DescriberConfig

__all__ = [
    "DiffCounts",
    "DiffResult",
    "DocumentDescription",
    "ElementKind",
    "RawArray",
    "RawObject",
    "classify",
    "describe",
    "describe_friendly",
    "diff_counts",
    "diff_keys",
    "friendly",
    "inventory",
    "parse_as_array",
    "parse_as_object",
    "summarize_diff",
]


def describe_friendly(
    data: bytes | bytearray | str,
    config: DescriberConfig | None = None,
) -> str:
    """Describe a JSON document and render the description in English.

    Equivalent to ``friendly(describe(data, config), config)``; this is the
    call a confirmation prompt usually wants.

    Args:
        data:   Raw JSON as UTF-8 bytes or text.
        config: Options.  Defaults to ``DescriberConfig()`` when None.

    Returns:
        A sentence fragment such as ``"an object with 2 strings"``.

    Raises:
        NotValidJSONError: If ``data`` is not valid JSON.
    """
    return friendly(describe(data, config=config), config=config)
